# cubeworld

The simulation core of a small voxel game, in plain Python with no runtime
dependencies.

## Modules

- `cubeworld.noise`: "improved" Perlin gradient noise in one to four
  dimensions (`noise1` … `noise4`), with periodic variants
  (`pnoise1` … `pnoise4`) that repeat with the given integer period on
  every axis.
- `cubeworld.geometry`: `AABB`, an immutable axis-aligned box with
  `translate`, `scale` (about its centre), `intersects` (touching counts),
  `depth` (overlap per axis) and `size`.
- `cubeworld.blocks`: the block registry. `BlockId`, `Direction`,
  `BlockMeshType`, `Torchlight`, `MeshInfo` and `Block`; look blocks up
  with `get_block(block_id)` (raises `ValueError` for an unknown id) or list
  them with `all_blocks()`. A `Block` gives its `texture_location`,
  `animation_frames`, `torchlight`, unit `aabb` and, for the torch,
  `mesh_information`.
- `cubeworld.ecs`: an entity-component system. `ECS` creates and deletes
  entities (`new`, `delete`), attaches components (`add`, `remove`, `has`,
  `get`) and runs each registered `System`'s callback for an `Event` over
  every entity holding the component (`event`). Component slots are listed
  in `Component`.
- `cubeworld.physics`: `move_axis` and `move` resolve a box's movement
  against colliders one axis at a time; `PhysicsComponent` applies gravity,
  collision, drag and ground friction per tick.
- `cubeworld.movement`: `MovementComponent` turns held `Directions` into
  walking, jumping, swimming or flying on a `PhysicsComponent`.
- `cubeworld.input`: `Button` detects presses per frame (`update`) and per
  tick (`tick`); `TickClock.advance(now)` returns how many 60 Hz ticks to
  run for a frame starting at `now` nanoseconds and keeps FPS/TPS counts.
- `cubeworld.ui`: `UI` holds `UIComponent`s (at most 256; `add` raises
  `OverflowError` beyond that) and dispatches `destroy`, `render`, `update`
  and `tick` to the enabled ones. `Hotbar` selects a slot from digit keys
  (0 is the last slot); `Crosshair.position` centres the reticle.
- `cubeworld.atlas`: `Atlas.uv` gives texture coordinates of a sprite cell;
  `BlockAtlas` builds one RGBA pixel buffer per animation frame from an
  image and picks the frame for a game tick (`frame_index`, `frame`).

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from cubeworld.noise import noise2
from cubeworld.blocks import BlockId, Direction, get_block

height = noise2(0.5, 1.25)

grass = get_block(BlockId.GRASS)
print(grass.solid, grass.texture_location((0, 0, 0), Direction.UP))  # True (0, 0)
```

```python
from cubeworld.geometry import AABB

box = AABB((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))
print(box.intersects(box.translate((0.5, 0.0, 0.0))))  # True
```

```python
from cubeworld.blocks import BlockId, get_block
from cubeworld.geometry import AABB
from cubeworld.physics import PhysicsComponent

body = PhysicsComponent(
    size=AABB((0.0, 0.0, 0.0), (0.2, 1.6, 0.2)),
    collide=True,
    gravity=True,
    drag=True,
)
floor = AABB((-5.0, -1.0, -5.0), (5.0, 0.0, 5.0))
position = (0.0, 5.0, 0.0)
for _ in range(200):
    position = body.tick(position, get_block(BlockId.AIR), [floor])
print(position, body.grounded)
```

```python
from cubeworld.ui import Hotbar

hotbar = Hotbar()
hotbar.update([3])
print(hotbar.selected())  # BlockId.STONE
```

## What it does not do

The package holds state and rules only. It opens no window, draws nothing
and reads no image files: `BlockAtlas` takes raw RGBA bytes, and the UI
callbacks do whatever you attach to them. There is no world storage, chunk
management, terrain generation or light propagation; physics and movement
take the surrounding colliders and blocks as arguments. There is no command
to run.