"""Block types and the registry of their properties."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable, Iterable, Optional

from cubeworld.geometry import AABB

ATLAS_FRAMES = 16
"""Number of animation frames in the block atlas."""

TexCoord = tuple[int, int]


class BlockId(IntEnum):
    AIR = 0
    GRASS = 1
    DIRT = 2
    STONE = 3
    SAND = 4
    WATER = 5
    GLASS = 6
    LOG = 7
    LEAVES = 8
    ROSE = 9
    BUTTERCUP = 10
    COAL = 11
    COPPER = 12
    LAVA = 13
    CLAY = 14
    GRAVEL = 15
    PLANKS = 16
    TORCH = 17
    COBBLESTONE = 18
    SNOW = 19
    PODZOL = 20
    SHRUB = 21
    TALLGRASS = 22
    PINE_LOG = 23
    PINE_LEAVES = 24


class Direction(Enum):
    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3
    UP = 4
    DOWN = 5


class BlockMeshType(Enum):
    DEFAULT = 0
    SPRITE = 1
    LIQUID = 2
    CUSTOM = 3


@dataclass(frozen=True)
class Torchlight:
    """Coloured block light; every channel is in 0..15."""

    r: int = 0
    g: int = 0
    b: int = 0
    intensity: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "intensity"):
            value = getattr(self, name)
            if not 0 <= value <= 0xF:
                raise ValueError(f"torchlight {name} out of range: {value}")


@dataclass(frozen=True)
class MeshInfo:
    """Geometry of a custom block mesh face."""

    offset: tuple[float, float, float]
    size: tuple[float, float, float]
    uv_offset: TexCoord
    uv_size: TexCoord


@dataclass(frozen=True)
class Block:
    """Static properties of one block type."""

    id: BlockId
    transparent: bool = False
    liquid: bool = False
    can_emit_light: bool = False
    animated: bool = False
    mesh_type: BlockMeshType = BlockMeshType.DEFAULT
    solid: bool = True
    gravity_modifier: float = 1.0
    drag: float = 1.0
    slipperiness: float = 1.0
    textures: Optional[Callable[[Direction], TexCoord]] = field(
        default=None, repr=False, compare=False
    )
    frames: tuple[TexCoord, ...] = ()
    light: Torchlight = Torchlight()
    mesh: Optional[Callable[[Direction], MeshInfo]] = field(
        default=None, repr=False, compare=False
    )

    def texture_location(self, pos: Iterable[int], direction: Direction) -> TexCoord:
        """Atlas cell used for the face of this block pointing in ``direction``."""
        if self.textures is None:
            raise ValueError(f"{self.id.name} has no texture")
        return self.textures(Direction(direction))

    def animation_frames(self) -> tuple[TexCoord, ...]:
        """Atlas cells of the animation frames, empty when not animated."""
        return self.frames

    def torchlight(self, pos: Iterable[int]) -> Torchlight:
        """Light this block emits at ``pos``."""
        return self.light

    def aabb(self, pos: Iterable[int]) -> AABB:
        """Unit bounding box of the block at ``pos``."""
        base = tuple(float(v) for v in pos)
        return AABB(base, tuple(v + 1.0 for v in base))

    def mesh_information(self, pos: Iterable[int], direction: Direction) -> MeshInfo:
        """Custom mesh geometry for the face pointing in ``direction``."""
        if self.mesh is None:
            raise ValueError(f"{self.id.name} has no custom mesh")
        return self.mesh(Direction(direction))


def _uniform(x: int, y: int) -> Callable[[Direction], TexCoord]:
    return lambda direction: (x, y)


def _faces(
    top: TexCoord, bottom: TexCoord, side: TexCoord
) -> Callable[[Direction], TexCoord]:
    def texture(direction: Direction) -> TexCoord:
        if direction is Direction.UP:
            return top
        if direction is Direction.DOWN:
            return bottom
        return side

    return texture


def _torch_mesh(direction: Direction) -> MeshInfo:
    width = 0.125
    offset = (0.5 - width / 2.0, 0.0, 0.5 - width / 2.0)
    size = (width, 10.0 / 16.0, width)
    if direction is Direction.UP:
        return MeshInfo(offset, size, (7, 7), (2, 2))
    return MeshInfo(offset, size, (7, 0), (2, 10))


def _sprite(block_id: BlockId, x: int, y: int) -> Block:
    return Block(
        block_id,
        transparent=True,
        solid=False,
        mesh_type=BlockMeshType.SPRITE,
        textures=_uniform(x, y),
    )


def _build_registry() -> dict[BlockId, Block]:
    blocks = [
        Block(BlockId.AIR, transparent=True, solid=False),
        Block(BlockId.GRASS, textures=_faces((0, 0), (2, 0), (1, 0))),
        Block(BlockId.DIRT, textures=_uniform(2, 0)),
        Block(BlockId.STONE, textures=_uniform(3, 0)),
        Block(BlockId.SAND, textures=_uniform(0, 1)),
        Block(
            BlockId.WATER,
            transparent=True,
            animated=True,
            liquid=True,
            solid=False,
            gravity_modifier=0.72,
            drag=10.0,
            mesh_type=BlockMeshType.LIQUID,
            textures=_uniform(0, 15),
            frames=tuple((i, 15) for i in range(ATLAS_FRAMES)),
        ),
        Block(BlockId.GLASS, transparent=True, textures=_uniform(1, 1)),
        Block(BlockId.LOG, textures=_faces((3, 1), (3, 1), (2, 1))),
        Block(BlockId.LEAVES, transparent=True, textures=_uniform(4, 1)),
        _sprite(BlockId.ROSE, 0, 3),
        _sprite(BlockId.BUTTERCUP, 1, 3),
        Block(BlockId.COAL, textures=_uniform(4, 0)),
        Block(BlockId.COPPER, textures=_uniform(5, 0)),
        Block(
            BlockId.LAVA,
            transparent=True,
            animated=True,
            liquid=True,
            solid=False,
            can_emit_light=True,
            mesh_type=BlockMeshType.LIQUID,
            textures=_uniform(0, 14),
            frames=tuple((14, i) for i in range(ATLAS_FRAMES)),
            light=Torchlight(0xF, 0x8, 0x2, 0x7),
        ),
        Block(BlockId.CLAY, textures=_uniform(5, 1)),
        Block(BlockId.GRAVEL, textures=_uniform(6, 0)),
        Block(BlockId.PLANKS, textures=_uniform(6, 1)),
        Block(
            BlockId.TORCH,
            transparent=True,
            solid=False,
            can_emit_light=True,
            mesh_type=BlockMeshType.CUSTOM,
            textures=_faces((1, 2), (0, 2), (0, 2)),
            light=Torchlight(0xF, 0xB, 0x5, 0xF),
            mesh=_torch_mesh,
        ),
        Block(BlockId.COBBLESTONE, textures=_uniform(2, 2)),
        Block(BlockId.SNOW, textures=_uniform(3, 2)),
        Block(BlockId.PODZOL, textures=_faces((4, 2), (2, 0), (5, 2))),
        _sprite(BlockId.SHRUB, 3, 3),
        _sprite(BlockId.TALLGRASS, 2, 3),
        Block(BlockId.PINE_LOG, textures=_faces((5, 3), (5, 3), (4, 3))),
        Block(BlockId.PINE_LEAVES, transparent=True, textures=_uniform(6, 3)),
    ]
    return {block.id: block for block in blocks}


_BLOCKS = _build_registry()


def get_block(block_id: int) -> Block:
    """Return the block registered for ``block_id``; ValueError if unknown."""
    return _BLOCKS[BlockId(block_id)]


def all_blocks() -> tuple[Block, ...]:
    """All registered blocks in id order."""
    return tuple(_BLOCKS[block_id] for block_id in sorted(_BLOCKS))