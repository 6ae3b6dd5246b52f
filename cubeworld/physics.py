"""Collision-resolving movement and the per-tick physics of entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from cubeworld.blocks import Block
from cubeworld.geometry import AABB, Vec3

MOVEMENT_EPSILON = 0.01
F32_EPSILON = 1.1920929e-07
GRAVITY: Vec3 = (0.0, -0.0086, 0.0)
MAX_COLLIDERS = 256


def _sign(value: float) -> float:
    return float((value > 0) - (value < 0))


def _add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return tuple(x + y for x, y in zip(a, b))  # type: ignore[return-value]


def _scale(a: Sequence[float], s: float) -> Vec3:
    return tuple(x * s for x in a)  # type: ignore[return-value]


def move_axis(
    aabb: AABB, movement: float, axis: Sequence[float], colliders: Sequence[AABB]
) -> float:
    """Distance ``aabb`` can travel along the unit ``axis`` before colliding."""
    axis_index = next((i for i, v in enumerate(axis) if v != 0.0), 0)
    delta = list(_scale(axis, movement))
    direction = _sign(movement)
    moved = aabb.translate(delta)

    for collider in colliders:
        if not moved.intersects(collider):
            continue
        depth = moved.depth(collider)[axis_index]
        delta[axis_index] += -direction * (depth + MOVEMENT_EPSILON)
        moved = aabb.translate(delta)
        if abs(delta[axis_index]) <= MOVEMENT_EPSILON:
            delta[axis_index] = 0.0
            break

    result = delta[axis_index]
    return 0.0 if abs(result) <= F32_EPSILON else result


def move(aabb: AABB, movement: Sequence[float], colliders: Sequence[AABB]) -> Vec3:
    """Resolve ``movement`` one axis at a time; return the distance moved."""
    current = aabb
    result = []
    for i in range(3):
        axis = tuple(1.0 if j == i else 0.0 for j in range(3))
        amount = move_axis(current, movement[i], axis, colliders)
        current = current.translate(_scale(axis, amount))
        result.append(amount)
    return tuple(result)  # type: ignore[return-value]


def _zero_box() -> AABB:
    return AABB((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))


@dataclass
class PhysicsComponent:
    """Velocity, size and collision state of a moving entity."""

    size: AABB = field(default_factory=_zero_box)
    velocity: Vec3 = (0.0, 0.0, 0.0)
    stopped: tuple[bool, bool, bool] = (False, False, False)
    aabb: AABB = field(default_factory=_zero_box)
    collide: bool = False
    gravity: bool = False
    drag: bool = False
    grounded: bool = False

    def make_aabb(self, position: Sequence[float]) -> AABB:
        """Box of this component's size centred on ``position``."""
        half = _scale(self.size.size(), 0.5)
        offset = tuple(p - h for p, h in zip(position, half))
        return self.size.translate(offset)

    def move(
        self, position: Sequence[float], movement: Sequence[float], colliders: Iterable[AABB]
    ) -> tuple[Vec3, Vec3]:
        """Try to move by ``movement``; return the new position and distance moved."""
        movement = tuple(float(m) for m in movement)
        if not self.collide:
            new_position = _add(position, movement)
            self.aabb = self.make_aabb(new_position)
            return new_position, movement  # type: ignore[return-value]

        self.aabb = self.make_aabb(position)
        area = self.aabb.scale(2.0)
        nearby = [c for c in colliders if c.intersects(area)][:MAX_COLLIDERS]

        moved = move(self.aabb, movement, nearby)
        new_position = _add(position, moved)
        self.aabb = self.make_aabb(new_position)
        return new_position, moved

    def collides(self, aabb: AABB) -> bool:
        """True if this component's current box touches ``aabb``."""
        return self.aabb.intersects(aabb)

    def tick(
        self, position: Sequence[float], block: Block, colliders: Iterable[AABB]
    ) -> Vec3:
        """Advance one tick inside ``block``; return the new position."""
        if self.gravity:
            modifier = 1.0 if block.solid else block.gravity_modifier
            self.velocity = _add(self.velocity, _scale(GRAVITY, modifier))

        new_position, moved = self.move(position, self.velocity, colliders)

        stopped = tuple(abs(m - v) >= F32_EPSILON for m, v in zip(moved, self.velocity))
        self.stopped = stopped  # type: ignore[assignment]
        self.velocity = tuple(
            0.0 if s else v for s, v in zip(stopped, self.velocity)
        )  # type: ignore[assignment]

        self.grounded = self.velocity[1] <= 0 and self.stopped[1]

        if self.drag:
            self.velocity = _add(self.velocity, _scale(self.velocity, -0.02 * block.drag))

        if self.grounded:
            slipperiness = block.slipperiness * 0.6
            vx, vy, vz = self.velocity
            self.velocity = (vx * slipperiness, vy, vz * slipperiness)

        return new_position