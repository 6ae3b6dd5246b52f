"""Player-driven movement: walking, jumping, swimming and flying."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from cubeworld.blocks import Block
from cubeworld.geometry import AABB, Vec3
from cubeworld.physics import PhysicsComponent

BASE_SPEED = 0.0245
FLYING_SPEED_MULTIPLIER = 1.8
FLYING_MOVE_SCALE = 8.0
JUMP_VELOCITY = 0.16
SWIM_FACTOR = 0.7
_UP: Vec3 = (0.0, 1.0, 0.0)


@dataclass
class Directions:
    """Which movement inputs are currently held."""

    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False


def _add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return tuple(x + y for x, y in zip(a, b))  # type: ignore[return-value]


def _sub(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return tuple(x - y for x, y in zip(a, b))  # type: ignore[return-value]


def _cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


@dataclass
class MovementComponent:
    """Turns held directions into velocity changes on a physics component."""

    speed: float = 1.0
    jump_height: float = 1.0
    directions: Directions = field(default_factory=Directions)
    flying: bool = False

    def tick(
        self,
        yaw: float,
        block: Block,
        top_block: Block,
        physics: PhysicsComponent,
        position: Sequence[float],
        colliders: Iterable[AABB],
    ) -> Vec3:
        """Apply one tick of movement; return the (possibly new) position.

        ``block`` is the block at the entity's feet and ``top_block`` the block
        at the top of its bounding box.
        """
        speed = BASE_SPEED * self.speed * (FLYING_SPEED_MULTIPLIER if self.flying else 1.0)
        dirs = self.directions

        forward: Vec3 = (math.sin(yaw), 0.0, math.cos(yaw))
        right = _cross(_UP, forward)

        direction: Vec3 = (0.0, 0.0, 0.0)
        if dirs.forward:
            direction = _add(direction, forward)
        if dirs.backward:
            direction = _sub(direction, forward)
        if dirs.left:
            direction = _add(direction, right)
        if dirs.right:
            direction = _sub(direction, right)

        vx, vy, vz = physics.velocity
        if self.flying:
            if dirs.up:
                direction = _add(direction, _UP)
            if dirs.down:
                direction = _sub(direction, _UP)
        elif block.liquid:
            if dirs.up:
                # rise faster when breaching the surface, faster still when
                # also pushing against a wall (trying to climb out)
                breaching = not top_block.liquid
                exiting = breaching and (physics.stopped[0] or physics.stopped[2])
                float_speed = (
                    speed
                    * SWIM_FACTOR
                    * (1.4 if breaching else 1.0)
                    * (2.0 if exiting else 1.0)
                )
                vy += float_speed
            if dirs.down:
                vy -= speed * SWIM_FACTOR
        elif dirs.up and physics.grounded:
            vy += JUMP_VELOCITY * self.jump_height
        physics.velocity = (vx, vy, vz)

        norm = math.sqrt(sum(c * c for c in direction))
        if norm == 0.0 or math.isnan(norm):
            movement = [0.0, 0.0, 0.0]
        else:
            movement = [c / norm * speed for c in direction]

        if self.flying:
            xz_modifier = 1.0
        elif block.liquid:
            xz_modifier = 0.8 if physics.grounded else 0.45
        else:
            xz_modifier = 1.0 if physics.grounded else 0.07
        movement[0] *= xz_modifier
        movement[2] *= xz_modifier

        physics.drag = not self.flying
        physics.gravity = not self.flying

        if self.flying:
            physics.velocity = (0.0, 0.0, 0.0)
            step = tuple(m * FLYING_MOVE_SCALE * self.speed for m in movement)
            new_position, _ = physics.move(position, step, colliders)
            return new_position

        physics.velocity = _add(physics.velocity, movement)
        return tuple(float(p) for p in position)  # type: ignore[return-value]