"""Axis-aligned bounding boxes used for collision and block shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

Vec3 = tuple[float, float, float]


def _vec3(values: Iterable[float]) -> Vec3:
    result = tuple(float(v) for v in values)
    if len(result) != 3:
        raise ValueError(f"expected three components, got {len(result)}")
    return result  # type: ignore[return-value]


@dataclass(frozen=True)
class AABB:
    """An axis-aligned box spanning ``min`` to ``max`` (inclusive)."""

    min: Vec3
    max: Vec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", _vec3(self.min))
        object.__setattr__(self, "max", _vec3(self.max))

    def translate(self, offset: Iterable[float]) -> AABB:
        """Return this box moved by ``offset``."""
        delta = _vec3(offset)
        return AABB(
            tuple(a + d for a, d in zip(self.min, delta)),
            tuple(b + d for b, d in zip(self.max, delta)),
        )

    def scale(self, factor: Union[float, Iterable[float]]) -> AABB:
        """Return this box with its extents scaled about its centre."""
        if isinstance(factor, (int, float)):
            factors = (float(factor),) * 3
        else:
            factors = _vec3(factor)
        centre = tuple((a + b) / 2.0 for a, b in zip(self.min, self.max))
        half = tuple((b - a) * f / 2.0 for a, b, f in zip(self.min, self.max, factors))
        return AABB(
            tuple(c - h for c, h in zip(centre, half)),
            tuple(c + h for c, h in zip(centre, half)),
        )

    def intersects(self, other: AABB) -> bool:
        """True if the boxes overlap or touch on every axis."""
        return all(
            a_min <= b_max and a_max >= b_min
            for a_min, a_max, b_min, b_max in zip(self.min, self.max, other.min, other.max)
        )

    def depth(self, other: AABB) -> Vec3:
        """Overlap of the two boxes along each axis."""
        return tuple(
            min(a_max, b_max) - max(a_min, b_min)
            for a_min, a_max, b_min, b_max in zip(self.min, self.max, other.min, other.max)
        )  # type: ignore[return-value]

    def size(self) -> Vec3:
        """Extent of the box along each axis."""
        return tuple(b - a for a, b in zip(self.min, self.max))  # type: ignore[return-value]