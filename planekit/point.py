"""A 2D point."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from planekit.vec2 import (
    Vec2,
    _ceil,
    _expand,
    _floor,
    _format_float,
    _round,
    _trunc,
)


def _offset(other: object) -> tuple[float, float] | None:
    if isinstance(other, Vec2):
        return other.x, other.y
    if isinstance(other, tuple) and len(other) == 2:
        return float(other[0]), float(other[1])
    return None


@dataclass(frozen=True, slots=True)
class Point:
    """A 2D point."""

    x: float = 0.0
    y: float = 0.0

    def to_vec2(self) -> Vec2:
        return Vec2(self.x, self.y)

    def lerp(self, other: Point, t: float) -> Point:
        """Linear interpolation between two points."""
        return self.to_vec2().lerp(other.to_vec2(), t).to_point()

    def midpoint(self, other: Point) -> Point:
        return Point(0.5 * (self.x + other.x), 0.5 * (self.y + other.y))

    def distance(self, other: Point) -> float:
        return (self - other).hypot()

    def distance_squared(self, other: Point) -> float:
        return (self - other).hypot2()

    def round(self) -> Point:
        return Point(_round(self.x), _round(self.y))

    def ceil(self) -> Point:
        return Point(_ceil(self.x), _ceil(self.y))

    def floor(self) -> Point:
        return Point(_floor(self.x), _floor(self.y))

    def expand(self) -> Point:
        return Point(_expand(self.x), _expand(self.y))

    def trunc(self) -> Point:
        return Point(_trunc(self.x), _trunc(self.y))

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)

    def __add__(self, other: object) -> Point:
        offset = _offset(other)
        if offset is None:
            return NotImplemented
        return Point(self.x + offset[0], self.y + offset[1])

    def __sub__(self, other: object) -> Point | Vec2:
        if isinstance(other, Point):
            return Vec2(self.x - other.x, self.y - other.y)
        offset = _offset(other)
        if offset is None:
            return NotImplemented
        return Point(self.x - offset[0], self.y - offset[1])

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __format__(self, spec: str) -> str:
        return f"({_format_float(self.x, spec)}, {_format_float(self.y, spec)})"

    def __str__(self) -> str:
        return format(self, "")