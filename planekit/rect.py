"""An axis-aligned rectangle."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from planekit.point import Point
from planekit.shape import Shape
from planekit.size import Size, _div, _max, _min
from planekit.vec2 import Vec2, _ceil, _floor, _recip, _round, _trunc

if TYPE_CHECKING:
    from planekit.rounded_rect import RoundedRect


def _as_point(value: Any) -> Point:
    if isinstance(value, Point):
        return value
    if isinstance(value, tuple) and len(value) == 2:
        return Point(float(value[0]), float(value[1]))
    raise TypeError(f"cannot make a point from {value!r}")


def _as_size(value: Any) -> Size:
    if isinstance(value, Size):
        return value
    if isinstance(value, tuple) and len(value) == 2:
        return Size(float(value[0]), float(value[1]))
    raise TypeError(f"cannot make a size from {value!r}")


@dataclass(frozen=True, slots=True)
class Rect(Shape):
    """A rectangle given by its minimum and maximum coordinates."""

    x0: float = 0.0
    y0: float = 0.0
    x1: float = 0.0
    y1: float = 0.0

    @classmethod
    def from_points(cls, p0: Any, p1: Any) -> Rect:
        """Rectangle spanning two points, with non-negative width and height."""
        a = _as_point(p0)
        b = _as_point(p1)
        return cls(a.x, a.y, b.x, b.y).abs()

    @classmethod
    def from_origin_size(cls, origin: Any, size: Any) -> Rect:
        """Rectangle from origin and size, with non-negative width and height."""
        origin = _as_point(origin)
        return cls.from_points(origin, origin + _as_size(size).to_vec2())

    @classmethod
    def from_center_size(cls, center: Any, size: Any) -> Rect:
        """Rectangle centred on a point."""
        center = _as_point(center)
        half = 0.5 * _as_size(size)
        return cls(
            center.x - half.width,
            center.y - half.height,
            center.x + half.width,
            center.y + half.height,
        )

    def with_origin(self, origin: Any) -> Rect:
        """Same size, new origin."""
        return Rect.from_origin_size(origin, self.size())

    def with_size(self, size: Any) -> Rect:
        """Same origin, new size."""
        return Rect.from_origin_size(self.origin(), size)

    def width(self) -> float:
        return self.x1 - self.x0

    def height(self) -> float:
        return self.y1 - self.y0

    def min_x(self) -> float:
        return _min(self.x0, self.x1)

    def max_x(self) -> float:
        return _max(self.x0, self.x1)

    def min_y(self) -> float:
        return _min(self.y0, self.y1)

    def max_y(self) -> float:
        return _max(self.y0, self.y1)

    def origin(self) -> Point:
        return Point(self.x0, self.y0)

    def size(self) -> Size:
        return Size(self.width(), self.height())

    def area(self) -> float:
        return self.width() * self.height()

    def is_empty(self) -> bool:
        """Whether the area is zero; a negative area is not empty."""
        return self.area() == 0.0

    def center(self) -> Point:
        return Point(0.5 * (self.x0 + self.x1), 0.5 * (self.y0 + self.y1))

    def contains(self, pt: Point) -> bool:
        """Whether the point lies in the half-open rectangle."""
        return self.x0 <= pt.x < self.x1 and self.y0 <= pt.y < self.y1

    def abs(self) -> Rect:
        """Same extents with non-negative width and height."""
        return Rect(
            _min(self.x0, self.x1),
            _min(self.y0, self.y1),
            _max(self.x0, self.x1),
            _max(self.y0, self.y1),
        )

    def union(self, other: Rect) -> Rect:
        """Smallest rectangle enclosing both."""
        return Rect(
            _min(self.x0, other.x0),
            _min(self.y0, other.y0),
            _max(self.x1, other.x1),
            _max(self.y1, other.y1),
        )

    def union_pt(self, pt: Point) -> Rect:
        """Smallest rectangle enclosing this one and a point."""
        return Rect(
            _min(self.x0, pt.x),
            _min(self.y0, pt.y),
            _max(self.x1, pt.x),
            _max(self.y1, pt.y),
        )

    def intersect(self, other: Rect) -> Rect:
        """Intersection; zero-area if the rectangles do not overlap."""
        x0 = _max(self.x0, other.x0)
        y0 = _max(self.y0, other.y0)
        x1 = _min(self.x1, other.x1)
        y1 = _min(self.y1, other.y1)
        return Rect(x0, y0, _max(x1, x0), _max(y1, y0))

    def inflate(self, width: float, height: float) -> Rect:
        """Grow by the given amounts on each side."""
        return Rect(self.x0 - width, self.y0 - height, self.x1 + width, self.y1 + height)

    def round(self) -> Rect:
        return Rect(_round(self.x0), _round(self.y0), _round(self.x1), _round(self.y1))

    def ceil(self) -> Rect:
        return Rect(_ceil(self.x0), _ceil(self.y0), _ceil(self.x1), _ceil(self.y1))

    def floor(self) -> Rect:
        return Rect(_floor(self.x0), _floor(self.y0), _floor(self.x1), _floor(self.y1))

    def expand(self) -> Rect:
        """Smallest integer rectangle containing this one."""
        if self.x0 < self.x1:
            x0, x1 = _floor(self.x0), _ceil(self.x1)
        else:
            x0, x1 = _ceil(self.x0), _floor(self.x1)
        if self.y0 < self.y1:
            y0, y1 = _floor(self.y0), _ceil(self.y1)
        else:
            y0, y1 = _ceil(self.y0), _floor(self.y1)
        return Rect(x0, y0, x1, y1)

    def trunc(self) -> Rect:
        """Largest integer rectangle contained in this one."""
        if self.x0 < self.x1:
            x0, x1 = _ceil(self.x0), _floor(self.x1)
        else:
            x0, x1 = _floor(self.x0), _ceil(self.x1)
        if self.y0 < self.y1:
            y0, y1 = _ceil(self.y0), _floor(self.y1)
        else:
            y0, y1 = _floor(self.y0), _ceil(self.y1)
        return Rect(x0, y0, x1, y1)

    def scale_from_origin(self, factor: float) -> Rect:
        """Scale every coordinate about the point (0, 0)."""
        return Rect(self.x0 * factor, self.y0 * factor, self.x1 * factor, self.y1 * factor)

    def to_rounded_rect(self, radii: Any) -> RoundedRect:
        """A rounded rectangle with these bounds and the given radii."""
        from planekit.rounded_rect import RoundedRect

        return RoundedRect.from_rect(self, radii)

    def aspect_ratio(self) -> float:
        """Height divided by width."""
        return self.size().aspect_ratio()

    def contained_rect_with_aspect_ratio(self, aspect_ratio: float) -> Rect:
        """Largest centred rectangle inside this one with the given height/width."""
        width, height = self.width(), self.height()
        self_aspect = _div(height, width)
        if abs(self_aspect - aspect_ratio) < 1e-9:
            return self
        if abs(self_aspect) < abs(aspect_ratio):
            new_width = height * _recip(aspect_ratio)
            gap = (width - new_width) * 0.5
            return Rect(self.x0 + gap, self.y0, self.x1 - gap, self.y1)
        new_height = width * aspect_ratio
        gap = (height - new_height) * 0.5
        return Rect(self.x0, self.y0 + gap, self.x1, self.y1 - gap)

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.x0, self.y0, self.x1, self.y1))

    def is_nan(self) -> bool:
        return any(math.isnan(v) for v in (self.x0, self.y0, self.x1, self.y1))

    def perimeter(self, accuracy: float) -> float:
        return 2.0 * (abs(self.width()) + abs(self.height()))

    def winding(self, pt: Point) -> int:
        """Winding number; tiling rectangles give nonzero for exactly one."""
        if self.min_x() <= pt.x < self.max_x() and self.min_y() <= pt.y < self.max_y():
            return -1 if (self.x1 > self.x0) ^ (self.y1 > self.y0) else 1
        return 0

    def bounding_box(self) -> Rect:
        return self.abs()

    def as_rect(self) -> Rect:
        return self

    def __add__(self, other: object) -> Rect:
        if isinstance(other, Vec2):
            return Rect(self.x0 + other.x, self.y0 + other.y, self.x1 + other.x, self.y1 + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> Rect:
        if isinstance(other, Vec2):
            return Rect(self.x0 - other.x, self.y0 - other.y, self.x1 - other.x, self.y1 - other.y)
        return NotImplemented

    def __format__(self, spec: str) -> str:
        return f"Rect {{ {format(self.origin(), spec)} {format(self.size(), spec)} }}"

    def __str__(self) -> str:
        return format(self, "")