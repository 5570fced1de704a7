"""A rectangle with rounded corners."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from planekit.point import Point
from planekit.rect import Rect
from planekit.rounded_rect_radii import RoundedRectRadii
from planekit.shape import Shape
from planekit.size import _max, _min
from planekit.vec2 import Vec2


@dataclass(frozen=True, slots=True)
class RoundedRect(Shape):
    """A rectangle with rounded corners.

    Built through the class methods, it has non-negative dimensions and radii
    clamped to half the shorter side.
    """

    rect: Rect = Rect()
    radii: RoundedRectRadii = RoundedRectRadii()

    @classmethod
    def new(cls, x0: float, y0: float, x1: float, y1: float, radii: Any) -> RoundedRect:
        """Rounded rectangle from minimum and maximum coordinates."""
        return cls.from_rect(Rect(x0, y0, x1, y1), radii)

    @classmethod
    def from_rect(cls, rect: Rect, radii: Any) -> RoundedRect:
        """Rounded rectangle from a rectangle and corner radii."""
        rect = rect.abs()
        shortest_side = _min(rect.width(), rect.height())
        clamped = RoundedRectRadii.coerce(radii).abs().clamp(shortest_side / 2.0)
        return cls(rect, clamped)

    @classmethod
    def from_points(cls, p0: Any, p1: Any, radii: Any) -> RoundedRect:
        """Rounded rectangle spanning two points."""
        return cls.from_rect(Rect.from_points(p0, p1), radii)

    @classmethod
    def from_origin_size(cls, origin: Any, size: Any, radii: Any) -> RoundedRect:
        """Rounded rectangle from origin and size."""
        return cls.from_rect(Rect.from_origin_size(origin, size), radii)

    def width(self) -> float:
        return self.rect.width()

    def height(self) -> float:
        return self.rect.height()

    def origin(self) -> Point:
        return self.rect.origin()

    def center(self) -> Point:
        return self.rect.center()

    def is_finite(self) -> bool:
        return self.rect.is_finite() and self.radii.is_finite()

    def is_nan(self) -> bool:
        return self.rect.is_nan() or self.radii.is_nan()

    def _corner_radii(self) -> tuple[float, float, float, float]:
        r = self.radii
        return (r.top_left, r.top_right, r.bottom_right, r.bottom_left)

    def area(self) -> float:
        """Rectangle area with each corner square replaced by a quarter circle."""
        return self.rect.area() + sum(
            (math.pi / 4.0 - 1.0) * radius * radius for radius in self._corner_radii()
        )

    def perimeter(self, accuracy: float) -> float:
        """Rectangle perimeter with each corner replaced by a quarter circle."""
        return self.rect.perimeter(1.0) + sum(
            (-2.0 + math.pi / 2.0) * radius for radius in self._corner_radii()
        )

    def winding(self, pt: Point) -> int:
        """1 if the point is inside the rounded rectangle, else 0."""
        center = self.center()
        x = pt.x - center.x
        y = pt.y - center.y

        radii = self.radii
        if x < 0.0 and y < 0.0:
            radius = radii.top_left
        elif x >= 0.0 and y < 0.0:
            radius = radii.top_right
        elif x >= 0.0 and y >= 0.0:
            radius = radii.bottom_right
        elif x < 0.0 and y >= 0.0:
            radius = radii.bottom_left
        else:
            radius = 0.0

        inside_half_width = _max(self.width() / 2.0 - radius, 0.0)
        inside_half_height = _max(self.height() / 2.0 - radius, 0.0)

        px = _max(abs(x) - inside_half_width, 0.0)
        py = _max(abs(y) - inside_half_height, 0.0)

        return 1 if px * px + py * py <= radius * radius else 0

    def bounding_box(self) -> Rect:
        return self.rect.bounding_box()

    def as_rounded_rect(self) -> RoundedRect:
        return self

    def __add__(self, other: object) -> RoundedRect:
        if isinstance(other, Vec2):
            return RoundedRect.from_rect(self.rect + other, self.radii)
        return NotImplemented

    def __sub__(self, other: object) -> RoundedRect:
        if isinstance(other, Vec2):
            return RoundedRect.from_rect(self.rect - other, self.radii)
        return NotImplemented