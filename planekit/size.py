"""A 2D size."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from planekit.vec2 import (
    Vec2,
    _ceil,
    _expand,
    _floor,
    _format_float,
    _is_scalar,
    _round,
    _trunc,
)

if TYPE_CHECKING:
    from planekit.rect import Rect
    from planekit.rounded_rect import RoundedRect


def _div(num: float, den: float) -> float:
    """Division following IEEE rules rather than raising on a zero divisor."""
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


@dataclass(frozen=True, slots=True)
class Size:
    """A 2D size."""

    width: float = 0.0
    height: float = 0.0

    def max_side(self) -> float:
        """The larger of width and height."""
        return max(self.width, self.height)

    def min_side(self) -> float:
        """The smaller of width and height."""
        return min(self.width, self.height)

    def area(self) -> float:
        return self.width * self.height

    def is_empty(self) -> bool:
        """Whether the area is zero; a negative area is not empty."""
        return self.area() == 0.0

    def clamp(self, min: Size, max: Size) -> Size:
        """A new size bounded by ``min`` and ``max``."""
        width = _min(_max(self.width, min.width), max.width)
        height = _min(_max(self.height, min.height), max.height)
        return Size(width, height)

    def to_vec2(self) -> Vec2:
        return Vec2(self.width, self.height)

    def round(self) -> Size:
        return Size(_round(self.width), _round(self.height))

    def ceil(self) -> Size:
        return Size(_ceil(self.width), _ceil(self.height))

    def floor(self) -> Size:
        return Size(_floor(self.width), _floor(self.height))

    def expand(self) -> Size:
        return Size(_expand(self.width), _expand(self.height))

    def trunc(self) -> Size:
        return Size(_trunc(self.width), _trunc(self.height))

    def aspect_ratio(self) -> float:
        """Height divided by width."""
        return _div(self.height, self.width)

    def to_rect(self) -> Rect:
        """A rectangle at the origin with this size."""
        from planekit.rect import Rect

        return Rect(0.0, 0.0, self.width, self.height)

    def to_rounded_rect(self, radii: Any) -> RoundedRect:
        """A rounded rectangle at the origin with this size."""
        return self.to_rect().to_rounded_rect(radii)

    def is_finite(self) -> bool:
        return math.isfinite(self.width) and math.isfinite(self.height)

    def is_nan(self) -> bool:
        return math.isnan(self.width) or math.isnan(self.height)

    def __add__(self, other: object) -> Size:
        if isinstance(other, Size):
            return Size(self.width + other.width, self.height + other.height)
        return NotImplemented

    def __sub__(self, other: object) -> Size:
        if isinstance(other, Size):
            return Size(self.width - other.width, self.height - other.height)
        return NotImplemented

    def __mul__(self, other: object) -> Size:
        if _is_scalar(other):
            return Size(self.width * other, self.height * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Size:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Size:
        if _is_scalar(other):
            den = float(other)
            return Size(_div(self.width, den), _div(self.height, den))
        return NotImplemented

    def __iter__(self):
        yield self.width
        yield self.height

    def __format__(self, spec: str) -> str:
        return f"({_format_float(self.width, spec)}×{_format_float(self.height, spec)})"

    def __str__(self) -> str:
        return format(self, "")


def _max(a: float, b: float) -> float:
    """Maximum that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


def _min(a: float, b: float) -> float:
    """Minimum that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b