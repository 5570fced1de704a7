"""A simple 2D vector."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from planekit.point import Point
    from planekit.size import Size


_SPEC = re.compile(
    r"(?P<align>.?[<>^=])?(?P<sign>[+\- ])?(?P<alt>#)?(?P<zero>0)?"
    r"(?P<width>\d+)?(?P<grouping>[,_])?(?:\.(?P<precision>\d+))?"
    r"(?P<type>[a-zA-Z%])?\Z"
)


def _display_float(value: float) -> str:
    """Shortest round-trip text of a float, never in exponent notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_float(value: float, spec: str) -> str:
    """Format one coordinate; a bare precision means fixed-point digits."""
    if not spec:
        return _display_float(value)
    match = _SPEC.match(spec)
    if match is None:
        return format(float(value), spec)
    if match.group("precision") is not None or match.group("type") is not None:
        if match.group("type") is None:
            spec += "f"
        return format(float(value), spec)
    text = _display_float(value)
    if match.group("sign") == "+" and not text.startswith("-"):
        text = "+" + text
    elif match.group("sign") == " " and not text.startswith("-"):
        text = " " + text
    width = match.group("width")
    if width:
        align = match.group("align") or ">"
        if align.endswith("="):
            align = align[:-1] + ">"
        text = format(text, f"{align}{width}")
    return text


def _recip(value: float) -> float:
    """Reciprocal following IEEE rules, so that 1/0 is an infinity."""
    if value == 0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def _keep_sign(result: float, value: float) -> float:
    return math.copysign(result, value) if result == 0 else result


def _round(value: float) -> float:
    """Round half away from zero."""
    if not math.isfinite(value):
        return value
    whole = float(math.trunc(value))
    if abs(value - whole) >= 0.5:
        whole += math.copysign(1.0, value)
    return _keep_sign(whole, value)


def _ceil(value: float) -> float:
    if not math.isfinite(value):
        return value
    return _keep_sign(float(math.ceil(value)), value)


def _floor(value: float) -> float:
    if not math.isfinite(value):
        return value
    return _keep_sign(float(math.floor(value)), value)


def _trunc(value: float) -> float:
    if not math.isfinite(value):
        return value
    return _keep_sign(float(math.trunc(value)), value)


def _expand(value: float) -> float:
    """Round away from zero to the next integer."""
    return _ceil(value) if value >= 0 else _floor(value)


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Vec2:
    """A 2D vector, usable also as a translation."""

    x: float = 0.0
    y: float = 0.0

    def to_point(self) -> Point:
        """This vector as a point relative to the origin."""
        from planekit.point import Point

        return Point(self.x, self.y)

    def to_size(self) -> Size:
        """This vector as a size, x mapped to width and y to height."""
        from planekit.size import Size

        return Size(self.x, self.y)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        return self.x * other.y - self.y * other.x

    def hypot(self) -> float:
        """Magnitude of the vector."""
        return math.hypot(self.x, self.y)

    def hypot2(self) -> float:
        """Squared magnitude of the vector."""
        return self.dot(self)

    def atan2(self) -> float:
        """Angle of the vector in radians."""
        return math.atan2(self.y, self.x)

    @classmethod
    def from_angle(cls, th: float) -> Vec2:
        """Unit vector at angle ``th`` radians."""
        return cls(math.cos(th), math.sin(th))

    def lerp(self, other: Vec2, t: float) -> Vec2:
        return self + t * (other - self)

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; NaN for the zero vector."""
        return self / self.hypot()

    def round(self) -> Vec2:
        return Vec2(_round(self.x), _round(self.y))

    def ceil(self) -> Vec2:
        return Vec2(_ceil(self.x), _ceil(self.y))

    def floor(self) -> Vec2:
        return Vec2(_floor(self.x), _floor(self.y))

    def expand(self) -> Vec2:
        return Vec2(_expand(self.x), _expand(self.y))

    def trunc(self) -> Vec2:
        return Vec2(_trunc(self.x), _trunc(self.y))

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)

    def __add__(self, other: object) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, other: object) -> Vec2:
        if _is_scalar(other):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vec2:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Vec2:
        if _is_scalar(other):
            return self * _recip(float(other))
        return NotImplemented

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __format__(self, spec: str) -> str:
        return f"𝐯=({_format_float(self.x, spec)}, {_format_float(self.y, spec)})"

    def __str__(self) -> str:
        return format(self, "")