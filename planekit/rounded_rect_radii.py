"""Radii for each corner of a rounded rectangle."""

from __future__ import annotations

import math
from dataclasses import dataclass

from planekit.vec2 import _is_scalar


@dataclass(frozen=True, slots=True)
class RoundedRectRadii:
    """Corner radii, clockwise from the top-left corner."""

    top_left: float = 0.0
    top_right: float = 0.0
    bottom_right: float = 0.0
    bottom_left: float = 0.0

    @classmethod
    def from_single_radius(cls, radius: float) -> RoundedRectRadii:
        """The same radius for all four corners."""
        return cls(radius, radius, radius, radius)

    @classmethod
    def coerce(cls, value: object) -> RoundedRectRadii:
        """Accept radii, a single number, or a tuple of four numbers."""
        if isinstance(value, RoundedRectRadii):
            return value
        if _is_scalar(value):
            return cls.from_single_radius(float(value))
        if isinstance(value, tuple) and len(value) == 4 and all(_is_scalar(v) for v in value):
            return cls(*(float(v) for v in value))
        raise TypeError(f"cannot make corner radii from {value!r}")

    def _values(self) -> tuple[float, float, float, float]:
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)

    def abs(self) -> RoundedRectRadii:
        """Absolute value of every radius."""
        return RoundedRectRadii(*(abs(v) for v in self._values()))

    def clamp(self, max: float) -> RoundedRectRadii:
        """Limit every radius to at most ``max``."""
        return RoundedRectRadii(*(_min(v, max) for v in self._values()))

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in self._values())

    def is_nan(self) -> bool:
        return any(math.isnan(v) for v in self._values())

    def as_single_radius(self) -> float | None:
        """The common radius if all four are equal, else None."""
        epsilon = 1e-9
        if (
            abs(self.top_left - self.top_right) < epsilon
            and abs(self.top_right - self.bottom_right) < epsilon
            and abs(self.bottom_right - self.bottom_left) < epsilon
        ):
            return self.top_left
        return None


def _min(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b