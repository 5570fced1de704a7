"""A transformation made of a uniform scale followed by a translation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from planekit.point import Point
from planekit.quadbez import QuadBez
from planekit.rect import Rect
from planekit.rounded_rect import RoundedRect
from planekit.rounded_rect_radii import RoundedRectRadii
from planekit.vec2 import Vec2, _is_scalar, _recip


@dataclass(frozen=True, slots=True)
class TranslateScale:
    """Scale by ``scale``, then translate by ``translation``.

    As a matrix this is ``[[s, 0, x], [0, s, y], [0, 0, 1]]``; multiplication
    composes like matrix multiplication, so ``a * b`` applies ``b`` first.
    """

    translation: Vec2 = Vec2()
    scale: float = 1.0

    def __post_init__(self) -> None:
        value: Any = self.translation
        if not isinstance(value, Vec2):
            if isinstance(value, tuple) and len(value) == 2:
                object.__setattr__(self, "translation", Vec2(float(value[0]), float(value[1])))
            else:
                raise TypeError(f"cannot make a translation from {value!r}")

    @classmethod
    def from_scale(cls, s: float) -> TranslateScale:
        """A transformation that only scales."""
        return cls(Vec2(), s)

    @classmethod
    def from_translate(cls, t: Vec2) -> TranslateScale:
        """A transformation that only translates."""
        return cls(t, 1.0)

    def as_tuple(self) -> tuple[Vec2, float]:
        """The translation and the scale."""
        return self.translation, self.scale

    def inverse(self) -> TranslateScale:
        """The inverse transformation; NaN values when the scale is zero."""
        scale_recip = _recip(float(self.scale))
        return TranslateScale(self.translation * -scale_recip, scale_recip)

    def is_finite(self) -> bool:
        return self.translation.is_finite() and math.isfinite(self.scale)

    def is_nan(self) -> bool:
        return self.translation.is_nan() or math.isnan(self.scale)

    def _apply(self, pt: Point) -> Point:
        return (self.scale * pt.to_vec2()).to_point() + self.translation

    def _apply_radii(self, radii: RoundedRectRadii) -> RoundedRectRadii:
        s = self.scale
        return RoundedRectRadii(
            s * radii.top_left,
            s * radii.top_right,
            s * radii.bottom_right,
            s * radii.bottom_left,
        )

    def __mul__(self, other: object) -> Any:
        if isinstance(other, TranslateScale):
            return TranslateScale(
                self.translation + self.scale * other.translation,
                self.scale * other.scale,
            )
        if isinstance(other, Point):
            return self._apply(other)
        if isinstance(other, Rect):
            pt0 = self._apply(Point(other.x0, other.y0))
            pt1 = self._apply(Point(other.x1, other.y1))
            return Rect.from_points(pt0, pt1)
        if isinstance(other, RoundedRectRadii):
            return self._apply_radii(other)
        if isinstance(other, RoundedRect):
            return RoundedRect.from_rect(self * other.rect, self._apply_radii(other.radii))
        if isinstance(other, QuadBez):
            return QuadBez(self._apply(other.p0), self._apply(other.p1), self._apply(other.p2))
        return NotImplemented

    def __rmul__(self, other: object) -> TranslateScale:
        if _is_scalar(other):
            return TranslateScale(self.translation * other, self.scale * other)
        return NotImplemented

    def __add__(self, other: object) -> TranslateScale:
        if isinstance(other, Vec2):
            return TranslateScale(self.translation + other, self.scale)
        return NotImplemented

    def __radd__(self, other: object) -> TranslateScale:
        return self.__add__(other)

    def __sub__(self, other: object) -> TranslateScale:
        if isinstance(other, Vec2):
            return TranslateScale(self.translation - other, self.scale)
        return NotImplemented