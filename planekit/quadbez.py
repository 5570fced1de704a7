"""Quadratic Bézier segments."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from planekit.param_curve import ParamCurveArclen, ParamCurveArea, ParamCurveExtrema
from planekit.point import Point
from planekit.rect import Rect, _as_point
from planekit.shape import Shape
from planekit.vec2 import Vec2


def _ln(value: float) -> float:
    """Natural logarithm that yields -inf or NaN instead of raising."""
    if math.isnan(value) or value < 0.0:
        return math.nan
    if value == 0.0:
        return -math.inf
    return math.log(value)


@dataclass(frozen=True, slots=True)
class QuadBez(Shape, ParamCurveExtrema, ParamCurveArclen, ParamCurveArea):
    """A single quadratic Bézier segment."""

    p0: Point
    p1: Point
    p2: Point

    def __post_init__(self) -> None:
        for name in ("p0", "p1", "p2"):
            value: Any = getattr(self, name)
            if not isinstance(value, Point):
                object.__setattr__(self, name, _as_point(value))

    def is_finite(self) -> bool:
        return self.p0.is_finite() and self.p1.is_finite() and self.p2.is_finite()

    def is_nan(self) -> bool:
        return self.p0.is_nan() or self.p1.is_nan() or self.p2.is_nan()

    def eval(self, t: float) -> Point:
        """The point at parameter ``t``."""
        mt = 1.0 - t
        v = self.p0.to_vec2() * (mt * mt) + (
            self.p1.to_vec2() * (mt * 2.0) + self.p2.to_vec2() * t
        ) * t
        return v.to_point()

    def subsegment(self, t0: float, t1: float) -> QuadBez:
        """The part of the curve between ``t0`` and ``t1``."""
        p0 = self.eval(t0)
        p2 = self.eval(t1)
        d0: Vec2 = self.p1 - self.p0
        d1: Vec2 = self.p2 - self.p1
        p1 = p0 + d0.lerp(d1, t0) * (t1 - t0)
        return QuadBez(p0, p1, p2)

    def subdivide(self) -> tuple[QuadBez, QuadBez]:
        """Split into halves using de Casteljau."""
        pm = self.eval(0.5)
        return (
            QuadBez(self.p0, self.p0.midpoint(self.p1), pm),
            QuadBez(pm, self.p1.midpoint(self.p2), self.p2),
        )

    def start(self) -> Point:
        return self.p0

    def end(self) -> Point:
        return self.p2

    def arclen(self, accuracy: float) -> float:
        """Arc length by an analytic formula, with quadrature for near-lines."""
        v0 = self.p0.to_vec2()
        v1 = self.p1.to_vec2()
        v2 = self.p2.to_vec2()
        d2 = v0 - 2.0 * v1 + v2
        a = d2.hypot2()
        d1: Vec2 = self.p1 - self.p0
        c = d1.hypot2()
        if a < 5e-4 * c:
            # Nearly straight: three-point Legendre-Gauss quadrature.
            q0 = (
                -0.492943519233745 * v0 + 0.430331482911935 * v1 + 0.0626120363218102 * v2
            ).hypot()
            q1 = ((self.p2 - self.p0) * 0.4444444444444444).hypot()
            q2 = (
                -0.0626120363218102 * v0 - 0.430331482911935 * v1 + 0.492943519233745 * v2
            ).hypot()
            return q0 + q1 + q2
        if a == 0.0:
            # All control points coincide; the formula has no value here.
            return math.nan
        b = 2.0 * d2.dot(d1)

        sabc = math.sqrt(a + b + c)
        a2 = a ** -0.5
        a32 = a2 ** 3
        c2 = 2.0 * math.sqrt(c)
        ba_c2 = b * a2 + c2

        result = 0.25 * a2 * a2 * b * (2.0 * sabc - c2) + sabc
        if ba_c2 < 1e-13:
            # Sharp kink.
            return result
        return result + 0.25 * a32 * (4.0 * c * a - b * b) * _ln(
            ((2.0 * a + b) * a2 + 2.0 * sabc) / ba_c2
        )

    def signed_area(self) -> float:
        """Signed area under the curve."""
        p0, p1, p2 = self.p0, self.p1, self.p2
        return (
            p0.x * (2.0 * p1.y + p2.y)
            + 2.0 * p1.x * (p2.y - p0.y)
            - p2.x * (p0.y + 2.0 * p1.y)
        ) * (1.0 / 6.0)

    def extrema(self) -> list[float]:
        """Interior parameters where x or y reaches an extremum, ascending."""
        result: list[float] = []
        d0: Vec2 = self.p1 - self.p0
        d1: Vec2 = self.p2 - self.p1
        dd = d1 - d0
        if dd.x != 0.0:
            t = -d0.x / dd.x
            if 0.0 < t < 1.0:
                result.append(t)
        if dd.y != 0.0:
            t = -d0.y / dd.y
            if 0.0 < t < 1.0:
                result.append(t)
                if len(result) == 2 and result[0] > t:
                    result.reverse()
        return result

    def area(self) -> float:
        return 0.0

    def perimeter(self, accuracy: float) -> float:
        return self.arclen(accuracy)

    def winding(self, pt: Point) -> int:
        return 0

    def bounding_box(self) -> Rect:
        return ParamCurveExtrema.bounding_box(self)