"""Curves parametrized by a scalar."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from planekit.rect import Rect

if TYPE_CHECKING:
    from planekit.point import Point

DEFAULT_ACCURACY = 1e-6
"""Default for methods taking an accuracy, suitable for 2D graphics."""

MAX_EXTREMA = 4
"""Most extrema a curve reports; enough for cubic Béziers."""


@dataclass(frozen=True, slots=True)
class Nearest:
    """The nearest position on a curve to some point."""

    distance_sq: float
    t: float


class ParamCurve(ABC):
    """A curve evaluated at a parameter t, generally in [0, 1]."""

    @abstractmethod
    def eval(self, t: float) -> Point:
        """The point at parameter ``t``."""

    @abstractmethod
    def subsegment(self, t0: float, t1: float) -> ParamCurve:
        """The part of the curve between parameters ``t0`` and ``t1``."""

    def subdivide(self) -> tuple[ParamCurve, ParamCurve]:
        """Split into (roughly) halves."""
        return self.subsegment(0.0, 0.5), self.subsegment(0.5, 1.0)

    def start(self) -> Point:
        return self.eval(0.0)

    def end(self) -> Point:
        return self.eval(1.0)


class ParamCurveArclen(ParamCurve):
    """A curve whose arc length can be measured."""

    @abstractmethod
    def arclen(self, accuracy: float) -> float:
        """Arc length, accurate to ``accuracy``."""


class ParamCurveArea(ABC):
    """A curve whose signed area can be measured."""

    @abstractmethod
    def signed_area(self) -> float:
        """Signed area under the curve, by Green's theorem."""


class ParamCurveExtrema(ParamCurve):
    """A curve that reports its interior extrema."""

    @abstractmethod
    def extrema(self) -> list[float]:
        """Interior extrema parameters in increasing order, at most four."""

    def extrema_ranges(self) -> list[tuple[float, float]]:
        """Parameter ranges within each of which the curve is monotonic."""
        bounds = [0.0, *self.extrema(), 1.0]
        return list(zip(bounds, bounds[1:]))

    def bounding_box(self) -> Rect:
        """Smallest rectangle enclosing the curve over [0, 1]."""
        bbox = Rect.from_points(self.start(), self.end())
        for t in self.extrema():
            bbox = bbox.union_pt(self.eval(t))
        return bbox