"""Quadratic Bézier splines in B-spline form."""

from __future__ import annotations

from typing import Iterable, Iterator

from planekit.point import Point
from planekit.quadbez import QuadBez


class QuadSpline:
    """A quadratic Bézier spline given by its control points."""

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Point]) -> None:
        self._points: tuple[Point, ...] = tuple(points)

    def points(self) -> tuple[Point, ...]:
        """The spline's control points."""
        return self._points

    def to_quads(self) -> Iterator[QuadBez]:
        """The implied G1-continuous sequence of quadratic segments."""
        pts = self._points
        last = len(pts) - 1
        for idx, (p0, p1, p2) in enumerate(zip(pts, pts[1:], pts[2:])):
            if idx != 0:
                p0 = p0.midpoint(p1)
            if idx + 2 < last:
                p2 = p1.midpoint(p2)
            yield QuadBez(p0, p1, p2)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QuadSpline):
            return self._points == other._points
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"QuadSpline({list(self._points)!r})"