import pytest

from planekit.param_curve import (
    MAX_EXTREMA,
    Nearest,
    ParamCurve,
    ParamCurveArclen,
    ParamCurveArea,
    ParamCurveExtrema,
)
from planekit.point import Point
from planekit.rect import Rect


class _Segment(ParamCurveArclen, ParamCurveExtrema):
    def __init__(self, p0, p1):
        self.p0 = p0
        self.p1 = p1

    def eval(self, t):
        return self.p0.lerp(self.p1, t)

    def subsegment(self, t0, t1):
        return _Segment(self.eval(t0), self.eval(t1))

    def arclen(self, accuracy):
        return self.p0.distance(self.p1)

    def extrema(self):
        return []


class _Arch(ParamCurveExtrema, ParamCurveArea):
    """x = t, y = t * (1 - t): one interior y extremum at t = 0.5."""

    def __init__(self, t0=0.0, t1=1.0):
        self.t0 = t0
        self.t1 = t1

    def _raw(self, s):
        return Point(s, s * (1.0 - s))

    def eval(self, t):
        return self._raw(self.t0 + (self.t1 - self.t0) * t)

    def subsegment(self, t0, t1):
        span = self.t1 - self.t0
        return _Arch(self.t0 + span * t0, self.t0 + span * t1)

    def extrema(self):
        return [0.5] if self.t0 == 0.0 and self.t1 == 1.0 else []

    def signed_area(self):
        return 0.0


def test_abstract_classes_cannot_be_instantiated():
    for cls in (ParamCurve, ParamCurveArclen, ParamCurveArea, ParamCurveExtrema):
        with pytest.raises(TypeError):
            cls()


def test_start_and_end_evaluate_endpoints():
    seg = _Segment(Point(1.0, 2.0), Point(5.0, 8.0))
    assert seg.start() == Point(1.0, 2.0)
    assert seg.end() == Point(5.0, 8.0)


def test_subdivide_halves_join_at_midpoint():
    seg = _Segment(Point(0.0, 0.0), Point(4.0, 6.0))
    first, second = seg.subdivide()
    assert first.start() == seg.start()
    assert second.end() == seg.end()
    assert first.end() == second.start()
    assert first.end() == seg.eval(0.5)


def test_subdivided_arclen_adds_up():
    seg = _Segment(Point(0.0, 0.0), Point(3.0, 4.0))
    first, second = seg.subdivide()
    total = first.arclen(1e-9) + second.arclen(1e-9)
    assert abs(total - seg.arclen(1e-9)) < 1e-12


def test_extrema_ranges_without_extrema():
    seg = _Segment(Point(0.0, 0.0), Point(1.0, 1.0))
    assert seg.extrema_ranges() == [(0.0, 1.0)]


def test_extrema_ranges_split_at_extrema():
    arch = _Arch()
    ranges = ParamCurveExtrema.extrema_ranges(arch)
    assert ranges == [(0.0, 0.5), (0.5, 1.0)]
    assert len(ranges) <= MAX_EXTREMA + 1


def test_bounding_box_includes_extrema():
    arch = _Arch()
    bbox = arch.bounding_box()
    top = arch.eval(0.5)
    assert bbox == Rect(0.0, 0.0, 1.0, top.y)


def test_bounding_box_of_segment_is_normalized():
    seg = _Segment(Point(5.0, 8.0), Point(1.0, 2.0))
    assert seg.bounding_box() == Rect(1.0, 2.0, 5.0, 8.0)


def test_bounding_box_contains_samples():
    arch = _Arch()
    bbox = ParamCurveExtrema.bounding_box(arch)
    for t in (0.1, 0.3, 0.5, 0.7, 0.9):
        p = arch.eval(t)
        assert bbox.x0 <= p.x <= bbox.x1
        assert bbox.y0 <= p.y <= bbox.y1


def test_nearest_holds_fields():
    n = Nearest(distance_sq=2.5, t=0.25)
    assert n.distance_sq == 2.5
    assert n.t == 0.25
    assert n == Nearest(2.5, 0.25)