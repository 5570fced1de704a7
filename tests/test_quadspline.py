from planekit.point import Point
from planekit.quadbez import QuadBez
from planekit.quadspline import QuadSpline


def test_no_points_no_quads():
    assert list(QuadSpline([]).to_quads()) == []


def test_one_point_no_quads():
    assert list(QuadSpline([Point(1.0, 1.0)]).to_quads()) == []


def test_two_points_no_quads():
    assert list(QuadSpline([Point(1.0, 1.0), Point(1.0, 1.0)]).to_quads()) == []


def test_three_points_same_quad():
    p0 = Point(1.0, 1.0)
    p1 = Point(2.0, 2.0)
    p2 = Point(3.0, 3.0)
    assert list(QuadSpline([p0, p1, p2]).to_quads()) == [QuadBez(p0, p1, p2)]


def test_four_points_implicit_on_curve():
    p0 = Point(1.0, 1.0)
    p1 = Point(3.0, 3.0)
    p2 = Point(5.0, 5.0)
    p3 = Point(8.0, 8.0)
    assert list(QuadSpline([p0, p1, p2, p3]).to_quads()) == [
        QuadBez(p0, p1, p1.midpoint(p2)),
        QuadBez(p1.midpoint(p2), p2, p3),
    ]


def test_points_returned_and_equality():
    pts = [Point(0.0, 0.0), Point(1.0, 2.0)]
    spline = QuadSpline(pts)
    assert list(spline.points()) == pts
    assert spline == QuadSpline(list(pts))


def test_quads_are_continuous():
    pts = [Point(0.0, 0.0), Point(1.0, 3.0), Point(4.0, 2.0), Point(5.0, -1.0), Point(7.0, 0.0)]
    quads = list(QuadSpline(pts).to_quads())
    assert len(quads) == 3
    for a, b in zip(quads, quads[1:]):
        assert a.end() == b.start()
    assert quads[0].start() == pts[0]
    assert quads[-1].end() == pts[-1]