import math

import pytest

from planekit.point import Point
from planekit.vec2 import Vec2


def test_point_arithmetic():
    assert Point(0.0, 0.0) - Vec2(10.0, 0.0) == Point(-10.0, 0.0)
    assert Point(0.0, 0.0) - Point(-5.0, 101.0) == Vec2(5.0, -101.0)


def test_add_vec_and_tuple():
    p = Point(1.0, 2.0)
    assert p + Vec2(1.0, 1.0) == Point(2.0, 3.0)
    assert p + (3.0, -2.0) == Point(4.0, 0.0)
    assert p - (1.0, 2.0) == Point(0.0, 0.0)


def test_bad_operand_raises():
    with pytest.raises(TypeError):
        Point(1.0, 2.0) + Point(1.0, 1.0)
    with pytest.raises(TypeError):
        Point(1.0, 2.0) - 3.0


def test_distance():
    assert Point(0.0, 10.0).distance(Point(0.0, 5.0)) == 5.0
    assert Point(-11.0, 1.0).distance(Point(-7.0, -2.0)) == 5.0
    assert Point(-11.0, 1.0).distance_squared(Point(-7.0, -2.0)) == 25.0


def test_display():
    p = Point(0.12345, 9.87654)
    assert str(p) == "(0.12345, 9.87654)"
    assert format(p, ".2") == "(0.12, 9.88)"


def test_display_whole_numbers():
    assert str(Point(10.0, -3.0)) == "(10, -3)"


def test_midpoint_and_lerp():
    a = Point(0.0, 0.0)
    b = Point(4.0, 8.0)
    assert a.midpoint(b) == Point(2.0, 4.0)
    assert a.lerp(b, 0.25) == Point(1.0, 2.0)


def test_to_vec2_and_iter():
    p = Point(1.5, 2.5)
    assert p.to_vec2() == Vec2(1.5, 2.5)
    assert tuple(p) == (1.5, 2.5)
    x, y = p
    assert (x, y) == (1.5, 2.5)


def test_round():
    a = Point(3.3, 3.6).round()
    b = Point(3.0, -3.1).round()
    assert (a.x, a.y) == (3.0, 4.0)
    assert (b.x, b.y) == (3.0, -3.0)


def test_ceil():
    a = Point(3.3, 3.6).ceil()
    b = Point(3.0, -3.1).ceil()
    assert (a.x, a.y) == (4.0, 4.0)
    assert (b.x, b.y) == (3.0, -3.0)


def test_floor():
    a = Point(3.3, 3.6).floor()
    b = Point(3.0, -3.1).floor()
    assert (a.x, a.y) == (3.0, 3.0)
    assert (b.x, b.y) == (3.0, -4.0)


def test_expand():
    a = Point(3.3, 3.6).expand()
    b = Point(3.0, -3.1).expand()
    assert (a.x, a.y) == (4.0, 4.0)
    assert (b.x, b.y) == (3.0, -4.0)


def test_trunc():
    a = Point(3.3, 3.6).trunc()
    b = Point(3.0, -3.1).trunc()
    assert (a.x, a.y) == (3.0, 3.0)
    assert (b.x, b.y) == (3.0, -3.0)


def test_finite_and_nan():
    assert Point(1.0, 2.0).is_finite()
    assert not Point(1.0, math.inf).is_finite()
    assert Point(math.nan, 1.0).is_nan()
    assert not Point(0.0, 0.0).is_nan()


def test_default_is_origin():
    assert Point() == Point(0.0, 0.0)