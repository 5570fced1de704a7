import math

import pytest

from planekit.size import Size
from planekit.vec2 import Vec2


def test_display():
    s = Size(-0.12345, 9.87654)
    assert f"{s}" == "(-0.12345×9.87654)"
    assert str(s) == "(-0.12345×9.87654)"


def test_display_with_spec():
    s = Size(-0.12345, 9.87654)
    assert f"{s:+6.2}" == "( -0.12× +9.88)"


def test_aspect_ratio():
    s = Size(1.0, 1.0)
    assert abs(s.aspect_ratio() - 1.0) < 1e-6


def test_aspect_ratio_zero_width():
    assert Size(0.0, 5.0).aspect_ratio() == math.inf
    assert Size(0.0, -5.0).aspect_ratio() == -math.inf
    assert math.isnan(Size(0.0, 0.0).aspect_ratio())


def test_max_min_side():
    size = Size(-10.5, 42.0)
    assert size.max_side() == 42.0
    assert size.min_side() == -10.5


def test_clamp():
    this = Size(0.0, 100.0)
    assert this.clamp(Size(10.0, 10.0), Size(50.0, 50.0)) == Size(10.0, 50.0)


def test_round():
    pos = Size(3.3, 3.6).round()
    assert (pos.width, pos.height) == (3.0, 4.0)
    neg = Size(-3.3, -3.6).round()
    assert (neg.width, neg.height) == (-3.0, -4.0)


def test_ceil():
    pos = Size(3.3, 3.6).ceil()
    assert (pos.width, pos.height) == (4.0, 4.0)
    neg = Size(-3.3, -3.6).ceil()
    assert (neg.width, neg.height) == (-3.0, -3.0)


def test_floor():
    pos = Size(3.3, 3.6).floor()
    assert (pos.width, pos.height) == (3.0, 3.0)
    neg = Size(-3.3, -3.6).floor()
    assert (neg.width, neg.height) == (-4.0, -4.0)


def test_expand():
    pos = Size(3.3, 3.6).expand()
    assert (pos.width, pos.height) == (4.0, 4.0)
    neg = Size(-3.3, -3.6).expand()
    assert (neg.width, neg.height) == (-4.0, -4.0)


def test_trunc():
    pos = Size(3.3, 3.6).trunc()
    assert (pos.width, pos.height) == (3.0, 3.0)
    neg = Size(-3.3, -3.6).trunc()
    assert (neg.width, neg.height) == (-3.0, -3.0)


def test_area_and_empty():
    assert Size(0.0, 10.0).is_empty() is True
    assert Size(-2.0, 3.0).is_empty() is False
    assert Size(-2.0, 3.0).area() == -6.0


def test_arithmetic():
    a = Size(1.0, 2.0)
    b = Size(3.0, 5.0)
    assert a + b == Size(4.0, 7.0)
    assert (a + b) - b == a
    assert a * 2.0 == Size(2.0, 4.0)
    assert 2.0 * a == a * 2.0
    assert (a * 3.0) / 3.0 == a


def test_div_by_zero_gives_infinity():
    s = Size(1.0, -1.0) / 0.0
    assert s.width == math.inf
    assert s.height == -math.inf


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Size(1.0, 2.0) + 1.0


def test_to_vec2_and_iter():
    s = Size(3.0, 4.0)
    assert s.to_vec2() == Vec2(3.0, 4.0)
    assert tuple(s) == (3.0, 4.0)
    assert s.to_vec2().to_size() == s


def test_finite_and_nan():
    assert Size(1.0, 2.0).is_finite() is True
    assert Size(math.inf, 2.0).is_finite() is False
    assert Size(math.nan, 2.0).is_nan() is True
    assert Size(1.0, 2.0).is_nan() is False