"""Tests for Point / Line / Rect value algebra."""

from __future__ import annotations

import pytest

from fretnot.geometry import Circle, Line, Point, Rect


def test_point_arithmetic():
    a = Point(3.0, -4.0)
    b = Point(1.5, 2.0)
    assert a.plus(b) == Point(4.5, -2.0)
    assert a.minus(b) == Point(1.5, -6.0)
    assert a.negate() == Point(-3.0, 4.0)
    assert a.times(2) == Point(6.0, -8.0)
    assert a.divided_by(2) == Point(1.5, -2.0)


def test_point_operators_match_methods():
    a = Point(1.0, 2.0)
    b = Point(5.0, 7.0)
    assert a + b == a.plus(b)
    assert a - b == a.minus(b)
    assert -a == a.negate()
    assert a * 3 == 3 * a == a.times(3)
    assert a / 4 == a.divided_by(4)


@pytest.mark.parametrize(
    "a, b",
    [
        (Point(0.0, 0.0), Point(0.0, 0.0)),
        (Point(1.1, 2.2), Point(-3.3, 4.4)),
        (Point(1e6, -1e-6), Point(0.1, 0.7)),
    ],
)
def test_minus_then_plus_is_identity(a, b):
    result = a.minus(b).plus(b)
    assert result.x == pytest.approx(a.x)
    assert result.y == pytest.approx(a.y)


def test_point_is_immutable():
    p = Point(1.0, 2.0)
    with pytest.raises(AttributeError):
        p.x = 5.0  # type: ignore[misc]
    p.plus(Point(1.0, 1.0))
    assert p == Point(1.0, 2.0)


def test_line_ops_apply_per_endpoint():
    line = Line(Point(0.0, 0.0), Point(10.0, 20.0))
    other = Line(Point(1.0, 1.0), Point(2.0, 2.0))
    assert line.plus(other) == Line(Point(1.0, 1.0), Point(12.0, 22.0))
    assert line.minus(other) == Line(Point(-1.0, -1.0), Point(8.0, 18.0))
    assert line.negate() == Line(Point(0.0, 0.0), Point(-10.0, -20.0))


@pytest.mark.parametrize("n", [3.0, -0.5, 7.25])
def test_line_times_then_divided_by_is_identity(n):
    line = Line(Point(1.0, -2.0), Point(3.5, 8.0))
    result = line.times(n).divided_by(n)
    assert result.p1.x == pytest.approx(line.p1.x)
    assert result.p1.y == pytest.approx(line.p1.y)
    assert result.p2.x == pytest.approx(line.p2.x)
    assert result.p2.y == pytest.approx(line.p2.y)


def test_divided_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Point(1.0, 1.0).divided_by(0)


def test_rect_derived_corners_consistent():
    rect = Rect(Point(28, 80), Point(172, 252))
    assert rect.top_right == Point(172, 80)
    assert rect.bottom_left == Point(28, 252)
    assert rect.top_right.x == rect.bottom_right.x
    assert rect.top_right.y == rect.top_left.y
    assert rect.bottom_left.x == rect.top_left.x
    assert rect.bottom_left.y == rect.bottom_right.y
    assert rect.width == 144
    assert rect.height == 172


def test_rect_lines():
    rect = Rect(Point(0, 0), Point(4, 3))
    assert rect.top_line == Line(Point(0, 0), Point(4, 0))
    assert rect.bottom_line == Line(Point(0, 3), Point(4, 3))
    assert rect.left_line == Line(Point(0, 0), Point(0, 3))
    assert rect.right_line == Line(Point(4, 0), Point(4, 3))


def test_circle():
    c = Circle(Point(5, 5), 2.5)
    assert c.center == Point(5, 5)
    assert c.radius == 2.5
