"""Tests for evenly-spaced line interpolation."""

from __future__ import annotations

import pytest

from fretnot.geometry import Line, Point, create_evenly_spaced_lines


def _close(a: Line, b: Line) -> bool:
    return all(
        u == pytest.approx(v)
        for u, v in [
            (a.p1.x, b.p1.x),
            (a.p1.y, b.p1.y),
            (a.p2.x, b.p2.x),
            (a.p2.y, b.p2.y),
        ]
    )


def test_identical_boundaries_repeat():
    line = Line(Point(1.0, 2.0), Point(3.0, 4.0))
    result = create_evenly_spaced_lines(line, line, 5)
    assert result == [line] * 5


@pytest.mark.parametrize("n", [2, 3, 6, 7, 13])
def test_first_and_last_are_boundaries(n):
    a = Line(Point(28, 80), Point(28, 252))
    b = Line(Point(172, 80), Point(172, 252))
    result = create_evenly_spaced_lines(a, b, n)
    assert len(result) == n
    assert result[0] == a
    assert _close(result[-1], b)


def test_strings_are_evenly_spaced():
    left = Line(Point(28, 80), Point(28, 252))
    right = Line(Point(172, 80), Point(172, 252))
    xs = [line.p1.x for line in create_evenly_spaced_lines(left, right, 6)]
    assert xs == pytest.approx([28.0, 56.8, 85.6, 114.4, 143.2, 172.0])


def test_non_parallel_boundaries_interpolate_each_endpoint():
    # Trapezoid: narrow nut, wide far edge.
    start = Line(Point(40, 0), Point(60, 0))
    end = Line(Point(0, 100), Point(100, 100))
    mid = create_evenly_spaced_lines(start, end, 3)[1]
    assert _close(mid, Line(Point(20, 50), Point(80, 50)))


@pytest.mark.parametrize("n", [1, 0, -3])
def test_count_below_two_rejected(n):
    line = Line(Point(0, 0), Point(1, 1))
    with pytest.raises(ValueError):
        create_evenly_spaced_lines(line, line, n)
