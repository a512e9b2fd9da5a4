"""Evenly-spaced line interpolation between two boundary segments."""

from __future__ import annotations

from fretnot.geometry.primitives import Line

# Two boundaries are the minimum: the step divisor is count - 1.
_MIN_LINE_COUNT = 2


def create_evenly_spaced_lines(line_start: Line, line_end: Line, count_inclusive: int) -> list[Line]:
    """Interpolate ``count_inclusive`` segments from ``line_start`` to ``line_end``.

    Both endpoints are stepped independently, so the boundaries need not be
    parallel or of equal length. The first result is ``line_start`` and the
    last is ``line_end``.
    """
    if count_inclusive < _MIN_LINE_COUNT:
        raise ValueError(f"need at least {_MIN_LINE_COUNT} lines, got {count_inclusive}")

    n = count_inclusive - 1
    delta1 = line_end.p1.minus(line_start.p1).divided_by(n)
    delta2 = line_end.p2.minus(line_start.p2).divided_by(n)
    line_delta = Line(delta1, delta2)
    return [line_start.plus(line_delta.times(i)) for i in range(n + 1)]
