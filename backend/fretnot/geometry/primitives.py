"""2D value primitives — Point, Line, Rect, Circle. No render imports.

All operations return new instances; nothing mutates after construction.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def plus(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def minus(self, other: Point) -> Point:
        return self.plus(other.negate())

    def negate(self) -> Point:
        return Point(-self.x, -self.y)

    def times(self, n: float) -> Point:
        return Point(self.x * n, self.y * n)

    def divided_by(self, n: float) -> Point:
        return Point(self.x / n, self.y / n)

    __add__ = plus
    __sub__ = minus
    __neg__ = negate
    __mul__ = times
    __rmul__ = times
    __truediv__ = divided_by


@dataclass(frozen=True)
class Line:
    """Directed segment p1 -> p2. Arithmetic applies to each endpoint independently."""

    p1: Point
    p2: Point

    def plus(self, other: Line) -> Line:
        return Line(self.p1.plus(other.p1), self.p2.plus(other.p2))

    def minus(self, other: Line) -> Line:
        return self.plus(other.negate())

    def negate(self) -> Line:
        return Line(self.p1.negate(), self.p2.negate())

    def times(self, n: float) -> Line:
        return Line(self.p1.times(n), self.p2.times(n))

    def divided_by(self, n: float) -> Line:
        return Line(self.p1.divided_by(n), self.p2.divided_by(n))

    __add__ = plus
    __sub__ = minus
    __neg__ = negate
    __mul__ = times
    __rmul__ = times
    __truediv__ = divided_by


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle stored as two corners; everything else is derived."""

    top_left: Point
    bottom_right: Point

    @property
    def top_right(self) -> Point:
        return Point(self.bottom_right.x, self.top_left.y)

    @property
    def bottom_left(self) -> Point:
        return Point(self.top_left.x, self.bottom_right.y)

    @property
    def width(self) -> float:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> float:
        return self.bottom_right.y - self.top_left.y

    @property
    def top_line(self) -> Line:
        return Line(self.top_left, self.top_right)

    @property
    def bottom_line(self) -> Line:
        return Line(self.bottom_left, self.bottom_right)

    @property
    def left_line(self) -> Line:
        return Line(self.top_left, self.bottom_left)

    @property
    def right_line(self) -> Line:
        return Line(self.top_right, self.bottom_right)


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float
