"""Fretboard geometry — value primitives and line interpolation."""

from fretnot.geometry.primitives import Circle, Line, Point, Rect
from fretnot.geometry.spacing import create_evenly_spaced_lines

__all__ = [
    "Circle",
    "Line",
    "Point",
    "Rect",
    "create_evenly_spaced_lines",
]
