"""Fretboard content and API models."""

from fretnot.models.fretboard import MUTED, Fret, Fretboard, Muted, format_frets, parse_frets

__all__ = [
    "MUTED",
    "Fret",
    "Fretboard",
    "Muted",
    "format_frets",
    "parse_frets",
]
