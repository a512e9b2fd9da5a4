"""Fret values and the compact fret-string encoding.

Two encodings are accepted:
    "2xx232"         one character per string (single-digit frets only)
    "12,x,0,10,9,9"  comma separated (multi-digit frets)

Any token without a leading integer becomes MUTED.
"""

from __future__ import annotations

import enum
import re
from typing import Union


class Muted(enum.Enum):
    """The muted-string marker. Single member, rendered as "x"."""

    MUTED = "x"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return "MUTED"


MUTED = Muted.MUTED

Fret = Union[int, Muted]

# Leading integer of a token: surrounding whitespace, optional sign, ASCII digits.
# Trailing garbage is ignored ("10fr" -> 10).
_LEADING_INT_RE = re.compile(r"\s*([+-]?)([0-9]+)")

# Fret numbers are capped in magnitude so layout coordinates stay finite floats.
FRET_LIMIT = 999_999
_FRET_LIMIT_DIGITS = len(str(FRET_LIMIT))


def clamp_fret(value: int) -> int:
    return max(-FRET_LIMIT, min(value, FRET_LIMIT))


def parse_fret(token: str) -> Fret:
    """Parse one token. No leading integer -> MUTED; huge numbers clamp to FRET_LIMIT."""
    match = _LEADING_INT_RE.match(token)
    if match is None:
        return MUTED
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    value = FRET_LIMIT if len(digits) > _FRET_LIMIT_DIGITS else min(int(digits), FRET_LIMIT)
    return -value if sign == "-" else value


def parse_frets(text: str) -> list[Fret]:
    """Parse a fret string into one Fret per string, in encoded order."""
    tokens = text.split(",") if "," in text else list(text)
    return [parse_fret(t) for t in tokens]


def format_frets(frets: list[Fret]) -> str:
    """Inverse of parse_frets for well-formed fret lists."""
    tokens = [str(f) for f in frets]
    if any(len(t) != 1 for t in tokens):
        return ",".join(tokens)
    return "".join(tokens)


def is_muted(fret: Fret) -> bool:
    return fret is MUTED


class Fretboard:
    """The content of one chord diagram: a fret per string."""

    def __init__(self, frets: str | list[Fret]) -> None:
        self._frets: list[Fret] = []
        self.set_frets(frets)

    @property
    def frets(self) -> list[Fret]:
        return list(self._frets)

    def set_frets(self, frets: str | list[Fret]) -> Fretboard:
        if isinstance(frets, str):
            self._frets = parse_frets(frets)
        else:
            self._frets = list(frets)
        return self

    def __len__(self) -> int:
        return len(self._frets)

    def __repr__(self) -> str:
        return f"Fretboard({format_frets(self._frets)!r})"
