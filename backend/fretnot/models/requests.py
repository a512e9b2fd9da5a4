"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from fretnot.models.fretboard import parse_fret, is_muted

DEFAULT_BACKGROUND = "rgba(0,0,0,0)"


class FretboardQuery(BaseModel):
    title: str = Field(default="", description="Title drawn above the diagram")
    frets: str = Field(default="", description='Fret string, e.g. "2xx232" or "12,x,0,10,9,9"')
    starting_fret: int = Field(default=1, ge=1, description="Fret number of the top row")
    bg_color: str = Field(default=DEFAULT_BACKGROUND, description="Background paint")


def _string_or_default(value: object, default: str = "") -> str:
    return value if isinstance(value, str) else default


def sanitize_query(
    title: object = None,
    frets: object = None,
    starting_fret: object = None,
    bg: object = None,
) -> FretboardQuery:
    """Coerce raw query values into a FretboardQuery. Never rejects input.

    Non-string values fall back to defaults; an unparsable or < 1 starting
    fret becomes 1.
    """
    parsed = parse_fret(_string_or_default(starting_fret, "1"))
    start = 1 if is_muted(parsed) else max(int(parsed), 1)
    return FretboardQuery(
        title=_string_or_default(title),
        frets=_string_or_default(frets),
        starting_fret=start,
        bg_color=_string_or_default(bg, DEFAULT_BACKGROUND),
    )
