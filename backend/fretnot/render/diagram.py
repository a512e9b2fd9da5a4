"""Chord diagram layout — maps a Fretboard onto a 200x280 drawing surface.

Layout, in canvas units: 80 units of top padding hold the title and the x/o
marks above the nut; 28 units pad the left, right and bottom. The board is 6
strings by 6 fret rows; a fret-number label sits left of the first row when
the diagram starts above fret 1.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass

from fretnot.config import settings
from fretnot.geometry import Circle, Line, Point, Rect, create_evenly_spaced_lines
from fretnot.models.fretboard import MUTED, Fret, Fretboard, clamp_fret
from fretnot.render.canvas import SvgCanvas

logger = logging.getLogger(__name__)

CANVAS_WIDTH = 200
CANVAS_HEIGHT = 280

FRET_COUNT = 6
STRING_COUNT = 6

PADDING_LEFT = 28
PADDING_RIGHT = 28
PADDING_BOTTOM = 28
PADDING_TOP = 80

TITLE_FONT = "30px Arial"
TITLE_Y = 45
LABEL_FONT = "20px Arial"
# Offset of the starting-fret label left of the board, and of x/o above the nut.
LABEL_GAP = 8
MARK_GAP = 10

NUT_WIDTH = 6
STRING_WIDTH = 2
# Marker radius as a fraction of one fret-row height.
MARKER_RADIUS_RATIO = 0.3


class OutputFormat(str, enum.Enum):
    SVG = "svg"
    PNG = "png"
    JPEG = "jpeg"
    DATA_URL = "data_url"


MEDIA_TYPES = {
    OutputFormat.SVG: "image/svg+xml",
    OutputFormat.PNG: "image/png",
    OutputFormat.JPEG: "image/jpeg",
    OutputFormat.DATA_URL: "text/plain",
}


@dataclass(frozen=True)
class DiagramOptions:
    title: str = ""
    background: str = "rgba(0,0,0,0)"
    starting_fret: int = 1

    def __post_init__(self) -> None:
        # Positions below the first fret do not exist.
        object.__setattr__(self, "starting_fret", max(clamp_fret(self.starting_fret), 1))


def shift_fret(fret: Fret, starting_fret: int) -> Fret:
    """Move a fret into the visible window that begins at ``starting_fret``.

    Frets below the window clamp to 0 and are therefore drawn as open.
    """
    if fret is MUTED:
        return fret
    return max(clamp_fret(fret) - clamp_fret(starting_fret) + 1, 0)


def _draw_line(ctx: SvgCanvas, line: Line) -> None:
    ctx.begin_path()
    ctx.line_to(line.p1.x, line.p1.y)
    ctx.line_to(line.p2.x, line.p2.y)
    ctx.stroke()


def _draw_circle(ctx: SvgCanvas, circle: Circle) -> None:
    ctx.begin_path()
    ctx.arc(circle.center.x, circle.center.y, circle.radius, 0, 2 * math.pi)
    ctx.fill()
    ctx.stroke()


def fretboard_rect(width: float = CANVAS_WIDTH, height: float = CANVAS_HEIGHT) -> Rect:
    top_left = Point(PADDING_LEFT, PADDING_TOP)
    bottom_right = Point(width - PADDING_RIGHT, height - PADDING_BOTTOM)
    return Rect(top_left, bottom_right)


def draw_fretboard(ctx: SvgCanvas, fretboard: Fretboard, options: DiagramOptions) -> SvgCanvas:
    """Draw the full diagram onto ``ctx`` and return it."""
    # background
    ctx.fill_style = options.background
    ctx.fill_rect(0, 0, ctx.width, ctx.height)

    # title
    ctx.text_align = "center"
    ctx.font = TITLE_FONT
    ctx.fill_style = "black"
    ctx.fill_text(options.title, ctx.width / 2, TITLE_Y)

    rect = fretboard_rect(ctx.width, ctx.height)

    # nut
    ctx.stroke_style = "black"
    ctx.line_cap = "square"
    ctx.line_width = NUT_WIDTH
    _draw_line(ctx, rect.top_line)

    # strings
    ctx.line_width = STRING_WIDTH
    for string_line in create_evenly_spaced_lines(rect.left_line, rect.right_line, STRING_COUNT):
        _draw_line(ctx, string_line)

    # frets
    for fret_line in create_evenly_spaced_lines(rect.top_line, rect.bottom_line, FRET_COUNT + 1):
        _draw_line(ctx, fret_line)

    string_spacing = rect.width / (STRING_COUNT - 1)
    fret_spacing = rect.height / FRET_COUNT
    y = rect.top_left.y

    ctx.font = LABEL_FONT
    if options.starting_fret > 1:
        ctx.save()
        ctx.text_align = "right"
        ctx.text_baseline = "middle"
        ctx.fill_text(str(options.starting_fret), rect.top_left.x - LABEL_GAP, rect.top_right.y + fret_spacing / 2)
        ctx.restore()

    frets = [shift_fret(f, options.starting_fret) for f in fretboard.frets]
    if len(frets) > STRING_COUNT:
        logger.debug("%d frets for %d strings; extra markers fall outside the board", len(frets), STRING_COUNT)

    for string_idx, fret in enumerate(frets):
        x = rect.top_left.x + string_idx * string_spacing
        if fret is MUTED:
            ctx.fill_text("x", x, y - MARK_GAP)
        elif fret == 0:
            ctx.fill_text("o", x, y - MARK_GAP)
        elif fret > 0:
            center = Point(x, y + fret_spacing * (fret - 0.5))
            _draw_circle(ctx, Circle(center, fret_spacing * MARKER_RADIUS_RATIO))

    return ctx


def render_fretboard(
    fretboard: Fretboard,
    options: DiagramOptions | None = None,
    fmt: OutputFormat | str = OutputFormat.SVG,
) -> bytes | str:
    """Render on a fresh canvas. Bytes for svg/png/jpeg, a string for data_url."""
    options = options or DiagramOptions()
    try:
        fmt = OutputFormat(fmt)
    except ValueError:
        raise ValueError(f"unknown output format: {fmt!r}") from None

    ctx = draw_fretboard(SvgCanvas(CANVAS_WIDTH, CANVAS_HEIGHT, title=options.title), fretboard, options)
    logger.debug("Rendered %r as %s (%d elements)", fretboard, fmt.value, len(ctx.elements))

    if fmt is OutputFormat.SVG:
        return ctx.to_svg().encode("utf-8")
    if fmt is OutputFormat.PNG:
        return ctx.to_png(scale=settings.raster_scale)
    if fmt is OutputFormat.JPEG:
        return ctx.to_jpeg(
            scale=settings.raster_scale,
            quality=settings.jpeg_quality,
            matte=settings.jpeg_matte,
        )
    return ctx.to_data_url(scale=settings.raster_scale)


def to_svg(fretboard: Fretboard, options: DiagramOptions | None = None) -> bytes:
    return render_fretboard(fretboard, options, OutputFormat.SVG)


def to_png(fretboard: Fretboard, options: DiagramOptions | None = None) -> bytes:
    return render_fretboard(fretboard, options, OutputFormat.PNG)


def to_jpeg(fretboard: Fretboard, options: DiagramOptions | None = None) -> bytes:
    return render_fretboard(fretboard, options, OutputFormat.JPEG)


def to_data_url(fretboard: Fretboard, options: DiagramOptions | None = None) -> str:
    return render_fretboard(fretboard, options, OutputFormat.DATA_URL)
