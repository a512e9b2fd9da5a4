"""Diagram rendering — drawing surface, layout and export."""

from fretnot.render.canvas import SvgCanvas
from fretnot.render.diagram import (
    DiagramOptions,
    OutputFormat,
    draw_fretboard,
    render_fretboard,
    to_data_url,
    to_jpeg,
    to_png,
    to_svg,
)

__all__ = [
    "DiagramOptions",
    "OutputFormat",
    "SvgCanvas",
    "draw_fretboard",
    "render_fretboard",
    "to_data_url",
    "to_jpeg",
    "to_png",
    "to_svg",
]
