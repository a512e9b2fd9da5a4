"""SvgCanvas — a 2D drawing context that records SVG elements.

Mirrors the subset of the HTML canvas 2D API the diagram needs:

    ctx = SvgCanvas(200, 280)
    ctx.line_width = 2
    ctx.begin_path()
    ctx.line_to(28, 80)
    ctx.line_to(172, 80)
    ctx.stroke()
    ctx.to_svg()

Every ``stroke`` / ``fill`` / ``fill_rect`` / ``fill_text`` call appends one
element dict to ``elements``; the dicts are serialized by ``serialize_svg``.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any

from fretnot.render.export import png_data_url, svg_to_jpeg, svg_to_png
from fretnot.render.serializer import serialize_svg

logger = logging.getLogger(__name__)

_TAU = 2 * math.pi

# "30px Arial", "bold 20px Helvetica, sans-serif"
_FONT_RE = re.compile(r"^(?:(?P<weight>bold|normal|\d{3})\s+)?(?P<size>[\d.]+)px\s+(?P<family>.+)$")

_TEXT_ANCHOR = {
    "start": "start",
    "left": "start",
    "center": "middle",
    "end": "end",
    "right": "end",
}

# alphabetic is the SVG default and needs no attribute
_DOMINANT_BASELINE = {
    "alphabetic": None,
    "middle": "middle",
    "top": "text-before-edge",
    "hanging": "hanging",
    "bottom": "text-after-edge",
    "ideographic": "ideographic",
}

_STATE_FIELDS = (
    "fill_style",
    "stroke_style",
    "line_width",
    "line_cap",
    "font",
    "text_align",
    "text_baseline",
)


class SvgCanvas:
    """Drawing surface with canvas-style state and path construction."""

    def __init__(self, width: float = 200, height: float = 280, title: str = "") -> None:
        self.width = width
        self.height = height
        # Written as the document <title>
        self.title = title
        self.elements: list[dict[str, Any]] = []

        self.fill_style = "#000000"
        self.stroke_style = "#000000"
        self.line_width: float = 1.0
        self.line_cap = "butt"
        self.font = "10px sans-serif"
        self.text_align = "start"
        self.text_baseline = "alphabetic"

        self._saved: list[dict[str, Any]] = []
        # Path segments: ("M", x, y) | ("L", x, y) | ("A", cx, cy, r, start, end, ccw)
        self._path: list[tuple] = []

    # ── State ──

    def save(self) -> None:
        self._saved.append({name: getattr(self, name) for name in _STATE_FIELDS})

    def restore(self) -> None:
        if not self._saved:
            return
        for name, value in self._saved.pop().items():
            setattr(self, name, value)

    # ── Paths ──

    def begin_path(self) -> None:
        self._path = []

    def move_to(self, x: float, y: float) -> None:
        self._path.append(("M", x, y))

    def line_to(self, x: float, y: float) -> None:
        # With no current point, lineTo behaves like moveTo.
        if not self._path:
            self.move_to(x, y)
            return
        self._path.append(("L", x, y))

    def arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        self._path.append(("A", cx, cy, radius, start_angle, end_angle, anticlockwise))

    def stroke(self) -> None:
        if not self._path:
            return
        elem = self._path_element()
        elem.update(
            {
                "fill": "none",
                "stroke": self.stroke_style,
                "stroke-width": self.line_width,
                "stroke-linecap": self.line_cap,
            }
        )
        self.elements.append(elem)

    def fill(self) -> None:
        if not self._path:
            return
        elem = self._path_element()
        elem.update({"fill": self.fill_style, "stroke": "none"})
        self.elements.append(elem)

    def _path_element(self) -> dict[str, Any]:
        """Full-circle arc -> <circle>, partial arc or polyline -> <path>.

        An arc must be the only segment of its path.
        """
        arcs = [seg for seg in self._path if seg[0] == "A"]
        if not arcs:
            return {"tag": "path", "d": " ".join(f"{k} {_num(x)} {_num(y)}" for k, x, y in self._path)}
        if len(self._path) != 1:
            raise ValueError("an arc must be the only segment of its path")

        _, cx, cy, r, start, end, ccw = arcs[0]
        span = start - end if ccw else end - start
        if span >= _TAU:
            return {"tag": "circle", "cx": cx, "cy": cy, "r": r}

        span %= _TAU
        sx, sy = cx + r * math.cos(start), cy + r * math.sin(start)
        ex, ey = cx + r * math.cos(end), cy + r * math.sin(end)
        large = 1 if span > math.pi else 0
        sweep = 0 if ccw else 1
        return {
            "tag": "path",
            "d": f"M {_num(sx)} {_num(sy)} A {_num(r)} {_num(r)} 0 {large} {sweep} {_num(ex)} {_num(ey)}",
        }

    # ── Shapes & text ──

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.elements.append(
            {"tag": "rect", "x": x, "y": y, "width": width, "height": height, "fill": self.fill_style}
        )

    def fill_text(self, text: str, x: float, y: float) -> None:
        elem: dict[str, Any] = {"tag": "text", "x": x, "y": y, "fill": self.fill_style}
        elem.update(_font_attributes(self.font))
        elem["text-anchor"] = _TEXT_ANCHOR.get(self.text_align, "start")
        baseline = _DOMINANT_BASELINE.get(self.text_baseline)
        if baseline:
            elem["dominant-baseline"] = baseline
        elem["text"] = text
        self.elements.append(elem)

    # ── Export ──

    def to_svg(self) -> str:
        return serialize_svg(self.elements, self.width, self.height, title=self.title)

    def to_png(self, scale: float = 1.0) -> bytes:
        return svg_to_png(self.to_svg(), scale=scale)

    def to_jpeg(self, scale: float = 1.0, quality: int = 90, matte: str = "white") -> bytes:
        return svg_to_jpeg(self.to_svg(), scale=scale, quality=quality, matte=matte)

    def to_data_url(self, scale: float = 1.0) -> str:
        return png_data_url(self.to_png(scale=scale))


def _num(value: float) -> str:
    return f"{value:.3f}".rstrip("0").rstrip(".")


def _font_attributes(font: str) -> dict[str, Any]:
    match = _FONT_RE.match(font.strip())
    if match is None:
        logger.debug("Unrecognised font %r, using SVG defaults", font)
        return {}
    attrs: dict[str, Any] = {
        "font-size": match.group("size"),
        "font-family": match.group("family"),
    }
    if match.group("weight"):
        attrs["font-weight"] = match.group("weight")
    return attrs
