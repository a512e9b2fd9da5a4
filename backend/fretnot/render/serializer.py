"""Write an SVG document from recorded drawing elements."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr


def _fmt(value: Any) -> str:
    # Trim float noise: 28.000000000000004 -> 28
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 200.0,
    canvas_h: float = 280.0,
    title: str = "",
) -> str:
    """Generate SVG markup from element definitions.

    Each element is ``{"tag": ..., <attr>: <value>, ...}``; an optional
    ``"text"`` key becomes the element's character content.
    """
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{_fmt(canvas_w)}" height="{_fmt(canvas_h)}"'
        f' viewBox="0 0 {_fmt(canvas_w)} {_fmt(canvas_h)}" xmlns="http://www.w3.org/2000/svg"'
        f' role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k not in ("tag", "text")}
        attr_str = " ".join(f"{k}={quoteattr(_fmt(v))}" for k, v in attrs.items())
        if "text" in elem:
            lines.append(f"  <{tag} {attr_str}>{escape(str(elem['text']))}</{tag}>")
        else:
            lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)
