"""SVG -> raster export (PNG / JPEG / data URL) via CairoSVG and Pillow."""

from __future__ import annotations

import base64
import io
import logging

import cairosvg
from PIL import Image

logger = logging.getLogger(__name__)


def svg_to_png(svg: str, scale: float = 1.0) -> bytes:
    """Render SVG string to PNG bytes using cairosvg."""
    try:
        return cairosvg.svg2png(bytestring=svg.encode("utf-8"), scale=scale)
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise


def svg_to_jpeg(svg: str, scale: float = 1.0, quality: int = 90, matte: str = "white") -> bytes:
    """Render SVG string to JPEG bytes.

    JPEG carries no alpha channel, so the RGBA raster is composited onto an
    opaque ``matte`` colour first.
    """
    png_bytes = svg_to_png(svg, scale=scale)
    image = Image.open(io.BytesIO(png_bytes)).convert("RGBA")
    background = Image.new("RGBA", image.size, matte)
    flattened = Image.alpha_composite(background, image).convert("RGB")

    buf = io.BytesIO()
    flattened.save(buf, format="JPEG", quality=quality)
    return buf.getvalue()


def png_data_url(png_bytes: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")
