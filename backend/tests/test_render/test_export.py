"""Tests for raster export (requires CairoSVG's cairo library)."""

from __future__ import annotations

import base64
import io

import numpy as np
from PIL import Image

from fretnot.models.fretboard import Fretboard
from fretnot.render.diagram import DiagramOptions, OutputFormat, render_fretboard

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"
JPEG_MAGIC = b"\xff\xd8"


def _pixels(data: bytes, mode: str) -> np.ndarray:
    return np.array(Image.open(io.BytesIO(data)).convert(mode))


def test_png_size_and_transparency():
    png = render_fretboard(Fretboard("2xx232"), DiagramOptions(title="D/F#"), OutputFormat.PNG)
    assert png.startswith(PNG_MAGIC)
    px = _pixels(png, "RGBA")
    assert px.shape == (280, 200, 4)
    # transparent background in the corner
    assert px[275, 2, 3] == 0
    # marker on the 4th string, 2nd fret is opaque and dark
    cy = int(80 + 172 / 6 * 1.5)
    r, g, b, a = px[cy, 114]
    assert a > 200
    assert max(r, g, b) < 80


def test_png_background_colour():
    png = render_fretboard(Fretboard(""), DiagramOptions(background="white"), OutputFormat.PNG)
    r, g, b, a = _pixels(png, "RGBA")[275, 2]
    assert (r, g, b, a) == (255, 255, 255, 255)


def test_jpeg_flattened_on_matte():
    jpeg = render_fretboard(Fretboard("x32010"), DiagramOptions(title="C"), OutputFormat.JPEG)
    assert jpeg.startswith(JPEG_MAGIC)
    px = _pixels(jpeg, "RGB")
    assert px.shape == (280, 200, 3)
    assert px[275, 2].min() > 240


def test_data_url_is_png():
    url = render_fretboard(Fretboard("022100"), DiagramOptions(title="E"), OutputFormat.DATA_URL)
    assert isinstance(url, str)
    prefix = "data:image/png;base64,"
    assert url.startswith(prefix)
    assert base64.b64decode(url[len(prefix):]).startswith(PNG_MAGIC)
