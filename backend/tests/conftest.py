"""Shared test fixtures."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from fretnot.models.fretboard import Fretboard
from fretnot.render.diagram import DiagramOptions

SVG_NS = "{http://www.w3.org/2000/svg}"

# D/F#: low E on the 2nd fret, A and D muted.
D_SLASH_F_SHARP = "2xx232"
# Comma form with multi-digit frets.
HIGH_POSITION = "12,x,0,10,9,9"


def svg_root(svg: bytes | str) -> ET.Element:
    if isinstance(svg, str):
        svg = svg.encode("utf-8")
    return ET.fromstring(svg)


def texts(root: ET.Element) -> list[str]:
    return [el.text or "" for el in root.iter(f"{SVG_NS}text")]


def filled_circles(root: ET.Element) -> list[ET.Element]:
    return [el for el in root.iter(f"{SVG_NS}circle") if el.get("fill") != "none"]


@pytest.fixture
def d_slash_f_sharp() -> Fretboard:
    return Fretboard(D_SLASH_F_SHARP)


@pytest.fixture
def high_position() -> Fretboard:
    return Fretboard(HIGH_POSITION)


@pytest.fixture
def default_options() -> DiagramOptions:
    return DiagramOptions()
