"""GET /fretboard.{svg,png,jpg} and /api/fretboard — chord diagram rendering.

Query parameters are coerced, never rejected:
    title         text above the diagram (default "")
    frets         "2xx232" or "12,x,0,10,9,9" (default "")
    startingFret  fret number of the top row (default 1, < 1 -> 1)
    bg            background paint (default rgba(0,0,0,0))
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from fretnot.models.fretboard import Fretboard
from fretnot.models.requests import FretboardQuery, sanitize_query
from fretnot.models.responses import DataUrlResponse
from fretnot.render.diagram import MEDIA_TYPES, DiagramOptions, OutputFormat, render_fretboard

router = APIRouter()
api_router = APIRouter()


def fretboard_query(
    title: str | None = Query(None),
    frets: str | None = Query(None),
    starting_fret: str | None = Query(None, alias="startingFret"),
    bg: str | None = Query(None),
) -> FretboardQuery:
    return sanitize_query(title=title, frets=frets, starting_fret=starting_fret, bg=bg)


def _render(query: FretboardQuery, fmt: OutputFormat) -> bytes | str:
    fretboard = Fretboard(query.frets)
    options = DiagramOptions(
        title=query.title,
        background=query.bg_color,
        starting_fret=query.starting_fret,
    )
    return render_fretboard(fretboard, options, fmt)


def _image_response(query: FretboardQuery, fmt: OutputFormat) -> Response:
    return Response(content=_render(query, fmt), media_type=MEDIA_TYPES[fmt])


@router.get("/fretboard.svg")
async def fretboard_svg(query: FretboardQuery = Depends(fretboard_query)) -> Response:
    return _image_response(query, OutputFormat.SVG)


@router.get("/fretboard.png")
async def fretboard_png(query: FretboardQuery = Depends(fretboard_query)) -> Response:
    return _image_response(query, OutputFormat.PNG)


@router.get("/fretboard.jpg")
@router.get("/fretboard.jpeg")
async def fretboard_jpeg(query: FretboardQuery = Depends(fretboard_query)) -> Response:
    return _image_response(query, OutputFormat.JPEG)


@api_router.get("/fretboard", response_model=DataUrlResponse)
async def fretboard_data_url(query: FretboardQuery = Depends(fretboard_query)) -> DataUrlResponse:
    fretboard = Fretboard(query.frets)
    return DataUrlResponse(
        data_url=_render(query, OutputFormat.DATA_URL),
        title=query.title,
        frets=[f if isinstance(f, int) else str(f) for f in fretboard.frets],
        starting_fret=query.starting_fret,
    )
