"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from fretnot.api import fretboard, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(fretboard.api_router)

# Mounted without prefix: /fretboard.svg, /fretboard.png, /fretboard.jpg
image_router = fretboard.router
