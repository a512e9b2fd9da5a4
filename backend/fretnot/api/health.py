"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fretnot import __version__
from fretnot.config import Settings
from fretnot.dependencies import get_settings
from fretnot.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, env=settings.fretnot_env)
