"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    env: str = "development"


class DataUrlResponse(BaseModel):
    data_url: str
    title: str = ""
    frets: list[int | str] = Field(default_factory=list)
    starting_fret: int = 1
