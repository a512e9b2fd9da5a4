"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    fretnot_env: str = "development"
    fretnot_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["*"]

    # Raster export
    raster_scale: float = 1.0
    jpeg_quality: int = 90
    jpeg_matte: str = "white"  # JPEG has no alpha; transparent pixels land on this

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
