"""FastAPI app factory."""

from __future__ import annotations

import logging
import time

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from fretnot import __version__
from fretnot.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.fretnot_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger("fretnot.access")


def create_app() -> FastAPI:
    app = FastAPI(
        title="FretNot",
        description="Guitar chord diagrams rendered to SVG, PNG and JPEG",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %d %.1f ms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
        )
        return response

    from fretnot.api.router import api_router, image_router

    app.include_router(api_router)
    app.include_router(image_router)

    return app


app = create_app()
