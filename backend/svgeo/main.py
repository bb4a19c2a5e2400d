"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from svgeo import __version__
from svgeo.config import settings
from svgeo.errors import InputError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svgeo_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _input_error_handler(request: Request, exc: InputError) -> JSONResponse:
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="SVGeo",
        description="SVG path markup ⇄ GeoJSON conversion",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InputError, _input_error_handler)

    from svgeo.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
