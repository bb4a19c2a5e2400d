"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svgeo import __version__
from svgeo.config import Settings
from svgeo.dependencies import get_settings
from svgeo.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, env=settings.svgeo_env)
