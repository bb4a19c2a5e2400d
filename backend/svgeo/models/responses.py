"""API response models."""

from __future__ import annotations

from svgeo.models.options import CamelModel
from svgeo.models.results import GeoJsonToSvgResult, SvgToGeoJsonResult


class HealthResponse(CamelModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = "development"


class SvgToGeoJsonResponse(SvgToGeoJsonResult):
    summary: str = ""
    processing_time_ms: float = 0.0


class GeoJsonToSvgResponse(GeoJsonToSvgResult):
    summary: str = ""
    processing_time_ms: float = 0.0
