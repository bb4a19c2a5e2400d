"""API request models."""

from __future__ import annotations

from pydantic import Field

from svgeo.config import settings
from svgeo.models.options import CamelModel, GeoJsonToSvgOptions, SvgToGeoJsonOptions


def _default_geojson_options() -> GeoJsonToSvgOptions:
    return GeoJsonToSvgOptions(
        viewport_width=settings.default_viewport_width,
        viewport_height=settings.default_viewport_height,
        point_radius=settings.default_point_radius,
    )


class SvgToGeoJsonRequest(CamelModel):
    svg: str = Field(..., description="Raw SVG code")
    options: SvgToGeoJsonOptions = Field(default_factory=SvgToGeoJsonOptions)


class GeoJsonToSvgRequest(CamelModel):
    geojson: str = Field(..., description="GeoJSON text (FeatureCollection, Feature or geometry)")
    options: GeoJsonToSvgOptions = Field(default_factory=_default_geojson_options)
