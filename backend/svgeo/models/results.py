"""Conversion results returned by both converters."""

from __future__ import annotations

from typing import Any

from svgeo.models.geojson import BoundingBox
from svgeo.models.options import CamelModel


class SvgToGeoJsonMetadata(CamelModel):
    feature_count: int
    path_count: int
    sample_points: int


class SvgToGeoJsonResult(CamelModel):
    collection: dict[str, Any]
    metadata: SvgToGeoJsonMetadata


class GeoJsonToSvgMetadata(CamelModel):
    element_count: int
    bbox: BoundingBox | None = None


class GeoJsonToSvgResult(CamelModel):
    svg: str
    metadata: GeoJsonToSvgMetadata
