"""GeoJSON-side value types."""

from __future__ import annotations

from typing import Any

from svgeo.models.options import CamelModel

GeoJson = dict[str, Any]
Coordinate = list[float]


class BoundingBox(CamelModel):
    min_x: float
    min_y: float
    max_x: float
    max_y: float
