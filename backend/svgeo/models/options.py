"""Conversion options for both directions.

Fields are snake_case in Python and accept the camelCase names of the public
configuration surface (``samplePoints``, ``flipY``, ``mapExtentFromGeojson``...).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_SAMPLE_POINTS = 250


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MapExtent(CamelModel):
    """Rectangle in target coordinate space."""

    left: float
    bottom: float
    right: float
    top: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom


class SvgToGeoJsonOptions(CamelModel):
    sample_points: int = Field(default=DEFAULT_SAMPLE_POINTS, gt=0, description="Points sampled per path")
    translate_x: float = 0.0
    translate_y: float = 0.0
    scale: float = 1.0
    flip_y: bool = Field(default=True, description="Flip Y against the root height")
    precision: int | None = Field(default=None, ge=0, description="Decimal places; None keeps full precision")


class GeoJsonToSvgOptions(CamelModel):
    viewport_width: float = Field(..., gt=0)
    viewport_height: float = Field(..., gt=0)
    map_extent: MapExtent | None = None
    precision: int | None = Field(default=None, ge=0)
    fit_to: Literal["width", "height"] | None = None
    point_radius: float | None = Field(default=None, ge=0)
    map_extent_from_geojson: bool = False
    attributes: list[str] = Field(
        default_factory=list,
        description="Feature property names copied onto each rendered element",
    )
