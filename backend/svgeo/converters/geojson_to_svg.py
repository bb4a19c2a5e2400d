"""GeoJSON → SVG conversion."""

from __future__ import annotations

import json
import logging

from svgeo.errors import InputError
from svgeo.geo.bbox import compute_bounding_box
from svgeo.geo.renderer import GeoJsonRenderer
from svgeo.models.options import GeoJsonToSvgOptions, MapExtent
from svgeo.models.results import GeoJsonToSvgMetadata, GeoJsonToSvgResult
from svgeo.utils.math_helpers import format_number

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not a JSON value")


def build_svg_wrapper(elements: list[str], width: float, height: float, extent: MapExtent | None = None) -> str:
    """Wrap fragments in a root <svg>; viewBox is the extent when given, else the viewport."""
    if extent is not None:
        box = [extent.left, extent.bottom, extent.width, extent.height]
    else:
        box = [0, 0, width, height]
    view_box = " ".join(format_number(v) for v in box)
    w, h = format_number(width), format_number(height)
    return "".join(
        [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="{view_box}">',
            *elements,
            "</svg>",
        ]
    )


def convert_geojson_to_svg(geojson_text: str, options: GeoJsonToSvgOptions) -> GeoJsonToSvgResult:
    """Render GeoJSON text (FeatureCollection, Feature or geometry) as SVG markup.

    Raises InputError for empty text, invalid JSON, or JSON that is not an object.
    """
    if not geojson_text.strip():
        raise InputError("GeoJSON input is empty.")

    try:
        parsed = json.loads(geojson_text, parse_constant=_reject_constant)
    except ValueError as e:
        raise InputError("GeoJSON input is not valid JSON.") from e

    if not isinstance(parsed, dict):
        raise InputError("GeoJSON input must be a JSON object.")

    renderer = GeoJsonRenderer(
        viewport_width=options.viewport_width,
        viewport_height=options.viewport_height,
        map_extent=options.map_extent,
        map_extent_from_geojson=options.map_extent_from_geojson,
        precision=options.precision,
        fit_to=options.fit_to,
        point_as_circle=True,
        radius=options.point_radius,
        attributes=options.attributes,
    )

    elements = renderer.convert(parsed)
    svg = build_svg_wrapper(elements, options.viewport_width, options.viewport_height, options.map_extent)
    bbox = compute_bounding_box(parsed)

    logger.info("Converted GeoJSON: %d SVG elements", len(elements))
    return GeoJsonToSvgResult(
        svg=svg,
        metadata=GeoJsonToSvgMetadata(element_count=len(elements), bbox=bbox),
    )
