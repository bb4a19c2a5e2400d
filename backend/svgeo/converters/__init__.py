"""Conversion entry points for both directions."""

from svgeo.converters.geojson_to_svg import convert_geojson_to_svg
from svgeo.converters.svg_to_geojson import convert_svg_to_geojson

__all__ = [
    "convert_geojson_to_svg",
    "convert_svg_to_geojson",
]
