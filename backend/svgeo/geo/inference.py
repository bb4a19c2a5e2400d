"""Feature inference — sampled points + path attributes → one GeoJSON Feature.

A path becomes a Polygon when its `d` ends in a close command or when it
declares a real fill; every other path becomes a LineString. Coordinates go
through a fixed order: (scale/translate, already applied by the sampler) →
Y-flip → rounding → ring closure.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from svgeo.models.geojson import Coordinate, GeoJson
from svgeo.utils.math_helpers import round_coords

_CLOSED_PATH_RE = re.compile(r"z\s*\Z", re.IGNORECASE)

# (property key, candidate source attributes); the first present attribute wins
_PROPERTY_SOURCES: list[tuple[str, tuple[str, ...]]] = [
    ("id", ("id",)),
    ("name", ("inkscape:label", "data-name")),
    ("fill", ("fill",)),
    ("stroke", ("stroke",)),
    ("strokeWidth", ("stroke-width",)),
]


def is_closed_path(path_data: str | None) -> bool:
    return bool(_CLOSED_PATH_RE.search(path_data or ""))


def has_fill(fill: str | None) -> bool:
    return bool(fill) and fill != "none"


def is_area(attributes: Mapping[str, str]) -> bool:
    return is_closed_path(attributes.get("d")) or has_fill(attributes.get("fill"))


def close_ring(coords: list[Coordinate]) -> list[Coordinate]:
    """Append the first coordinate when the ring is open. Never touches interior points."""
    if not coords:
        return coords
    first, last = coords[0], coords[-1]
    if first[0] == last[0] and first[1] == last[1]:
        return coords
    return [*coords, list(first)]


def flip_coords(coords: Sequence[Sequence[float]], height: float) -> list[Coordinate]:
    return [[x, height - y] for x, y in coords]


def extract_properties(attributes: Mapping[str, str]) -> dict[str, str]:
    properties: dict[str, str] = {}
    for key, sources in _PROPERTY_SOURCES:
        value = None
        for source in sources:
            if source in attributes:
                value = attributes[source]
                break
        if value:
            properties[key] = value
    return properties


def infer_feature(
    coords: Sequence[Sequence[float]],
    attributes: Mapping[str, str],
    flip_y: bool,
    svg_height: float | None,
    precision: int | None = None,
) -> GeoJson:
    """Build one Feature from a non-empty sampled point sequence.

    Flip is skipped without error when no reference height is known.
    """
    if flip_y and svg_height is not None:
        transformed = flip_coords(coords, svg_height)
    else:
        transformed = [[x, y] for x, y in coords]

    rounded = round_coords(transformed, precision)
    properties = extract_properties(attributes)

    if is_area(attributes):
        geometry: GeoJson = {"type": "Polygon", "coordinates": [close_ring(rounded)]}
    else:
        geometry = {"type": "LineString", "coordinates": rounded}

    return {"type": "Feature", "geometry": geometry, "properties": properties}
