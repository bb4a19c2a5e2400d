"""Bounding envelope over any GeoJSON input — FeatureCollection, Feature or bare geometry."""

from __future__ import annotations

from typing import Any

import numpy as np

from svgeo.models.geojson import BoundingBox, Coordinate, GeoJson

# Nesting depth of the coordinate array for each geometry type
_COORDINATE_DEPTH = {
    "Point": 0,
    "MultiPoint": 1,
    "LineString": 1,
    "MultiLineString": 2,
    "Polygon": 2,
    "MultiPolygon": 3,
}


def _collect_positions(coordinates: Any, depth: int, collection: list[Coordinate]) -> None:
    if depth == 0:
        collection.append(coordinates)
        return
    for item in coordinates:
        _collect_positions(item, depth - 1, collection)


def flatten_coords(geometry: GeoJson | None, collection: list[Coordinate] | None = None) -> list[Coordinate]:
    """Flatten any geometry into one list of positions.

    GeometryCollection recurses to any depth; unknown or missing geometries
    contribute nothing.
    """
    if collection is None:
        collection = []
    if not isinstance(geometry, dict):
        return collection

    kind = geometry.get("type")
    if kind == "GeometryCollection":
        for member in geometry.get("geometries") or []:
            flatten_coords(member, collection)
    elif kind in _COORDINATE_DEPTH:
        coordinates = geometry.get("coordinates")
        if coordinates is not None:
            _collect_positions(coordinates, _COORDINATE_DEPTH[kind], collection)
    return collection


def collect_coords(geojson: GeoJson) -> list[Coordinate]:
    coords: list[Coordinate] = []
    kind = geojson.get("type") if isinstance(geojson, dict) else None

    if kind == "FeatureCollection":
        for feature in geojson.get("features") or []:
            if isinstance(feature, dict):
                flatten_coords(feature.get("geometry"), coords)
    elif kind == "Feature":
        flatten_coords(geojson.get("geometry"), coords)
    else:
        flatten_coords(geojson, coords)
    return coords


def compute_bounding_box(geojson: GeoJson) -> BoundingBox | None:
    """Independent min/max over x and y. None when the input holds no coordinate."""
    coords = collect_coords(geojson)
    if not coords:
        return None

    pts = np.array([c[:2] for c in coords], dtype=np.float64)
    return BoundingBox(
        min_x=float(np.min(pts[:, 0])),
        min_y=float(np.min(pts[:, 1])),
        max_x=float(np.max(pts[:, 0])),
        max_y=float(np.max(pts[:, 1])),
    )
