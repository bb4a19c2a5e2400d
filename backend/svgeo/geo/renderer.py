"""GeoJSON → SVG fragment renderer.

Projects map coordinates into viewport pixels and emits one markup fragment
per geometry, in input order:

- Point / MultiPoint → one <circle> (or arc <path>) per position
- LineString / MultiLineString → one <path>, one ``M`` per part
- Polygon / MultiPolygon → one <path>, every ring closed with ``Z``
- GeometryCollection → the fragments of its members

Projection: ``res`` map units per pixel, taken from the extent/viewport ratio
of the axis chosen by ``fit_to`` (default the larger ratio so everything fits);
``x' = (x - left) / res``, ``y' = (top - y) / res``.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Iterable, Sequence
from typing import Any

from svgeo.geo.bbox import compute_bounding_box
from svgeo.models.geojson import GeoJson
from svgeo.models.options import MapExtent
from svgeo.utils.math_helpers import format_number, round_half_away

logger = logging.getLogger(__name__)

# Web Mercator square, used when neither an explicit nor a data extent is available
_MERCATOR_HALF = 20037508.342789244
DEFAULT_EXTENT = MapExtent(left=-_MERCATOR_HALF, bottom=-_MERCATOR_HALF, right=_MERCATOR_HALF, top=_MERCATOR_HALF)

DEFAULT_RADIUS = 1.0


class GeoJsonRenderer:
    """Configured once, then ``convert()`` any number of GeoJSON objects."""

    def __init__(
        self,
        viewport_width: float,
        viewport_height: float,
        map_extent: MapExtent | None = None,
        map_extent_from_geojson: bool = False,
        precision: int | None = None,
        fit_to: str | None = None,
        point_as_circle: bool = False,
        radius: float | None = None,
        attributes: Sequence[str] = (),
    ) -> None:
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.map_extent = map_extent
        self.map_extent_from_geojson = map_extent_from_geojson
        self.precision = precision
        self.fit_to = fit_to
        self.point_as_circle = point_as_circle
        self.radius = DEFAULT_RADIUS if radius is None else radius
        self.attributes = list(attributes)

    # ── Public ───────────────────────────────────────────────────────────

    def resolve_extent(self, geojson: GeoJson) -> MapExtent:
        """Data bbox when asked for and available, else the explicit extent, else Web Mercator."""
        if self.map_extent_from_geojson:
            bbox = compute_bounding_box(geojson)
            if bbox is not None:
                return MapExtent(left=bbox.min_x, bottom=bbox.min_y, right=bbox.max_x, top=bbox.max_y)
        if self.map_extent is not None:
            return self.map_extent
        return DEFAULT_EXTENT

    def convert(self, geojson: GeoJson) -> list[str]:
        """Render every geometry of a FeatureCollection, Feature or bare geometry."""
        extent = self.resolve_extent(geojson)
        projection = _Projection(extent, self._resolution(extent), self.precision)

        fragments: list[str] = []
        for geometry, attrs in self._iter_geometries(geojson):
            fragments.extend(self._render_geometry(geometry, projection, attrs))

        logger.debug("Rendered %d fragments over extent %s", len(fragments), extent.model_dump())
        return fragments

    # ── Internals ────────────────────────────────────────────────────────

    def _resolution(self, extent: MapExtent) -> float:
        x_res = extent.width / self.viewport_width
        y_res = extent.height / self.viewport_height
        if self.fit_to == "width":
            res = x_res
        elif self.fit_to == "height":
            res = y_res
        else:
            res = max(x_res, y_res)
        if res <= 0:
            # Degenerate extent (single point or horizontal/vertical line)
            res = max(x_res, y_res)
        return res if res > 0 else 1.0

    def _iter_geometries(self, geojson: GeoJson) -> Iterable[tuple[GeoJson, dict[str, str]]]:
        kind = geojson.get("type")
        if kind == "FeatureCollection":
            for feature in geojson.get("features") or []:
                if isinstance(feature, dict):
                    yield from self._iter_geometries(feature)
        elif kind == "Feature":
            geometry = geojson.get("geometry")
            if isinstance(geometry, dict):
                yield geometry, self._feature_attributes(geojson)
        else:
            yield geojson, {}

    def _feature_attributes(self, feature: GeoJson) -> dict[str, str]:
        attrs: dict[str, str] = {}
        if feature.get("id") is not None:
            attrs["id"] = str(feature["id"])
        properties = feature.get("properties") or {}
        for name in self.attributes:
            value = properties.get(name)
            if value is not None:
                attrs[name] = str(value)
        return attrs

    def _render_geometry(self, geometry: GeoJson, projection: _Projection, attrs: dict[str, str]) -> list[str]:
        kind = geometry.get("type")
        coords = geometry.get("coordinates")

        if kind == "GeometryCollection":
            fragments: list[str] = []
            for member in geometry.get("geometries") or []:
                if isinstance(member, dict):
                    fragments.extend(self._render_geometry(member, projection, attrs))
            return fragments
        if coords is None:
            logger.debug("Skipping %s without coordinates", kind)
            return []
        if kind == "Point":
            return [self._point(coords, projection, attrs)]
        if kind == "MultiPoint":
            return [self._point(c, projection, attrs) for c in coords]
        if kind == "LineString":
            return [_path_element(_line_d(coords, projection), attrs)]
        if kind == "MultiLineString":
            return [_path_element(" ".join(_line_d(line, projection) for line in coords), attrs)]
        if kind == "Polygon":
            return [_path_element(_polygon_d(coords, projection), attrs)]
        if kind == "MultiPolygon":
            return [_path_element(" ".join(_polygon_d(poly, projection) for poly in coords), attrs)]

        logger.debug("Skipping unsupported geometry type %r", kind)
        return []

    def _point(self, coord: Sequence[float], projection: _Projection, attrs: dict[str, str]) -> str:
        x, y = projection.project(coord)
        r = format_number(self.radius)
        if self.point_as_circle:
            return f'<circle cx="{x}" cy="{y}" r="{r}"{_attr_string(attrs)}/>'
        diameter = format_number(2 * self.radius)
        d = f"M{x},{y} m-{r},0 a{r},{r} 0 1,1 {diameter},0 a{r},{r} 0 1,1 -{diameter},0"
        return _path_element(d, attrs)


class _Projection:
    def __init__(self, extent: MapExtent, res: float, precision: int | None) -> None:
        self.extent = extent
        self.res = res
        self.precision = precision

    def project(self, coord: Sequence[float]) -> tuple[str, str]:
        x = (float(coord[0]) - self.extent.left) / self.res
        y = (self.extent.top - float(coord[1])) / self.res
        if self.precision is not None:
            x = round_half_away(x, self.precision)
            y = round_half_away(y, self.precision)
        return format_number(x), format_number(y)


def _line_d(coords: Sequence[Sequence[float]], projection: _Projection) -> str:
    points = [",".join(projection.project(c)) for c in coords]
    if not points:
        return ""
    return "M" + " ".join(points)


def _polygon_d(rings: Sequence[Sequence[Sequence[float]]], projection: _Projection) -> str:
    return " ".join(f"{_line_d(ring, projection)} Z" for ring in rings if ring)


def _attr_string(attrs: dict[str, Any]) -> str:
    return "".join(f' {k}="{html.escape(str(v), quote=True)}"' for k, v in attrs.items())


def _path_element(d: str, attrs: dict[str, str]) -> str:
    return f'<path d="{d}"{_attr_string(attrs)}/>'
