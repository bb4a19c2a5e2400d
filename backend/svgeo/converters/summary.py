"""One-line, human-readable summaries of conversion metadata."""

from __future__ import annotations

from svgeo.models.results import GeoJsonToSvgMetadata, SvgToGeoJsonMetadata


def summarize_svg_metadata(metadata: SvgToGeoJsonMetadata) -> str:
    return (
        f"Paths: {metadata.path_count} · Features: {metadata.feature_count}"
        f" · Samples per path: {metadata.sample_points}"
    )


def summarize_geojson_metadata(metadata: GeoJsonToSvgMetadata) -> str:
    bbox = metadata.bbox
    if bbox is None:
        bounds = "Bounds: n/a"
    else:
        bounds = f"Bounds: [{bbox.min_x:.2f}, {bbox.min_y:.2f}] → [{bbox.max_x:.2f}, {bbox.max_y:.2f}]"
    return f"SVG elements: {metadata.element_count} · {bounds}"
