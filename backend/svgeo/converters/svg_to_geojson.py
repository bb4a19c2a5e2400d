"""SVG → GeoJSON conversion.

sanitize (with fallback) → parse → per <path>: sample → infer → FeatureCollection.
"""

from __future__ import annotations

import logging

from svgeo.errors import InputError, SanitizeError
from svgeo.geo.inference import infer_feature
from svgeo.models.geojson import GeoJson
from svgeo.models.options import SvgToGeoJsonOptions
from svgeo.models.results import SvgToGeoJsonMetadata, SvgToGeoJsonResult
from svgeo.svg.parser import parse_document
from svgeo.svg.sampler import path_to_coords
from svgeo.svg.sanitizer import pathologize, strip_unsupported

logger = logging.getLogger(__name__)


async def _try_pathologize(svg_text: str) -> str | None:
    """Sanitized markup, or None when the sanitizer rejects the input."""
    try:
        return await pathologize(svg_text)
    except SanitizeError as e:
        logger.info("Sanitizer rejected markup: %s", e)
        return None


async def sanitize_with_fallback(svg_text: str) -> str:
    """Sanitize, falling back step by step instead of failing.

    1. sanitize the raw text
    2. strip <clipPath>/<mask> and sanitize again
    3. use the stripped text unsanitized
    4. when stripping changed nothing, use the raw text unsanitized
    """
    sanitized = await _try_pathologize(svg_text)
    if sanitized is not None:
        return sanitized

    cleaned = strip_unsupported(svg_text)
    if cleaned == svg_text:
        logger.info("Nothing to strip; using raw markup unsanitized")
        return svg_text

    sanitized = await _try_pathologize(cleaned)
    if sanitized is not None:
        return sanitized

    logger.info("Using stripped markup unsanitized")
    return cleaned


async def convert_svg_to_geojson(svg_text: str, options: SvgToGeoJsonOptions | None = None) -> SvgToGeoJsonResult:
    """Convert SVG markup into a FeatureCollection of Polygon/LineString features.

    Raises InputError for empty input, markup without <svg>, or an <svg>
    without any <path>.
    """
    opts = options or SvgToGeoJsonOptions()

    if not svg_text.strip():
        raise InputError("SVG input is empty.")

    sanitized = await sanitize_with_fallback(svg_text)
    doc = parse_document(sanitized)

    if not doc.paths:
        raise InputError("No <path> elements were found in the SVG.")

    svg_height = doc.reference_height
    if opts.flip_y and svg_height is None:
        logger.debug("No height or viewBox on <svg>; Y axis left unflipped")

    features: list[GeoJson] = []
    for element in doc.paths:
        coords = path_to_coords(element, opts.scale, opts.sample_points, opts.translate_x, opts.translate_y)
        if not coords:
            logger.debug("Skipping path %r: no sampled points", element.get("id"))
            continue
        features.append(infer_feature(coords, element.attributes, opts.flip_y, svg_height, opts.precision))

    logger.info("Converted SVG: %d paths → %d features", len(doc.paths), len(features))
    return SvgToGeoJsonResult(
        collection={"type": "FeatureCollection", "features": features},
        metadata=SvgToGeoJsonMetadata(
            feature_count=len(features),
            path_count=len(doc.paths),
            sample_points=opts.sample_points,
        ),
    )
