"""POST /api/convert/* — SVG ⇄ GeoJSON conversion."""

from __future__ import annotations

import time

from fastapi import APIRouter

from svgeo.converters.geojson_to_svg import convert_geojson_to_svg
from svgeo.converters.summary import summarize_geojson_metadata, summarize_svg_metadata
from svgeo.converters.svg_to_geojson import convert_svg_to_geojson
from svgeo.models.requests import GeoJsonToSvgRequest, SvgToGeoJsonRequest
from svgeo.models.responses import GeoJsonToSvgResponse, SvgToGeoJsonResponse

router = APIRouter(prefix="/convert")


@router.post("/svg-to-geojson", response_model=SvgToGeoJsonResponse)
async def svg_to_geojson(req: SvgToGeoJsonRequest) -> SvgToGeoJsonResponse:
    start = time.perf_counter()

    result = await convert_svg_to_geojson(req.svg, req.options)

    elapsed = (time.perf_counter() - start) * 1000
    return SvgToGeoJsonResponse(
        collection=result.collection,
        metadata=result.metadata,
        summary=summarize_svg_metadata(result.metadata),
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/geojson-to-svg", response_model=GeoJsonToSvgResponse)
async def geojson_to_svg(req: GeoJsonToSvgRequest) -> GeoJsonToSvgResponse:
    start = time.perf_counter()

    result = convert_geojson_to_svg(req.geojson, req.options)

    elapsed = (time.perf_counter() - start) * 1000
    return GeoJsonToSvgResponse(
        svg=result.svg,
        metadata=result.metadata,
        summary=summarize_geojson_metadata(result.metadata),
        processing_time_ms=round(elapsed, 1),
    )
