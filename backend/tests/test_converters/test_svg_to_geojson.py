"""Tests for SVG → GeoJSON conversion."""

import asyncio

import pytest

from svgeo.converters import svg_to_geojson
from svgeo.converters.svg_to_geojson import convert_svg_to_geojson, sanitize_with_fallback
from svgeo.errors import InputError, SanitizeError
from svgeo.models.options import SvgToGeoJsonOptions
from tests.conftest import (
    CLIPPED_SVG,
    EMPTY_SVG,
    ICON_SVG,
    LABELLED_SVG,
    MALFORMED_SVG,
    SHAPES_SVG,
    SQUARE_SVG,
    UNDECLARED_PREFIX_SVG,
)


def _convert(text: str, **options):
    return asyncio.run(convert_svg_to_geojson(text, SvgToGeoJsonOptions(**options)))


def test_square_is_flipped_and_closed():
    result = _convert(SQUARE_SVG, flip_y=True, precision=0)
    features = result.collection["features"]
    assert result.collection["type"] == "FeatureCollection"
    assert len(features) == 1

    geometry = features[0]["geometry"]
    assert geometry["type"] == "Polygon"
    ring = geometry["coordinates"][0]
    assert ring[0] == [0, 100]
    assert ring[-1] == [0, 100]
    assert [10, 100] in ring
    assert [10, 90] in ring
    assert all(0 <= x <= 10 and 90 <= y <= 100 for x, y in ring)
    assert features[0]["properties"] == {"fill": "red"}


def test_metadata_counts():
    result = _convert(ICON_SVG, sample_points=50)
    assert result.metadata.path_count == 3
    assert result.metadata.feature_count == 3
    assert result.metadata.sample_points == 50


def test_geometry_inference_per_path():
    result = _convert(ICON_SVG, sample_points=20)
    mouth, frame, diagonal = result.collection["features"]

    assert mouth["geometry"]["type"] == "LineString"
    assert len(mouth["geometry"]["coordinates"]) == 20
    assert mouth["properties"] == {"id": "mouth", "fill": "none", "stroke": "#000", "strokeWidth": "2"}

    assert frame["geometry"]["type"] == "Polygon"
    ring = frame["geometry"]["coordinates"][0]
    assert ring[0] == ring[-1]

    assert diagonal["geometry"]["type"] == "Polygon"


def test_flip_toggle():
    flipped = _convert(ICON_SVG, sample_points=10, flip_y=True)
    plain = _convert(ICON_SVG, sample_points=10, flip_y=False)
    flipped_line = flipped.collection["features"][0]["geometry"]["coordinates"]
    plain_line = plain.collection["features"][0]["geometry"]["coordinates"]
    for (fx, fy), (px, py) in zip(flipped_line, plain_line):
        assert fx == px
        assert fy == pytest.approx(24 - py)


def test_flip_skipped_without_reference_height():
    result = _convert('<svg><path d="M0 0 L10 0"/></svg>', sample_points=2, flip_y=True)
    assert result.collection["features"][0]["geometry"]["coordinates"] == [[0.0, 0.0], [5.0, 0.0]]


def test_scale_and_translate():
    result = _convert('<svg><path d="M0 0 L10 0"/></svg>', sample_points=2, scale=2, translate_x=5, translate_y=-1)
    assert result.collection["features"][0]["geometry"]["coordinates"] == [[5.0, -1.0], [15.0, -1.0]]


def test_empty_paths_are_skipped_but_counted():
    markup = '<svg height="10"><path id="dot" d="M1 1"/><path id="line" d="M0 0 L5 5"/><path id="bare"/></svg>'
    result = _convert(markup, sample_points=5)
    assert result.metadata.path_count == 3
    assert result.metadata.feature_count == 1
    assert result.collection["features"][0]["properties"] == {"id": "line"}


def test_shapes_are_converted():
    result = _convert(SHAPES_SVG, sample_points=16)
    features = result.collection["features"]
    assert [f["properties"].get("id") for f in features] == ["box", "dot", "rule", "zigzag", "tri"]
    types = {f["properties"]["id"]: f["geometry"]["type"] for f in features}
    assert types["box"] == "Polygon"
    assert types["rule"] == "LineString"
    assert types["zigzag"] == "LineString"
    assert types["tri"] == "Polygon"


def test_names_from_labels():
    result = _convert(LABELLED_SVG, sample_points=4)
    river, road = result.collection["features"]
    assert river["properties"]["name"] == "River"
    assert road["properties"]["name"] == "Road"


def test_undeclared_label_prefix_still_names_feature():
    result = _convert(UNDECLARED_PREFIX_SVG, sample_points=4)
    assert result.metadata.feature_count == 1
    assert result.collection["features"][0]["properties"]["name"] == "River"


def test_precision_beyond_float_range():
    result = _convert('<svg height="10"><path d="M0 0 L4 0"/></svg>', sample_points=4, precision=400)
    coords = result.collection["features"][0]["geometry"]["coordinates"]
    assert coords == [[0.0, 10.0], [1.0, 10.0], [2.0, 10.0], [3.0, 10.0]]


def test_clip_paths_are_stripped_and_retried():
    result = _convert(CLIPPED_SVG, sample_points=4, flip_y=False)
    assert result.metadata.path_count == 1
    feature = result.collection["features"][0]
    assert feature["properties"] == {"id": "edge", "stroke": "black"}
    assert feature["geometry"]["type"] == "LineString"


def test_empty_input_fails():
    with pytest.raises(InputError, match="empty"):
        _convert("   \n ")


def test_svg_without_paths_fails_distinctly():
    with pytest.raises(InputError, match="No <path>"):
        _convert(EMPTY_SVG)


def test_missing_svg_fails():
    with pytest.raises(InputError, match="valid <svg>"):
        _convert("<html><body><p>hello</p></body></html>")


def test_malformed_markup_fails():
    with pytest.raises(InputError, match="valid <svg>"):
        _convert(MALFORMED_SVG)


def test_default_options():
    result = asyncio.run(convert_svg_to_geojson(SQUARE_SVG))
    assert result.metadata.sample_points == 250


# ── Sanitizer fallback protocol ──────────────────────────────────────────


def _install_sanitizer(monkeypatch, fail_on):
    calls: list[str] = []

    async def fake_pathologize(text: str) -> str:
        calls.append(text)
        if fail_on(text):
            raise SanitizeError("rejected")
        return f"sanitized:{text}"

    monkeypatch.setattr(svg_to_geojson, "pathologize", fake_pathologize)
    return calls


def test_fallback_first_attempt_succeeds(monkeypatch):
    calls = _install_sanitizer(monkeypatch, lambda text: False)
    assert asyncio.run(sanitize_with_fallback(CLIPPED_SVG)) == f"sanitized:{CLIPPED_SVG}"
    assert len(calls) == 1


def test_fallback_retries_stripped_text(monkeypatch):
    calls = _install_sanitizer(monkeypatch, lambda text: "clipPath" in text)
    result = asyncio.run(sanitize_with_fallback(CLIPPED_SVG))
    assert result.startswith("sanitized:")
    assert "clipPath" not in result
    assert len(calls) == 2


def test_fallback_uses_stripped_text_when_retry_fails(monkeypatch):
    calls = _install_sanitizer(monkeypatch, lambda text: True)
    result = asyncio.run(sanitize_with_fallback(CLIPPED_SVG))
    assert "clipPath" not in result
    assert "<mask" not in result
    assert not result.startswith("sanitized:")
    assert len(calls) == 2


def test_fallback_uses_raw_text_when_nothing_to_strip(monkeypatch):
    calls = _install_sanitizer(monkeypatch, lambda text: True)
    assert asyncio.run(sanitize_with_fallback(SQUARE_SVG)) == SQUARE_SVG
    assert len(calls) == 1


def test_unsanitized_fallback_still_converts(monkeypatch):
    _install_sanitizer(monkeypatch, lambda text: True)
    result = _convert(SQUARE_SVG, sample_points=8)
    assert result.metadata.feature_count == 1
