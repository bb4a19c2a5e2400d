"""Shared test fixtures."""

from __future__ import annotations

import json

import pytest


# Sample markup

SQUARE_SVG = '<svg height="100"><path d="M0 0 L10 0 L10 10 Z" fill="red"/></svg>'

ICON_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <path id="mouth" d="M8 14s1.5 2 4 2 4-2 4-2" fill="none" stroke="#000" stroke-width="2"/>
  <path id="frame" d="M3 3 L21 3 L21 21 L3 21" fill="#4ECDC4"/>
  <path id="diagonal" d="M3 3 L21 21 z"/>
</svg>'''

SHAPES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 50">
  <rect id="box" x="10" y="10" width="20" height="10" fill="#FF6B6B"/>
  <circle id="dot" cx="50" cy="25" r="5"/>
  <line id="rule" x1="0" y1="40" x2="100" y2="40" stroke="black"/>
  <polyline id="zigzag" points="0,0 10,10 20,0" stroke="black" fill="none"/>
  <polygon id="tri" points="60,10 70,10 65,20"/>
  <text x="0" y="0">ignored</text>
</svg>'''

LABELLED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg"
     xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" width="200" height="200">
  <g inkscape:label="Layer 1">
    <path id="river" inkscape:label="River" data-name="ignored" d="M0 0 L100 100" stroke="blue"/>
    <path id="road" data-name="Road" d="M0 100 L100 0" stroke="gray"/>
  </g>
</svg>'''

CLIPPED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <defs>
    <clipPath id="clip"><rect x="0" y="0" width="50" height="50"/></clipPath>
    <linearGradient id="grad"><stop offset="0" stop-color="red"/></linearGradient>
  </defs>
  <mask id="fade"><rect x="0" y="0" width="100" height="100" fill="white"/></mask>
  <path id="edge" d="M0 0 L50 50" stroke="black" clip-path="url(#clip)"/>
</svg>'''

EMPTY_SVG = '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10"><g/></svg>'

MALFORMED_SVG = 'svg height="10"><path d="M0 0 L1 1"/></svg>'

UNDECLARED_PREFIX_SVG = '<svg height="10"><path inkscape:label="River" d="M0 0 L4 0"/></svg>'


# Sample GeoJSON

POINT_FEATURE = {"type": "Feature", "geometry": {"type": "Point", "coordinates": [3, 4]}, "properties": {}}

MIXED_COLLECTION = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "id": "city",
            "geometry": {"type": "Point", "coordinates": [10, 20]},
            "properties": {"name": "Harbor & Bay"},
        },
        {
            "type": "Feature",
            "geometry": {"type": "LineString", "coordinates": [[0, 0], [50, 50]]},
            "properties": {},
        },
        {
            "type": "Feature",
            "geometry": {
                "type": "Polygon",
                "coordinates": [[[0, 0], [100, 0], [100, 100], [0, 0]]],
            },
            "properties": {"fill": "red"},
        },
        {"type": "Feature", "geometry": None, "properties": {}},
    ],
}

EMPTY_COLLECTION = {"type": "FeatureCollection", "features": []}


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def icon_svg() -> str:
    return ICON_SVG


@pytest.fixture
def shapes_svg() -> str:
    return SHAPES_SVG


@pytest.fixture
def mixed_collection_text() -> str:
    return json.dumps(MIXED_COLLECTION)
