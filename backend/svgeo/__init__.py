"""SVGeo — SVG path markup ⇄ GeoJSON conversion."""

__version__ = "0.1.0"
