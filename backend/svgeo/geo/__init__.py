"""GeoJSON-side geometry: feature inference, bounding envelope, SVG rendering."""

from svgeo.geo.bbox import compute_bounding_box, flatten_coords
from svgeo.geo.inference import infer_feature
from svgeo.geo.renderer import GeoJsonRenderer

__all__ = [
    "compute_bounding_box",
    "flatten_coords",
    "infer_feature",
    "GeoJsonRenderer",
]
