"""Path sampler — one <path> → ordered (x, y) points via svgpathtools."""

from __future__ import annotations

import bisect
import logging

import numpy as np
from svgpathtools import Line, Path, parse_path

from svgeo.models.svg_document import PathElement

logger = logging.getLogger(__name__)

# Paths shorter than this are treated as empty.
_MIN_PATH_LENGTH = 1e-10


def path_to_coords(
    element: PathElement,
    scale: float,
    num_points: int,
    translate_x: float,
    translate_y: float,
) -> list[tuple[float, float]]:
    """Sample `num_points` points evenly by arc length, then scale and translate.

    Point i sits at length ``L * i / num_points``, so a closed outline never
    repeats its start point. Missing, unparsable or zero-length path data
    yields an empty list.
    """
    d = element.path_data
    if not d or not d.strip():
        return []

    try:
        path = parse_path(d)
    except Exception as e:
        logger.warning("Failed to parse path %r: %s", element.get("id"), e)
        return []

    points = _sample_path(path, num_points)
    return [(x * scale + translate_x, y * scale + translate_y) for x, y in points]


def _sample_path(path: Path, num_samples: int) -> list[tuple[float, float]]:
    """Sample points along a path at even arc-length steps."""
    if len(path) == 0:
        return []

    lengths = [seg.length() for seg in path]
    total = float(sum(lengths))
    if total < _MIN_PATH_LENGTH:
        return []

    # Arc length at which each segment starts
    starts = np.concatenate([[0.0], np.cumsum(lengths)[:-1]]).tolist()

    points: list[tuple[float, float]] = []
    for s in total * np.arange(num_samples) / num_samples:
        idx = max(bisect.bisect_right(starts, s) - 1, 0)
        seg = path[idx]
        seg_len = lengths[idx]
        local = min(max(s - starts[idx], 0.0), seg_len)

        if seg_len <= 0:
            t = 0.0
        elif isinstance(seg, Line):
            t = local / seg_len
        else:
            t = seg.ilength(local)

        pt = seg.point(t)
        points.append((float(pt.real), float(pt.imag)))

    return points
