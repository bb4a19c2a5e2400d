"""Markup sanitizer — normalizes arbitrary SVG into a canonical all-<path> form.

Two entry points:
- pathologize(): async. Rebuilds the document as one root <svg> holding one
  <path> per drawable shape (rect, circle, ellipse, line, polyline, polygon are
  converted with svgpathtools). Rejects markup it cannot handle with SanitizeError.
- strip_unsupported(): literal removal of <clipPath> and <mask> blocks, used by
  the forward converter before retrying pathologize().
"""

from __future__ import annotations

import asyncio
import logging
import re
import xml.etree.ElementTree as ET

from svgpathtools.svg_to_paths import (
    ellipse2pathd,
    polygon2pathd,
    polyline2pathd,
    rect2pathd,
)

from svgeo.errors import SanitizeError
from svgeo.svg.parser import INKSCAPE_NS, SVG_NS, element_attributes, find_svg_root, load_markup, local_name

logger = logging.getLogger(__name__)

ET.register_namespace("inkscape", INKSCAPE_NS)

_CLIP_PATH_RE = re.compile(r"<clipPath[\s\S]*?</clipPath>", re.IGNORECASE)
_MASK_RE = re.compile(r"<mask[\s\S]*?</mask>", re.IGNORECASE)
_DEFS_RE = re.compile(r"<defs[\s\S]*?</defs>", re.IGNORECASE)

UNSUPPORTED_TAGS = {"clipPath", "mask"}

# Subtrees that define resources rather than draw
SKIP_TAGS = {"defs", "symbol", "metadata", "title", "desc", "style", "script"}

ROOT_ATTRS = ["width", "height", "viewBox"]

KEEP_ATTRS = ["id", "fill", "stroke", "stroke-width", "inkscape:label", "data-name"]

_OUTPUT_ATTR_KEYS = {"inkscape:label": f"{{{INKSCAPE_NS}}}label"}


def _shape_to_pathd(tag: str, attrs: dict[str, str]) -> str | None:
    """Return the path data for a drawable shape, None for non-drawable tags."""
    if tag == "path":
        return attrs.get("d", "")
    if tag == "rect":
        return rect2pathd(attrs)
    if tag in ("circle", "ellipse"):
        return ellipse2pathd(attrs)
    if tag == "line":
        x1, y1, x2, y2 = (attrs.get(k, "0") for k in ("x1", "y1", "x2", "y2"))
        return f"M{x1} {y1}L{x2} {y2}"
    if tag == "polyline":
        return polyline2pathd(attrs)
    if tag == "polygon":
        return polygon2pathd(attrs)
    return None


def _collect_paths(element: ET.Element, out: ET.Element) -> None:
    for child in element:
        if not isinstance(child.tag, str):
            continue  # comments, processing instructions
        tag = local_name(child.tag)
        if tag in SKIP_TAGS:
            continue

        attrs = element_attributes(child)
        try:
            d = _shape_to_pathd(tag, attrs)
        except (IndexError, KeyError, TypeError, ValueError, ZeroDivisionError) as e:
            logger.warning("Dropping <%s> with unusable geometry: %s", tag, e)
            d = None

        if d is not None:
            path = ET.SubElement(out, "path")
            for name in KEEP_ATTRS:
                if name in attrs:
                    path.set(_OUTPUT_ATTR_KEYS.get(name, name), attrs[name])
            path.set("d", d)

        _collect_paths(child, out)


def _pathologize(svg_text: str) -> str:
    root = load_markup(svg_text)
    if root is None:
        raise SanitizeError("Markup could not be parsed.")

    svg = find_svg_root(root)
    if svg is None:
        raise SanitizeError("No <svg> element found.")

    for element in svg.iter():
        if isinstance(element.tag, str) and local_name(element.tag) in UNSUPPORTED_TAGS:
            raise SanitizeError(f"Unsupported element <{local_name(element.tag)}>.")

    out = ET.Element("svg", {"xmlns": SVG_NS})
    for name in ROOT_ATTRS:
        value = svg.get(name)
        if value is not None:
            out.set(name, value)

    _collect_paths(svg, out)
    return ET.tostring(out, encoding="unicode")


async def pathologize(svg_text: str) -> str:
    """Sanitize markup into canonical form. Raises SanitizeError on rejection."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, _pathologize, svg_text)


def strip_unsupported(svg_markup: str) -> str:
    """Remove <clipPath> and <mask> blocks, including those nested in <defs>."""
    stripped = _CLIP_PATH_RE.sub("", svg_markup)
    stripped = _MASK_RE.sub("", stripped)
    return _DEFS_RE.sub(lambda m: _MASK_RE.sub("", _CLIP_PATH_RE.sub("", m.group(0))), stripped)
