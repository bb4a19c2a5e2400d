"""SVG parser — xml.etree facade for the forward converter, lxml as the recovering fallback.

Turns (sanitized) markup into an SvgDocument: root dimensions plus every
<path> element in document order.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

from lxml import etree

from svgeo.errors import InputError
from svgeo.models.svg_document import PathElement, SvgDocument
from svgeo.utils.math_helpers import parse_leading_float

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
INKSCAPE_NS = "http://www.inkscape.org/namespaces/inkscape"

# Namespaced attributes are exposed under their conventional prefix
_NS_PREFIXES = {
    INKSCAPE_NS: "inkscape",
    "http://sodipodi.sourceforge.net/DTD/sodipodi-0.0.dtd": "sodipodi",
    "http://www.w3.org/1999/xlink": "xlink",
}

_WHITESPACE_RE = re.compile(r"\s+")

# Name of the first element start tag, past any declaration, comment or doctype
_START_TAG_RE = re.compile(r"<(?![?!/])[^\s/>]+")


def local_name(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def attribute_name(key: str) -> str:
    """``{inkscape-ns}label`` → ``inkscape:label``; unknown namespaces drop to the local name."""
    if not key.startswith("{"):
        return key
    uri, _, local = key[1:].partition("}")
    prefix = _NS_PREFIXES.get(uri)
    return f"{prefix}:{local}" if prefix else local


def element_attributes(element: ET.Element) -> dict[str, str]:
    return {attribute_name(k): v for k, v in element.attrib.items()}


def find_svg_root(root: ET.Element) -> ET.Element | None:
    """First <svg> element in document order, the root itself included."""
    for element in root.iter():
        if isinstance(element.tag, str) and local_name(element.tag) == "svg":
            return element
    return None


def parse_viewbox_height(viewbox: str | None) -> float | None:
    """Height component of a four-number viewBox, else None."""
    if not viewbox:
        return None
    parts = _WHITESPACE_RE.split(viewbox.strip())
    if len(parts) != 4:
        return None
    return parse_leading_float(parts[3])


def _declare_known_prefixes(svg_text: str) -> str:
    """Add xmlns declarations on the first start tag for known prefixes used without one."""
    missing = [
        f' xmlns:{prefix}="{uri}"'
        for uri, prefix in _NS_PREFIXES.items()
        if re.search(rf"(?<![\w:.-]){prefix}:[\w.-]+\s*=", svg_text) and f"xmlns:{prefix}" not in svg_text
    ]
    match = _START_TAG_RE.search(svg_text)
    if not missing or match is None:
        return svg_text
    return svg_text[: match.end()] + "".join(missing) + svg_text[match.end() :]


def load_markup(svg_text: str):
    """Parse markup into an element tree, None when nothing can be recovered.

    Strict xml.etree first; on failure, a recovering lxml parser gets the text
    with any undeclared inkscape/sodipodi/xlink prefixes declared.
    """
    try:
        return ET.fromstring(svg_text)
    except ET.ParseError as e:
        logger.info("Markup is not well-formed (%s), retrying with a recovering parser", e)

    parser = etree.XMLParser(recover=True, remove_comments=True, remove_pis=True, no_network=True)
    try:
        return etree.fromstring(_declare_known_prefixes(svg_text).encode("utf-8"), parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        logger.info("Markup could not be recovered: %s", e)
        return None


def parse_document(svg_text: str) -> SvgDocument:
    """Parse markup into an SvgDocument.

    Raises InputError when the markup cannot be parsed or holds no <svg>.
    An SvgDocument with zero paths is returned as-is; the caller decides.
    """
    root = load_markup(svg_text)
    svg = find_svg_root(root) if root is not None else None
    if svg is None:
        raise InputError("Provided input does not contain a valid <svg> element.")

    paths = [
        PathElement(attributes=element_attributes(element))
        for element in root.iter()
        if isinstance(element.tag, str) and local_name(element.tag) == "path"
    ]

    doc = SvgDocument(
        width=parse_leading_float(svg.get("width")),
        height=parse_leading_float(svg.get("height")),
        viewbox_height=parse_viewbox_height(svg.get("viewBox")),
        paths=paths,
    )
    logger.debug("Parsed SVG: %d <path> elements, reference height %s", len(paths), doc.reference_height)
    return doc
