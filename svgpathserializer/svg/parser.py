"""SVG document parser — facade over ElementTree + the path definition parser.

Converts raw SVG string → list of ParsedShape (path + decoded attributes).
Only ``<path>``, ``<rect>`` and ``<polygon>`` are read; groups, transforms and
other shapes are ignored.
"""

from __future__ import annotations

import logging
import math
import os
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from pathlib import Path as FilePath

from svgpathserializer.errors import SvgStructureError
from svgpathserializer.models.attributes import AttributeSet
from svgpathserializer.models.path import Path
from svgpathserializer.models.shape import ParsedShape, ShapeSource
from svgpathserializer.svg.path_parser import parse_path_definition
from svgpathserializer.svg.serializer import serialize
from svgpathserializer.svg.shapes import polygon_to_definition, rect_to_definition
from svgpathserializer.svg.style import decode_attributes

logger = logging.getLogger(__name__)

# Attributes consumed by geometry expansion, never copied to the shape's attributes
GEOMETRY_ATTRS = {
    "path": {"d"},
    "rect": {"x", "y", "width", "height"},
    "polygon": {"points"},
}


def strip_ns(tag: str) -> str:
    """Remove namespace from tag name."""
    return tag.split("}")[-1] if "}" in tag else tag


def _float_attr(elem: ET.Element, name: str, default: float | None = None) -> float | None:
    text = elem.get(name)
    if text is None:
        return default
    try:
        value = float(text.strip().removesuffix("px"))
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _read_path(elem: ET.Element) -> str | None:
    d = elem.get("d")
    if d is None:
        logger.warning("Invalid/missing d attribute in <path>")
    return d


def _read_rect(elem: ET.Element) -> str | None:
    x = _float_attr(elem, "x", 0.0)
    y = _float_attr(elem, "y", 0.0)
    width = _float_attr(elem, "width")
    height = _float_attr(elem, "height")
    if None in (x, y, width, height):
        logger.warning("Invalid/missing geometry in <rect>: %s", dict(elem.attrib))
        return None
    return rect_to_definition(x, y, width, height)


def _read_polygon(elem: ET.Element) -> str | None:
    definition = polygon_to_definition(elem.get("points", ""))
    if definition is None:
        logger.warning("Too few points in <polygon>")
    return definition


_READERS = {
    "path": _read_path,
    "rect": _read_rect,
    "polygon": _read_polygon,
}


def _raw_attrs(elem: ET.Element, kind: str) -> dict[str, str]:
    attrs: dict[str, str] = {}
    for name, value in elem.attrib.items():
        if name.startswith("{"):
            logger.debug("Dropping namespaced attribute %s on <%s>", name, kind)
            continue
        if name in GEOMETRY_ATTRS[kind]:
            continue
        attrs[name] = value
    return attrs


def extract_shapes(svg_text: str) -> list[ShapeSource]:
    """Find every supported shape element, in document order."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise SvgStructureError(f"Malformed SVG document: {e}") from e

    shapes: list[ShapeSource] = []
    for elem in root.iter():
        if not isinstance(elem.tag, str):
            continue
        kind = strip_ns(elem.tag).lower()
        reader = _READERS.get(kind)
        if reader is None:
            continue
        definition = reader(elem)
        if definition is None:
            continue
        shapes.append(ShapeSource(kind=kind, definition=definition, attributes=_raw_attrs(elem, kind)))

    return shapes


def parse_shape(source: ShapeSource) -> ParsedShape:
    parsed = parse_path_definition(source.definition)
    decoded = decode_attributes(source.attributes)
    return ParsedShape(
        kind=source.kind,
        path=parsed.path,
        attributes=decoded.attributes,
        diagnostics=parsed.diagnostics + decoded.diagnostics,
    )


def paths_from_svg_string(svg_text: str) -> list[ParsedShape]:
    """Parse raw SVG string into paths with their decoded attributes."""
    shapes = [parse_shape(source) for source in extract_shapes(svg_text)]
    logger.info(
        "Parsed SVG: %d shapes, %d diagnostics",
        len(shapes),
        sum(len(s.diagnostics) for s in shapes),
    )
    return shapes


def paths_from_svg_file(filename: str | os.PathLike[str]) -> list[ParsedShape]:
    """Read a UTF-8 SVG file and parse it like ``paths_from_svg_string``."""
    logger.info("Reading SVG file %s", filename)
    return paths_from_svg_string(FilePath(filename).read_text(encoding="utf-8"))


def svg_from_paths(
    paths: Sequence[Path],
    attributes: Sequence[AttributeSet | None] | None = None,
) -> str:
    """Inverse of ``paths_from_svg_string``."""
    return serialize(paths, attributes)
