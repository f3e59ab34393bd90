"""SVG path definition parser and compact serializer."""

__version__ = "0.1.0"

from svgpathserializer.errors import ColorParseError, SvgPathError, SvgStructureError
from svgpathserializer.models.attributes import AttributeSet, Color
from svgpathserializer.models.diagnostics import Diagnostic, DiagnosticKind
from svgpathserializer.models.path import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    ParseResult,
    Path,
    Point,
    QuadCurveTo,
)
from svgpathserializer.svg.color import color_to_hex, hex_to_color
from svgpathserializer.svg.parser import (
    extract_shapes,
    paths_from_svg_file,
    paths_from_svg_string,
    svg_from_paths,
)
from svgpathserializer.svg.path_parser import parse_path_definition
from svgpathserializer.svg.serializer import path_to_svg, serialize
from svgpathserializer.svg.style import decode_attributes, parse_style

__all__ = [
    "ClosePath",
    "Color",
    "ColorParseError",
    "CubicCurveTo",
    "Diagnostic",
    "DiagnosticKind",
    "AttributeSet",
    "LineTo",
    "MoveTo",
    "ParseResult",
    "Path",
    "Point",
    "QuadCurveTo",
    "SvgPathError",
    "SvgStructureError",
    "color_to_hex",
    "decode_attributes",
    "extract_shapes",
    "hex_to_color",
    "parse_path_definition",
    "parse_style",
    "path_to_svg",
    "paths_from_svg_file",
    "paths_from_svg_string",
    "serialize",
    "svg_from_paths",
]
