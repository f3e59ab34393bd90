"""Tests for SVG document parsing (shape extraction + decode)."""

from __future__ import annotations

import pytest

from tests.conftest import GROUPED_SVG, MALFORMED_SVG, ROUND_TRIP_SVG, SHAPES_SVG

from svgpathserializer.errors import SvgStructureError
from svgpathserializer.models.attributes import Color
from svgpathserializer.models.diagnostics import DiagnosticKind
from svgpathserializer.models.path import ClosePath, LineTo, MoveTo, Point
from svgpathserializer.svg.parser import (
    extract_shapes,
    paths_from_svg_file,
    paths_from_svg_string,
    svg_from_paths,
)
from svgpathserializer.svg.shapes import polygon_to_definition, rect_to_definition


def test_rect_expansion():
    assert rect_to_definition(10, 20, 30, 40) == "M 10.0,20.0 H 40.0 V 60.0 H 10.0 V 20.0 Z"


def test_polygon_expansion():
    assert polygon_to_definition("0,0 10,0 10,10") == "M 0,0 L 10 0 10 10 Z"
    assert polygon_to_definition(" 5 5 ") == "M 5,5 Z"
    assert polygon_to_definition("") is None


def test_extract_shapes_in_document_order():
    shapes = extract_shapes(SHAPES_SVG)
    assert [s.kind for s in shapes] == ["path", "rect", "polygon"]
    assert "d" not in shapes[0].attributes
    assert "x" not in shapes[1].attributes
    assert "points" not in shapes[2].attributes
    assert shapes[2].attributes == {"fill": "#F00", "stroke-width": "2"}


def test_rect_segments():
    rect = paths_from_svg_string(SHAPES_SVG)[1]
    assert rect.path.segments == [
        MoveTo(Point(10, 20)),
        LineTo(Point(40, 20)),
        LineTo(Point(40, 60)),
        LineTo(Point(10, 60)),
        LineTo(Point(10, 20)),
        ClosePath(),
    ]


def test_rect_style_decoded():
    rect = paths_from_svg_string(SHAPES_SVG)[1]
    fill = rect.attributes["fill"]
    assert isinstance(fill, Color)
    assert fill.alpha == 0.5
    assert "fill-opacity" not in rect.attributes


def test_polygon_segments():
    polygon = paths_from_svg_string(SHAPES_SVG)[2]
    assert polygon.path.segments == [
        MoveTo(Point(0, 0)),
        LineTo(Point(10, 0)),
        LineTo(Point(10, 10)),
        ClosePath(),
    ]
    assert polygon.attributes["fill"] == Color(1.0, 0.0, 0.0)


def test_path_with_shorthand_curve():
    wave = paths_from_svg_string(SHAPES_SVG)[0]
    assert wave.diagnostics == []
    assert len(wave.path) == 3
    assert wave.path.segments[2].control1 == Point(125, 150)
    assert wave.attributes["fill"].alpha == 0.0


def test_nested_groups_and_arc_diagnostic():
    shapes = paths_from_svg_string(GROUPED_SVG)
    assert [s.kind for s in shapes] == ["path", "path"]
    arc_shape, square = shapes
    assert [d.kind for d in arc_shape.diagnostics] == [DiagnosticKind.UNSUPPORTED_FEATURE]
    assert arc_shape.attributes is None
    assert square.attributes["stroke-opacity"] == "1"


def test_rect_without_size_is_skipped():
    svg = '<svg xmlns="http://www.w3.org/2000/svg"><rect x="1" y="1"/><path d="M0 0"/></svg>'
    assert [s.kind for s in extract_shapes(svg)] == ["path"]


def test_malformed_document():
    with pytest.raises(SvgStructureError):
        paths_from_svg_string(MALFORMED_SVG)


def test_document_round_trip():
    shapes = paths_from_svg_string(ROUND_TRIP_SVG)
    svg = svg_from_paths([s.path for s in shapes], [s.attributes for s in shapes])
    again = paths_from_svg_string(svg)
    assert [s.path for s in again] == [s.path for s in shapes]
    assert again[0].attributes == shapes[0].attributes


def test_paths_from_svg_file(tmp_path):
    svg_file = tmp_path / "shapes.svg"
    svg_file.write_text(SHAPES_SVG, encoding="utf-8")
    shapes = paths_from_svg_file(svg_file)
    assert [s.kind for s in shapes] == ["path", "rect", "polygon"]
    assert [s.path for s in shapes] == [s.path for s in paths_from_svg_string(SHAPES_SVG)]
    assert paths_from_svg_file(str(svg_file))[1].attributes["fill"].alpha == 0.5


def test_paths_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        paths_from_svg_file(tmp_path / "missing.svg")
