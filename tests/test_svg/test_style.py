"""Tests for style parsing and attribute decoding."""

from __future__ import annotations

import pytest

from svgpathserializer.models.attributes import Color
from svgpathserializer.models.diagnostics import DiagnosticKind
from svgpathserializer.errors import StyleSyntaxError
from svgpathserializer.svg.style import decode_attributes, parse_style


# ---------------------------------------------------------------------------
# parse_style
# ---------------------------------------------------------------------------

def test_parse_style_trims_whitespace():
    assert parse_style(" fill : #fff ; stroke:none; ") == {"fill": "#fff", "stroke": "none"}


def test_parse_style_value_may_contain_colon():
    assert parse_style("font-family:a:b") == {"font-family": "a:b"}


@pytest.mark.parametrize("text", ["fill:red;stroke", "fill:;stroke:blue", ":red"])
def test_parse_style_missing_value(text):
    with pytest.raises(StyleSyntaxError):
        parse_style(text)


# ---------------------------------------------------------------------------
# decode_attributes
# ---------------------------------------------------------------------------

def test_none_fill_is_transparent():
    attrs = decode_attributes({"fill": "none"}).attributes
    assert attrs["fill"].alpha == 0.0


def test_fill_opacity_folded_into_alpha():
    decoded = decode_attributes({"fill": "#ff0000", "fill-opacity": "0.5"})
    assert decoded.attributes == {"fill": Color(1.0, 0.0, 0.0, 0.5)}
    assert decoded.diagnostics == []


def test_full_opacity_left_unfolded():
    attrs = decode_attributes({"stroke": "#000", "stroke-opacity": "1"}).attributes
    assert attrs["stroke"] == Color(0.0, 0.0, 0.0, 1.0)
    assert attrs["stroke-opacity"] == "1"


def test_opacity_from_style():
    attrs = decode_attributes({"stroke": "#00f", "style": "stroke-opacity:0.25"}).attributes
    assert attrs == {"stroke": Color(0.0, 0.0, 1.0, 0.25)}


def test_style_overrides_explicit_attribute():
    attrs = decode_attributes({"fill": "#000000", "style": "fill:#ffffff"}).attributes
    assert attrs["fill"] == Color(1.0, 1.0, 1.0)


def test_malformed_style_keeps_explicit_attributes():
    decoded = decode_attributes({"fill": "#000000", "id": "x", "style": "stroke:#fff;width"})
    assert decoded.attributes == {"fill": Color(0.0, 0.0, 0.0), "id": "x"}
    assert [d.kind for d in decoded.diagnostics] == [DiagnosticKind.ATTRIBUTE_DECODE_ERROR]


def test_empty_set_is_absent():
    assert decode_attributes({}).attributes is None
    assert decode_attributes({"style": ""}).attributes is None


def test_non_hex_color_left_as_string():
    decoded = decode_attributes({"fill": "red", "fill-opacity": "0.5"})
    assert decoded.attributes == {"fill": "red", "fill-opacity": "0.5"}
    assert [d.kind for d in decoded.diagnostics] == [DiagnosticKind.ATTRIBUTE_DECODE_ERROR]


def test_non_numeric_opacity():
    decoded = decode_attributes({"fill": "#fff", "fill-opacity": "half"})
    assert decoded.attributes["fill"].alpha == 1.0
    assert decoded.attributes["fill-opacity"] == "half"
    assert len(decoded.diagnostics) == 1


def test_other_attributes_pass_through_in_order():
    attrs = decode_attributes({"id": "p", "stroke-width": "2", "fill": "#fff"}).attributes
    assert list(attrs) == ["id", "stroke-width", "fill"]
    assert attrs["stroke-width"] == "2"
