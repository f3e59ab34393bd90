"""Attribute decoder — style merge, colour decoding and opacity folding."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from svgpathserializer.errors import ColorParseError, StyleSyntaxError
from svgpathserializer.models.attributes import TRANSPARENT, AttributeSet, Color, DecodedAttributes
from svgpathserializer.models.diagnostics import Diagnostic, DiagnosticKind
from svgpathserializer.svg.color import hex_to_color

logger = logging.getLogger(__name__)

COLOR_ATTRIBUTES = ("fill", "stroke")


def parse_style(text: str) -> dict[str, str]:
    """Parse ``"key:value;key:value"`` into an ordered dict.

    Whitespace around both separators is trimmed; a value is split at the
    first ``:`` so it may itself contain colons.
    """
    style: dict[str, str] = {}
    for entry in text.split(";"):
        entry = entry.strip()
        if not entry:
            continue
        key, sep, value = entry.partition(":")
        key, value = key.strip(), value.strip()
        if not sep or not key or not value:
            raise StyleSyntaxError(f"Missing value for style key {key or entry!r}")
        style[key] = value
    return style


def decode_attributes(raw: Mapping[str, str]) -> DecodedAttributes:
    """Decode raw attribute strings of one shape into an AttributeSet.

    Explicit attributes are taken first and the ``style`` list is merged on
    top of them, so style wins on a key collision.
    """
    result = DecodedAttributes()
    attrs: AttributeSet = {k: v for k, v in raw.items() if k != "style"}

    style_text = raw.get("style")
    if style_text is not None:
        try:
            attrs.update(parse_style(style_text))
        except StyleSyntaxError as e:
            logger.warning("Parse error in style %r: %s", style_text, e)
            result.diagnostics.append(
                Diagnostic(DiagnosticKind.ATTRIBUTE_DECODE_ERROR, f"Parse error in style: {e}")
            )

    for name in COLOR_ATTRIBUTES:
        value = attrs.get(name)
        if not isinstance(value, str):
            continue
        if value.strip() == "none":
            attrs[name] = TRANSPARENT
            continue
        try:
            attrs[name] = hex_to_color(value)
        except ColorParseError as e:
            logger.warning("Leaving %s=%r undecoded: %s", name, value, e)
            result.diagnostics.append(Diagnostic(DiagnosticKind.ATTRIBUTE_DECODE_ERROR, str(e)))

    for name in COLOR_ATTRIBUTES:
        _fold_opacity(attrs, name, result)

    result.attributes = attrs or None
    return result


def _fold_opacity(attrs: AttributeSet, name: str, result: DecodedAttributes) -> None:
    """Move ``<name>-opacity`` into the colour's alpha when it is below 1."""
    opacity_key = f"{name}-opacity"
    color = attrs.get(name)
    opacity_text = attrs.get(opacity_key)
    if not isinstance(color, Color) or not isinstance(opacity_text, str):
        return

    try:
        opacity = float(opacity_text)
    except ValueError:
        logger.warning("Non-numeric %s=%r", opacity_key, opacity_text)
        result.diagnostics.append(
            Diagnostic(DiagnosticKind.ATTRIBUTE_DECODE_ERROR, f"Non-numeric {opacity_key}: {opacity_text!r}")
        )
        return

    if opacity < 1.0:
        attrs[name] = color.with_alpha(max(0.0, opacity))
        del attrs[opacity_key]
