"""Hex-triplet colour codec.

Alpha never travels through the hex form; the attribute decoder and the
serializer carry it as a separate ``*-opacity`` attribute.
"""

from __future__ import annotations

import re

from svgpathserializer.errors import ColorParseError
from svgpathserializer.models.attributes import Color

_HEX_RE = re.compile(r"#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def hex_to_color(text: str) -> Color:
    """Parse ``#RRGGBB`` or ``#RGB`` into an opaque Color."""
    match = _HEX_RE.fullmatch(text.strip())
    if not match:
        raise ColorParseError(f"Not a hex colour: {text!r}")

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    data = int(digits, 16)

    return Color(
        red=((data >> 16) & 0xFF) / 255.0,
        green=((data >> 8) & 0xFF) / 255.0,
        blue=(data & 0xFF) / 255.0,
        alpha=1.0,
    )


def _channel_byte(value: float) -> int:
    return max(0, min(255, round(value * 255)))


def color_to_hex(color: Color) -> str:
    """Encode the RGB channels as lowercase ``#rrggbb``; alpha is ignored."""
    return "#{:02x}{:02x}{:02x}".format(
        _channel_byte(color.red),
        _channel_byte(color.green),
        _channel_byte(color.blue),
    )
