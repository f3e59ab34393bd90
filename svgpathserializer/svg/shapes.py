"""Rectangle and polygon geometry → equivalent path definitions."""

from __future__ import annotations

import re

_POINTS_SPLIT_RE = re.compile(r"[\s,]+")


def _num(value: float) -> str:
    return repr(float(value))


def rect_to_definition(x: float, y: float, width: float, height: float) -> str:
    """``M x,y H x+w V y+h H x V y Z``"""
    return (
        f"M {_num(x)},{_num(y)} "
        f"H {_num(x + width)} "
        f"V {_num(y + height)} "
        f"H {_num(x)} "
        f"V {_num(y)} Z"
    )


def polygon_to_definition(points: str) -> str | None:
    """``M x0,y0 L x1,y1 ... Z`` from a polygon ``points`` list.

    Returns None when there is not even one coordinate pair. Coordinates are
    passed through as text; malformed ones surface as parser diagnostics.
    """
    items = [p for p in _POINTS_SPLIT_RE.split(points.strip()) if p]
    if len(items) < 2:
        return None
    x, y, rest = items[0], items[1], items[2:]
    definition = f"M {x},{y}"
    if rest:
        definition += " L " + " ".join(rest)
    return definition + " Z"
