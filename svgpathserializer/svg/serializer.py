"""Write compact absolute-coordinate SVG from parsed paths."""

from __future__ import annotations

from collections.abc import Sequence
from xml.sax.saxutils import quoteattr

from svgpathserializer.models.attributes import AttributeSet, Color
from svgpathserializer.models.path import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    Path,
    QuadCurveTo,
    Segment,
)
from svgpathserializer.svg.color import color_to_hex
from svgpathserializer.utils.formatting import format_coordinate, format_opacity
from svgpathserializer.utils.geometry import union_bounds

SEGMENT_LETTERS = {
    MoveTo: "M",
    LineTo: "L",
    QuadCurveTo: "Q",
    CubicCurveTo: "C",
    ClosePath: "Z",
}


def segment_to_text(seg: Segment) -> str:
    """One absolute command, e.g. ``C1,2,3,4,5,6``."""
    letter = SEGMENT_LETTERS[type(seg)]
    coords = ",".join(format_coordinate(v) for pt in seg.points for v in pt)
    return letter + coords


def path_to_definition(path: Path) -> str:
    """Absolute-only ``d`` text for a path (M, L, Q, C, Z)."""
    return "".join(segment_to_text(seg) for seg in path)


def attributes_to_text(attrs: AttributeSet | None) -> str:
    """Render an attribute set as `` name="value"`` pairs (leading space included)."""
    if not attrs:
        return ""
    # A translucent colour writes its own <name>-opacity; a leftover string
    # key of the same name would duplicate the attribute.
    shadowed = {
        f"{name}-opacity"
        for name, value in attrs.items()
        if isinstance(value, Color) and value.alpha < 1.0
    }
    parts: list[str] = []
    for name, value in attrs.items():
        if name in shadowed:
            continue
        if isinstance(value, Color):
            parts.append(f"{name}={quoteattr(color_to_hex(value))}")
            if value.alpha < 1.0:
                parts.append(f'{name}-opacity="{format_opacity(value.alpha)}"')
        else:
            parts.append(f"{name}={quoteattr(value)}")
    return "".join(f" {p}" for p in parts)


def serialize(
    paths: Sequence[Path],
    attributes_per_path: Sequence[AttributeSet | None] | None = None,
) -> str:
    """Generate an SVG document with one ``<path>`` per Path.

    ``attributes_per_path`` is aligned with ``paths``; width and height are
    the union of the path bounding boxes (seeded with the origin), rounded.
    """
    if attributes_per_path is None:
        attributes_per_path = [None] * len(paths)
    if len(attributes_per_path) != len(paths):
        raise ValueError(
            f"Got {len(attributes_per_path)} attribute sets for {len(paths)} paths"
        )

    xmin, ymin, xmax, ymax = union_bounds(p.bounds() for p in paths)

    lines = [
        '<svg xmlns="http://www.w3.org/2000/svg"'
        ' xmlns:xlink="http://www.w3.org/1999/xlink"'
        f' width="{xmax - xmin:.0f}" height="{ymax - ymin:.0f}">',
    ]
    for path, attrs in zip(paths, attributes_per_path):
        lines.append(f'  <path{attributes_to_text(attrs)} d="{path_to_definition(path)}"/>')
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def path_to_svg(path: Path) -> str:
    """Serialize a single path with no attributes."""
    return serialize([path])
