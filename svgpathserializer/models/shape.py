"""Per-shape records flowing from the document extractor to the consumer."""

from __future__ import annotations

from dataclasses import dataclass, field

from svgpathserializer.models.attributes import AttributeSet
from svgpathserializer.models.diagnostics import Diagnostic
from svgpathserializer.models.path import Path


@dataclass
class ShapeSource:
    """One shape element as found in the document."""

    kind: str  # "path" | "rect" | "polygon"
    # Path-definition text; rect and polygon geometry already expanded
    definition: str
    # Raw attribute strings, geometry attributes removed
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class ParsedShape:
    kind: str
    path: Path
    attributes: AttributeSet | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)
