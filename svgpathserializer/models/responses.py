"""API response models, plus conversions from the internal dataclasses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgpathserializer.models.attributes import AttributeSet, Color
from svgpathserializer.models.diagnostics import Diagnostic
from svgpathserializer.models.path import Path
from svgpathserializer.models.shape import ParsedShape
from svgpathserializer.svg.color import color_to_hex
from svgpathserializer.svg.serializer import SEGMENT_LETTERS


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = "development"


class SegmentOut(BaseModel):
    type: str = Field(..., description="M, L, Q, C or Z")
    points: list[tuple[float, float]] = Field(default_factory=list)


class ColorOut(BaseModel):
    hex: str
    alpha: float = 1.0


class DiagnosticOut(BaseModel):
    kind: str
    message: str
    offset: int | None = None
    command: str | None = None


class ParsePathResponse(BaseModel):
    segments: list[SegmentOut] = Field(default_factory=list)
    diagnostics: list[DiagnosticOut] = Field(default_factory=list)


class ShapeOut(BaseModel):
    kind: str
    segments: list[SegmentOut] = Field(default_factory=list)
    attributes: dict[str, str | ColorOut] | None = None
    diagnostics: list[DiagnosticOut] = Field(default_factory=list)


class ImportResponse(BaseModel):
    shapes: list[ShapeOut] = Field(default_factory=list)


class NormalizeResponse(BaseModel):
    svg: str
    diagnostics: list[DiagnosticOut] = Field(default_factory=list)


def segments_out(path: Path) -> list[SegmentOut]:
    return [
        SegmentOut(type=SEGMENT_LETTERS[type(seg)], points=[(pt.x, pt.y) for pt in seg.points])
        for seg in path
    ]


def diagnostics_out(diagnostics: list[Diagnostic]) -> list[DiagnosticOut]:
    return [
        DiagnosticOut(kind=d.kind.value, message=d.message, offset=d.offset, command=d.command)
        for d in diagnostics
    ]


def attributes_out(attrs: AttributeSet | None) -> dict[str, str | ColorOut] | None:
    if attrs is None:
        return None
    return {
        name: ColorOut(hex=color_to_hex(value), alpha=value.alpha) if isinstance(value, Color) else value
        for name, value in attrs.items()
    }


def shape_out(shape: ParsedShape) -> ShapeOut:
    return ShapeOut(
        kind=shape.kind,
        segments=segments_out(shape.path),
        attributes=attributes_out(shape.attributes),
        diagnostics=diagnostics_out(shape.diagnostics),
    )
