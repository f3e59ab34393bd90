"""POST /api/svg/import and /api/svg/normalize — whole-document conversion."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from svgpathserializer.errors import SvgStructureError
from svgpathserializer.models.requests import SvgRequest
from svgpathserializer.models.responses import (
    ImportResponse,
    NormalizeResponse,
    diagnostics_out,
    shape_out,
)
from svgpathserializer.models.shape import ParsedShape
from svgpathserializer.svg.parser import paths_from_svg_string, svg_from_paths

router = APIRouter(prefix="/svg")


def _import(svg: str) -> list[ParsedShape]:
    try:
        return paths_from_svg_string(svg)
    except SvgStructureError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/import", response_model=ImportResponse)
def import_svg(request: SvgRequest) -> ImportResponse:
    shapes = _import(request.svg)
    return ImportResponse(shapes=[shape_out(s) for s in shapes])


@router.post("/normalize", response_model=NormalizeResponse)
def normalize_svg(request: SvgRequest) -> NormalizeResponse:
    """Re-emit the document as absolute-only, rounded paths."""
    shapes = _import(request.svg)
    svg = svg_from_paths([s.path for s in shapes], [s.attributes for s in shapes])
    diagnostics = [d for s in shapes for d in s.diagnostics]
    return NormalizeResponse(svg=svg, diagnostics=diagnostics_out(diagnostics))
