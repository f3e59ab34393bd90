"""POST /api/paths/parse — parse a single path definition."""

from __future__ import annotations

from fastapi import APIRouter

from svgpathserializer.models.requests import ParsePathRequest
from svgpathserializer.models.responses import ParsePathResponse, diagnostics_out, segments_out
from svgpathserializer.svg.path_parser import parse_path_definition

router = APIRouter(prefix="/paths")


@router.post("/parse", response_model=ParsePathResponse)
def parse_path(request: ParsePathRequest) -> ParsePathResponse:
    result = parse_path_definition(request.definition)
    return ParsePathResponse(
        segments=segments_out(result.path),
        diagnostics=diagnostics_out(result.diagnostics),
    )
