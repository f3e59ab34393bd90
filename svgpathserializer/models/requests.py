"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParsePathRequest(BaseModel):
    definition: str = Field(..., description="SVG path definition (the d attribute)")


class SvgRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
