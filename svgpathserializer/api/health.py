"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svgpathserializer import __version__
from svgpathserializer.config import Settings
from svgpathserializer.dependencies import get_settings
from svgpathserializer.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, env=settings.svgpath_env)
