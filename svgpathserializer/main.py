"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from svgpathserializer import __version__
from svgpathserializer.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svgpath_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="svgpathserializer",
        description="SVG path definition parser and compact serializer",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from svgpathserializer.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
