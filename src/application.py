"""FastAPI application factory and bootstrap helpers."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from src.api.error_handlers import register_error_handlers
from src.api.routes import include_api_routes
from src.config import settings

logger = logging.getLogger(__name__)


def create_app(static_directory: str | Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Pruducts",
        description="In-memory product catalog with request validation",
        version="1.0.0",
    )

    register_error_handlers(app)
    include_api_routes(app)
    _mount_static(app, Path(static_directory or settings.STATIC_DIRECTORY))

    return app


def _mount_static(app: FastAPI, directory: Path) -> None:
    """Serve local assets at the root path when the directory exists.

    Mounted after the API routes so those always take precedence.
    """

    if not directory.is_dir():
        logger.debug("Static directory %s not found, skipping mount", directory)
        return

    app.mount("/", StaticFiles(directory=directory, html=True), name="static")
    logger.info("Serving static files from %s", directory)
