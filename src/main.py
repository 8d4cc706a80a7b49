"""FastAPI application entry point."""

import logging

import uvicorn

from src.application import create_app
from src.config import settings

app = create_app()

__all__ = ["app"]


if __name__ == "__main__":
    logging.getLogger(__name__).info("Server is running on %s", settings.base_url)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.log_level.lower())
