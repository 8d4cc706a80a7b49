"""Request interceptors attached to individual routes as dependencies."""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import Request

from src.config import settings

logger = logging.getLogger(__name__)


async def log_request_time(request: Request) -> None:
    """Log local request time and path. Runs before the route's validation."""

    timestamp = datetime.now().strftime(settings.REQUEST_LOG_TIME_FORMAT)
    logger.info(
        "Request time: %s | path: %s",
        timestamp,
        request.url.path,
        extra={"method": request.method},
    )
