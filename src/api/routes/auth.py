"""Registration route."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from src.api.interceptors import log_request_time
from src.models.auth import RegistrationPayload
from src.validation.gate import ValidatedRequest, validate_request

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
    dependencies=[Depends(log_request_time)],
    summary="Register a user (nothing is persisted)",
)
async def register(
    validated: Annotated[ValidatedRequest, Depends(validate_request("register"))],
) -> str:
    payload = RegistrationPayload.model_validate(validated.body)
    logger.info("New registration: username=%s", payload.username)
    return f"Welcome, {payload.username}!"
