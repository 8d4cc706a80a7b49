"""FastAPI dependency that validates a request before its handler runs."""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Request
from pydantic import BaseModel, Field, ValidationError

from src.validation.issues import (
    GenericFailure,
    IssueList,
    RequestValidationFailure,
    ValidationIssue,
)
from src.validation.schemas import RequestModel, SchemaRegistry, schema_registry

logger = logging.getLogger(__name__)

_FORM_MEDIA_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class ValidatedRequest(BaseModel):
    """The request input that passed its schema, exactly as received."""

    body: Any = Field(default_factory=dict)
    query: dict[str, str] = Field(default_factory=dict)
    params: dict[str, str] = Field(default_factory=dict)


def _reject_constant(constant: str) -> float:
    raise ValueError(f"{constant} is not a valid JSON number")


async def read_body(request: Request) -> Any:
    """Decode a JSON or form body. An empty or unrecognised body reads as ``{}``."""

    raw = await request.body()
    if not raw:
        return {}

    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type in _FORM_MEDIA_TYPES:
        form = await request.form()
        return dict(form)
    if media_type == "application/json" or media_type.endswith("+json"):
        try:
            return json.loads(raw, parse_constant=_reject_constant)
        except ValueError as exc:
            raise RequestValidationFailure(
                GenericFailure(message=f"Malformed JSON body: {exc}")
            ) from exc
    return {}


def issues_from_error(
    model: type[RequestModel], error: ValidationError
) -> tuple[ValidationIssue, ...]:
    """Flatten ``error`` into issues, keeping pydantic's error order."""

    issues: list[ValidationIssue] = []
    for detail in error.errors(include_url=False):
        path = tuple(str(part) for part in detail["loc"])
        # One pydantic error may stand for several failed checks on a field
        messages = detail.get("ctx", {}).get("issues") or [model.message_for(detail)]
        issues.extend(ValidationIssue(message=message, path=path) for message in messages)
    return tuple(issues)


def validate_request(
    name: str,
    registry: SchemaRegistry = schema_registry,
) -> Callable[[Request], Awaitable[ValidatedRequest]]:
    """Build a dependency that checks ``(body, query, params)`` against schema ``name``.

    Every violated constraint is collected before the request is rejected
    with ``RequestValidationFailure``; nothing downstream runs in that case.
    """

    model = registry.get(name)

    async def dependency(request: Request) -> ValidatedRequest:
        request_input = {
            "body": await read_body(request),
            "query": dict(request.query_params),
            "params": dict(request.path_params),
        }

        try:
            model.model_validate(request_input)
        except ValidationError as exc:
            issues = issues_from_error(model, exc)
            logger.debug("Schema %s rejected request with %d issue(s)", name, len(issues))
            raise RequestValidationFailure(IssueList(issues=issues)) from exc
        except TypeError as exc:
            raise RequestValidationFailure(
                GenericFailure(message=str(exc) or None)
            ) from exc

        return ValidatedRequest(**request_input)

    dependency.__name__ = f"validate_{name}"
    return dependency
