"""Exception handlers turning terminal request errors into plain-text responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from src.services.product_store import ProductNotFoundError
from src.validation.issues import RequestValidationFailure

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND_MESSAGE = "Product not found"


def register_error_handlers(app: FastAPI) -> None:
    """Register the validation and not-found handlers on the app."""
    _register_validation_failure_handler(app)
    _register_not_found_handler(app)


def _register_validation_failure_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationFailure)
    async def validation_failure_handler(
        request: Request, exc: RequestValidationFailure,
    ) -> PlainTextResponse:
        logger.warning(
            "Validation failed on %s: %s", request.url.path, exc.detail,
        )
        return PlainTextResponse(exc.detail, status_code=status.HTTP_400_BAD_REQUEST)


def _register_not_found_handler(app: FastAPI) -> None:
    @app.exception_handler(ProductNotFoundError)
    async def not_found_handler(
        request: Request, exc: ProductNotFoundError,
    ) -> PlainTextResponse:
        logger.info(
            "Product %s not found",
            exc.product_id,
            extra={"path": request.url.path},
        )
        return PlainTextResponse(
            PRODUCT_NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND,
        )
