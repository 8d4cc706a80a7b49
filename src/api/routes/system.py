"""System-level routes such as health checks."""

from __future__ import annotations

from fastapi import APIRouter

from src.config import settings
from src.services.product_store import StoreDependency

router = APIRouter(tags=["system"])


@router.get("/health")
async def health_check(store: StoreDependency) -> dict[str, str | int]:
    """Health check reporting the environment and catalog size."""

    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "products": len(store),
    }
