"""Product domain models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A catalog record as stored and served by the product endpoints.

    Keys beyond ``id``, ``name`` and ``price`` are kept as submitted so a
    created record is stored verbatim.
    """

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Caller supplied identifier, not unique")
    name: str
    price: int | float = Field(..., description="Price, integers are kept as-is")


DEFAULT_CATALOG: tuple[dict, ...] = tuple(
    {"id": n, "name": f"Product {n}", "price": n * 10} for n in range(1, 11)
)
"""Seed records loaded into a fresh store."""
