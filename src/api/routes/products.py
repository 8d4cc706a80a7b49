"""Routes for managing the product catalog."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from src.models.product import Product
from src.services.product_store import StoreDependency
from src.validation.gate import ValidatedRequest, validate_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pruducts", tags=["products"])


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    summary="List every stored product",
)
async def list_products(store: StoreDependency) -> list[dict[str, Any]]:
    return [product.model_dump() for product in store.list_products()]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
    summary="Append a product to the catalog",
)
async def create_product(
    validated: Annotated[ValidatedRequest, Depends(validate_request("create_product"))],
    store: StoreDependency,
) -> str:
    """Store the validated body as submitted. Ids are not checked for collisions."""

    product = Product.model_validate(validated.body)
    logger.info("Adding new product: %s", product.model_dump())
    store.add(product)
    return "Product created successfully"


@router.delete(
    "/{id}",
    status_code=status.HTTP_200_OK,
    response_class=PlainTextResponse,
    summary="Delete the first product with the given id",
)
async def delete_product(
    validated: Annotated[ValidatedRequest, Depends(validate_request("delete_product"))],
    store: StoreDependency,
) -> str:
    product_id = int(validated.params["id"])
    store.remove(product_id)
    return f"Product ID: {product_id} deleted successfully"


@router.put(
    "/{id}",
    status_code=status.HTTP_200_OK,
    response_class=PlainTextResponse,
    summary="Merge the given fields onto an existing product",
)
async def update_product(
    validated: Annotated[ValidatedRequest, Depends(validate_request("update_product"))],
    store: StoreDependency,
) -> str:
    """Shallow-merge the body onto the product; a body ``id`` is ignored."""

    product_id = int(validated.params["id"])
    changes = {key: value for key, value in validated.body.items() if key != "id"}
    logger.info("Updating product ID: %s with data: %s", product_id, changes)
    store.update(product_id, changes)
    return "Product updated successfully"
