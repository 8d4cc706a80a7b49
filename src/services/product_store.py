"""In-memory product store backing the catalog endpoints."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from threading import RLock
from typing import Annotated, Any

from fastapi import Depends

from src.models.product import DEFAULT_CATALOG, Product

logger = logging.getLogger(__name__)


class ProductNotFoundError(LookupError):
    """Raised when no stored product carries the requested id."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class ProductStore:
    """Ordered in-memory list of products.

    Records keep insertion order; ids are not required to be unique and
    lookups act on the first match.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._lock = RLock()
        self._products: list[Product] = list(products)

    @classmethod
    def with_default_catalog(cls) -> ProductStore:
        """Return a store seeded with the ten demo products."""

        return cls(Product.model_validate(record) for record in DEFAULT_CATALOG)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def _index_of(self, product_id: int) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        raise ProductNotFoundError(product_id)

    def list_products(self) -> list[Product]:
        with self._lock:
            return list(self._products)

    def add(self, product: Product) -> Product:
        """Append ``product`` at the end. Duplicate ids are accepted."""

        with self._lock:
            self._products.append(product)

        logger.info("Added product %s", product.id)
        logger.debug("Product payload: %s", product.model_dump_json())
        return product

    def remove(self, product_id: int) -> Product:
        """Remove and return the first product with ``product_id``."""

        with self._lock:
            removed = self._products.pop(self._index_of(product_id))

        logger.info("Removed product %s", product_id)
        return removed

    def update(self, product_id: int, changes: Mapping[str, Any]) -> Product:
        """Shallow-merge ``changes`` onto the first product with ``product_id``.

        An ``id`` key in ``changes`` is dropped; ids cannot change here.
        """

        changes = {key: value for key, value in changes.items() if key != "id"}
        with self._lock:
            index = self._index_of(product_id)
            merged = Product.model_validate(
                {**self._products[index].model_dump(), **changes}
            )
            self._products[index] = merged

        logger.info("Updated product %s", product_id, extra={"fields": sorted(changes)})
        return merged


_store = ProductStore.with_default_catalog()


def get_product_store() -> ProductStore:
    """FastAPI dependency factory."""

    return _store


StoreDependency = Annotated[ProductStore, Depends(get_product_store)]
