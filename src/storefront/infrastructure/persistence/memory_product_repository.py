"""In-memory implementation of ProductRepository.

The map is owned by the repository instance. Records handed out are
copies, so nothing outside the repository can change what is stored.
"""

from __future__ import annotations

import dataclasses
import threading
from typing import Any

import structlog

from storefront.domain.model.product import Product, ProductInput
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.identity import IdGenerator

logger = structlog.get_logger(__name__)


class InMemoryProductRepository(ProductRepository):

    def __init__(self, ids: IdGenerator | None = None) -> None:
        self._store: dict[str, Product] = {}
        self._ids = ids or IdGenerator()
        # One lock for the whole map: request handlers may run on worker threads.
        self._lock = threading.Lock()

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        with self._lock:
            return [_copy(p) for p in self._store.values()]

    def get(self, product_id: str) -> Product | None:
        with self._lock:
            product = self._store.get(product_id)
            return _copy(product) if product is not None else None

    def create(self, data: ProductInput) -> Product:
        with self._lock:
            product = data.to_product(self._ids.next_id())
            self._store[product.id] = product
        logger.debug("product_stored", product_id=product.id, name=product.name)
        return _copy(product)

    def update(self, product_id: str, changes: dict[str, Any]) -> Product | None:
        with self._lock:
            existing = self._store.get(product_id)
            if existing is None:
                return None
            updated = dataclasses.replace(existing, **changes)
            self._store[product_id] = updated
        return _copy(updated)

    def delete(self, product_id: str) -> bool:
        with self._lock:
            return self._store.pop(product_id, None) is not None


def _copy(product: Product) -> Product:
    return dataclasses.replace(product, variants=list(product.variants))
