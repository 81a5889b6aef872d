"""Application service: the catalog as seen by the admin back office and the shop.

Payloads are validated before the repository sees them; the repository
stores whatever it is given. A missing product surfaces here as
EntityNotFoundError, except for delete, which reports a boolean.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from storefront.application.dto import parse_product_changes, parse_product_input
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class CatalogService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def list_products(self) -> list[Product]:
        return self._product_repo.list_all()

    def get_product(self, product_id: str) -> Product:
        product = self._product_repo.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product '{product_id}' not found")
        return product

    def create_product(self, payload: Mapping[str, Any]) -> Product:
        data = parse_product_input(payload)
        product = self._product_repo.create(data)
        logger.info("product_created", product_id=product.id, name=product.name)
        return product

    def update_product(self, product_id: str, payload: Mapping[str, Any]) -> Product:
        """Apply a partial update; fields left out keep their values."""
        changes = parse_product_changes(payload)
        product = self._product_repo.update(product_id, changes)
        if product is None:
            raise EntityNotFoundError(f"Product '{product_id}' not found")
        logger.info("product_updated", product_id=product_id, fields=sorted(changes))
        return product

    def delete_product(self, product_id: str) -> bool:
        """Hard-delete a product. Orders keep their own snapshot of it."""
        deleted = self._product_repo.delete(product_id)
        logger.info("product_deleted", product_id=product_id, existed=deleted)
        return deleted
