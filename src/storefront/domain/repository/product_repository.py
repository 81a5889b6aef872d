"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The in-memory and JSON-file implementations live in the
infrastructure layer; services only ever see this interface.

Not-found is never an exception here: lookups return ``None`` and
``delete`` returns ``False``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from storefront.domain.model.product import Product, ProductInput


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def get(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def create(self, data: ProductInput) -> Product:
        """Store a new product under a fresh, never-reused ID."""

    @abstractmethod
    def update(self, product_id: str, changes: dict[str, Any]) -> Product | None:
        """Merge *changes* over the stored product, or None if unknown."""

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product; True if one was removed."""
