"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderInput, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, newest first.

        Orders sharing a ``created_at`` come out in reverse insertion order.
        """

    @abstractmethod
    def get(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def create(self, data: OrderInput) -> Order:
        """Store a new order as pending, stamped with the current time."""

    @abstractmethod
    def update_status(self, order_id: str, status: OrderStatus) -> Order | None:
        """Replace the status of an order, or None if unknown."""
