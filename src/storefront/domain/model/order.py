"""Order aggregate.

An order is created once at checkout, never deleted, and afterwards only
its status changes. Line items are a snapshot of the catalog at order time,
so later product edits or deletions leave historical orders untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]


# ---------------------------------------------------------------------------
# Transition table, consulted only when strict transitions are switched on.
# The repository itself accepts any status change.
# ---------------------------------------------------------------------------
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.COMPLETED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def can_transition(current: OrderStatus, requested: OrderStatus) -> bool:
    """Return True if *current* may move to *requested* (no-ops allowed)."""
    if current == requested:
        return True
    return requested in ALLOWED_TRANSITIONS[current]


@dataclass(frozen=True)
class OrderLineItem:
    """Captures product name and price at order-creation time."""

    product_id: str
    product_name: str
    quantity: int
    price: str  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return Money.of(self.price) * Quantity(self.quantity).value


@dataclass
class Order:
    """Aggregate root for customer orders.

    ``total`` is the amount the customer was shown at checkout and is
    stored exactly as submitted; ``computed_total`` is what the line items
    add up to.
    """

    id: str
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_address: str
    items: list[OrderLineItem]
    total: str
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def computed_total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)


@dataclass(frozen=True)
class OrderInput:
    """A checkout submission.

    ``status`` is accepted so callers can send what the storefront sends,
    but the repository always stores new orders as pending.
    """

    customer_name: str
    customer_email: str
    customer_phone: str
    customer_address: str
    items: tuple[OrderLineItem, ...]
    total: str
    status: str | None = None
