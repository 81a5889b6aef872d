"""In-memory implementation of OrderRepository."""

from __future__ import annotations

import dataclasses
import itertools
import threading
from collections.abc import Callable
from datetime import datetime, timezone

import structlog

from storefront.domain.model.order import Order, OrderInput, OrderStatus
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.identity import IdGenerator

logger = structlog.get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryOrderRepository(OrderRepository):
    """Orders keyed by ID, plus the sequence number each was inserted with.

    The sequence number is the tie-breaker for orders whose ``created_at``
    compare equal (coarse clocks, or a fixed clock in tests).
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        ids: IdGenerator | None = None,
    ) -> None:
        self._store: dict[str, tuple[int, Order]] = {}
        self._sequence = itertools.count()
        self._clock = clock
        self._ids = ids or IdGenerator()
        self._lock = threading.Lock()

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> list[Order]:
        with self._lock:
            entries = list(self._store.values())
        entries.sort(key=lambda entry: (entry[1].created_at, entry[0]), reverse=True)
        return [_copy(order) for _, order in entries]

    def get(self, order_id: str) -> Order | None:
        with self._lock:
            entry = self._store.get(order_id)
            return _copy(entry[1]) if entry is not None else None

    def create(self, data: OrderInput) -> Order:
        with self._lock:
            order = Order(
                id=self._ids.next_id(),
                customer_name=data.customer_name,
                customer_email=data.customer_email,
                customer_phone=data.customer_phone,
                customer_address=data.customer_address,
                items=list(data.items),
                total=data.total,
                # whatever the caller asked for, new orders start out pending
                status=OrderStatus.PENDING,
                created_at=self._clock(),
            )
            self._store[order.id] = (next(self._sequence), order)
        logger.debug("order_stored", order_id=order.id)
        return _copy(order)

    def update_status(self, order_id: str, status: OrderStatus) -> Order | None:
        with self._lock:
            entry = self._store.get(order_id)
            if entry is None:
                return None
            sequence, existing = entry
            updated = dataclasses.replace(existing, status=status)
            self._store[order_id] = (sequence, updated)
        return _copy(updated)


def _copy(order: Order) -> Order:
    return dataclasses.replace(order, items=list(order.items))
