"""Application service: placing orders and moving them through their lifecycle.

By default this service behaves like the storefront always has:

- the total submitted at checkout is stored as-is, and
- any status may follow any other status.

Both can be tightened. With ``verify_totals`` the submitted total must
match the line items within ``total_tolerance``, and every line price must
be one the catalog actually offers for that product. With
``strict_transitions`` status changes are checked against
``ALLOWED_TRANSITIONS``.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

import structlog

from storefront.application.dto import parse_order_input, parse_status
from storefront.domain.exceptions import (
    EntityNotFoundError,
    InvalidStatusTransitionError,
    TotalMismatchError,
    ValidationError,
)
from storefront.domain.model.order import Order, OrderInput, OrderStatus, can_transition
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)

DEFAULT_TOTAL_TOLERANCE = Decimal("0.01")


class OrderService:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository | None = None,
        *,
        strict_transitions: bool = False,
        verify_totals: bool = False,
        total_tolerance: Decimal = DEFAULT_TOTAL_TOLERANCE,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._strict_transitions = strict_transitions
        self._verify_totals = verify_totals
        self._total_tolerance = total_tolerance
        # held across read, check and write of a strict status change
        self._transition_lock = threading.Lock()

    # --- Queries --------------------------------------------------------------

    def list_orders(self) -> list[Order]:
        """All orders, newest first."""
        return self._order_repo.list_all()

    def get_order(self, order_id: str) -> Order:
        order = self._order_repo.get(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")
        return order

    # --- Commands -------------------------------------------------------------

    def create_order(self, payload: Mapping[str, Any]) -> Order:
        data = parse_order_input(payload)
        if self._verify_totals:
            self._check_prices(data)
            self._check_total(data)

        order = self._order_repo.create(
            OrderInput(
                customer_name=data.customer_name,
                customer_email=data.customer_email,
                customer_phone=data.customer_phone,
                customer_address=data.customer_address,
                items=data.items,
                total=data.total,
                status=OrderStatus.PENDING.value,
            )
        )
        logger.info(
            "order_created",
            order_id=order.id,
            total=order.total,
            items=len(order.items),
        )
        return order

    def update_status(self, order_id: str, status: str) -> Order:
        requested = parse_status(status)

        if self._strict_transitions:
            with self._transition_lock:
                current = self.get_order(order_id)
                if not can_transition(current.status, requested):
                    logger.warning(
                        "order_transition_rejected",
                        order_id=order_id,
                        current=current.status.value,
                        requested=requested.value,
                    )
                    raise InvalidStatusTransitionError(
                        order_id, current.status.value, requested.value
                    )
                order = self._order_repo.update_status(order_id, requested)
        else:
            order = self._order_repo.update_status(order_id, requested)

        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")
        logger.info("order_status_changed", order_id=order_id, status=requested.value)
        return order

    # --- Verification ---------------------------------------------------------

    def _check_total(self, data: OrderInput) -> None:
        submitted = Money.of(data.total)
        computed = Money.zero()
        for item in data.items:
            computed = computed + item.line_total
        if submitted.difference(computed) > self._total_tolerance:
            logger.warning(
                "order_total_mismatch",
                submitted=data.total,
                computed=computed.to_text(),
            )
            raise TotalMismatchError(
                f"Order total {data.total} does not match items total {computed.to_text()}"
            )

    def _check_prices(self, data: OrderInput) -> None:
        if self._product_repo is None:
            return
        for item in data.items:
            product = self._product_repo.get(item.product_id)
            if product is None:
                raise ValidationError(f"Product '{item.product_name}' is no longer available")
            offered = {Money.of(product.price)} | {Money.of(v.price) for v in product.variants}
            if Money.of(item.price) not in offered:
                raise ValidationError(
                    f"Price {item.price} is not offered for '{item.product_name}'"
                )
