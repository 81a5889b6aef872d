"""JSON-file-backed implementation of OrderRepository.

Orders are stored as ``{"orders": {"<id>": {...}}}`` in insertion order;
position in that mapping breaks ties between equal timestamps.
"""

from __future__ import annotations

import json
import threading
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from storefront.domain.model.order import Order, OrderInput, OrderLineItem, OrderStatus
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.identity import IdGenerator
from storefront.infrastructure.persistence.memory_order_repository import utc_now


class JsonOrderRepository(OrderRepository):

    def __init__(
        self,
        file_path: Path,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._file_path = file_path
        self._clock = clock
        self._lock = threading.Lock()
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> list[Order]:
        with self._lock:
            records = self._load_raw()
        orders = [(seq, self._to_domain(raw)) for seq, raw in enumerate(records.values())]
        orders.sort(key=lambda entry: (entry[1].created_at, entry[0]), reverse=True)
        return [order for _, order in orders]

    def get(self, order_id: str) -> Order | None:
        with self._lock:
            raw = self._load_raw().get(order_id)
        return self._to_domain(raw) if raw is not None else None

    def create(self, data: OrderInput) -> Order:
        with self._lock:
            records = self._load_raw()
            order = Order(
                id=IdGenerator(records).next_id(),
                customer_name=data.customer_name,
                customer_email=data.customer_email,
                customer_phone=data.customer_phone,
                customer_address=data.customer_address,
                items=list(data.items),
                total=data.total,
                status=OrderStatus.PENDING,
                created_at=self._clock(),
            )
            records[order.id] = self._to_raw(order)
            self._persist_raw(records)
        return order

    def update_status(self, order_id: str, status: OrderStatus) -> Order | None:
        with self._lock:
            records = self._load_raw()
            raw = records.get(order_id)
            if raw is None:
                return None
            raw["status"] = status.value
            self._persist_raw(records)
        return self._to_domain(raw)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_name": order.customer_name,
            "customer_email": order.customer_email,
            "customer_phone": order.customer_phone,
            "customer_address": order.customer_address,
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity,
                    "price": item.price,
                }
                for item in order.items
            ],
            "total": order.total,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=i["quantity"],
                price=i["price"],
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            customer_name=raw["customer_name"],
            customer_email=raw["customer_email"],
            customer_phone=raw["customer_phone"],
            customer_address=raw["customer_address"],
            items=items,
            total=raw["total"],
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, dict]:
        data = json.loads(self._file_path.read_text(encoding="utf-8"))
        return data.get("orders", {})

    def _persist_raw(self, records: dict[str, dict]) -> None:
        self._file_path.write_text(
            json.dumps({"orders": records}, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw({})
