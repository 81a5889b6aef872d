"""JSON-file-backed implementation of ProductRepository.

File layout::

    {
      "products": {"<id>": {...}, ...},
      "issued_ids": ["<id>", ...]
    }

``products`` keeps insertion order. ``issued_ids`` outlives deletions so a
removed product's ID is never handed out again.
"""

from __future__ import annotations

import dataclasses
import json
import threading
from pathlib import Path
from typing import Any

from storefront.domain.model.product import Product, ProductInput, ProductVariant
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.identity import IdGenerator


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        with self._lock:
            records, _ = self._load_raw()
        return [self._to_domain(raw) for raw in records.values()]

    def get(self, product_id: str) -> Product | None:
        with self._lock:
            records, _ = self._load_raw()
        raw = records.get(product_id)
        return self._to_domain(raw) if raw is not None else None

    def create(self, data: ProductInput) -> Product:
        with self._lock:
            records, issued = self._load_raw()
            ids = IdGenerator(issued)
            product = data.to_product(ids.next_id())
            records[product.id] = self._to_raw(product)
            self._persist_raw(records, ids.issued)
        return product

    def update(self, product_id: str, changes: dict[str, Any]) -> Product | None:
        with self._lock:
            records, issued = self._load_raw()
            raw = records.get(product_id)
            if raw is None:
                return None
            updated = dataclasses.replace(self._to_domain(raw), **changes)
            records[product_id] = self._to_raw(updated)
            self._persist_raw(records, issued)
        return updated

    def delete(self, product_id: str) -> bool:
        with self._lock:
            records, issued = self._load_raw()
            if records.pop(product_id, None) is None:
                return False
            self._persist_raw(records, issued)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": product.price,
            "category": product.category,
            "image_url": product.image_url,
            "stock": product.stock,
            "variants": [
                {"id": v.id, "name": v.name, "price": v.price, "size": v.size}
                for v in product.variants
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw["description"],
            price=raw["price"],
            category=raw["category"],
            image_url=raw["image_url"],
            stock=raw.get("stock", "100"),
            variants=[
                ProductVariant(id=v["id"], name=v["name"], price=v["price"], size=v["size"])
                for v in raw.get("variants", [])
            ],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> tuple[dict[str, dict], set[str]]:
        data = json.loads(self._file_path.read_text(encoding="utf-8"))
        records = data.get("products", {})
        issued = set(data.get("issued_ids", [])) | set(records)
        return records, issued

    def _persist_raw(self, records: dict[str, dict], issued: frozenset[str] | set[str]) -> None:
        data = {"products": records, "issued_ids": sorted(issued)}
        self._file_path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw({}, set())
