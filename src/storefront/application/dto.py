"""Data Transfer Objects and payload parsing for the service boundary.

Payloads arrive as plain mappings (decoded JSON, CLI options). They are
checked and turned into domain inputs here, once, before any repository
is called. Both the storefront's camelCase keys and snake_case keys are
accepted. ``variants`` and ``items`` may be given either as lists or as the
JSON text older clients send.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderInput, OrderLineItem, OrderStatus
from storefront.domain.model.product import (
    UPDATABLE_FIELDS,
    Product,
    ProductInput,
    ProductVariant,
)
from storefront.domain.model.value_objects import Money

_ALIASES = {
    "imageUrl": "image_url",
    "customerName": "customer_name",
    "customerEmail": "customer_email",
    "customerPhone": "customer_phone",
    "customerAddress": "customer_address",
    "productId": "product_id",
    "productName": "product_name",
}

_LABELS = {
    "image_url": "Image URL",
    "customer_name": "Customer name",
    "customer_email": "Customer email",
    "customer_phone": "Customer phone",
    "customer_address": "Customer address",
    "product_id": "Product ID",
    "product_name": "Product name",
}


def _normalize_keys(payload: Mapping[str, Any]) -> dict[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValidationError("Payload must be an object")
    return {_ALIASES.get(key, key): value for key, value in payload.items()}


def _label(field: str) -> str:
    return _LABELS.get(field, field.replace("_", " ").capitalize())


# ---------------------------------------------------------------------------
# Field checks. Each returns the value exactly as supplied, as text.
# ---------------------------------------------------------------------------


def _text(data: Mapping[str, Any], field: str) -> str:
    value = data.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{_label(field)} is required")
    return value


def _as_text(value: Any) -> Any:
    # Numbers are tolerated and kept as their text form
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _decimal_text(data: Mapping[str, Any], field: str) -> str:
    value = _as_text(data.get(field))
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{_label(field)} is required")
    try:
        Money.of(value)
    except ValidationError as exc:
        raise ValidationError(
            f"{_label(field)} must be a non-negative amount, got {value!r}"
        ) from exc
    return value


def _stock_text(data: Mapping[str, Any], field: str = "stock") -> str:
    value = _as_text(data.get(field))
    if not isinstance(value, str):
        raise ValidationError("Stock is required")
    try:
        level = int(value)
    except ValueError as exc:
        raise ValidationError(f"Stock must be a whole number, got {value!r}") from exc
    if level < 0:
        raise ValidationError("Stock cannot be negative")
    return value


def _sequence(value: Any, field: str) -> list:
    """Accept a list, or the JSON text of one."""
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"{_label(field)} is not valid JSON") from exc
    if not isinstance(value, list):
        raise ValidationError(f"{_label(field)} must be a list")
    return value


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


def parse_variants(value: Any) -> tuple[ProductVariant, ...]:
    variants = []
    for raw in _sequence(value, "variants"):
        entry = _normalize_keys(raw)
        variants.append(
            ProductVariant(
                id=_text(entry, "id"),
                name=_text(entry, "name"),
                price=_decimal_text(entry, "price"),
                size=_text(entry, "size"),
            )
        )
    ids = [v.id for v in variants]
    if len(ids) != len(set(ids)):
        raise ValidationError("Variant IDs must be unique within a product")
    return tuple(variants)


def parse_product_input(payload: Mapping[str, Any]) -> ProductInput:
    """Validate a create-product payload."""
    data = _normalize_keys(payload)
    return ProductInput(
        name=_text(data, "name"),
        description=_text(data, "description"),
        price=_decimal_text(data, "price"),
        category=_text(data, "category"),
        image_url=_text(data, "image_url"),
        stock=_stock_text(data) if data.get("stock") is not None else "100",
        variants=parse_variants(data["variants"]) if data.get("variants") is not None else (),
    )


def parse_product_changes(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a partial update; only the supplied fields are checked.

    Returns the changes keyed by Product attribute name.
    """
    data = _normalize_keys(payload)
    if "id" in data:
        raise ValidationError("Product ID cannot be changed")
    unknown = sorted(set(data) - UPDATABLE_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown product field(s): {', '.join(unknown)}")

    changes: dict[str, Any] = {}
    for field in ("name", "description", "category", "image_url"):
        if field in data:
            changes[field] = _text(data, field)
    if "price" in data:
        changes["price"] = _decimal_text(data, "price")
    if "stock" in data:
        changes["stock"] = _stock_text(data)
    if "variants" in data:
        changes["variants"] = list(parse_variants(data["variants"]))
    return changes


def product_to_dict(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "category": product.category,
        "imageUrl": product.image_url,
        "stock": product.stock,
        "inStock": product.in_stock,
        "variants": [
            {"id": v.id, "name": v.name, "price": v.price, "size": v.size}
            for v in product.variants
        ],
    }


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


def parse_status(value: Any) -> OrderStatus:
    try:
        return OrderStatus(value)
    except ValueError as exc:
        raise ValidationError(
            f"Unknown order status {value!r}; expected one of "
            f"{', '.join(OrderStatus.values())}"
        ) from exc


def parse_line_items(value: Any) -> tuple[OrderLineItem, ...]:
    items = []
    for raw in _sequence(value, "items"):
        entry = _normalize_keys(raw)
        quantity = entry.get("quantity")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError(f"Quantity must be a whole number of at least 1, got {quantity!r}")
        items.append(
            OrderLineItem(
                product_id=_text(entry, "product_id"),
                product_name=_text(entry, "product_name"),
                quantity=quantity,
                price=_decimal_text(entry, "price"),
            )
        )
    if not items:
        raise ValidationError("Order must contain at least one item")
    return tuple(items)


def parse_order_input(payload: Mapping[str, Any]) -> OrderInput:
    """Validate a create-order payload."""
    data = _normalize_keys(payload)
    status = data.get("status")
    if status is not None:
        status = parse_status(status).value
    return OrderInput(
        customer_name=_text(data, "customer_name"),
        customer_email=_text(data, "customer_email"),
        customer_phone=_text(data, "customer_phone"),
        customer_address=_text(data, "customer_address"),
        items=parse_line_items(data.get("items")),
        total=_decimal_text(data, "total"),
        status=status,
    )


def order_to_dict(order: Order) -> dict[str, Any]:
    return {
        "id": order.id,
        "customerName": order.customer_name,
        "customerEmail": order.customer_email,
        "customerPhone": order.customer_phone,
        "customerAddress": order.customer_address,
        "items": [
            {
                "productId": item.product_id,
                "productName": item.product_name,
                "quantity": item.quantity,
                "price": item.price,
            }
            for item in order.items
        ],
        "total": order.total,
        "status": order.status.value,
        "createdAt": order.created_at.isoformat(),
    }


# ---------------------------------------------------------------------------
# Checkout / dashboard outputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CustomerDetails:
    """Input: the contact details collected on the checkout form."""

    name: str
    email: str
    phone: str
    address: str


@dataclass(frozen=True)
class DailySales:
    day: str  # ISO date
    sales: str


@dataclass(frozen=True)
class DashboardDTO:
    """Output: the figures shown on the admin dashboard."""

    total_sales: str
    total_orders: int
    today_orders: int
    recent_orders: list[Order]
    daily_sales: list[DailySales]
