"""Shopping cart: what a shopper intends to buy before checkout.

The cart only remembers product references and quantities. Names and
prices are resolved against the catalog at checkout, which is when the
order snapshot is taken.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError


@dataclass(frozen=True)
class CartLine:
    product_id: str
    quantity: int
    variant_id: str | None = None


@dataclass
class Cart:
    """Quantities keyed by ``(product_id, variant_id)``.

    Setting a quantity to zero or less removes the line, mirroring the
    storefront's minus button.
    """

    _lines: dict[tuple[str, str | None], int] = field(default_factory=dict)

    def add(self, product_id: str, quantity: int = 1, variant_id: str | None = None) -> None:
        if quantity <= 0:
            raise ValidationError("Quantity to add must be positive")
        key = (product_id, variant_id)
        self._lines[key] = self._lines.get(key, 0) + quantity

    def set_quantity(
        self, product_id: str, quantity: int, variant_id: str | None = None
    ) -> None:
        key = (product_id, variant_id)
        if quantity <= 0:
            self._lines.pop(key, None)
        else:
            self._lines[key] = quantity

    def remove(self, product_id: str, variant_id: str | None = None) -> None:
        self._lines.pop((product_id, variant_id), None)

    def clear(self) -> None:
        self._lines.clear()

    @property
    def lines(self) -> list[CartLine]:
        return [
            CartLine(product_id=product_id, quantity=qty, variant_id=variant_id)
            for (product_id, variant_id), qty in self._lines.items()
        ]

    @property
    def item_count(self) -> int:
        return sum(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines
