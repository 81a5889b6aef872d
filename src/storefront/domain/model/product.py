"""Product aggregate.

Products live independently of orders. Prices and stock are kept as the
text the administrator entered; they are only interpreted when the store
needs to compute something from them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

KNOWN_CATEGORIES = ("Dairy", "Oils", "Spreads")


@dataclass(frozen=True)
class ProductVariant:
    """A purchasable sub-option of a product (e.g. a pack size)."""

    id: str
    name: str
    price: str
    size: str


@dataclass
class Product:
    """A product in the catalog.

    ``id`` is assigned by the repository and never changes. ``category`` is
    an open vocabulary; ``KNOWN_CATEGORIES`` lists the ones the store ships
    with.
    """

    id: str
    name: str
    description: str
    price: str
    category: str
    image_url: str
    stock: str = "100"
    variants: list[ProductVariant] = field(default_factory=list)

    @property
    def stock_level(self) -> int:
        """Stock as an integer; unparseable stock counts as zero."""
        try:
            return int(self.stock)
        except (TypeError, ValueError):
            return 0

    @property
    def in_stock(self) -> bool:
        return self.stock_level > 0

    def find_variant(self, variant_id: str) -> ProductVariant | None:
        for variant in self.variants:
            if variant.id == variant_id:
                return variant
        return None

    def price_for(self, variant_id: str | None = None) -> str:
        """Price shown (and charged in the cart) for the selected variant.

        Selecting a variant never changes the stored product; with no
        selection, or an unknown variant, the base price applies.
        """
        if variant_id is not None:
            variant = self.find_variant(variant_id)
            if variant is not None:
                return variant.price
        return self.price


@dataclass(frozen=True)
class ProductInput:
    """Everything needed to create a product, minus the id."""

    name: str
    description: str
    price: str
    category: str
    image_url: str
    stock: str = "100"
    variants: tuple[ProductVariant, ...] = ()

    def to_product(self, product_id: str) -> Product:
        return Product(
            id=product_id,
            name=self.name,
            description=self.description,
            price=self.price,
            category=self.category,
            image_url=self.image_url,
            stock=self.stock,
            variants=list(self.variants),
        )


# Fields an update may touch; ``id`` is deliberately absent.
UPDATABLE_FIELDS = frozenset(
    {"name", "description", "price", "category", "image_url", "stock", "variants"}
)
