"""Application service: Checkout use case.

Turns a cart into an order. This is where the line-item snapshot is
taken: each line gets the product's current name and the price of the
selected variant (or the base price).

Steps:
1. Resolve every cart line against the catalog. Lines whose product no
   longer exists are dropped, just as the cart page hides them.
2. Check variant selection, and stock against the quantity summed over
   all lines of a product.
3. Compute the subtotal and submit through the OrderService, which stores
   it as the order total.
"""

from __future__ import annotations

from storefront.application.dto import CustomerDetails
from storefront.application.order_service import OrderService
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class CheckoutHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_service: OrderService,
    ) -> None:
        self._product_repo = product_repo
        self._order_service = order_service

    def handle(self, cart: Cart, customer: CustomerDetails) -> Order:
        items: list[dict] = []
        subtotal = Money.zero()
        # variant lines of one product draw on the same stock
        requested: dict[str, int] = {}

        for line in cart.lines:
            product = self._product_repo.get(line.product_id)
            if product is None:
                continue

            if line.variant_id is not None and product.find_variant(line.variant_id) is None:
                raise ValidationError(
                    f"Unknown option '{line.variant_id}' for {product.name}"
                )
            if not product.in_stock:
                raise ValidationError(f"{product.name} is out of stock")
            requested[product.id] = requested.get(product.id, 0) + line.quantity
            if requested[product.id] > product.stock_level:
                raise ValidationError(
                    f"Only {product.stock_level} of {product.name} available"
                )

            price = product.price_for(line.variant_id)
            subtotal = subtotal + Money.of(price) * line.quantity
            items.append(
                {
                    "productId": product.id,
                    "productName": product.name,
                    "quantity": line.quantity,
                    "price": price,
                }
            )

        if not items:
            raise ValidationError("Cart is empty")

        order = self._order_service.create_order(
            {
                "customerName": customer.name,
                "customerEmail": customer.email,
                "customerPhone": customer.phone,
                "customerAddress": customer.address,
                "items": items,
                "total": subtotal.to_text(),
                "status": "pending",
            }
        )
        cart.clear()
        return order
