"""Unit tests for the shopping cart."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart, CartLine


class TestCart:

    def test_new_cart_is_empty(self):
        cart = Cart()
        assert cart.is_empty
        assert cart.item_count == 0

    def test_add_accumulates_quantity(self):
        cart = Cart()
        cart.add("p-1", 2)
        cart.add("p-1", 3)
        assert cart.lines == [CartLine(product_id="p-1", quantity=5)]

    def test_variants_are_separate_lines(self):
        cart = Cart()
        cart.add("p-1", 1, variant_id="250g")
        cart.add("p-1", 1, variant_id="1kg")
        assert len(cart.lines) == 2
        assert cart.item_count == 2

    def test_add_non_positive_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Cart().add("p-1", 0)

    def test_set_quantity_to_zero_removes_line(self):
        cart = Cart()
        cart.add("p-1", 2)
        cart.set_quantity("p-1", 0)
        assert cart.is_empty

    def test_set_quantity_replaces(self):
        cart = Cart()
        cart.add("p-1", 2)
        cart.set_quantity("p-1", 7)
        assert cart.item_count == 7

    def test_remove_missing_line_is_harmless(self):
        cart = Cart()
        cart.remove("nope")
        assert cart.is_empty

    def test_clear(self):
        cart = Cart()
        cart.add("p-1")
        cart.add("p-2")
        cart.clear()
        assert cart.is_empty
