"""Integration tests for the Checkout use case."""

import pytest

from shop.application.checkout import CheckoutHandler
from shop.domain.exceptions import CartEmptyError, EntryNotFoundError
from shop.domain.model.cart import Cart
from shop.domain.model.catalog import Catalog
from shop.domain.model.catalog_entry import CatalogEntry
from shop.domain.model.discount import PercentageDiscount
from shop.domain.model.value_objects import Money


def _setup() -> tuple[CheckoutHandler, Catalog, Cart]:
    laptop = CatalogEntry("1", "Laptop", Money.of("1200"), PercentageDiscount(10))
    mouse = CatalogEntry("2", "Mouse", Money.of("25"))
    catalog = Catalog([laptop, mouse])
    cart = Cart()
    return CheckoutHandler(catalog, cart), catalog, cart


class TestCheckout:

    def test_reports_total_and_clears_cart(self):
        handler, _, cart = _setup()
        cart.add_item("1", 1)
        cart.add_item("2", 2)

        receipt = handler.handle()

        assert receipt.total == "$1130.00"
        assert receipt.item_count == 3
        assert len(receipt.lines) == 2
        assert cart.is_empty()

    def test_empty_cart_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(CartEmptyError, match="Nothing to check out"):
            handler.handle()

    def test_failed_lookup_leaves_cart_intact(self):
        handler, _, cart = _setup()
        cart.add_item("1", 1)
        cart.add_item("ghost", 1)
        with pytest.raises(EntryNotFoundError):
            handler.handle()
        assert cart.items == {"1": 1, "ghost": 1}

    def test_second_checkout_is_empty(self):
        handler, _, cart = _setup()
        cart.add_item("2")
        handler.handle()
        with pytest.raises(CartEmptyError):
            handler.handle()
