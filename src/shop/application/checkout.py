"""Application service: Checkout use case.

Checkout performs no payment. It reports the total and empties the
cart. The total is computed before anything is cleared, so a lookup
failure leaves the cart exactly as it was.
"""

from __future__ import annotations

import logging

from shop.application.dto import ReceiptDTO
from shop.application.show_cart import cart_lines
from shop.domain.exceptions import CartEmptyError
from shop.domain.model.cart import Cart
from shop.domain.model.catalog import Catalog

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, catalog: Catalog, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart

    def handle(self) -> ReceiptDTO:
        if self._cart.is_empty():
            raise CartEmptyError("Your cart is empty. Nothing to check out.")

        lines = cart_lines(self._cart, self._catalog)
        total = self._cart.compute_total(self._catalog)
        receipt = ReceiptDTO(
            lines=lines,
            item_count=sum(line.quantity for line in lines),
            total=str(total),
        )

        self._cart.clear()
        logger.info("Checked out %d item(s), total %s", receipt.item_count, receipt.total)
        return receipt
