"""Application service: Add To Cart use case.

The cart itself does not know the catalog, so this handler is the place
that guarantees every ID in the cart resolves: the entry is looked up
*before* the cart is touched.
"""

from __future__ import annotations

import logging

from shop.application.dto import CartLineDTO
from shop.domain.model.cart import Cart
from shop.domain.model.catalog import Catalog

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, catalog: Catalog, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart

    def handle(self, product_id: str, quantity: int = 1) -> CartLineDTO:
        """Add *quantity* units of a product to the cart.

        Raises EntryNotFoundError for unknown products and
        InvalidQuantityError for non-positive quantities. Neither
        failure changes the cart.
        """
        entry = self._catalog.get_entry(product_id)
        new_quantity = self._cart.add_item(entry.id, quantity)
        logger.info(
            "Added %d x %s to cart (now %d)", quantity, entry.id, new_quantity
        )

        unit_price = entry.effective_price
        return CartLineDTO(
            product_id=entry.id,
            product_name=entry.name,
            quantity=new_quantity,
            unit_price=str(unit_price),
            line_total=str(unit_price * new_quantity),
        )
