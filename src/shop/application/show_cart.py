"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from shop.application.dto import CartDTO, CartLineDTO
from shop.domain.model.cart import Cart
from shop.domain.model.catalog import Catalog


def cart_lines(cart: Cart, catalog: Catalog) -> list[CartLineDTO]:
    """Resolve every cart line through the catalog for display."""
    lines: list[CartLineDTO] = []
    for product_id, quantity in cart.items.items():
        entry = catalog.get_entry(product_id)
        unit_price = entry.effective_price
        lines.append(
            CartLineDTO(
                product_id=entry.id,
                product_name=entry.name,
                quantity=quantity,
                unit_price=str(unit_price),
                line_total=str(unit_price * quantity),
            )
        )
    return lines


class ShowCartHandler:

    def __init__(self, catalog: Catalog, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart

    def handle(self) -> CartDTO:
        return CartDTO(
            lines=cart_lines(self._cart, self._catalog),
            total=str(self._cart.compute_total(self._catalog)),
        )
