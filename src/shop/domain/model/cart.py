"""Cart aggregate: accumulates quantities per product ID.

The cart stores only product IDs and quantities. Prices are resolved
against the catalog every time a total is computed, so a price change
in the catalog is reflected in any pending cart.
"""

from __future__ import annotations

from shop.domain.model.catalog import Catalog
from shop.domain.model.value_objects import Money, Quantity


class Cart:
    """Aggregate root for a shopping session's cart.

    Invariants:
    - every stored quantity is >= 1
    - the cart never checks IDs against a catalog; callers resolve the
      entry first (see ``AddToCartHandler``)
    """

    def __init__(self) -> None:
        self._items: dict[str, int] = {}

    @property
    def items(self) -> dict[str, int]:
        """Copy of the ``product_id -> quantity`` mapping, in insertion order."""
        return dict(self._items)

    def add_item(self, product_id: str, quantity: int = 1) -> int:
        """Add *quantity* units of a product and return the new line quantity.

        Raises InvalidQuantityError for zero or negative quantities; the
        cart is left unchanged in that case.
        """
        qty = Quantity(quantity)
        new_quantity = self._items.get(product_id, 0) + qty.value
        self._items[product_id] = new_quantity
        return new_quantity

    def quantity_of(self, product_id: str) -> int:
        return self._items.get(product_id, 0)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def compute_total(self, catalog: Catalog) -> Money:
        """Sum ``effective_price * quantity`` over every line.

        Each line is re-resolved through *catalog*; an ID the catalog no
        longer knows raises EntryNotFoundError instead of being skipped.
        """
        total: Money | None = None
        for product_id, quantity in self._items.items():
            entry = catalog.get_entry(product_id)
            line_total = entry.effective_price * quantity
            total = line_total if total is None else total + line_total
        return total if total is not None else Money.zero()

    def __len__(self) -> int:
        return len(self._items)
