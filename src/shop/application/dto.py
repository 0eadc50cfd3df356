"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the session loop and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogEntryDTO:
    """Output: a catalog entry as displayed to the user."""

    id: str
    name: str
    price: str  # formatted, e.g. "$1200.00"
    effective_price: str
    discounted: bool


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart with its grand total."""

    lines: list[CartLineDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: checkout confirmation (informational, no payment)."""

    lines: list[CartLineDTO]
    item_count: int
    total: str
