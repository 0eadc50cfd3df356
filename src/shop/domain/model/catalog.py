"""Catalog: the set of products available in the shop.

The catalog owns its entries, keyed by product ID. It is populated at
startup and only looked up afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable

from shop.domain.exceptions import DuplicateIdentityError, EntryNotFoundError
from shop.domain.model.catalog_entry import CatalogEntry


class Catalog:
    """Aggregate root for catalog entries.

    Invariants:
    - product IDs are unique; re-adding an ID is an error, never an overwrite
    - ``list_entries()`` returns entries in insertion order
    """

    def __init__(self, entries: Iterable[CatalogEntry] | None = None) -> None:
        self._entries: dict[str, CatalogEntry] = {}
        for entry in entries or []:
            self.add_entry(entry)

    def add_entry(self, entry: CatalogEntry) -> None:
        if entry.id in self._entries:
            raise DuplicateIdentityError(entry.id)
        self._entries[entry.id] = entry

    def get_entry(self, product_id: str) -> CatalogEntry:
        try:
            return self._entries[product_id]
        except KeyError:
            raise EntryNotFoundError(product_id) from None

    def list_entries(self) -> list[CatalogEntry]:
        """Return a snapshot of every entry, in insertion order."""
        return list(self._entries.values())

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
