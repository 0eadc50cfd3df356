"""Application service: List Catalog use case (query)."""

from __future__ import annotations

from shop.application.dto import CatalogEntryDTO
from shop.domain.model.catalog import Catalog
from shop.domain.model.catalog_entry import CatalogEntry


class ListCatalogHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(self) -> list[CatalogEntryDTO]:
        return [self._to_dto(entry) for entry in self._catalog.list_entries()]

    @staticmethod
    def _to_dto(entry: CatalogEntry) -> CatalogEntryDTO:
        return CatalogEntryDTO(
            id=entry.id,
            name=entry.name,
            price=str(entry.price),
            effective_price=str(entry.effective_price),
            discounted=entry.has_discount,
        )
