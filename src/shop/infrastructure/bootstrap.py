"""Composition root: builds the seed catalog and wires the session.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on the domain and application layers.
"""

from __future__ import annotations

from shop.domain.model.cart import Cart
from shop.domain.model.catalog import Catalog
from shop.domain.model.catalog_entry import CatalogEntry
from shop.domain.model.discount import PercentageDiscount
from shop.domain.model.value_objects import Money
from shop.infrastructure.cli.console import Console
from shop.infrastructure.cli.session import ShopSession
from shop.infrastructure.config import Settings


def build_catalog(currency: str = "USD") -> Catalog:
    """Seed catalog used by every session.

    Raises DuplicateIdentityError or NullPolicyError if the seed data
    is inconsistent; the session must not start in that case.
    """
    laptop = CatalogEntry("1", "Laptop", Money.of("1200", currency))
    laptop.attach_discount(PercentageDiscount(10))
    mouse = CatalogEntry("2", "Mouse", Money.of("25", currency))
    return Catalog([laptop, mouse])


def build_session(console: Console, settings: Settings | None = None) -> ShopSession:
    settings = settings or Settings()
    return ShopSession(
        console=console,
        catalog=build_catalog(settings.currency),
        cart=Cart(),
    )
