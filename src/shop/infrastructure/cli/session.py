"""Interactive shopping session.

Reads one command per line, dispatches it to the matching use case and
prints the result. Domain errors are reported and the loop carries on;
the failing command leaves the catalog and cart unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from shop.application.add_to_cart import AddToCartHandler
from shop.application.checkout import CheckoutHandler
from shop.application.dto import CartDTO, CatalogEntryDTO
from shop.application.list_catalog import ListCatalogHandler
from shop.application.show_cart import ShowCartHandler
from shop.domain.exceptions import CartEmptyError, DomainException
from shop.domain.model.cart import Cart
from shop.domain.model.catalog import Catalog
from shop.infrastructure.cli.console import Console

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
HELP_TEXT = "Available commands: list, add <id> [qty], cart, checkout, exit"


def display_catalog(write: Callable[[str], None], entries: list[CatalogEntryDTO]) -> None:
    """Shared formatting for the catalog table."""
    if not entries:
        write("No products found.")
        return

    write(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Now':>10}")
    write("-" * 49)
    for e in entries:
        now = e.effective_price if e.discounted else ""
        write(f"{e.id:<6} {e.name:<20} {e.price:>10} {now:>10}")


def display_cart(write: Callable[[str], None], cart: CartDTO) -> None:
    """Shared formatting for the cart table."""
    if cart.is_empty:
        write("Your cart is empty.")
        return

    write("Cart contents:")
    write(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    write(f"  {'-'*48}")
    for line in cart.lines:
        write(
            f"  {line.product_name:<20} {line.quantity:>5} {line.unit_price:>10} {line.line_total:>10}"
        )
    write(f"  {'-'*48}")
    write(f"  {'Total':<27} {cart.total:>21}")


class ShopSession:

    def __init__(self, console: Console, catalog: Catalog, cart: Cart) -> None:
        self._console = console
        self._catalog = catalog
        self._cart = cart
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "list": self._list,
            "add": self._add,
            "cart": self._show_cart,
            "checkout": self._checkout,
        }

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def run(self) -> None:
        self._console.write("Welcome to the Console Shop!")
        self._console.write(HELP_TEXT)

        while True:
            line = self._console.read_command()
            if line is None or not self.execute(line):
                self._console.write("Exiting...")
                return

    def execute(self, line: str) -> bool:
        """Run a single command line. Returns False when the session should end."""
        parts = line.split()
        if not parts:
            return True

        action, args = parts[0].lower(), parts[1:]
        if action == EXIT_COMMAND:
            return False

        command = self._commands.get(action)
        if command is None:
            logger.debug("Unrecognised command %r", line)
            self._console.write("Invalid command.")
            return True

        try:
            command(args)
        except DomainException as exc:
            logger.info("Command %r failed: %s", line, exc)
            self._console.write(f"Error: {exc}")
        return True

    # --- Commands -------------------------------------------------------------

    def _list(self, args: list[str]) -> None:
        entries = ListCatalogHandler(self._catalog).handle()
        display_catalog(self._console.write, entries)

    def _add(self, args: list[str]) -> None:
        if len(args) not in (1, 2):
            self._console.write("Usage: add <id> [qty]")
            return

        product_id = args[0]
        quantity = 1
        if len(args) == 2:
            try:
                quantity = int(args[1])
            except ValueError:
                self._console.write(f"Invalid quantity '{args[1]}'.")
                return

        line = AddToCartHandler(self._catalog, self._cart).handle(product_id, quantity)
        self._console.write(
            f"Added to cart: {line.product_name} (x{line.quantity} in cart)"
        )

    def _show_cart(self, args: list[str]) -> None:
        cart = ShowCartHandler(self._catalog, self._cart).handle()
        display_cart(self._console.write, cart)

    def _checkout(self, args: list[str]) -> None:
        try:
            receipt = CheckoutHandler(self._catalog, self._cart).handle()
        except CartEmptyError as exc:
            self._console.write(str(exc))
            return
        self._console.write(
            f"Order placed! Total charged: {receipt.total}. Thank you for your purchase!"
        )
