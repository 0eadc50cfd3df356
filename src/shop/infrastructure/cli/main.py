"""Command-line entry point: ``shop run`` and ``shop catalog``."""

from __future__ import annotations

import click

from shop.application.list_catalog import ListCatalogHandler
from shop.domain.exceptions import DomainException
from shop.infrastructure.bootstrap import build_catalog, build_session
from shop.infrastructure.cli.console import ClickConsole
from shop.infrastructure.cli.session import display_catalog
from shop.infrastructure.config import Settings, configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override SHOP_LOG_LEVEL (e.g. INFO).")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Console Shop: browse the catalog and check out a cart."""
    settings = Settings.from_env()
    configure_logging(log_level or settings.log_level)
    ctx.obj = settings


@cli.command("run")
@click.pass_obj
def run(settings: Settings) -> None:
    """Start an interactive shopping session."""
    try:
        session = build_session(ClickConsole(settings.prompt), settings)
    except DomainException as exc:
        raise click.ClickException(f"Cannot start shop: {exc}")

    session.run()


@cli.command("catalog")
@click.pass_obj
def catalog(settings: Settings) -> None:
    """Print the catalog and exit."""
    try:
        shop_catalog = build_catalog(settings.currency)
    except DomainException as exc:
        raise click.ClickException(f"Cannot load catalog: {exc}")

    display_catalog(click.echo, ListCatalogHandler(shop_catalog).handle())
