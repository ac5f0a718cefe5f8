"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from pos.application.dto import CatalogLineDTO
from pos.application.show_catalog import ShowCatalogHandler
from pos.infrastructure.bootstrap import product_repository


def display_catalog(lines: list[CatalogLineDTO]) -> None:
    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'Name':<14} {'Price':>8} {'Stock':>6} {'Expires':>11} {'Weight':>8}")
    click.echo("-" * 51)
    for line in lines:
        click.echo(
            f"{line.name:<14} {line.price:>8} {line.available:>6} "
            f"{line.expires_at or '-':>11} {line.weight or '-':>8}"
        )


@click.command("catalog")
def catalog_list() -> None:
    """List all products in the catalog."""
    handler = ShowCatalogHandler(product_repo=product_repository())
    display_catalog(handler.handle())
