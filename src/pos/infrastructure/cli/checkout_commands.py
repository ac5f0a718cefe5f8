"""CLI commands for shopping and checkout."""

from __future__ import annotations

import click

from pos.application.add_to_cart import AddToCartHandler
from pos.application.checkout import CheckoutHandler
from pos.application.dto import CartItemSpec, CheckoutDTO
from pos.application.show_catalog import ShowCatalogHandler
from pos.domain.exceptions import DomainException
from pos.domain.model.cart import Cart
from pos.domain.model.customer import Customer
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository
from pos.infrastructure.bootstrap import product_repository, shipping_fee
from pos.infrastructure.cli.catalog_commands import display_catalog

FINISH_WORDS = ("", "done", "checkout")


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'Cheese:2,ScratchCard:1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        specs.append(CartItemSpec(product_name=name.strip(), quantity=qty))
    return specs


def _make_customer(name: str, balance: str) -> Customer:
    try:
        return Customer(name=name, balance=Money.of(balance))
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _display_checkout(dto: CheckoutDTO) -> None:
    """Shipment notice (when anything ships) followed by the receipt."""
    if dto.manifest is not None:
        click.echo("** Shipment notice **")
        for row in dto.manifest.rows:
            click.echo(f"{row.label} {row.name:<16} {row.weight:>8}")
        click.echo(f"Total package weight {dto.manifest.total_weight}")
        click.echo()

    click.echo("** Checkout receipt **")
    for item in dto.items:
        name = f"{item.quantity}x {item.product_name}"
        click.echo(f"{name:<19} {item.line_total:>8}")
    click.echo("-" * 28)
    click.echo(f"{'Subtotal':<19} {dto.subtotal:>8}")
    click.echo(f"{'Shipping':<19} {dto.shipping_fee:>8}")
    click.echo(f"{'Amount':<19} {dto.total_paid:>8}")
    click.echo(f"{'Balance':<19} {dto.balance:>8}")


def _resolve_shipping_fee() -> Money:
    try:
        return shipping_fee()
    except DomainException as exc:
        raise click.ClickException(f"Bad POS_SHIPPING_FEE setting: {exc}")


def _run_checkout(
    repo: ProductRepository, customer: Customer, cart: Cart, fee: Money
) -> None:
    handler = CheckoutHandler(product_repo=repo, shipping_fee=fee)

    try:
        dto = handler.handle(customer, cart)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_checkout(dto)


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--balance", required=True, help="Customer balance (e.g. 1000).")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
def checkout_command(customer: str, balance: str, items: str) -> None:
    """Buy the given items in one go and print the receipt."""
    specs = _parse_items(items)
    buyer = _make_customer(customer, balance)
    fee = _resolve_shipping_fee()

    repo = product_repository()
    cart = Cart()
    add_handler = AddToCartHandler(product_repo=repo)

    try:
        for spec in specs:
            add_handler.handle(cart, spec.product_name, spec.quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _run_checkout(repo, buyer, cart, fee)


@click.command("shop")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--balance", required=True, help="Customer balance (e.g. 1000).")
def shop_command(customer: str, balance: str) -> None:
    """Interactive session: add items one by one, then check out.

    Enter a blank product name (or 'done') to finish and check out.
    """
    buyer = _make_customer(customer, balance)
    fee = _resolve_shipping_fee()
    repo = product_repository()
    display_catalog(ShowCatalogHandler(product_repo=repo).handle())
    click.echo()

    cart = Cart()
    add_handler = AddToCartHandler(product_repo=repo)

    while True:
        name = click.prompt(
            "Product (blank to check out)", default="", show_default=False
        )
        if name.strip().lower() in FINISH_WORDS:
            break
        quantity = click.prompt("Quantity", type=int)

        try:
            line = add_handler.handle(cart, name, quantity)
        except DomainException as exc:
            click.echo(f"  {exc}")
            continue

        click.echo(f"  Added {line.quantity}x {line.product_name} @ {line.unit_price}")

    click.echo()
    _run_checkout(repo, buyer, cart, fee)
