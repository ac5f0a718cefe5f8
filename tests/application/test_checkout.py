"""Integration tests for the Checkout use case.

Uses the in-memory catalog repository — no file I/O.
"""

from datetime import datetime, timedelta, timezone

import pytest

from pos.application.add_to_cart import AddToCartHandler
from pos.application.checkout import CheckoutHandler
from pos.domain.exceptions import EmptyCartError, InsufficientBalanceError
from pos.domain.model.cart import Cart
from pos.domain.model.customer import Customer
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def _setup() -> tuple[CheckoutHandler, AddToCartHandler, InMemoryProductRepository]:
    expires = datetime.now(timezone.utc) + timedelta(days=7)
    repo = InMemoryProductRepository([
        Product.create("Cheese", price="100", quantity=5, expires_at=expires, weight="0.2"),
        Product.create("TV", price="3000", quantity=2),
        Product.create("ScratchCard", price="50", quantity=10),
    ])
    return CheckoutHandler(repo), AddToCartHandler(repo), repo


class TestCheckoutHandler:

    def test_receipt_is_formatted(self):
        checkout, add, _ = _setup()
        cart = Cart()
        add.handle(cart, "cheese", 2)
        add.handle(cart, "SCRATCHCARD", 1)

        dto = checkout.handle(Customer("Alice", Money.of("1000")), cart)

        assert [(i.quantity, i.product_name, i.line_total) for i in dto.items] == [
            (2, "Cheese", "200"),
            (1, "ScratchCard", "50"),
        ]
        assert dto.subtotal == "250"
        assert dto.shipping_fee == "30"
        assert dto.total_paid == "280"
        assert dto.balance == "720"

    def test_manifest_is_formatted(self):
        checkout, add, _ = _setup()
        cart = Cart()
        add.handle(cart, "Cheese", 2)
        add.handle(cart, "ScratchCard", 1)

        dto = checkout.handle(Customer("Alice", Money.of("1000")), cart)

        assert len(dto.manifest.rows) == 1
        row = dto.manifest.rows[0]
        assert (row.label, row.name, row.weight) == ("1x", "Cheese", "400g")
        assert dto.manifest.total_weight == "0.4kg"

    def test_bundled_tv_row(self):
        checkout, add, _ = _setup()
        cart = Cart()
        add.handle(cart, "TV", 1)
        add.handle(cart, "ScratchCard", 1)

        dto = checkout.handle(Customer("Bob", Money.of("5000")), cart)

        assert dto.total_paid == "3080"
        assert [(r.name, r.weight) for r in dto.manifest.rows] == [("TV", "5000g")]
        assert dto.manifest.total_weight == "5.0kg"

    def test_no_manifest_when_nothing_ships(self):
        checkout, add, _ = _setup()
        cart = Cart()
        add.handle(cart, "TV", 1)
        dto = checkout.handle(Customer("Bob", Money.of("5000")), cart)
        assert dto.manifest is None

    def test_shipping_fee_override(self):
        expires = datetime.now(timezone.utc) + timedelta(days=7)
        repo = InMemoryProductRepository([
            Product.create("Cheese", price="100", quantity=5, expires_at=expires, weight="0.2"),
        ])
        cart = Cart()
        AddToCartHandler(repo).handle(cart, "Cheese", 1)
        dto = CheckoutHandler(repo, shipping_fee=Money.of("0")).handle(
            Customer("Bob", Money.of("100")), cart
        )
        assert dto.total_paid == "100"
        assert dto.balance == "0"

    def test_empty_cart_rejected(self):
        checkout, _, _ = _setup()
        with pytest.raises(EmptyCartError):
            checkout.handle(Customer("Bob", Money.of("5000")), Cart())

    def test_insufficient_balance_keeps_stock_deduction(self):
        checkout, add, repo = _setup()
        cart = Cart()
        add.handle(cart, "TV", 2)
        customer = Customer("Bob", Money.of("1000"))

        with pytest.raises(InsufficientBalanceError):
            checkout.handle(customer, cart)

        assert repo.get_by_name("TV").quantity == 0
        assert customer.balance == Money.of("1000")

