"""Integration tests for the AddToCart use case."""

import pytest

from pos.application.add_to_cart import AddToCartHandler
from pos.domain.exceptions import EntityNotFoundError, NotEnoughStockError
from pos.domain.model.cart import Cart
from pos.domain.model.product import Product
from pos.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def _setup() -> tuple[AddToCartHandler, InMemoryProductRepository]:
    repo = InMemoryProductRepository([
        Product.create("Cheese", price="100", quantity=5, weight="0.2"),
        Product.create("ScratchCard", price="50", quantity=10),
    ])
    return AddToCartHandler(repo), repo


class TestAddToCart:

    def test_adds_line(self):
        handler, _ = _setup()
        cart = Cart()
        dto = handler.handle(cart, "Cheese", 2)
        assert (dto.product_name, dto.quantity, dto.unit_price) == ("Cheese", 2, "100")
        assert len(cart) == 1

    def test_name_lookup_is_case_insensitive(self):
        handler, _ = _setup()
        cart = Cart()
        dto = handler.handle(cart, "  scratchcard ", 1)
        assert dto.product_name == "ScratchCard"

    def test_unknown_product_rejected(self):
        handler, _ = _setup()
        cart = Cart()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            handler.handle(cart, "Caviar", 1)
        assert cart.is_empty

    def test_not_enough_stock_leaves_cart_unchanged(self):
        handler, _ = _setup()
        cart = Cart()
        handler.handle(cart, "Cheese", 1)
        with pytest.raises(NotEnoughStockError):
            handler.handle(cart, "Cheese", 6)
        assert len(cart) == 1

    def test_does_not_reserve_stock(self):
        handler, repo = _setup()
        handler.handle(Cart(), "Cheese", 5)
        assert repo.get_by_name("Cheese").quantity == 5
