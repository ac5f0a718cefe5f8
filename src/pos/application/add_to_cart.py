"""Application service: Add To Cart use case."""

from __future__ import annotations

import logging

from pos.application.dto import CartLineDTO
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.cart import Cart
from pos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, cart: Cart, product_name: str, quantity: int) -> CartLineDTO:
        """Look up a catalog product by name and reserve it in ``cart``.

        The cart is left unchanged when the product is unknown or the
        requested quantity exceeds current stock.
        """
        product = self._product_repo.get_by_name(product_name.strip())
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_name}'")

        cart.add(product, quantity)
        logger.info("Added %d x %s to cart", quantity, product.name)

        return CartLineDTO(
            product_name=product.name,
            quantity=quantity,
            unit_price=str(product.price),
        )
