"""Cart aggregate — the customer's reservations for one session.

Lines do not copy catalog state. Each line keeps the product's catalog
key, and the checkout procedure resolves it through the catalog
repository, so stock changes made after an item was added are seen at
checkout.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import NotEnoughStockError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class CartLine:
    product_key: str
    quantity: Quantity


class Cart:
    """Ordered cart lines; repeated additions are never merged."""

    def __init__(self) -> None:
        self._lines: list[CartLine] = []

    def add(self, product: Product, quantity: int) -> CartLine:
        """Reserve ``quantity`` units of ``product``.

        Stock is checked against the product as it is right now; the
        check is repeated at checkout.
        """
        qty = Quantity(quantity)
        if qty.value > product.quantity:
            raise NotEnoughStockError(
                f"Not enough stock for {product.name} "
                f"(requested {qty.value}, have {product.quantity})"
            )
        line = CartLine(product_key=product.key, quantity=qty)
        self._lines.append(line)
        return line

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)
