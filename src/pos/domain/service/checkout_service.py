"""Domain service: Checkout.

Turns a customer's cart into a receipt. Lines are validated and
committed one at a time in cart order: when line *k* fails, the stock of
lines before it has already been deducted and stays deducted. Payment is
taken after every line has been committed, so an insufficient balance
also leaves the stock deductions in place.

The bundling rule keys off product names (case-insensitive): when a
ScratchCard is bought together with a TV, every TV unit is shipped as an
extra 5 kg package regardless of how the TV itself is catalogued.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable

from pos.domain.exceptions import (
    EmptyCartError,
    EntityNotFoundError,
    InsufficientBalanceError,
    OutOfStockError,
    ProductExpiredError,
)
from pos.domain.model.cart import Cart, CartLine
from pos.domain.model.customer import Customer
from pos.domain.model.product import Product
from pos.domain.model.receipt import Receipt, ReceiptLine, ShippableUnit
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.service.shipping_service import ShippingService

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
SHIPPING_FEE = Money(Decimal("30"))
SCRATCH_CARD_NAME = "scratchcard"
TV_NAME = "tv"
BUNDLED_TV_WEIGHT = Decimal("5.0")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CheckoutService:

    def __init__(
        self,
        product_repo: ProductRepository,
        shipping_fee: Money = SHIPPING_FEE,
        shipping_service: ShippingService | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._shipping_fee = shipping_fee
        self._shipping = shipping_service or ShippingService()
        self._clock = clock

    def checkout(self, customer: Customer, cart: Cart) -> Receipt:
        """Validate, commit and pay for every line of ``cart``."""
        if cart.is_empty:
            raise EmptyCartError("Cart is empty")

        logger.info("Checkout started for %s (%d lines)", customer.name, len(cart))
        now = self._clock()

        subtotal = Money.zero()
        receipt_lines: list[ReceiptLine] = []
        units: list[ShippableUnit] = []
        scratch_card_seen = False
        tv_lines: list[CartLine] = []

        for line in cart.lines:
            product = self._resolve(line)
            qty = line.quantity.value

            if product.is_expired(now):
                logger.warning("Rejected %s: expired", product.name)
                raise ProductExpiredError(f"{product.name} is expired")
            if qty > product.quantity:
                logger.warning(
                    "Rejected %s: requested %d, in stock %d",
                    product.name, qty, product.quantity,
                )
                raise OutOfStockError(
                    f"{product.name} is out of stock "
                    f"(requested {qty}, have {product.quantity})"
                )

            product.reduce_quantity(qty)
            self._product_repo.save(product)

            line_total = product.price * qty
            subtotal = subtotal + line_total
            receipt_lines.append(
                ReceiptLine(quantity=qty, name=product.name, line_total=line_total)
            )

            if product.key == SCRATCH_CARD_NAME:
                scratch_card_seen = True
            if product.is_shippable:
                units.extend(
                    ShippableUnit(name=product.name, weight=product.weight)
                    for _ in range(qty)
                )
            if product.key == TV_NAME:
                tv_lines.append(line)

        # Bundled TV packages go after every regular unit.
        if scratch_card_seen and tv_lines:
            for tv_line in tv_lines:
                units.extend(
                    ShippableUnit(name="TV", weight=BUNDLED_TV_WEIGHT)
                    for _ in range(tv_line.quantity.value)
                )

        total = subtotal + self._shipping_fee
        try:
            customer.pay(total)
        except InsufficientBalanceError:
            logger.warning("Payment of %s failed for %s", total, customer.name)
            raise

        manifest = self._shipping.aggregate(units) if units else None

        logger.info(
            "Checkout completed for %s: paid %s, balance %s",
            customer.name, total, customer.balance,
        )
        return Receipt(
            customer_name=customer.name,
            lines=tuple(receipt_lines),
            subtotal=subtotal,
            shipping_fee=self._shipping_fee,
            total_paid=total,
            balance_after=customer.balance,
            manifest=manifest,
        )

    # --- Internal helpers -----------------------------------------------------

    def _resolve(self, line: CartLine) -> Product:
        product = self._product_repo.get_by_name(line.product_key)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{line.product_key}'")
        return product
