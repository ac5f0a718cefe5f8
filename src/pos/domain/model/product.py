"""Product aggregate.

Products live in the shared catalog. A product may carry two independent
capabilities: an expiry instant (perishable goods) and a shipping weight
(goods that travel in the shipment). Instead of one class per combination,
a single record holds both as optional fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money


class ProductKind(Enum):
    NON_EXPIRABLE_NON_SHIPPABLE = "NON_EXPIRABLE_NON_SHIPPABLE"
    EXPIRABLE_NON_SHIPPABLE = "EXPIRABLE_NON_SHIPPABLE"
    NON_EXPIRABLE_SHIPPABLE = "NON_EXPIRABLE_SHIPPABLE"
    EXPIRABLE_SHIPPABLE = "EXPIRABLE_SHIPPABLE"


@dataclass(frozen=True)
class ExpiryInfo:
    expires_at: datetime

    def __post_init__(self) -> None:
        if self.expires_at.tzinfo is None:
            raise ValidationError("Expiry instant must be timezone-aware")


@dataclass(frozen=True)
class ShippingInfo:
    weight: Decimal  # kilograms

    def __post_init__(self) -> None:
        if not isinstance(self.weight, Decimal):
            raise ValidationError(
                f"Weight must be a Decimal, got {type(self.weight).__name__}"
            )
        if not self.weight.is_finite():
            raise ValidationError(f"Shipping weight must be finite, got {self.weight}")
        if self.weight <= 0:
            raise ValidationError("Shipping weight must be greater than zero")


@dataclass
class Product:
    """A product in the catalog.

    ``quantity`` is the live stock counter and the only mutable field;
    the price is fixed once the product is created.
    """

    name: str
    price: Money
    quantity: int
    expiry: ExpiryInfo | None = None
    shipping: ShippingInfo | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.quantity < 0:
            raise ValidationError(
                f"Stock for {self.name} cannot be negative, got {self.quantity}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        name: str,
        price: str | int | float | Decimal,
        quantity: int,
        expires_at: datetime | None = None,
        weight: str | int | float | Decimal | None = None,
    ) -> Product:
        """Build a product, coercing price and weight from plain values."""
        expiry = ExpiryInfo(expires_at) if expires_at is not None else None
        shipping = None
        if weight is not None:
            try:
                shipping = ShippingInfo(Decimal(str(weight)))
            except InvalidOperation as exc:
                raise ValidationError(f"Invalid weight: {weight!r}") from exc
        return Product(
            name=name.strip(),
            price=Money.of(price),
            quantity=quantity,
            expiry=expiry,
            shipping=shipping,
        )

    # --- Capabilities ---------------------------------------------------------

    @property
    def key(self) -> str:
        """Catalog lookup key; names match case-insensitively."""
        return self.name.lower()

    @property
    def is_expirable(self) -> bool:
        return self.expiry is not None

    @property
    def is_shippable(self) -> bool:
        return self.shipping is not None

    @property
    def weight(self) -> Decimal | None:
        return self.shipping.weight if self.shipping is not None else None

    @property
    def kind(self) -> ProductKind:
        if self.is_expirable and self.is_shippable:
            return ProductKind.EXPIRABLE_SHIPPABLE
        if self.is_expirable:
            return ProductKind.EXPIRABLE_NON_SHIPPABLE
        if self.is_shippable:
            return ProductKind.NON_EXPIRABLE_SHIPPABLE
        return ProductKind.NON_EXPIRABLE_NON_SHIPPABLE

    def is_expired(self, now: datetime | None = None) -> bool:
        """True once ``now`` is strictly past the expiry instant.

        Evaluated on every call; never cached.
        """
        if self.expiry is None:
            return False
        if now is None:
            now = datetime.now(timezone.utc)
        return now > self.expiry.expires_at

    # --- Stock ----------------------------------------------------------------

    def reduce_quantity(self, amount: int) -> None:
        """Subtract ``amount`` from stock.

        No bound check: callers validate availability first.
        """
        self.quantity -= amount
