"""Checkout outcome: receipt lines, totals and the optional shipment manifest."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class ShippableUnit:
    """One physical unit's contribution to the shipment."""

    name: str
    weight: Decimal  # kilograms


@dataclass(frozen=True)
class ManifestRow:
    name: str
    weight: Decimal  # summed over every unit with this name


@dataclass(frozen=True)
class ShipmentManifest:
    rows: tuple[ManifestRow, ...]
    total_weight: Decimal


@dataclass(frozen=True)
class ReceiptLine:
    quantity: int
    name: str
    line_total: Money


@dataclass(frozen=True)
class Receipt:
    customer_name: str
    lines: tuple[ReceiptLine, ...]
    subtotal: Money
    shipping_fee: Money
    total_paid: Money
    balance_after: Money
    manifest: ShipmentManifest | None = None
