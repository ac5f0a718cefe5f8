"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Amounts are already
formatted for display: money in whole units, manifest weights in grams
and the package total in kilograms.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a line that was just added to the cart."""

    product_name: str
    quantity: int
    unit_price: str


@dataclass(frozen=True)
class CatalogLineDTO:
    name: str
    price: str
    available: int
    expires_at: str | None  # e.g. "2026-11-01"
    weight: str | None  # e.g. "200g"


@dataclass(frozen=True)
class ManifestRowDTO:
    """Output: one shipment notice row.

    ``label`` is always "1x"; the row weight is the summed weight of
    every unit shipped under this name.
    """

    label: str
    name: str
    weight: str  # grams, e.g. "400g"


@dataclass(frozen=True)
class ShipmentManifestDTO:
    rows: list[ManifestRowDTO]
    total_weight: str  # kilograms, e.g. "0.4kg"


@dataclass(frozen=True)
class ReceiptLineDTO:
    quantity: int
    product_name: str
    line_total: str


@dataclass(frozen=True)
class CheckoutDTO:
    """Output: a completed checkout as displayed to the user."""

    customer_name: str
    items: list[ReceiptLineDTO]
    subtotal: str
    shipping_fee: str
    total_paid: str
    balance: str
    manifest: ShipmentManifestDTO | None
