"""Application service: Checkout use case.

Runs the domain checkout procedure and maps the resulting receipt and
shipment manifest to display-ready DTOs.
"""

from __future__ import annotations

from pos.application.dto import (
    CheckoutDTO,
    ManifestRowDTO,
    ReceiptLineDTO,
    ShipmentManifestDTO,
)
from pos.application.formatting import format_grams, format_kilograms
from pos.domain.model.cart import Cart
from pos.domain.model.customer import Customer
from pos.domain.model.receipt import Receipt, ShipmentManifest
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.service.checkout_service import SHIPPING_FEE, CheckoutService

MANIFEST_ROW_LABEL = "1x"


class CheckoutHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        shipping_fee: Money = SHIPPING_FEE,
    ) -> None:
        self._service = CheckoutService(product_repo, shipping_fee=shipping_fee)

    def handle(self, customer: Customer, cart: Cart) -> CheckoutDTO:
        receipt = self._service.checkout(customer, cart)
        return self._to_dto(receipt)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(receipt: Receipt) -> CheckoutDTO:
        return CheckoutDTO(
            customer_name=receipt.customer_name,
            items=[
                ReceiptLineDTO(
                    quantity=line.quantity,
                    product_name=line.name,
                    line_total=str(line.line_total),
                )
                for line in receipt.lines
            ],
            subtotal=str(receipt.subtotal),
            shipping_fee=str(receipt.shipping_fee),
            total_paid=str(receipt.total_paid),
            balance=str(receipt.balance_after),
            manifest=CheckoutHandler._manifest_to_dto(receipt.manifest),
        )

    @staticmethod
    def _manifest_to_dto(manifest: ShipmentManifest | None) -> ShipmentManifestDTO | None:
        if manifest is None:
            return None
        return ShipmentManifestDTO(
            rows=[
                ManifestRowDTO(
                    label=MANIFEST_ROW_LABEL,
                    name=row.name,
                    weight=format_grams(row.weight),
                )
                for row in manifest.rows
            ],
            total_weight=format_kilograms(manifest.total_weight),
        )
