"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from pos.application.dto import CatalogLineDTO
from pos.application.formatting import format_grams
from pos.domain.repository.product_repository import ProductRepository


class ShowCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[CatalogLineDTO]:
        return [
            CatalogLineDTO(
                name=p.name,
                price=str(p.price),
                available=p.quantity,
                expires_at=(
                    p.expiry.expires_at.strftime("%Y-%m-%d") if p.expiry else None
                ),
                weight=format_grams(p.weight) if p.weight is not None else None,
            )
            for p in self._product_repo.list_all()
        ]
