"""In-memory implementation of ProductRepository.

The catalog lives for one process only. Products are stored by their
lower-cased name, so every lookup of the same key hands back the same
Product instance and stock changes are visible to all callers.
"""

from __future__ import annotations

from pos.domain.model.product import Product
from pos.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.key] = p

    # --- ProductRepository interface ------------------------------------------

    def get_by_name(self, name: str) -> Product | None:
        return self._store.get(name.lower())

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.key] = product
