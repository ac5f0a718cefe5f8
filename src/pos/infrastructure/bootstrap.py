"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pos.domain.model.value_objects import Money
from pos.infrastructure import settings
from pos.infrastructure.persistence.catalog_seed import seed_products
from pos.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def product_repository() -> InMemoryProductRepository:
    """A fresh catalog; stock is not carried between runs."""
    return InMemoryProductRepository(seed_products())


def shipping_fee() -> Money:
    return Money.of(settings.SHIPPING_FEE)
