"""Demo catalog loaded at start-up.

Covers every capability combination: Cheese and Biscuits expire and
ship, PrepaidCard expires but is not shipped, Mobile ships but never
expires, TV and ScratchCard are neither.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pos.domain.model.product import Product


def seed_products(now: datetime | None = None) -> list[Product]:
    if now is None:
        now = datetime.now(timezone.utc)
    return [
        Product.create("Cheese", price="100", quantity=5,
                       expires_at=now + timedelta(days=14), weight="0.2"),
        Product.create("Biscuits", price="150", quantity=8,
                       expires_at=now + timedelta(days=90), weight="0.7"),
        Product.create("PrepaidCard", price="200", quantity=20,
                       expires_at=now + timedelta(days=365)),
        Product.create("TV", price="3000", quantity=2),
        Product.create("Mobile", price="2500", quantity=4, weight="0.3"),
        Product.create("ScratchCard", price="50", quantity=10),
    ]
