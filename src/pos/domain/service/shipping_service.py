"""Domain service: Shipping aggregation.

Collapses the per-unit shipping projections of a checkout into one
manifest row per product name. Pure read/aggregate step; it never
touches stock or balances.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from pos.domain.model.receipt import ManifestRow, ShipmentManifest, ShippableUnit

logger = logging.getLogger(__name__)


class ShippingService:

    def aggregate(self, units: Iterable[ShippableUnit]) -> ShipmentManifest:
        """Group units by name (first-seen order) and sum their weights."""
        weights: dict[str, Decimal] = {}
        total = Decimal("0")

        for unit in units:
            weights[unit.name] = weights.get(unit.name, Decimal("0")) + unit.weight
            total += unit.weight

        rows = tuple(ManifestRow(name=name, weight=w) for name, w in weights.items())
        logger.debug("Aggregated %d shipment rows, total %skg", len(rows), total)
        return ShipmentManifest(rows=rows, total_weight=total)
