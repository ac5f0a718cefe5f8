"""Display formatting shared by the application handlers."""

from __future__ import annotations

from decimal import Decimal


def format_grams(weight_kg: Decimal) -> str:
    return f"{weight_kg * 1000:.0f}g"


def format_kilograms(weight_kg: Decimal) -> str:
    return f"{weight_kg:.1f}kg"
