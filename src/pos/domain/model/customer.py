"""Customer — a named balance holder that pays at checkout."""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import InsufficientBalanceError, ValidationError
from pos.domain.model.value_objects import Money


@dataclass
class Customer:

    name: str
    balance: Money

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Customer name is required")

    def pay(self, amount: Money) -> None:
        """Debit ``amount`` from the balance."""
        if self.balance < amount:
            raise InsufficientBalanceError(
                f"Insufficient balance for {self.name} "
                f"(need {amount}, have {self.balance})"
            )
        self.balance = self.balance - amount
