"""
Charge port interface.

External interface for taking money: a card charge, a cash till entry or a
PayPal capture. Callers pass a funding source label and an amount and get
nothing back; the side effect is fire-and-forget.

Implementations:
1. DevChargeAdapter: Logs the charge and records it in memory (dev/test)
2. A real payment provider adapter (not part of this repository)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ChargeRecord:
    """A charge as seen by the collaborator."""

    source: str  # Masked card, or a payment method label ("cash", "paypal")
    amount: float


class ChargePort(Protocol):
    """Port for taking a payment."""

    def charge(self, source: str, amount: float) -> None:
        """
        Take `amount` from `source`.

        Args:
            source: Funding source. Card numbers must already be masked.
            amount: Final amount, tax and fees included.
        """
        ...
