"""
Payments component models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentInput:
    """Input for a card payment."""

    email: str | None
    amount: float
    card_number: str


@dataclass(frozen=True)
class PaymentResult:
    """
    Outcome of a completed payment.

    Invariant: total == amount + tax
    """

    email: str
    masked_card: str
    amount: float
    tax: float
    total: float
