"""
E-commerce component models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckoutInput:
    email: str | None
    password: str | None
    price: float
    quantity: int


@dataclass(frozen=True)
class OrderConfirmation:
    """Result of a placed order."""

    email: str
    quantity: int
    total: float  # Tax included
    message: str  # Text sent to the customer
