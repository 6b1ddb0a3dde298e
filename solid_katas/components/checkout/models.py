"""
Checkout component models.

Data models for pricing and paying for an order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# --- Discriminators ---
# Known values; any other string selects the zero-value variant, hence
# fields typed `<Alias> | str`.

CustomerType = Literal["regular", "vip", "employee"]
ShippingType = Literal["standard", "express"]
PaymentType = Literal["cash", "card", "paypal"]


@dataclass(frozen=True)
class CheckoutInput:
    """Input for checking out an order by discriminator labels."""

    price: float
    customer_type: CustomerType | str
    payment_type: PaymentType | str
    shipping_type: ShippingType | str


@dataclass(frozen=True)
class CheckoutReceipt:
    """
    Breakdown of a completed checkout.

    Invariant: total == price - discount + shipping
    """

    price: float
    discount: float
    shipping: float
    total: float
