"""
Checkout strategy variants.

Discount, shipping and payment variants, one class per case.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from solid_katas.core.ports.charge import ChargePort

logger = logging.getLogger(__name__)

# --- Discounts ---


@dataclass(frozen=True)
class RateDiscount:
    """Discount of `rate` times the price."""

    rate: float = 0.0

    def apply_discount(self, price: float) -> float:
        return price * self.rate


@dataclass(frozen=True)
class RegularDiscount(RateDiscount):
    rate: float = 0.05


@dataclass(frozen=True)
class VipDiscount(RateDiscount):
    rate: float = 0.20


@dataclass(frozen=True)
class EmployeeDiscount(RateDiscount):
    rate: float = 0.50


@dataclass(frozen=True)
class NoDiscount:
    def apply_discount(self, price: float) -> float:
        return 0.0


# --- Shipping ---


@dataclass(frozen=True)
class FlatShipping:
    fee: float = 0.0

    def calculate_shipping(self) -> float:
        return self.fee


@dataclass(frozen=True)
class StandardShipping(FlatShipping):
    fee: float = 20.0


@dataclass(frozen=True)
class ExpressShipping(FlatShipping):
    fee: float = 50.0


@dataclass(frozen=True)
class NoShipping:
    def calculate_shipping(self) -> float:
        return 0.0


# --- Payment ---


@dataclass(frozen=True)
class MethodPayment:
    """Pays by handing the amount to a ChargePort under a method label."""

    charger: ChargePort
    method: str = "cash"

    def pay(self, amount: float) -> None:
        logger.info(f"{self.method.capitalize()} paid: {amount}")
        self.charger.charge(self.method, amount)


@dataclass(frozen=True)
class CashPayment(MethodPayment):
    method: str = "cash"


@dataclass(frozen=True)
class CardPayment(MethodPayment):
    method: str = "card"


@dataclass(frozen=True)
class PaypalPayment(MethodPayment):
    method: str = "paypal"


@dataclass(frozen=True)
class NoPayment:
    """Unknown payment method: nothing is charged."""

    def pay(self, amount: float) -> None:
        logger.debug(f"No payment method selected, {amount} not charged")
