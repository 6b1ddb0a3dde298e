"""
Checkout component ports.

One capability per behaviour family. An Order holds one of each and never
inspects which variant it was given.
"""

from __future__ import annotations

from typing import Protocol


class DiscountStrategy(Protocol):
    """
    Discount for a customer tier.

    Implementations:
    - RegularDiscount: 5%
    - VipDiscount: 20%
    - EmployeeDiscount: 50%
    - NoDiscount: unknown tier
    """

    def apply_discount(self, price: float) -> float:
        """Discount amount (not the discounted price) for `price`."""
        ...


class ShippingStrategy(Protocol):
    """
    Shipping fee for a delivery method.

    Implementations:
    - StandardShipping: flat 20
    - ExpressShipping: flat 50
    - NoShipping: unknown method
    """

    def calculate_shipping(self) -> float: ...


class PaymentStrategy(Protocol):
    """
    Way of paying the final amount.

    Implementations:
    - CashPayment, CardPayment, PaypalPayment: charge through a ChargePort
    - NoPayment: unknown method, nothing is charged
    """

    def pay(self, amount: float) -> None: ...
