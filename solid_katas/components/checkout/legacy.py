"""
Order checkout before the Open/Closed refactor.

Discount, shipping and payment are each an if/elif chain on a string, so a
new customer tier, shipping method or payment method edits this class.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class Order:
    def __init__(
        self, price: float, payment_type: str, customer_type: str, shipping_type: str
    ) -> None:
        self.price = price
        self.payment_type = payment_type
        self.customer_type = customer_type
        self.shipping_type = shipping_type

    def calculate_discount(self) -> float:
        if self.customer_type == "regular":
            return self.price * 0.05
        elif self.customer_type == "vip":
            return self.price * 0.20
        elif self.customer_type == "employee":
            return self.price * 0.50

        return 0.0

    def calculate_shipping(self) -> float:
        if self.shipping_type == "standard":
            return 20.0
        elif self.shipping_type == "express":
            return 50.0

        return 0.0

    def process_payment(self, amount: float) -> None:
        if self.payment_type == "cash":
            logger.info(f"Cash paid: {amount}")
        elif self.payment_type == "card":
            logger.info(f"Card paid: {amount}")
        elif self.payment_type == "paypal":
            logger.info(f"Paypal paid: {amount}")

    def checkout(self) -> float:
        discount = self.calculate_discount()
        shipping = self.calculate_shipping()
        final_price = self.price - discount + shipping

        self.process_payment(final_price)
        return final_price
