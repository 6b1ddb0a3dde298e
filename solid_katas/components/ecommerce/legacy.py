"""
E-commerce checkout before the Single Responsibility split.

Validation, authentication, pricing, persistence and email live in one
class and share one generic error.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class EcommerceSystem:
    def checkout(
        self, email: str | None, password: str, price: float, quantity: int
    ) -> float:
        if email is None or len(password) < 6 or quantity <= 0:
            raise RuntimeError("Invalid checkout data")

        if not self.authenticate(email, password):
            raise RuntimeError("Authentication failed")

        total = self.calculate_price(price, quantity)
        total += total * 0.14

        self.save_order(email, total)
        self.send_email(email, total)
        return total

    def authenticate(self, email: str, password: str) -> bool:
        return password == "123456"

    def calculate_price(self, price: float, quantity: int) -> float:
        return price * quantity

    def save_order(self, email: str, total: float) -> None:
        logger.info(f"Saved order for {email} with total {total}")

    def send_email(self, email: str, total: float) -> None:
        logger.info(f"Email sent to {email} with total {total}")
