"""
Payment processing before the Single Responsibility split.

One method validates, masks the card, computes tax, charges, saves and
sends the receipt. Nothing can be reused or tested on its own.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class PaymentProcessor:
    def process(self, user_email: str | None, amount: float, card_number: str) -> float:
        if user_email is None or "@" not in user_email or amount <= 0:
            raise RuntimeError("Invalid data")

        masked_card = card_number[:4] + "****"

        tax = amount * 0.14
        total = amount + tax

        logger.info(f"Charging card: {masked_card} with {total}")
        logger.info("Saving payment to database")
        logger.info(f"Sending receipt to {user_email}")
        logger.info("Payment completed")

        return total
