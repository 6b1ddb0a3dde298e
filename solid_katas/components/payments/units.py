"""
Payments component units.

One class per responsibility. None of them calls another; the
PaymentCoordinator sequences them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from solid_katas.core.ports.charge import ChargePort
from solid_katas.core.ports.notify import NotifierPort
from solid_katas.core.ports.store import RecordStorePort
from solid_katas.domain.errors import InvalidInputError

logger = logging.getLogger(__name__)

# --- Pure Units ---


class PaymentValidator:
    """Fails fast on malformed payment input."""

    def validate(self, email: str | None, amount: float) -> None:
        if email is None or not email.strip():
            raise InvalidInputError("Email is required", field="email")
        if "@" not in email:
            raise InvalidInputError(f"Email {email!r} is missing '@'", field="email")
        if not amount > 0:  # also rejects NaN
            raise InvalidInputError(f"Amount must be positive, got {amount}", field="amount")


@dataclass(frozen=True)
class CardMasker:
    visible_digits: int = 4

    def mask(self, card_number: str) -> str:
        """Keep the leading digits, hide the rest."""
        if len(card_number) < self.visible_digits:
            raise InvalidInputError(
                f"Card number must have at least {self.visible_digits} digits",
                field="card_number",
            )
        return card_number[: self.visible_digits] + "****"


@dataclass(frozen=True)
class TaxCalculator:
    rate: float = 0.14

    def calculate(self, amount: float) -> float:
        return amount * self.rate


# --- Side-Effecting Units ---


@dataclass
class PaymentGateway:
    charger: ChargePort

    def charge(self, masked_card: str, total: float) -> None:
        logger.info(f"Charging card: {masked_card} with {total}")
        self.charger.charge(masked_card, total)


@dataclass
class PaymentRepository:
    store: RecordStorePort

    def save(self, email: str, masked_card: str, total: float) -> None:
        logger.info("Saving payment to database")
        self.store.save(
            "payment", {"email": email, "card": masked_card, "total": total}
        )


@dataclass
class ReceiptService:
    notifier: NotifierPort

    def send(self, email: str, total: float) -> None:
        logger.info(f"Sending receipt to {email}")
        self.notifier.notify(email, f"Payment received: {total}")
