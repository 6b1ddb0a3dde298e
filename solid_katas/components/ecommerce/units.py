"""
E-commerce component units.

AuthService, PricingService, OrderService and NotificationService each
own one concern and keep their helpers private to that concern.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from solid_katas.core.ports.credentials import CredentialVerifierPort
from solid_katas.core.ports.notify import NotifierPort
from solid_katas.core.ports.store import RecordStorePort
from solid_katas.domain.errors import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass
class AuthService:
    verifier: CredentialVerifierPort
    stored_secret: str
    min_password_length: int = 6

    def login(self, email: str | None, password: str | None) -> bool:
        """
        Check credentials.

        Raises:
            InvalidInputError: email missing or password too short

        Returns:
            True if the password matches the stored secret
        """
        self._validate(email, password)
        assert password is not None
        return self._check_credentials(password)

    def _validate(self, email: str | None, password: str | None) -> None:
        if not email:
            raise InvalidInputError("Email is required", field="email")
        if password is None or len(password) < self.min_password_length:
            raise InvalidInputError(
                f"Password must be at least {self.min_password_length} characters",
                field="password",
            )

    def _check_credentials(self, password: str) -> bool:
        return self.verifier.verify(password, self.stored_secret)


@dataclass(frozen=True)
class PricingService:
    tax_rate: float = 0.14

    def calculate_total(self, price: float, quantity: int) -> float:
        """Subtotal for `quantity` items plus tax."""
        self._validate(quantity)
        return self.add_tax(self.calculate_subtotal(price, quantity))

    def _validate(self, quantity: int) -> None:
        if quantity <= 0:
            raise InvalidInputError(
                f"Quantity must be positive, got {quantity}", field="quantity"
            )

    def calculate_subtotal(self, price: float, quantity: int) -> float:
        return price * quantity

    def add_tax(self, amount: float) -> float:
        return amount + amount * self.tax_rate


@dataclass
class OrderService:
    store: RecordStorePort

    def place_order(self, email: str, total: float) -> None:
        self._save(email, total)
        self._log(email, total)

    def _save(self, email: str, total: float) -> None:
        self.store.save("order", {"email": email, "total": total})

    def _log(self, email: str, total: float) -> None:
        logger.info(f"Saved order for {email}, total {total}")


@dataclass
class NotificationService:
    notifier: NotifierPort

    def notify_user(self, email: str, total: float) -> str:
        """Send the order total to the customer; returns the message sent."""
        message = self.build_message(total)
        self.notifier.notify(email, message)
        return message

    def build_message(self, total: float) -> str:
        return f"Total payment: {total}"
