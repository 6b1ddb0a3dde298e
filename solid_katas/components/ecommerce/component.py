"""
E-commerce component.

EcommerceCheckout sequences login -> pricing -> order -> notification.
Login and pricing are side-effect free, so any InvalidInputError or
AuthenticationError is raised before an order is saved or a customer is
notified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from solid_katas.adapters.credentials import (
    Argon2CredentialVerifier,
    PlainCredentialVerifier,
)
from solid_katas.core.ports.credentials import CredentialVerifierPort
from solid_katas.core.ports.notify import NotifierPort
from solid_katas.core.ports.store import RecordStorePort
from solid_katas.domain.errors import AuthenticationError, InvalidInputError
from solid_katas.rules.models import Rules, default_rules

from .models import CheckoutInput, OrderConfirmation
from .units import AuthService, NotificationService, OrderService, PricingService

logger = logging.getLogger(__name__)


@dataclass
class EcommerceCheckout:
    auth: AuthService
    pricing: PricingService
    orders: OrderService
    notifications: NotificationService

    def checkout(
        self,
        email: str | None,
        password: str | None,
        price: float,
        quantity: int,
    ) -> OrderConfirmation:
        """
        Authenticate, price, save and notify.

        Raises:
            InvalidInputError: malformed email, password or quantity
            AuthenticationError: password does not match
        """
        try:
            authenticated = self.auth.login(email, password)
            total = self.pricing.calculate_total(price, quantity)
        except InvalidInputError as e:
            logger.warning(f"Checkout rejected: field={e.field}, reason={e}")
            raise
        assert email is not None

        if not authenticated:
            logger.warning(f"Checkout rejected: bad credentials for {email}")
            raise AuthenticationError(email)

        logger.debug(f"Checkout priced: quantity={quantity}, total={total}")

        self.orders.place_order(email, total)
        message = self.notifications.notify_user(email, total)

        return OrderConfirmation(
            email=email, quantity=quantity, total=total, message=message
        )


def build_ecommerce_checkout(
    store: RecordStorePort,
    notifier: NotifierPort,
    rules: Rules | None = None,
    verifier: CredentialVerifierPort | None = None,
) -> EcommerceCheckout:
    """
    Wire the units from rules.

    With `credential_hash` configured the stored secret is an argon2 hash and
    checked with Argon2CredentialVerifier; otherwise the plain
    `credential_secret` is compared directly.
    """
    rules = rules or default_rules()
    ecommerce = rules.ecommerce

    if ecommerce.credential_hash:
        stored = ecommerce.credential_hash
        verifier = verifier or Argon2CredentialVerifier()
    else:
        stored = ecommerce.credential_secret
        verifier = verifier or PlainCredentialVerifier()

    return EcommerceCheckout(
        auth=AuthService(
            verifier=verifier,
            stored_secret=stored,
            min_password_length=ecommerce.password_min_length,
        ),
        pricing=PricingService(tax_rate=ecommerce.tax_rate),
        orders=OrderService(store),
        notifications=NotificationService(notifier),
    )


def run(inp: CheckoutInput, checkout: EcommerceCheckout) -> OrderConfirmation:
    return checkout.checkout(inp.email, inp.password, inp.price, inp.quantity)
