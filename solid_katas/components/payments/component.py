"""
Payments component.

PaymentCoordinator runs validate -> mask -> tax -> charge -> save -> receipt.
It owns the abort policy: nothing side-effecting runs until validation and
masking have passed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from solid_katas.core.ports.charge import ChargePort
from solid_katas.core.ports.notify import NotifierPort
from solid_katas.core.ports.store import RecordStorePort
from solid_katas.domain.errors import InvalidInputError
from solid_katas.rules.models import Rules, default_rules

from .models import PaymentInput, PaymentResult
from .units import (
    CardMasker,
    PaymentGateway,
    PaymentRepository,
    PaymentValidator,
    ReceiptService,
    TaxCalculator,
)

logger = logging.getLogger(__name__)


@dataclass
class PaymentCoordinator:
    gateway: PaymentGateway
    repository: PaymentRepository
    receipts: ReceiptService
    validator: PaymentValidator = field(default_factory=PaymentValidator)
    masker: CardMasker = field(default_factory=CardMasker)
    tax: TaxCalculator = field(default_factory=TaxCalculator)

    def process(
        self, email: str | None, amount: float, card_number: str
    ) -> PaymentResult:
        """
        Take a card payment.

        Raises:
            InvalidInputError: email/amount/card malformed. No charge, save or
                receipt has happened when this is raised.
        """
        try:
            self.validator.validate(email, amount)
            masked_card = self.masker.mask(card_number)
        except InvalidInputError as e:
            logger.warning(f"Payment rejected: field={e.field}, reason={e}")
            raise
        assert email is not None  # narrowed by validate()

        tax = self.tax.calculate(amount)
        total = amount + tax
        logger.debug(f"Payment priced: amount={amount}, tax={tax}, total={total}")

        self.gateway.charge(masked_card, total)
        self.repository.save(email, masked_card, total)
        self.receipts.send(email, total)
        logger.info("Payment completed")

        return PaymentResult(
            email=email, masked_card=masked_card, amount=amount, tax=tax, total=total
        )


def build_payment_coordinator(
    charger: ChargePort,
    store: RecordStorePort,
    notifier: NotifierPort,
    rules: Rules | None = None,
) -> PaymentCoordinator:
    """Wire the units to their collaborators using rules for tax and masking."""
    rules = rules or default_rules()
    return PaymentCoordinator(
        gateway=PaymentGateway(charger),
        repository=PaymentRepository(store),
        receipts=ReceiptService(notifier),
        masker=CardMasker(visible_digits=rules.payments.card_visible_digits),
        tax=TaxCalculator(rate=rules.payments.tax_rate),
    )


def run(inp: PaymentInput, coordinator: PaymentCoordinator) -> PaymentResult:
    return coordinator.process(inp.email, inp.amount, inp.card_number)
