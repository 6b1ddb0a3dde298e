"""
Payments component (Single Responsibility).

Card payment split into validator, masker, tax calculator, gateway,
repository and receipt units, sequenced by PaymentCoordinator.
"""

from .component import PaymentCoordinator, build_payment_coordinator, run
from .legacy import PaymentProcessor
from .models import PaymentInput, PaymentResult
from .units import (
    CardMasker,
    PaymentGateway,
    PaymentRepository,
    PaymentValidator,
    ReceiptService,
    TaxCalculator,
)

__all__ = [
    # Coordinator
    "PaymentCoordinator",
    "build_payment_coordinator",
    "run",
    # Models
    "PaymentInput",
    "PaymentResult",
    # Units
    "CardMasker",
    "PaymentGateway",
    "PaymentRepository",
    "PaymentValidator",
    "ReceiptService",
    "TaxCalculator",
    # Before refactor
    "PaymentProcessor",
]
