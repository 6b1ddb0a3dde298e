"""
E-commerce component (Single Responsibility).

Login, pricing, order persistence and notification as separate services,
sequenced by EcommerceCheckout.
"""

from .component import EcommerceCheckout, build_ecommerce_checkout, run
from .legacy import EcommerceSystem
from .models import CheckoutInput, OrderConfirmation
from .units import AuthService, NotificationService, OrderService, PricingService

__all__ = [
    # Coordinator
    "EcommerceCheckout",
    "build_ecommerce_checkout",
    "run",
    # Models
    "CheckoutInput",
    "OrderConfirmation",
    # Units
    "AuthService",
    "NotificationService",
    "OrderService",
    "PricingService",
    # Before refactor
    "EcommerceSystem",
]
