"""
Checkout component (Open/Closed).

Orders priced and paid through discount, shipping and payment strategies.
"""

from .component import (
    Order,
    build_discount_strategies,
    build_order,
    build_payment_strategies,
    build_shipping_strategies,
    run,
)
from .legacy import Order as LegacyOrder
from .models import (
    CheckoutInput,
    CheckoutReceipt,
    CustomerType,
    PaymentType,
    ShippingType,
)
from .ports import DiscountStrategy, PaymentStrategy, ShippingStrategy
from .strategies import (
    CardPayment,
    CashPayment,
    EmployeeDiscount,
    ExpressShipping,
    FlatShipping,
    MethodPayment,
    NoDiscount,
    NoPayment,
    NoShipping,
    PaypalPayment,
    RateDiscount,
    RegularDiscount,
    StandardShipping,
    VipDiscount,
)

__all__ = [
    # Order + factories
    "Order",
    "build_discount_strategies",
    "build_order",
    "build_payment_strategies",
    "build_shipping_strategies",
    "run",
    # Models
    "CheckoutInput",
    "CheckoutReceipt",
    "CustomerType",
    "PaymentType",
    "ShippingType",
    # Ports
    "DiscountStrategy",
    "PaymentStrategy",
    "ShippingStrategy",
    # Strategies
    "CardPayment",
    "CashPayment",
    "EmployeeDiscount",
    "ExpressShipping",
    "FlatShipping",
    "MethodPayment",
    "NoDiscount",
    "NoPayment",
    "NoShipping",
    "PaypalPayment",
    "RateDiscount",
    "RegularDiscount",
    "StandardShipping",
    "VipDiscount",
    # Before refactor
    "LegacyOrder",
]
