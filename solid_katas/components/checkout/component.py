"""
Checkout component.

Order composes a discount, a shipping and a payment strategy. Factories map
discriminator labels to variants once, when the order is built.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from solid_katas.core.ports.charge import ChargePort
from solid_katas.rules.models import Rules, default_rules

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

logger = logging.getLogger(__name__)

# --- Variant Registries ---
# Labels configured in rules.yaml without an entry here get the generic
# base variant.

DISCOUNT_TYPES: dict[str, type[RateDiscount]] = {
    "regular": RegularDiscount,
    "vip": VipDiscount,
    "employee": EmployeeDiscount,
}

SHIPPING_TYPES: dict[str, type[FlatShipping]] = {
    "standard": StandardShipping,
    "express": ExpressShipping,
}

PAYMENT_TYPES: dict[str, type[MethodPayment]] = {
    "cash": CashPayment,
    "card": CardPayment,
    "paypal": PaypalPayment,
}


# --- Order ---


@dataclass(frozen=True)
class Order:
    price: float
    discount: DiscountStrategy
    payment: PaymentStrategy
    shipping: ShippingStrategy

    def checkout(self) -> CheckoutReceipt:
        """Price the order and hand the final amount to the payment strategy."""
        discount = self.discount.apply_discount(self.price)
        shipping = self.shipping.calculate_shipping()
        total = self.price - discount + shipping

        logger.debug(
            f"Order.checkout: price={self.price}, discount={discount}, "
            f"shipping={shipping}, total={total}"
        )
        self.payment.pay(total)

        return CheckoutReceipt(
            price=self.price, discount=discount, shipping=shipping, total=total
        )


# --- Factories ---


def build_discount_strategies(rules: Rules | None = None) -> dict[str, DiscountStrategy]:
    rules = rules or default_rules()
    return {
        name: DISCOUNT_TYPES.get(name, RateDiscount)(rate=rate)
        for name, rate in rules.checkout.discount_rates.items()
    }


def build_shipping_strategies(rules: Rules | None = None) -> dict[str, ShippingStrategy]:
    rules = rules or default_rules()
    return {
        name: SHIPPING_TYPES.get(name, FlatShipping)(fee=fee)
        for name, fee in rules.checkout.shipping_fees.items()
    }


def build_payment_strategies(
    charger: ChargePort, rules: Rules | None = None
) -> dict[str, PaymentStrategy]:
    rules = rules or default_rules()
    return {
        name: PAYMENT_TYPES.get(name, MethodPayment)(charger=charger, method=name)
        for name in rules.checkout.payment_methods
    }


def build_order(
    price: float,
    customer_type: CustomerType | str,
    payment_type: PaymentType | str,
    shipping_type: ShippingType | str,
    charger: ChargePort,
    rules: Rules | None = None,
) -> Order:
    """
    Build an Order from discriminator labels.

    Unknown labels select the zero-value variant (NoDiscount, NoShipping,
    NoPayment) rather than failing.

    Args:
        price: Order price before discount and shipping
        customer_type: Customer tier label
        payment_type: Payment method label
        shipping_type: Shipping method label
        charger: Collaborator that takes the payment
        rules: Policy rules; None uses the built-in defaults

    Returns:
        Order holding the selected strategies
    """
    discounts = build_discount_strategies(rules)
    shippings = build_shipping_strategies(rules)
    payments = build_payment_strategies(charger, rules)

    discount = discounts.get(customer_type)
    if discount is None:
        logger.debug(f"No discount for customer_type={customer_type!r}")
        discount = NoDiscount()

    shipping = shippings.get(shipping_type)
    if shipping is None:
        logger.debug(f"No shipping fee for shipping_type={shipping_type!r}")
        shipping = NoShipping()

    payment = payments.get(payment_type)
    if payment is None:
        logger.debug(f"No payment strategy for payment_type={payment_type!r}")
        payment = NoPayment()

    return Order(price=price, discount=discount, payment=payment, shipping=shipping)


# --- Run Function ---


def run(
    inp: CheckoutInput, charger: ChargePort, rules: Rules | None = None
) -> CheckoutReceipt:
    order = build_order(
        inp.price,
        inp.customer_type,
        inp.payment_type,
        inp.shipping_type,
        charger,
        rules,
    )
    return order.checkout()
