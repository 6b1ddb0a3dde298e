from solid_katas.rules.loader import RulesError, load_rules
from solid_katas.rules.models import (
    CheckoutRules,
    EcommerceRules,
    FineRules,
    PaymentRules,
    Rules,
    default_rules,
)

__all__ = [
    "CheckoutRules",
    "EcommerceRules",
    "FineRules",
    "PaymentRules",
    "Rules",
    "RulesError",
    "default_rules",
    "load_rules",
]
