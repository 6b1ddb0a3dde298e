from pydantic import BaseModel, ConfigDict, Field


class FineRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Fine per overdue day, keyed by member type
    daily_rates: dict[str, float] = Field(
        default_factory=lambda: {"regular": 1.0, "vip": 0.5}
    )
    # Member types that never pay a fine
    exempt: list[str] = Field(default_factory=lambda: ["staff"])


class CheckoutRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    discount_rates: dict[str, float] = Field(
        default_factory=lambda: {"regular": 0.05, "vip": 0.20, "employee": 0.50}
    )
    shipping_fees: dict[str, float] = Field(
        default_factory=lambda: {"standard": 20.0, "express": 50.0}
    )
    payment_methods: list[str] = Field(default_factory=lambda: ["cash", "card", "paypal"])


class PaymentRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tax_rate: float = 0.14
    card_visible_digits: int = 4


class EcommerceRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tax_rate: float = 0.14
    password_min_length: int = 6
    credential_secret: str = "123456"
    # argon2 hash of the secret; when set it is used instead of credential_secret
    credential_hash: str | None = None


class Rules(BaseModel):
    fines: FineRules = Field(default_factory=FineRules)
    checkout: CheckoutRules = Field(default_factory=CheckoutRules)
    payments: PaymentRules = Field(default_factory=PaymentRules)
    ecommerce: EcommerceRules = Field(default_factory=EcommerceRules)

    model_config = ConfigDict(extra="forbid")


def default_rules() -> Rules:
    """Rules with the built-in policy numbers (same values as rules.yaml)."""
    return Rules()
