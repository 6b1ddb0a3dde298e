"""
Unit tests for payments component.

Tests:
- Each unit on its own
- Coordinator sequence and result
- Validation failures abort before any charge, save or receipt
- Refactor matches the legacy PaymentProcessor
"""

import logging

import pytest

from solid_katas.adapters.dev_charge import DevChargeAdapter
from solid_katas.adapters.dev_notifier import DevNotifier
from solid_katas.adapters.memory_store import InMemoryRecordStore
from solid_katas.components.payments import (
    CardMasker,
    PaymentCoordinator,
    PaymentInput,
    PaymentProcessor,
    PaymentValidator,
    TaxCalculator,
    build_payment_coordinator,
    run,
)
from solid_katas.core.ports.charge import ChargeRecord
from solid_katas.domain.errors import InvalidInputError
from solid_katas.rules import PaymentRules, Rules

CARD = "4111111111111111"

# --- Fixtures ---


@pytest.fixture
def charger() -> DevChargeAdapter:
    return DevChargeAdapter()


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def notifier() -> DevNotifier:
    return DevNotifier()


@pytest.fixture
def coordinator(
    charger: DevChargeAdapter, store: InMemoryRecordStore, notifier: DevNotifier
) -> PaymentCoordinator:
    return build_payment_coordinator(charger, store, notifier)


def assert_no_side_effects(
    charger: DevChargeAdapter, store: InMemoryRecordStore, notifier: DevNotifier
) -> None:
    assert charger.charge_count == 0
    assert store.record_count == 0
    assert notifier.sent_count == 0


# --- Unit Tests ---


class TestPaymentValidator:
    def test_valid_input_passes(self) -> None:
        PaymentValidator().validate("user@example.com", 10.0)

    @pytest.mark.parametrize("email", [None, "", "   ", "user.example.com"])
    def test_bad_email_rejected(self, email: str | None) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            PaymentValidator().validate(email, 10.0)
        assert exc_info.value.field == "email"

    @pytest.mark.parametrize("amount", [0, -0.01, -100, float("nan")])
    def test_non_positive_amount_rejected(self, amount: float) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            PaymentValidator().validate("user@example.com", amount)
        assert exc_info.value.field == "amount"

    def test_invalid_input_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            PaymentValidator().validate(None, 10.0)


class TestCardMasker:
    def test_keeps_first_four_digits(self) -> None:
        assert CardMasker().mask(CARD) == "4111****"

    def test_exactly_four_digits(self) -> None:
        assert CardMasker().mask("1234") == "1234****"

    def test_too_short_rejected(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            CardMasker().mask("12")
        assert exc_info.value.field == "card_number"


class TestTaxCalculator:
    def test_fourteen_percent(self) -> None:
        assert TaxCalculator().calculate(100) == pytest.approx(14.0)

    def test_custom_rate(self) -> None:
        assert TaxCalculator(rate=0.2).calculate(50) == pytest.approx(10.0)


# --- Coordinator Tests ---


class TestPaymentCoordinator:
    def test_successful_payment(
        self,
        coordinator: PaymentCoordinator,
        charger: DevChargeAdapter,
        store: InMemoryRecordStore,
        notifier: DevNotifier,
    ) -> None:
        result = coordinator.process("user@example.com", 100.0, CARD)

        assert result.masked_card == "4111****"
        assert result.tax == pytest.approx(14.0)
        assert result.total == pytest.approx(114.0)
        assert result.total == result.amount + result.tax

        assert charger.charges == [ChargeRecord("4111****", result.total)]

        saved = store.get_by_kind("payment")
        assert len(saved) == 1
        assert saved[0].data == {
            "email": "user@example.com",
            "card": "4111****",
            "total": result.total,
        }

        last = notifier.get_last()
        assert last is not None
        assert last.recipient == "user@example.com"

    def test_raw_card_never_leaves_coordinator(
        self,
        coordinator: PaymentCoordinator,
        charger: DevChargeAdapter,
        store: InMemoryRecordStore,
    ) -> None:
        coordinator.process("user@example.com", 100.0, CARD)

        assert all(CARD not in c.source for c in charger.charges)
        assert all(CARD not in str(r.data) for r in store.records)

    @pytest.mark.parametrize(
        ("email", "amount", "card"),
        [
            (None, 100.0, CARD),
            ("no-at-sign", 100.0, CARD),
            ("user@example.com", 0, CARD),
            ("user@example.com", -5, CARD),
            ("user@example.com", float("nan"), CARD),
            ("user@example.com", 100.0, "41"),
        ],
    )
    def test_invalid_input_has_no_side_effects(
        self,
        coordinator: PaymentCoordinator,
        charger: DevChargeAdapter,
        store: InMemoryRecordStore,
        notifier: DevNotifier,
        email: str | None,
        amount: float,
        card: str,
    ) -> None:
        with pytest.raises(InvalidInputError):
            coordinator.process(email, amount, card)

        assert_no_side_effects(charger, store, notifier)

    def test_rejection_is_logged(
        self, coordinator: PaymentCoordinator, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING), pytest.raises(InvalidInputError):
            coordinator.process(None, 100.0, CARD)

        assert "Payment rejected" in caplog.text
        assert "field=email" in caplog.text

    def test_rules_drive_tax_and_masking(
        self,
        charger: DevChargeAdapter,
        store: InMemoryRecordStore,
        notifier: DevNotifier,
    ) -> None:
        rules = Rules(payments=PaymentRules(tax_rate=0.5, card_visible_digits=6))
        coordinator = build_payment_coordinator(charger, store, notifier, rules)

        result = coordinator.process("user@example.com", 10.0, CARD)

        assert result.masked_card == "411111****"
        assert result.total == pytest.approx(15.0)

    def test_run(self, coordinator: PaymentCoordinator) -> None:
        result = run(PaymentInput("user@example.com", 50.0, CARD), coordinator)
        assert result.total == pytest.approx(57.0)


class TestMatchesLegacy:
    @pytest.mark.parametrize("amount", [0.01, 1.0, 99.99, 100.0, 2500.0])
    def test_same_total(self, coordinator: PaymentCoordinator, amount: float) -> None:
        legacy_total = PaymentProcessor().process("user@example.com", amount, CARD)
        assert coordinator.process("user@example.com", amount, CARD).total == legacy_total

    def test_legacy_rejects_same_input(self) -> None:
        with pytest.raises(RuntimeError, match="Invalid data"):
            PaymentProcessor().process("no-at-sign", 10.0, CARD)
