"""
Unit tests for the rules loader.

Tests:
- Shipped rules.yaml matches the in-code defaults
- Missing file, bad YAML and schema errors
- Partial files fall back to defaults
"""

from pathlib import Path

import pytest

from solid_katas.adapters.dev_charge import DevChargeAdapter
from solid_katas.components.checkout import build_order
from solid_katas.components.fines import build_fine_policies, calculate_fine
from solid_katas.rules import Rules, RulesError, default_rules, load_rules


class TestShippedRules:
    def test_rules_yaml_matches_defaults(self, rules: Rules) -> None:
        assert rules == default_rules()

    def test_policy_numbers(self, rules: Rules) -> None:
        assert rules.fines.daily_rates == {"regular": 1.0, "vip": 0.5}
        assert rules.fines.exempt == ["staff"]
        assert rules.checkout.discount_rates["employee"] == 0.50
        assert rules.checkout.shipping_fees == {"standard": 20.0, "express": 50.0}
        assert rules.payments.tax_rate == 0.14
        assert rules.ecommerce.password_min_length == 6
        assert rules.ecommerce.credential_hash is None

    def test_components_accept_loaded_rules(self, rules: Rules) -> None:
        assert calculate_fine("vip", 10, build_fine_policies(rules)) == 5.0

        order = build_order(1000, "vip", "card", "express", DevChargeAdapter(), rules)
        assert order.checkout().total == 850.0


class TestLoadRules:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "missing.yaml")

    def test_empty_file_is_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("")

        assert load_rules(path) == default_rules()

    def test_partial_file_keeps_other_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("payments:\n  tax_rate: 0.2\n")

        rules = load_rules(path)

        assert rules.payments.tax_rate == 0.2
        assert rules.payments.card_visible_digits == 4
        assert rules.fines == default_rules().fines

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("fines: [unclosed\n")

        with pytest.raises(RulesError, match="Invalid YAML"):
            load_rules(path)

    def test_wrong_type(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("payments:\n  tax_rate: fourteen\n")

        with pytest.raises(RulesError, match="validation failed"):
            load_rules(path)

    def test_unknown_section_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("shipping:\n  drone: 5\n")

        with pytest.raises(RulesError):
            load_rules(path)

    @pytest.mark.parametrize(
        "content",
        [
            "payments:\n  tax_rat: 0.5\n",
            "fines:\n  daily_rate:\n    regular: 2.0\n",
            "checkout:\n  shipping_fee:\n    express: 10\n",
            "ecommerce:\n  password_min: 8\n",
        ],
    )
    def test_misspelled_key_in_section_rejected(
        self, tmp_path: Path, content: str
    ) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text(content)

        with pytest.raises(RulesError, match="validation failed"):
            load_rules(path)

    def test_rules_error_is_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ValueError):
            load_rules(path)
