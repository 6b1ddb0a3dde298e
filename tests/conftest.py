from pathlib import Path

import pytest

from solid_katas.rules import Rules, load_rules

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def rules_path() -> Path:
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    """Rules loaded from the real rules.yaml at the project root."""
    return load_rules(rules_path)
