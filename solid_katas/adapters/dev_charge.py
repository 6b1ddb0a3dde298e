"""
Dev Charge Adapter (ChargePort implementation).

Logs charges instead of contacting a payment provider.
Used for local development and testing.

Key behaviors:
- Logs each charge at the configured level
- Stores charges in memory for test assertions
- Never raises
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from solid_katas.core.ports.charge import ChargePort, ChargeRecord

logger = logging.getLogger(__name__)


@dataclass
class DevChargeAdapter:
    """
    Dev charge adapter that logs instead of charging.

    Implements ChargePort protocol.
    """

    # In-memory storage for test assertions
    charges: list[ChargeRecord] = field(default_factory=list)

    log_level: int = logging.INFO

    def charge(self, source: str, amount: float) -> None:
        """
        Log a charge instead of executing it.

        Args:
            source: Masked card or payment method label
            amount: Amount to charge
        """
        self.charges.append(ChargeRecord(source=source, amount=amount))
        logger.log(self.log_level, f"CHARGE (dev): source={source}, amount={amount}")

    # --- Test Helper Methods ---

    def get_last_charge(self) -> ChargeRecord | None:
        """Get the most recent charge."""
        return self.charges[-1] if self.charges else None

    def clear(self) -> None:
        """Clear all stored charges (for test isolation)."""
        self.charges.clear()

    @property
    def charge_count(self) -> int:
        return len(self.charges)


def _verify_protocol_compliance() -> None:
    """Verify DevChargeAdapter satisfies ChargePort protocol."""
    adapter: ChargePort = DevChargeAdapter()
    _ = adapter


_verify_protocol_compliance()
