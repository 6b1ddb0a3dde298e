"""
Notifier port interface.

Sends a message (receipt, order confirmation) to a recipient identified by
email address.

Implementations:
1. DevNotifier: Logs to console and keeps messages for test assertions
2. An SMTP or provider adapter (not part of this repository)
"""

from __future__ import annotations

from typing import Protocol


class NotifierPort(Protocol):
    """Port for user notifications."""

    def notify(self, recipient: str, message: str) -> None:
        """Deliver `message` to `recipient`."""
        ...
