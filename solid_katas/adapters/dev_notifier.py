"""
Dev Notifier (NotifierPort implementation).

Logs notifications to console instead of sending them.

Key behaviors:
- Logs recipient and a preview of the message
- Stores notifications in memory for test assertions
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SentNotification:
    """Record of a logged notification for test assertions."""

    recipient: str
    message: str


@dataclass
class DevNotifier:
    """
    Notifier that logs instead of sending.

    Implements NotifierPort protocol.
    """

    sent: list[SentNotification] = field(default_factory=list)

    log_level: int = logging.INFO
    preview_length: int = 80  # Max chars of message to log

    def notify(self, recipient: str, message: str) -> None:
        self.sent.append(SentNotification(recipient=recipient, message=message))

        preview = message[: self.preview_length]
        if len(message) > self.preview_length:
            preview += "..."
        logger.log(self.log_level, f"NOTIFY (dev): To={recipient}, Message={preview}")

    # --- Test Helper Methods ---

    def get_last(self) -> SentNotification | None:
        """Get the most recently logged notification."""
        return self.sent[-1] if self.sent else None

    def get_sent_to(self, recipient: str) -> list[SentNotification]:
        return [n for n in self.sent if n.recipient == recipient]

    def clear(self) -> None:
        self.sent.clear()

    @property
    def sent_count(self) -> int:
        return len(self.sent)
