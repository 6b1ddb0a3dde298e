from typing import Protocol


class CredentialVerifierPort(Protocol):
    """Checks a submitted secret against the stored one."""

    def verify(self, plain: str, stored: str) -> bool: ...
