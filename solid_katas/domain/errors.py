"""
Error types shared by all components.

Only malformed primitive input is an error. Unknown discriminators
(member type, shipping method, ...) degrade to zero-value variants instead.
"""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Input failed validation; the enclosing operation is aborted."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class AuthenticationError(Exception):
    """Credentials were well-formed but did not match."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Invalid credentials for {email}")
