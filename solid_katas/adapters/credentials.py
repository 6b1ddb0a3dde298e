import hmac

from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError


class PlainCredentialVerifier:
    """Compares the submitted secret with a stored plain-text secret."""

    def verify(self, plain: str, stored: str) -> bool:
        return hmac.compare_digest(plain.encode(), stored.encode())


class Argon2CredentialVerifier:
    """Verifies the submitted secret against a stored argon2 hash."""

    def __init__(self) -> None:
        self.ph = PasswordHasher()

    def hash_secret(self, plain: str) -> str:
        return str(self.ph.hash(plain))

    def verify(self, plain: str, stored: str) -> bool:
        try:
            self.ph.verify(stored, plain)
            return True
        except VerifyMismatchError:
            return False
