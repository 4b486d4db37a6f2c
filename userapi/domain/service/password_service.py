"""Password hashing domain service."""

import secrets

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from userapi.config import PasswordSettings

from .base import Service


class PasswordService(Service):
    """One-way salted password hashing with Argon2id.

    Every hash gets a fresh random salt, so hashing the same password twice
    yields different strings. Verification compares in constant time and
    returns False for anything that is not a matching hash.
    """

    def __init__(self, password_settings: PasswordSettings) -> None:
        """Initialize password service.

        Args:
            password_settings: Argon2 cost parameters
        """
        self._hasher = PasswordHasher(
            time_cost=password_settings.time_cost,
            memory_cost=password_settings.memory_cost,
            parallelism=password_settings.parallelism,
        )
        # Verified against when there is no stored hash, so that a lookup
        # miss costs the same as a wrong password
        self._dummy_hash = self._hasher.hash(secrets.token_urlsafe(16))

    def hash(self, password: str) -> str:
        """Hash a password.

        Args:
            password: Plaintext password

        Returns:
            Encoded Argon2 hash including salt and parameters
        """
        return self._hasher.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against a stored hash.

        Args:
            password: Plaintext password
            password_hash: Stored hash

        Returns:
            True on match; False on mismatch or malformed hash
        """
        try:
            return self._hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            return False

    def verify_dummy(self, password: str) -> None:
        """Spend one verification without a real hash."""
        self.verify(password, self._dummy_hash)
