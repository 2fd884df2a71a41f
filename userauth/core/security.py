"""Salted password hashing and verification for authentication."""

from __future__ import annotations

import hmac
import logging
import secrets
from typing import TYPE_CHECKING

import bcrypt

if TYPE_CHECKING:
    from userauth.core.config import Settings

logger = logging.getLogger(__name__)

# Stored passwords look like "<hex salt>.<hex derived key>".
HASH_SEPARATOR = "."
SALT_BYTES = 8
KEY_BYTES = 32
DEFAULT_KDF_ROUNDS = 64

# Min/max lengths for password validation.
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128


class PasswordHasher:
    """
    Derive and check salted password hashes with bcrypt-pbkdf.

    A fresh random salt is drawn for every hash, so hashing the same password
    twice gives two different strings. Plain passwords are never stored or logged.
    """

    def __init__(
        self,
        rounds: int = DEFAULT_KDF_ROUNDS,
        salt_bytes: int = SALT_BYTES,
        key_bytes: int = KEY_BYTES,
    ) -> None:
        if rounds < 1:
            raise ValueError("rounds must be at least 1")
        self.rounds = rounds
        self.salt_bytes = salt_bytes
        self.key_bytes = key_bytes

    @classmethod
    def from_settings(cls, settings: "Settings") -> PasswordHasher:
        return cls(rounds=settings.PASSWORD_KDF_ROUNDS)

    def _derive(self, plain_password: str, salt: bytes) -> bytes:
        return bcrypt.kdf(
            password=plain_password.encode("utf-8"),
            salt=salt,
            desired_key_bytes=self.key_bytes,
            rounds=self.rounds,
            ignore_few_rounds=True,
        )

    def hash(self, plain_password: str) -> str:
        """Hash a plain-text password for storage as "salt.hash"."""
        if not plain_password:
            raise ValueError("Password must not be empty")
        salt = secrets.token_bytes(self.salt_bytes)
        derived = self._derive(plain_password, salt)
        return f"{salt.hex()}{HASH_SEPARATOR}{derived.hex()}"

    def verify(self, plain_password: str, hashed: str) -> bool:
        """
        Check a plain password against a stored "salt.hash" string.

        A malformed stored value is treated as a non-match. The comparison is
        constant-time and returns False when the key lengths differ.
        """
        if not plain_password:
            return False
        parts = (hashed or "").split(HASH_SEPARATOR)
        if len(parts) != 2:
            logger.warning("Stored password hash is malformed: expected one '%s' separator", HASH_SEPARATOR)
            return False
        try:
            salt = bytes.fromhex(parts[0])
            stored_key = bytes.fromhex(parts[1])
        except ValueError:
            logger.warning("Stored password hash is malformed: salt or key is not hex")
            return False
        if not salt:
            logger.warning("Stored password hash is malformed: empty salt")
            return False
        derived = self._derive(plain_password, salt)
        return hmac.compare_digest(derived, stored_key)
