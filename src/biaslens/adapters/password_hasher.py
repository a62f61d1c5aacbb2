"""PBKDF2-HMAC-SHA256 password hasher.

Encoded hashes look like ``pbkdf2_sha256$<iterations>$<salt>$<hex digest>``.
The iteration count travels with the hash, so raising the default later does
not invalidate existing accounts.
"""

import hashlib
import secrets

from biaslens.interfaces.password_hasher import PasswordHasher

SCHEME = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 200_000
SALT_BYTES = 16


class Pbkdf2PasswordHasher(PasswordHasher):
    """Salted PBKDF2-HMAC-SHA256 hasher with constant-time verification."""

    def __init__(self, iterations: int = DEFAULT_ITERATIONS) -> None:
        if iterations < 1:
            raise ValueError("iterations must be >= 1")
        self._iterations = iterations

    def hash(self, password: str) -> str:
        salt = secrets.token_hex(SALT_BYTES)
        digest = self._derive(password, salt, self._iterations)
        return f"{SCHEME}${self._iterations}${salt}${digest}"

    def verify(self, password: str, encoded: str) -> bool:
        try:
            scheme, iterations_str, salt, expected = encoded.split("$")
            iterations = int(iterations_str)
        except (AttributeError, ValueError):
            return False
        if scheme != SCHEME or iterations < 1:
            return False
        actual = self._derive(password, salt, iterations)
        return secrets.compare_digest(actual, expected)

    @staticmethod
    def _derive(password: str, salt: str, iterations: int) -> str:
        return hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations
        ).hex()
