"""Interface for password hashing."""

import abc


class PasswordHasher(abc.ABC):
    """Contract for turning passwords into salted, verifiable hashes."""

    @abc.abstractmethod
    def hash(self, password: str) -> str:
        """Return an encoded, salted hash of ``password``."""

    @abc.abstractmethod
    def verify(self, password: str, encoded: str) -> bool:
        """Return True if ``password`` matches the ``encoded`` hash.

        Malformed or foreign hash encodings never match.
        """
