"""Key-value store interface definitions.

A key-value store persists small string values under string keys, the way a
mobile app keeps preferences and session data on the device. Values are
opaque text; callers that store structured data encode it as JSON.
"""

import abc

MAX_KEY_LENGTH = 200


class StorageError(Exception):
    """Base class for key-value storage errors."""


class StorageUnavailableError(StorageError):
    """Raised when the backing storage cannot be read or written."""


class InvalidKeyError(StorageError, ValueError):
    """Raised when a key is empty, too long, or contains forbidden characters."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Invalid storage key {key!r}: {reason}")
        self.key = key


def validate_key(key: str) -> None:
    """Raise `InvalidKeyError` unless ``key`` is usable by every backend.

    Enforced:
    - Non-empty, at most ``MAX_KEY_LENGTH`` characters
    - No path separators, no leading dot
    """
    if not key:
        raise InvalidKeyError(key, "key must not be empty")
    if len(key) > MAX_KEY_LENGTH:
        raise InvalidKeyError(key, f"key longer than {MAX_KEY_LENGTH} characters")
    if "/" in key or "\\" in key:
        raise InvalidKeyError(key, "key must not contain path separators")
    if key.startswith("."):
        raise InvalidKeyError(key, "key must not start with a dot")


class KeyValueStore(abc.ABC):
    """Abstract base class for persistent string-keyed, string-valued storage."""

    @abc.abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if absent.

        Raises:
            InvalidKeyError: If ``key`` is not a valid key.
            StorageUnavailableError: If the storage cannot be read.
        """

    @abc.abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value.

        Raises:
            InvalidKeyError: If ``key`` is not a valid key.
            StorageUnavailableError: If the storage cannot be written.
        """

    @abc.abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove ``key``. Removing a missing key is a no-op.

        Raises:
            InvalidKeyError: If ``key`` is not a valid key.
            StorageUnavailableError: If the storage cannot be written.
        """

    # --- Convenience Methods ---

    def contains(self, key: str) -> bool:
        """Return True if a value is stored under ``key``."""
        return self.get_item(key) is not None
