"""ID generators for BIASLENS."""

import threading
import uuid

from biaslens.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class SequentialIdGenerator(IdGenerator[int]):
    """Thread-safe generator of strictly increasing integer ids.

    Ids start at ``start`` (1 by default) and grow by one per call.
    `peek` reports the next id without consuming it, and `reset` restarts
    the sequence, which is what clearing a record collection needs.
    """

    def __init__(self, start: int = 1) -> None:
        self._start = start
        self._next = start
        self._lock = threading.Lock()

    def new_id(self) -> int:
        """Return the next id (serialized across threads)."""
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        """Return the id the next `new_id` call will hand out."""
        with self._lock:
            return self._next

    def reset(self) -> None:
        """Restart the sequence at its start value."""
        with self._lock:
            self._next = self._start


class UUIDv4Generator(IdGenerator[str]):
    """UUIDv4 generator.

    UUIDv4 are universally unique identifiers that are randomly generated.
    They are not guaranteed to be sequential or ordered in any way.
    This generator uses Python's built-in `uuid` library to create UUIDv4 identifiers.
    """

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())
