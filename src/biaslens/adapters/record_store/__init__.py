"""Record store adapters."""

from .memory import InMemoryRecordStore
from .memory_store import InMemoryRecordData

__all__ = ["InMemoryRecordData", "InMemoryRecordStore"]
