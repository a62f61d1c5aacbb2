"""Interface for ID generators."""

import abc
from typing import Generic, TypeVar

# pylint: disable=too-few-public-methods

T = TypeVar("T")  # Identifier type


class IdGenerator(abc.ABC, Generic[T]):
    """Contract for an ID generator."""

    @abc.abstractmethod
    def new_id(self) -> T:
        """Generate a new unique identifier."""
