"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from biaslens.adapters.id_generators import SequentialIdGenerator, UUIDv4Generator
from biaslens.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["sequential", "uuid4"])
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a fresh IdGenerator for each backend.

    Supported params:
      - `"sequential"` → SequentialIdGenerator (record ids)
      - `"uuid4"` → UUIDv4Generator (user ids)
    """

    match request.param:
        case "sequential":
            yield SequentialIdGenerator()
        case "uuid4":
            yield UUIDv4Generator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")


@pytest.fixture
def sequential() -> SequentialIdGenerator:
    return SequentialIdGenerator()
