"""In-memory shared data for the record store."""

from dataclasses import dataclass, field

from biaslens.adapters.id_generators import SequentialIdGenerator
from biaslens.domain.catalog import DEFAULT_TEMPLATES
from biaslens.domain.models import BiasTest, BiasTestResult, BiasTestTemplate, Review


@dataclass(slots=True)
class InMemoryRecordData:
    """Backing collections and id sequences for `InMemoryRecordStore`.

    One instance is built per process by the composition root and handed to
    the store; tests build their own to start from a known state. Lists are
    kept in insertion order, and each collection owns its id sequence.
    """

    tests: list[BiasTest] = field(default_factory=list)
    test_results: list[BiasTestResult] = field(default_factory=list)
    reviews: list[Review] = field(default_factory=list)

    test_ids: SequentialIdGenerator = field(default_factory=SequentialIdGenerator)
    result_ids: SequentialIdGenerator = field(default_factory=SequentialIdGenerator)
    review_ids: SequentialIdGenerator = field(default_factory=SequentialIdGenerator)

    # read-only catalog
    templates: tuple[BiasTestTemplate, ...] = DEFAULT_TEMPLATES
