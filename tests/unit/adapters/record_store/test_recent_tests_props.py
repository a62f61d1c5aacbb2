"""Property tests for the ordering and scoping of recent tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from hypothesis import given, settings
from hypothesis import strategies as st

from biaslens.adapters.record_store import InMemoryRecordData, InMemoryRecordStore

OWNERS = ("alice", "bob", "carol")
BASE = datetime(2025, 1, 1, tzinfo=timezone.utc)


class ScriptedClock:
    """Clock that replays a fixed list of offsets (in minutes) from BASE."""

    def __init__(self, offsets: list[int]):
        self._offsets = iter(offsets)

    def __call__(self) -> datetime:
        return BASE + timedelta(minutes=next(self._offsets))


entries = st.lists(
    st.tuples(st.sampled_from(OWNERS), st.integers(min_value=0, max_value=10_000)),
    max_size=30,
)


@settings(max_examples=100, deadline=None)
@given(entries=entries, owner=st.sampled_from(OWNERS), limit=st.integers(0, 10))
def test_recent_tests_are_bounded_owned_and_sorted(entries, owner, limit):
    """get_recent_tests(owner, n): at most n items, all owned, non-increasing dates."""
    store = InMemoryRecordStore(
        InMemoryRecordData(), clock=ScriptedClock([offset for _, offset in entries])
    )
    for user_id, _ in entries:
        store.add_test("app", 5.0, "Bias Evaluation", user_id)

    recent = store.get_recent_tests(owner, limit)

    owned = sum(1 for user_id, _ in entries if user_id == owner)
    assert len(recent) == min(limit, owned)
    assert all(test.user_id == owner for test in recent)
    assert all(a.date >= b.date for a, b in zip(recent, recent[1:]))


@settings(max_examples=50, deadline=None)
@given(ratings=st.lists(st.integers(min_value=1, max_value=5), max_size=20))
def test_average_rating_is_exact_mean_or_none(ratings):
    store = InMemoryRecordStore(InMemoryRecordData())
    for rating in ratings:
        store.add_review("X", rating, "comment", "alice")

    average = store.get_average_rating("X")

    if ratings:
        assert average == sum(ratings) / len(ratings)
    else:
        assert average is None
