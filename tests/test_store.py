"""
Tests for the in-memory activity store.
"""

import pytest

from eco_helper.models.activity import Activity, ActivityCandidate, ActivityCategory
from eco_helper.models.audit import AuditEvent, AuditEventType
from eco_helper.storage import (
    ActivityStorageInterface,
    InMemoryActivityStore,
    InMemoryAuditStorage,
    StorageError,
)


def make_candidate(activity_type="shower", category="water", duration=40):
    return ActivityCandidate(type=activity_type, category=category, duration=duration)


class TestInMemoryActivityStore:
    """Tests for append ordering and reads."""

    def test_implements_interface(self):
        assert isinstance(InMemoryActivityStore(), ActivityStorageInterface)

    def test_starts_empty(self):
        store = InMemoryActivityStore()
        assert len(store) == 0
        assert store.activities == ()

    def test_append_returns_activity(self):
        store = InMemoryActivityStore()
        activity = store.append(make_candidate(duration=3.2))

        assert isinstance(activity, Activity)
        assert activity.type == "shower"
        assert activity.category is ActivityCategory.WATER
        assert activity.duration == 3.2

    def test_most_recent_first(self):
        """After append(a1) then append(a2) the sequence is [a2, a1]."""
        store = InMemoryActivityStore()
        a1 = store.append(make_candidate("shower"))
        a2 = store.append(make_candidate("tv", "energy", 0.3))

        assert list(store) == [a2, a1]

    def test_order_follows_submission_not_timestamp(self):
        """Identical timestamps still keep submission order."""
        store = InMemoryActivityStore()
        appended = [store.append(make_candidate(duration=n)) for n in (1, 2, 3)]

        assert [a.duration for a in store.activities] == [3, 2, 1]
        assert store.activities[0] is appended[-1]

    def test_ids_are_unique(self):
        store = InMemoryActivityStore()
        for _ in range(20):
            store.append(make_candidate())
        assert len({a.id for a in store}) == 20

    def test_activities_is_a_snapshot(self):
        store = InMemoryActivityStore()
        store.append(make_candidate())
        before = store.activities
        store.append(make_candidate())

        assert len(before) == 1
        assert len(store.activities) == 2

    def test_recent_limits_results(self):
        store = InMemoryActivityStore()
        for n in range(1, 13):
            store.append(make_candidate(duration=n))

        recent = store.recent(10)
        assert len(recent) == 10
        assert recent[0].duration == 12
        assert recent[-1].duration == 3

    def test_recent_rejects_negative_limit(self):
        with pytest.raises(ValueError):
            InMemoryActivityStore().recent(-1)

    def test_rejects_unvalidated_input(self):
        """Only ActivityCandidate instances reach the store."""
        store = InMemoryActivityStore()
        with pytest.raises(StorageError):
            store.append({"type": "shower", "category": "water", "duration": 40})
        assert len(store) == 0

    def test_listeners_run_after_append(self):
        store = InMemoryActivityStore()
        seen = []

        def listener(activity):
            # The new activity is already visible to readers
            seen.append((activity, store.activities[0]))

        store.add_listener(listener)
        activity = store.append(make_candidate())

        assert seen == [(activity, activity)]


class TestInMemoryAuditStorage:
    """Tests for the session audit trail."""

    def test_recent_events_newest_first(self):
        storage = InMemoryAuditStorage()
        first = AuditEvent(event_type=AuditEventType.SESSION_STARTED, description="start")
        second = AuditEvent(event_type=AuditEventType.ACTIVITY_LOGGED, description="logged")

        assert storage.append_event(first) is True
        assert storage.append_event(second) is True
        assert storage.get_recent_events() == [second, first]
        assert storage.get_recent_events(limit=1) == [second]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
