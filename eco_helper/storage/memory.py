"""
In-Memory Storage

The only backend Eco Helper ships. State lives as long as the session
that owns the store; nothing is written to disk.
"""

from eco_helper.models.activity import Activity, ActivityCandidate
from eco_helper.models.audit import AuditEvent
from eco_helper.storage.interface import (
    ActivityListener,
    ActivityStorageInterface,
    AuditStorageInterface,
    StorageError,
)


class InMemoryActivityStore(ActivityStorageInterface):
    """
    Session-scoped activity store.

    New activities go to the front, so reads are most recent first.
    Ordering follows submission order, even when two activities
    share the same timestamp.
    """

    def __init__(self):
        self._activities: list[Activity] = []
        self._listeners: list[ActivityListener] = []

    def append(self, candidate: ActivityCandidate) -> Activity:
        if not isinstance(candidate, ActivityCandidate):
            raise StorageError(
                f"Store only accepts validated candidates, got {type(candidate).__name__}"
            )

        activity = Activity.from_candidate(candidate)
        self._activities.insert(0, activity)

        for listener in self._listeners:
            listener(activity)

        return activity

    def add_listener(self, listener: ActivityListener) -> None:
        self._listeners.append(listener)

    @property
    def activities(self) -> tuple[Activity, ...]:
        return tuple(self._activities)


class InMemoryAuditStorage(AuditStorageInterface):
    """Keeps the session's audit trail for the settings page."""

    def __init__(self):
        self._events: list[AuditEvent] = []

    def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        return list(reversed(self._events))[:limit]
