"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep the session decoupled from where activities live
2. Use the in-memory store for the app and for tests alike
3. Add a persistent backend later without touching business logic

The interface is intentionally small. Activities are appended and read;
there is no update or delete.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterator

from eco_helper.models.activity import Activity, ActivityCandidate
from eco_helper.models.audit import AuditEvent


ActivityListener = Callable[[Activity], None]


class ActivityStorageInterface(ABC):
    """
    Abstract interface for the activity store.

    Entries are kept most recent first. Only append changes the order.
    """

    @abstractmethod
    def append(self, candidate: ActivityCandidate) -> Activity:
        """
        Create an activity from a validated candidate and store it.

        Args:
            candidate: The validated submission

        Returns:
            The stored Activity with its fresh id and timestamp
        """
        pass

    @abstractmethod
    def add_listener(self, listener: ActivityListener) -> None:
        """
        Register a callback run after every successful append.

        Args:
            listener: Called with the newly stored activity
        """
        pass

    @property
    @abstractmethod
    def activities(self) -> tuple[Activity, ...]:
        """
        All stored activities, most recent first.

        Returns a snapshot; later appends do not change it.
        """
        pass

    def recent(self, limit: int) -> list[Activity]:
        """The first `limit` activities, most recent first."""
        if limit < 0:
            raise ValueError("limit must not be negative")
        return list(self.activities[:limit])

    def __len__(self) -> int:
        return len(self.activities)

    def __iter__(self) -> Iterator[Activity]:
        return iter(self.activities)


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Returns:
            True if logged successfully
        """
        pass

    @abstractmethod
    def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        """
        Get the most recent audit events.

        Returns:
            List of recent events (newest first)
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass
