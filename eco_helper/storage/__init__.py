"""
Storage Package

Provides abstract interfaces and the in-memory implementation
used by the session.
"""

from eco_helper.storage.interface import (
    ActivityListener,
    ActivityStorageInterface,
    AuditStorageInterface,
    StorageError,
)
from eco_helper.storage.memory import (
    InMemoryActivityStore,
    InMemoryAuditStorage,
)

__all__ = [
    # Interfaces
    "ActivityListener",
    "ActivityStorageInterface",
    "AuditStorageInterface",
    # Exceptions
    "StorageError",
    # In-memory implementation
    "InMemoryActivityStore",
    "InMemoryAuditStorage",
]
