"""
Audit Models for Eco Helper

Every submission to the session is logged for audit purposes.
This provides:
1. A trace of what the user logged and what was rejected
2. Debugging information when a figure looks wrong
3. The session history shown on the settings page

DESIGN DECISION: Audit logs are append-only. We never delete or modify them.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

DESCRIPTION_MAX_LENGTH = 500


def _clip(text: str) -> str:
    """Shorten free text to fit the description column."""
    if len(text) <= DESCRIPTION_MAX_LENGTH:
        return text
    return text[: DESCRIPTION_MAX_LENGTH - 3] + "..."


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Session lifecycle
    SESSION_STARTED = "session_started"

    # Submissions
    ACTIVITY_LOGGED = "activity_logged"
    SUBMISSION_REJECTED = "submission_rejected"

    # System events
    SYSTEM_ERROR = "system_error"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    Every submission creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now().astimezone(),
        description="When the event occurred"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'activity', 'submission', 'session')"
    )
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the entity this event relates to"
    )

    # Correlation - for tracking related events
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., all events of one submission)"
    )

    description: str = Field(
        ...,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Human-readable description of what happened"
    )

    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.activity_logged(activity_id, ...)
        event = AuditEventBuilder.submission_rejected(submission_id, ...)
    """

    @staticmethod
    def session_started(
        session_id: UUID,
        environment: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_STARTED,
            entity_type="session",
            entity_id=session_id,
            description="Tracking session started",
            details={
                "environment": environment,
            },
        )

    @staticmethod
    def activity_logged(
        activity_id: UUID,
        activity_type: str,
        category: str,
        duration: float,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ACTIVITY_LOGGED,
            entity_type="activity",
            entity_id=activity_id,
            correlation_id=correlation_id,
            description=_clip(f"Activity logged: {activity_type} ({duration} {category})"),
            details={
                "type": activity_type,
                "category": category,
                "duration": duration,
            },
            is_user_action=True,
        )

    @staticmethod
    def submission_rejected(
        submission_id: UUID,
        issues: list[dict],
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SUBMISSION_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="submission",
            entity_id=submission_id,
            correlation_id=correlation_id,
            description=f"Submission rejected with {len(issues)} issues",
            details={
                "issues": issues,
            },
            is_user_action=True,
        )

    @staticmethod
    def system_error(
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SYSTEM_ERROR,
            severity=AuditSeverity.ERROR,
            description=_clip(f"System error: {error_type}"),
            error_message=error_message,
            details=details or {},
            correlation_id=correlation_id,
        )
