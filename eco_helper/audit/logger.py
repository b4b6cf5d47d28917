"""
Audit Logger

DESIGN DECISION: Every submission to the session is logged.
This provides:
1. Traceability of what was logged and what was rejected
2. Debugging capability when a total looks off
3. A session history the user can inspect

The audit logger:
- Gracefully handles failures (doesn't crash the app if logging fails)
- Supports correlation IDs to trace related events
"""

import logging
from typing import Any, Callable, Optional
from uuid import UUID, uuid4

import structlog

from eco_helper.models.audit import AuditEvent, AuditEventBuilder
from eco_helper.storage import AuditStorageInterface


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "INFO") -> None:
    """
    Set the stdlib level that structlog's filter_by_level checks against.

    structlog only renders; the stdlib root logger decides what gets through.
    """
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger().setLevel(level)


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. The session's audit storage (for the history view), if configured
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for the session trail.
                    If None, only logs locally.
        """
        self._storage = storage
        self._logger = structlog.get_logger("eco_helper.audit")

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Keeps it in storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        log_dict = event.to_log_dict()

        if event.severity.value in ("error", "critical"):
            self._logger.error("audit_event", **log_dict)
        elif event.severity.value == "warning":
            self._logger.warning("audit_event", **log_dict)
        elif event.severity.value == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage is not None:
            try:
                return self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def _emit(self, build: Callable[..., AuditEvent], **fields: Any) -> bool:
        """Build an event and log it. A malformed event is logged, not raised."""
        try:
            event = build(**fields)
        except ValueError as e:
            self._logger.error(
                "audit_event_build_failed",
                builder=build.__name__,
                error=str(e),
            )
            return False
        return self.log(event)

    def log_session_started(
        self,
        session_id: UUID,
        environment: str,
    ) -> None:
        """Log session start."""
        self._emit(
            AuditEventBuilder.session_started,
            session_id=session_id,
            environment=environment,
        )

    def log_activity_logged(
        self,
        activity_id: UUID,
        activity_type: str,
        category: str,
        duration: float,
        correlation_id: UUID,
    ) -> None:
        """Log an accepted activity."""
        self._emit(
            AuditEventBuilder.activity_logged,
            activity_id=activity_id,
            activity_type=activity_type,
            category=category,
            duration=duration,
            correlation_id=correlation_id,
        )

    def log_submission_rejected(
        self,
        submission_id: UUID,
        issues: list[dict],
        correlation_id: UUID,
    ) -> None:
        """Log a rejected submission."""
        self._emit(
            AuditEventBuilder.submission_rejected,
            submission_id=submission_id,
            issues=issues,
            correlation_id=correlation_id,
        )

    def log_error(
        self,
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log an error."""
        self._emit(
            AuditEventBuilder.system_error,
            error_type=error_type,
            error_message=error_message,
            details=details,
            correlation_id=correlation_id,
        )

    def recent_events(self, limit: int = 100) -> list[AuditEvent]:
        """Session trail, newest first. Empty without storage."""
        if self._storage is None:
            return []
        return self._storage.get_recent_events(limit=limit)


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a new user action (e.g., one form submission).
    Pass it through all subsequent operations.
    """
    return uuid4()
