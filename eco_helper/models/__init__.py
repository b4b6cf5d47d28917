"""
Data Models Package

This package contains all Pydantic models used in Eco Helper.
All data flowing through the system must conform to these schemas.
"""

from eco_helper.models.activity import (
    ACTIVITY_TYPES,
    Activity,
    ActivityCandidate,
    ActivityCategory,
    ActivityTypeDescriptor,
    SubmissionOutcome,
    ValidationIssue,
    ValidationResult,
    activity_types_for,
    category_of_type,
    find_activity_type,
)
from eco_helper.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)
from eco_helper.models.dashboard import (
    ActivityRow,
    DashboardSnapshot,
    MetricCard,
    TipCard,
    UsageSummary,
)
from eco_helper.models.tip import (
    SHORTER_SHOWERS_TITLE,
    TIP_CATALOG,
    Tip,
    TipCategory,
    TipImpact,
)

__all__ = [
    # Activity models
    "ACTIVITY_TYPES",
    "Activity",
    "ActivityCandidate",
    "ActivityCategory",
    "ActivityTypeDescriptor",
    "SubmissionOutcome",
    "ValidationIssue",
    "ValidationResult",
    "activity_types_for",
    "category_of_type",
    "find_activity_type",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
    # Dashboard models
    "ActivityRow",
    "DashboardSnapshot",
    "MetricCard",
    "TipCard",
    "UsageSummary",
    # Tip models
    "SHORTER_SHOWERS_TITLE",
    "TIP_CATALOG",
    "Tip",
    "TipCategory",
    "TipImpact",
]
