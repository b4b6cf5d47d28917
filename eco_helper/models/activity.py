"""
Core Data Models for Eco Helper

These models define the strict schemas for the activities flowing
through the system. They are designed to:
1. Enforce the store invariants at construction time
2. Provide clear validation error messages
3. Stay immutable once created

DESIGN DECISION: Activities are frozen Pydantic models.
Nothing in the system edits a logged activity; the store only
ever inserts new ones.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class ActivityCategory(str, Enum):
    """
    Top-level resource classification.

    The category decides the unit of an activity's magnitude:
    liters for water, kWh for energy.
    """
    WATER = "water"
    ENERGY = "energy"

    @property
    def unit_symbol(self) -> str:
        """Short unit shown next to a single activity."""
        return "L" if self is ActivityCategory.WATER else "kWh"

    @property
    def unit_name(self) -> str:
        """Long unit shown on the metric cards and form label."""
        return "liters" if self is ActivityCategory.WATER else "kWh"

    @property
    def icon(self) -> str:
        return "💧" if self is ActivityCategory.WATER else "⚡"


# Shown for activity types missing from the catalog
FALLBACK_ACTIVITY_ICON = "🕒"


# =============================================================================
# ACTIVITY TYPE CATALOG
# =============================================================================

class ActivityTypeDescriptor(BaseModel):
    """
    One entry of the static activity type catalog.

    avg_magnitude is only a placeholder hint for the input form.
    It never takes part in any computed total.
    """
    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    icon: str
    avg_magnitude: float = Field(gt=0)


ACTIVITY_TYPES: dict[ActivityCategory, tuple[ActivityTypeDescriptor, ...]] = {
    ActivityCategory.WATER: (
        ActivityTypeDescriptor(value="shower", label="Shower", icon="💧", avg_magnitude=40),
        ActivityTypeDescriptor(value="bath", label="Bath", icon="💧", avg_magnitude=80),
        ActivityTypeDescriptor(value="dishwasher", label="Dishwasher", icon="💧", avg_magnitude=15),
        ActivityTypeDescriptor(value="laundry", label="Laundry", icon="💧", avg_magnitude=50),
        ActivityTypeDescriptor(value="garden", label="Garden Watering", icon="💧", avg_magnitude=30),
    ),
    ActivityCategory.ENERGY: (
        ActivityTypeDescriptor(value="hvac", label="Heating/Cooling", icon="⚡", avg_magnitude=2),
        ActivityTypeDescriptor(value="lighting", label="Lighting", icon="⚡", avg_magnitude=0.5),
        ActivityTypeDescriptor(value="cooking", label="Cooking", icon="⚡", avg_magnitude=1.5),
        ActivityTypeDescriptor(value="tv", label="TV/Entertainment", icon="⚡", avg_magnitude=0.3),
        ActivityTypeDescriptor(value="computer", label="Computer", icon="⚡", avg_magnitude=0.4),
    ),
}


def activity_types_for(category: ActivityCategory) -> tuple[ActivityTypeDescriptor, ...]:
    """Types offered by the form once a category is picked."""
    return ACTIVITY_TYPES[category]


def find_activity_type(value: str) -> Optional[ActivityTypeDescriptor]:
    """Look up a type across both categories. Returns None if unknown."""
    for descriptors in ACTIVITY_TYPES.values():
        for descriptor in descriptors:
            if descriptor.value == value:
                return descriptor
    return None


def category_of_type(value: str) -> Optional[ActivityCategory]:
    """The category a known type is catalogued under."""
    for category, descriptors in ACTIVITY_TYPES.items():
        if any(d.value == value for d in descriptors):
            return category
    return None


# =============================================================================
# ACTIVITY MODELS
# =============================================================================

class ActivityCandidate(BaseModel):
    """
    A validated submission that has not been stored yet.

    CRITICAL: This is the only thing the activity store accepts.
    Constructing one enforces the store's input constraints, so an
    invalid submission can never reach the store.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    type: str = Field(
        ...,
        min_length=1,
        description="Activity type identifier, e.g. 'shower'"
    )
    category: ActivityCategory = Field(
        ...,
        description="Resource category"
    )
    duration: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Magnitude in liters (water) or kWh (energy)"
    )


class Activity(BaseModel):
    """
    One logged activity.

    Created by the store on append and immutable afterwards.
    Unknown types are tolerated; they display under their raw name.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique activity ID"
    )
    type: str = Field(..., min_length=1)
    category: ActivityCategory
    duration: float = Field(..., gt=0, allow_inf_nan=False)
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now().astimezone(),
        description="When the activity was logged"
    )

    @classmethod
    def from_candidate(cls, candidate: ActivityCandidate) -> "Activity":
        return cls(
            type=candidate.type,
            category=candidate.category,
            duration=candidate.duration,
        )

    @property
    def descriptor(self) -> Optional[ActivityTypeDescriptor]:
        return find_activity_type(self.type)

    @property
    def label(self) -> str:
        """Catalog label, falling back to the raw type."""
        descriptor = self.descriptor
        return descriptor.label if descriptor else self.type

    @property
    def icon(self) -> str:
        descriptor = self.descriptor
        return descriptor.icon if descriptor else FALLBACK_ACTIVITY_ICON


# =============================================================================
# SUBMISSION VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single problem found in a submission."""

    field: str = Field(
        ...,
        description="Form field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'invalid_format', 'not_positive')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggested fix if available"
    )


class ValidationResult(BaseModel):
    """
    Result of validating one form submission.

    If is_valid is True, candidate holds the activity ready for the store.
    Otherwise candidate is None and issues explain why.
    """

    submission_id: UUID = Field(
        default_factory=uuid4,
        description="ID of the submission being validated"
    )
    validated_at: datetime = Field(
        default_factory=lambda: datetime.now().astimezone()
    )

    is_valid: bool = Field(
        ...,
        description="Overall validation result"
    )
    candidate: Optional[ActivityCandidate] = None

    issues: list[ValidationIssue] = Field(
        default_factory=list,
        description="All validation issues found"
    )

    # Warnings don't block but should be shown
    warnings: list[str] = Field(
        default_factory=list,
        description="Non-blocking warnings"
    )

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")

    def issues_for(self, field: str) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.field == field]


class SubmissionOutcome(BaseModel):
    """What the session reports back to the form after a submission."""

    accepted: bool
    activity: Optional[Activity] = None
    validation: ValidationResult
    message: str = Field(
        ...,
        description="Notice shown to the user"
    )
