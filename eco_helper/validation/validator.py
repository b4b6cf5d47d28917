"""
Submission Validation

DESIGN DECISION: The form hands us raw values (strings from the
inputs, possibly empty). This module is the only place that turns
them into an ActivityCandidate.

ERRORS (block the submission):
- Category missing or not water/energy
- Activity type empty or unselected
- Magnitude empty, not a number, not finite, or not positive

WARNINGS (shown, but the activity is still logged):
- Activity type not in the catalog
- Activity type catalogued under the other category

IMPORTANT: Validation NEVER silently fixes issues and never touches
the store. A rejected submission leaves the session exactly as it was.
"""

import math
from typing import Optional, Union

from eco_helper.models.activity import (
    ActivityCandidate,
    ActivityCategory,
    ValidationIssue,
    ValidationResult,
    category_of_type,
)


RawMagnitude = Union[str, int, float, None]


class SubmissionValidator:
    """Validates one activity form submission."""

    def _parse_category(
        self,
        category: Union[ActivityCategory, str, None],
    ) -> tuple[Optional[ActivityCategory], list[ValidationIssue]]:
        if category is None or (isinstance(category, str) and not category.strip()):
            return None, [ValidationIssue(
                field="category",
                issue_type="missing",
                message="Category is required",
                severity="error",
                suggested_fix="Choose water or energy",
            )]

        value = category.strip().lower() if isinstance(category, str) else category
        try:
            return ActivityCategory(value), []
        except ValueError:
            return None, [ValidationIssue(
                field="category",
                issue_type="invalid_value",
                message=f"Unknown category: {category}",
                severity="error",
                suggested_fix="Choose water or energy",
            )]

    def _parse_type(
        self,
        activity_type: Optional[str],
    ) -> tuple[Optional[str], list[ValidationIssue]]:
        value = (activity_type or "").strip()
        if not value:
            return None, [ValidationIssue(
                field="type",
                issue_type="missing",
                message="Activity type is required",
                severity="error",
                suggested_fix="Select an activity from the list",
            )]
        return value, []

    def _parse_duration(
        self,
        duration: RawMagnitude,
    ) -> tuple[Optional[float], list[ValidationIssue]]:
        if duration is None or (isinstance(duration, str) and not duration.strip()):
            return None, [ValidationIssue(
                field="duration",
                issue_type="missing",
                message="Amount is required",
                severity="error",
                suggested_fix="Enter liters for water or kWh for energy",
            )]

        if isinstance(duration, bool):
            value = None
        elif isinstance(duration, (int, float)):
            try:
                value = float(duration)
            except OverflowError:
                value = None
        else:
            try:
                value = float(str(duration).strip())
            except (ValueError, OverflowError):
                value = None

        if value is None:
            return None, [ValidationIssue(
                field="duration",
                issue_type="invalid_format",
                message=f"'{duration}' is not a number",
                severity="error",
                suggested_fix="Enter a number such as 3.2",
            )]

        if not math.isfinite(value):
            return None, [ValidationIssue(
                field="duration",
                issue_type="not_finite",
                message="Amount must be a finite number",
                severity="error",
                suggested_fix="Enter a number such as 3.2",
            )]

        if value <= 0:
            return None, [ValidationIssue(
                field="duration",
                issue_type="not_positive",
                message=f"Amount must be greater than zero (got {duration})",
                severity="error",
                suggested_fix="Enter a positive amount",
            )]

        return value, []

    def _check_catalog(
        self,
        category: ActivityCategory,
        activity_type: str,
    ) -> list[ValidationIssue]:
        """Catalog mismatches are tolerated but flagged."""
        catalogued = category_of_type(activity_type)

        if catalogued is None:
            return [ValidationIssue(
                field="type",
                issue_type="unknown_type",
                message=f"'{activity_type}' is not a known activity; it will be shown as entered",
                severity="warning",
            )]

        if catalogued is not category:
            return [ValidationIssue(
                field="type",
                issue_type="category_mismatch",
                message=(
                    f"'{activity_type}' is a {catalogued.value} activity "
                    f"but was logged under {category.value}"
                ),
                severity="warning",
                suggested_fix="Check the category before logging",
            )]

        return []

    def validate(
        self,
        category: Union[ActivityCategory, str, None],
        activity_type: Optional[str],
        duration: RawMagnitude,
    ) -> ValidationResult:
        """
        Validate raw form input.

        Args:
            category: 'water' / 'energy' or an ActivityCategory
            activity_type: Selected type identifier
            duration: Magnitude as typed into the form

        Returns:
            ValidationResult; candidate is set only when valid
        """
        parsed_category, issues = self._parse_category(category)

        parsed_type, type_issues = self._parse_type(activity_type)
        issues.extend(type_issues)

        parsed_duration, duration_issues = self._parse_duration(duration)
        issues.extend(duration_issues)

        is_valid = not any(issue.severity == "error" for issue in issues)

        candidate = None
        if is_valid:
            issues.extend(self._check_catalog(parsed_category, parsed_type))
            candidate = ActivityCandidate(
                type=parsed_type,
                category=parsed_category,
                duration=parsed_duration,
            )

        warnings = [issue.message for issue in issues if issue.severity == "warning"]

        return ValidationResult(
            is_valid=is_valid,
            candidate=candidate,
            issues=issues,
            warnings=warnings,
        )

    def get_rejection_notice(self, result: ValidationResult) -> str:
        """
        The one-line notice shown when a submission is rejected.

        Missing fields take precedence over a bad amount.
        """
        if any(
            issue.issue_type == "missing" and issue.severity == "error"
            for issue in result.issues
        ):
            return "Please fill in all fields"
        return "Please enter a valid duration"

    def get_user_friendly_summary(
        self,
        result: ValidationResult,
    ) -> str:
        """
        Generate a user-friendly summary of validation results.

        This is what we show under the form.
        """
        if result.is_valid and not result.warnings:
            return "✅ Activity looks good."

        lines = []

        if not result.is_valid:
            lines.append("❌ This activity could not be logged:")
            for issue in result.issues:
                if issue.severity == "error":
                    lines.append(f"   • {issue.message}")
                    if issue.suggested_fix:
                        lines.append(f"     💡 {issue.suggested_fix}")

        if result.warnings:
            if lines:
                lines.append("")
            lines.append("⚠️ Please note:")
            for warning in result.warnings:
                lines.append(f"   • {warning}")

        return "\n".join(lines)
