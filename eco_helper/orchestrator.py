"""
Main Orchestrator for Eco Helper

This module ties the components together and defines the one flow
the app has:

    form input → validate → store.append → recompute summary and tips

DESIGN DECISION: The orchestrator enforces the boundaries:
- Nothing reaches the store without passing the validator
- Derived figures are recomputed after every append, never patched
- Every submission is audited, accepted or not
"""

from typing import Optional, Union
from uuid import UUID, uuid4

from eco_helper.audit import AuditLogger, configure_logging, create_correlation_id
from eco_helper.config import AppSettings, get_settings
from eco_helper.insights import aggregate, select_tips
from eco_helper.models.activity import (
    Activity,
    ActivityCategory,
    SubmissionOutcome,
)
from eco_helper.models.dashboard import (
    ActivityRow,
    DashboardSnapshot,
    MetricCard,
    TipCard,
    UsageSummary,
)
from eco_helper.models.tip import Tip
from eco_helper.storage import (
    ActivityStorageInterface,
    InMemoryActivityStore,
    InMemoryAuditStorage,
)
from eco_helper.validation import SubmissionValidator
from eco_helper.validation.validator import RawMagnitude


class EcoSession:
    """
    One user's tracking session.

    Owns the activity store. The dashboard snapshot is rebuilt by a
    store listener, so it reflects an append as soon as append returns.
    """

    def __init__(
        self,
        store: Optional[ActivityStorageInterface] = None,
        validator: Optional[SubmissionValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
        settings: Optional[AppSettings] = None,
    ):
        self.session_id: UUID = uuid4()
        self._settings = settings if settings is not None else get_settings().app
        self._store = store if store is not None else InMemoryActivityStore()
        self._validator = validator if validator is not None else SubmissionValidator()
        self._audit_logger = audit_logger

        self._dashboard = self._build_dashboard()
        self._store.add_listener(self._on_activity_appended)

        if self._audit_logger is not None:
            self._audit_logger.log_session_started(
                session_id=self.session_id,
                environment=self._settings.app_environment,
            )

    @property
    def store(self) -> ActivityStorageInterface:
        return self._store

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def validator(self) -> SubmissionValidator:
        return self._validator

    @property
    def audit_logger(self) -> Optional[AuditLogger]:
        return self._audit_logger

    @property
    def activities(self) -> tuple[Activity, ...]:
        return self._store.activities

    def log_activity(
        self,
        category: Union[ActivityCategory, str, None],
        activity_type: Optional[str],
        duration: RawMagnitude,
        correlation_id: Optional[UUID] = None,
    ) -> SubmissionOutcome:
        """
        Validate a form submission and, if valid, store it.

        Returns:
            SubmissionOutcome with the stored activity or the rejection
        """
        correlation_id = correlation_id or create_correlation_id()

        result = self._validator.validate(category, activity_type, duration)

        if not result.is_valid:
            if self._audit_logger is not None:
                issues = [
                    {"field": i.field, "type": i.issue_type, "message": i.message}
                    for i in result.issues
                ]
                self._audit_logger.log_submission_rejected(
                    submission_id=result.submission_id,
                    issues=issues,
                    correlation_id=correlation_id,
                )
            return SubmissionOutcome(
                accepted=False,
                validation=result,
                message=self._validator.get_rejection_notice(result),
            )

        try:
            activity = self._store.append(result.candidate)
        except Exception as e:
            if self._audit_logger is not None:
                self._audit_logger.log_error(
                    error_type="store_append_failed",
                    error_message=str(e),
                    correlation_id=correlation_id,
                )
            raise

        if self._audit_logger is not None:
            self._audit_logger.log_activity_logged(
                activity_id=activity.id,
                activity_type=activity.type,
                category=activity.category.value,
                duration=activity.duration,
                correlation_id=correlation_id,
            )

        return SubmissionOutcome(
            accepted=True,
            activity=activity,
            validation=result,
            message="Activity logged successfully!",
        )

    def summary(self) -> UsageSummary:
        """Totals and savings over everything logged so far."""
        return aggregate(
            self._store.activities,
            water_rate=self._settings.water_saving_rate,
            energy_rate=self._settings.energy_saving_rate,
        )

    def tips(self) -> list[Tip]:
        """Tips ranked for what has been logged so far."""
        return select_tips(self._store.activities, limit=self._settings.max_tips)

    def recent(self) -> list[Activity]:
        return self._store.recent(self._settings.recent_activity_limit)

    @property
    def dashboard(self) -> DashboardSnapshot:
        """The snapshot as of the latest append."""
        return self._dashboard

    def _build_dashboard(self) -> DashboardSnapshot:
        summary = self.summary()
        return DashboardSnapshot(
            summary=summary,
            water_card=MetricCard.for_water(summary),
            energy_card=MetricCard.for_energy(summary),
            recent=[ActivityRow.from_activity(a) for a in self.recent()],
            tips=[TipCard.from_tip(t) for t in self.tips()],
        )

    def _on_activity_appended(self, activity: Activity) -> None:
        self._dashboard = self._build_dashboard()


def create_app_components(
    use_audit_trail: bool = True,
) -> EcoSession:
    """
    Factory function to create a fully wired session.

    Args:
        use_audit_trail: Keep the session's audit events in memory
                         for the history view. The structured log is
                         written either way.

    Returns:
        A fresh EcoSession
    """
    settings = get_settings().app
    configure_logging(settings.effective_log_level)

    audit_logger = AuditLogger(InMemoryAuditStorage() if use_audit_trail else None)

    return EcoSession(
        store=InMemoryActivityStore(),
        validator=SubmissionValidator(),
        audit_logger=audit_logger,
        settings=settings,
    )
