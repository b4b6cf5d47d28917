"""
Dashboard Models

Read-only views computed from the activity store on every render.
None of these are stored; the session rebuilds them after each append.
"""

from uuid import UUID

from pydantic import BaseModel, Field

from eco_helper.models.activity import Activity, ActivityCategory
from eco_helper.models.tip import Tip


def format_magnitude(value: float) -> str:
    """
    Render a magnitude without a trailing '.0'.

    40.0 -> '40', 3.2 -> '3.2'
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return str(value)


class UsageSummary(BaseModel):
    """Per-category totals and potential savings for the session."""

    water_total: float = Field(default=0.0, ge=0)
    energy_total: float = Field(default=0.0, ge=0)
    water_saving: int = Field(default=0, ge=0)
    energy_saving: int = Field(default=0, ge=0)
    activity_count: int = Field(default=0, ge=0)


class MetricCard(BaseModel):
    """One of the usage cards at the top of the dashboard."""

    title: str
    value: float
    unit: str
    icon: str
    potential_saving: int = 0

    @property
    def shows_saving(self) -> bool:
        """The saving line is hidden until there is something to save."""
        return self.potential_saving > 0

    @property
    def value_text(self) -> str:
        return format_magnitude(self.value)

    @classmethod
    def for_water(cls, summary: UsageSummary) -> "MetricCard":
        return cls(
            title="Water Usage",
            value=summary.water_total,
            unit=ActivityCategory.WATER.unit_name,
            icon=ActivityCategory.WATER.icon,
            potential_saving=summary.water_saving,
        )

    @classmethod
    def for_energy(cls, summary: UsageSummary) -> "MetricCard":
        return cls(
            title="Energy Usage",
            value=summary.energy_total,
            unit=ActivityCategory.ENERGY.unit_name,
            icon=ActivityCategory.ENERGY.icon,
            potential_saving=summary.energy_saving,
        )


class ActivityRow(BaseModel):
    """One line of the recent activities list."""

    id: UUID
    label: str
    icon: str
    category: ActivityCategory
    time_text: str
    magnitude_text: str

    @classmethod
    def from_activity(cls, activity: Activity) -> "ActivityRow":
        return cls(
            id=activity.id,
            label=activity.label,
            icon=activity.icon,
            category=activity.category,
            time_text=activity.timestamp.strftime("%H:%M:%S"),
            magnitude_text=(
                f"{format_magnitude(activity.duration)} {activity.category.unit_symbol}"
            ),
        )


class TipCard(BaseModel):
    """A tip as shown in the tips panel."""

    title: str
    description: str
    icon: str
    badge: str
    impact: str

    @classmethod
    def from_tip(cls, tip: Tip) -> "TipCard":
        return cls(
            title=tip.title,
            description=tip.description,
            icon=tip.category.icon,
            badge=f"{tip.impact.value} impact",
            impact=tip.impact.value,
        )


class DashboardSnapshot(BaseModel):
    """Everything the page shows, derived from one read of the store."""

    summary: UsageSummary
    water_card: MetricCard
    energy_card: MetricCard
    recent: list[ActivityRow] = Field(default_factory=list)
    tips: list[TipCard] = Field(default_factory=list)

    @property
    def activity_count(self) -> int:
        return self.summary.activity_count

    @property
    def count_message(self) -> str:
        if self.activity_count > 0:
            return "Great tracking!"
        return "Start logging activities"
