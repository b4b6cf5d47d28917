"""
Usage Aggregation

DESIGN DECISION: Totals are summed as Decimals built from each
duration's decimal string. That keeps the sum exact, so the result
does not depend on the order of the activities, and it makes the
saving estimate land exactly on .5 boundaries where it should.

Savings round half up: 2.5 L of water at 20% is 0.5 L, shown as 1.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from eco_helper.models.activity import Activity, ActivityCategory
from eco_helper.models.dashboard import UsageSummary


WATER_SAVING_RATE = 0.20
ENERGY_SAVING_RATE = 0.15


def _to_decimal(value: float) -> Decimal:
    return Decimal(str(value))


def estimate_saving(total: Decimal, rate: float) -> int:
    """Fixed-percentage saving, rounded half up to a whole unit."""
    saving = total * _to_decimal(rate)
    return int(saving.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def aggregate(
    activities: Iterable[Activity],
    water_rate: float = WATER_SAVING_RATE,
    energy_rate: float = ENERGY_SAVING_RATE,
) -> UsageSummary:
    """
    Compute per-category totals and potential savings.

    An empty sequence gives an all-zero summary.
    """
    totals = {
        ActivityCategory.WATER: Decimal("0"),
        ActivityCategory.ENERGY: Decimal("0"),
    }
    count = 0

    for activity in activities:
        totals[activity.category] += _to_decimal(activity.duration)
        count += 1

    water_total = totals[ActivityCategory.WATER]
    energy_total = totals[ActivityCategory.ENERGY]

    return UsageSummary(
        water_total=float(water_total),
        energy_total=float(energy_total),
        water_saving=estimate_saving(water_total, water_rate),
        energy_saving=estimate_saving(energy_total, energy_rate),
        activity_count=count,
    )
