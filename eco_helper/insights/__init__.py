"""Aggregation and tip selection over the activity sequence."""

from eco_helper.insights.aggregator import (
    ENERGY_SAVING_RATE,
    WATER_SAVING_RATE,
    aggregate,
    estimate_saving,
)
from eco_helper.insights.tips import MAX_TIPS, select_tips

__all__ = [
    "ENERGY_SAVING_RATE",
    "MAX_TIPS",
    "WATER_SAVING_RATE",
    "aggregate",
    "estimate_saving",
    "select_tips",
]
