"""
Tip Models

Tips are static advice cards. The catalog is defined once here and
never mutated; the tip selector only reorders, filters and truncates it.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TipImpact(str, Enum):
    """How much a tip is expected to help."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TipCategory(str, Enum):
    """
    Which resource a tip is about.

    GENERAL tips survive every category filter.
    """
    WATER = "water"
    ENERGY = "energy"
    GENERAL = "general"

    @property
    def icon(self) -> str:
        return {
            TipCategory.WATER: "💧",
            TipCategory.ENERGY: "⚡",
            TipCategory.GENERAL: "✨",
        }[self]


class Tip(BaseModel):
    """A static advisory recommendation."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    description: str
    impact: TipImpact
    category: TipCategory


SHORTER_SHOWERS_TITLE = "Shorter Showers"


# Declaration order matters: it is the default ranking.
TIP_CATALOG: tuple[Tip, ...] = (
    Tip(
        title=SHORTER_SHOWERS_TITLE,
        description="Reduce shower time by 2 minutes to save up to 10 liters of water per shower.",
        impact=TipImpact.HIGH,
        category=TipCategory.WATER,
    ),
    Tip(
        title="Cold Water Laundry",
        description="Washing clothes in cold water can reduce energy use by up to 90% per load.",
        impact=TipImpact.HIGH,
        category=TipCategory.ENERGY,
    ),
    Tip(
        title="LED Light Bulbs",
        description="Switch to LED bulbs to use 75% less energy and last 25 times longer.",
        impact=TipImpact.MEDIUM,
        category=TipCategory.ENERGY,
    ),
    Tip(
        title="Fix Leaky Faucets",
        description="A dripping faucet can waste up to 15 liters of water per day.",
        impact=TipImpact.HIGH,
        category=TipCategory.WATER,
    ),
    Tip(
        title="Unplug Devices",
        description="Unplug chargers and devices when not in use to prevent phantom energy drain.",
        impact=TipImpact.MEDIUM,
        category=TipCategory.ENERGY,
    ),
    Tip(
        title="Full Loads Only",
        description="Only run dishwashers and washing machines with full loads to maximize efficiency.",
        impact=TipImpact.MEDIUM,
        category=TipCategory.WATER,
    ),
    Tip(
        title="Smart Thermostat",
        description="Program your thermostat to reduce heating/cooling when you're away.",
        impact=TipImpact.HIGH,
        category=TipCategory.ENERGY,
    ),
    Tip(
        title="Low-Flow Fixtures",
        description="Install low-flow showerheads and faucets to reduce water use by 30-50%.",
        impact=TipImpact.HIGH,
        category=TipCategory.WATER,
    ),
)
