"""
Tip Selection

Picks up to six tips from the static catalog, ranked by what the
user has been logging:

1. Start from the catalog in declaration order
2. If a shower was logged, move "Shorter Showers" to the front
3. Water only: keep water and general tips
   Energy only: keep energy and general tips
   Both or neither: keep everything
4. Take the first six

The reorder relies on sorted() being stable: every tip other than
"Shorter Showers" gets the same key, so their relative order is kept.
"""

from typing import Iterable, Sequence

from eco_helper.models.activity import Activity, ActivityCategory
from eco_helper.models.tip import SHORTER_SHOWERS_TITLE, TIP_CATALOG, Tip, TipCategory


MAX_TIPS = 6


def select_tips(
    activities: Iterable[Activity],
    catalog: Sequence[Tip] = TIP_CATALOG,
    limit: int = MAX_TIPS,
) -> list[Tip]:
    """
    Choose and order tips for the given activities.

    Pure and deterministic; call it again after every append.
    """
    activities = list(activities)

    has_water = any(a.category is ActivityCategory.WATER for a in activities)
    has_energy = any(a.category is ActivityCategory.ENERGY for a in activities)
    has_shower = any(a.type == "shower" for a in activities)

    tips = list(catalog)

    if has_shower:
        tips = sorted(tips, key=lambda tip: 0 if tip.title == SHORTER_SHOWERS_TITLE else 1)

    if has_water and not has_energy:
        allowed = {TipCategory.WATER, TipCategory.GENERAL}
        tips = [tip for tip in tips if tip.category in allowed]
    elif has_energy and not has_water:
        allowed = {TipCategory.ENERGY, TipCategory.GENERAL}
        tips = [tip for tip in tips if tip.category in allowed]

    return tips[:max(limit, 0)]
