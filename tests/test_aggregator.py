"""
Tests for usage aggregation and the saving estimates.
"""

import pytest
from decimal import Decimal

from eco_helper.insights import aggregate, estimate_saving
from eco_helper.models.activity import Activity
from eco_helper.models.dashboard import UsageSummary


def water(duration, activity_type="shower"):
    return Activity(type=activity_type, category="water", duration=duration)


def energy(duration, activity_type="hvac"):
    return Activity(type=activity_type, category="energy", duration=duration)


class TestAggregate:
    """Tests for per-category totals."""

    def test_empty_is_all_zero(self):
        summary = aggregate([])
        assert summary == UsageSummary()
        assert summary.water_total == 0
        assert summary.energy_total == 0
        assert summary.water_saving == 0
        assert summary.energy_saving == 0
        assert summary.activity_count == 0

    def test_totals_by_category(self):
        activities = [water(40), energy(2), water(80, "bath"), energy(1.5, "cooking")]
        summary = aggregate(activities)

        assert summary.water_total == 120
        assert summary.energy_total == 3.5
        assert summary.activity_count == 4

    def test_totals_are_exact_decimals(self):
        """0.1 + 0.2 adds up to 0.3, not 0.30000000000000004."""
        summary = aggregate([water(0.1), water(0.2)])
        assert summary.water_total == 0.3

    def test_order_independent(self):
        activities = [water(0.1), energy(0.7), water(0.2), water(12.4), energy(3.3)]
        forward = aggregate(activities)
        backward = aggregate(list(reversed(activities)))
        shuffled = aggregate(activities[2:] + activities[:2])

        assert forward == backward == shuffled

    def test_idempotent(self):
        activities = [water(40), energy(2)]
        assert aggregate(activities) == aggregate(activities)

    def test_unknown_types_still_count(self):
        summary = aggregate([water(5, "aquarium")])
        assert summary.water_total == 5


class TestSavings:
    """Tests for the fixed-percentage savings, rounded half up."""

    def test_water_saving_twenty_percent(self):
        assert aggregate([water(40)]).water_saving == 8

    def test_energy_saving_fifteen_percent(self):
        assert aggregate([energy(20)]).energy_saving == 3

    def test_water_half_boundary_rounds_up(self):
        """2.5 L at 20% is exactly 0.5, which rounds to 1."""
        assert aggregate([water(2.5)]).water_saving == 1

    def test_water_twelve_and_a_half(self):
        """12.5 L at 20% is 2.5, which rounds to 3."""
        assert aggregate([water(12.5)]).water_saving == 3

    def test_energy_half_boundary_rounds_up(self):
        """10 kWh at 15% is exactly 1.5, which rounds to 2."""
        assert aggregate([energy(10)]).energy_saving == 2

    def test_below_half_rounds_down(self):
        assert aggregate([water(2.4)]).water_saving == 0

    def test_custom_rates(self):
        summary = aggregate([water(10), energy(10)], water_rate=0.5, energy_rate=0.25)
        assert summary.water_saving == 5
        assert summary.energy_saving == 3

    @pytest.mark.parametrize("total,rate,expected", [
        ("0", 0.2, 0),
        ("2.5", 0.2, 1),
        ("7.5", 0.2, 2),
        ("3.3", 0.15, 0),
        ("3.4", 0.15, 1),
    ])
    def test_estimate_saving(self, total, rate, expected):
        assert estimate_saving(Decimal(total), rate) == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
