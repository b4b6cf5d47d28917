"""
Tests for submission validation.
"""

import pytest

from eco_helper.models.activity import ActivityCategory
from eco_helper.validation import SubmissionValidator


@pytest.fixture
def validator():
    return SubmissionValidator()


class TestDurationParsing:
    """Tests for the magnitude field."""

    def test_accepts_decimal_string(self, validator):
        result = validator.validate("water", "shower", "3.2")

        assert result.is_valid is True
        assert result.candidate.duration == 3.2
        assert result.candidate.type == "shower"
        assert result.candidate.category is ActivityCategory.WATER

    def test_accepts_padded_string(self, validator):
        result = validator.validate("energy", "tv", "  0.3 ")
        assert result.candidate.duration == 0.3

    def test_accepts_numbers(self, validator):
        assert validator.validate("energy", "hvac", 2).candidate.duration == 2.0
        assert validator.validate("energy", "hvac", 1.5).candidate.duration == 1.5

    def test_rejects_negative(self, validator):
        result = validator.validate("water", "shower", "-5")

        assert result.is_valid is False
        assert result.candidate is None
        assert result.issues_for("duration")[0].issue_type == "not_positive"

    def test_rejects_zero(self, validator):
        result = validator.validate("water", "shower", "0")
        assert result.is_valid is False

    def test_rejects_non_number(self, validator):
        result = validator.validate("water", "shower", "abc")

        assert result.is_valid is False
        assert result.issues_for("duration")[0].issue_type == "invalid_format"

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf", float("inf")])
    def test_rejects_non_finite(self, validator, raw):
        result = validator.validate("water", "shower", raw)

        assert result.is_valid is False
        assert result.issues_for("duration")[0].issue_type == "not_finite"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_rejects_empty(self, validator, raw):
        result = validator.validate("water", "shower", raw)

        assert result.is_valid is False
        assert result.issues_for("duration")[0].issue_type == "missing"

    @pytest.mark.parametrize("raw", [10**400, "1" + "0" * 400 + "e9999"])
    def test_rejects_out_of_range_numbers(self, validator, raw):
        result = validator.validate("water", "shower", raw)

        assert result.is_valid is False
        assert result.candidate is None
        assert result.issues_for("duration")[0].issue_type in ("invalid_format", "not_finite")

    def test_huge_integer_is_invalid_format(self, validator):
        result = validator.validate("water", "shower", 10**400)
        assert result.issues_for("duration")[0].issue_type == "invalid_format"

    def test_rejects_bool(self, validator):
        result = validator.validate("water", "shower", True)
        assert result.is_valid is False


class TestTypeAndCategory:
    """Tests for the type and category fields."""

    @pytest.mark.parametrize("raw", ["", "  ", None])
    def test_rejects_missing_type(self, validator, raw):
        result = validator.validate("water", raw, "40")

        assert result.is_valid is False
        assert result.issues_for("type")[0].issue_type == "missing"

    def test_rejects_missing_category(self, validator):
        result = validator.validate(None, "shower", "40")
        assert result.issues_for("category")[0].issue_type == "missing"

    def test_rejects_unknown_category(self, validator):
        result = validator.validate("gas", "boiler", "40")

        assert result.is_valid is False
        assert result.issues_for("category")[0].issue_type == "invalid_value"

    def test_category_is_case_insensitive(self, validator):
        result = validator.validate(" Water ", "shower", "40")
        assert result.candidate.category is ActivityCategory.WATER

    def test_accepts_enum_category(self, validator):
        result = validator.validate(ActivityCategory.ENERGY, "lighting", "0.5")
        assert result.candidate.category is ActivityCategory.ENERGY

    def test_unknown_type_is_a_warning(self, validator):
        result = validator.validate("water", "aquarium", "20")

        assert result.is_valid is True
        assert result.candidate.type == "aquarium"
        assert result.issues_for("type")[0].issue_type == "unknown_type"
        assert len(result.warnings) == 1

    def test_category_mismatch_is_a_warning(self, validator):
        result = validator.validate("energy", "shower", "2")

        assert result.is_valid is True
        assert result.issues_for("type")[0].issue_type == "category_mismatch"

    def test_collects_every_error(self, validator):
        result = validator.validate(None, "", "abc")
        assert result.error_count == 3


class TestUserMessages:
    """Tests for the notices shown under the form."""

    def test_missing_fields_notice(self, validator):
        result = validator.validate("water", "", "abc")
        assert validator.get_rejection_notice(result) == "Please fill in all fields"

    def test_invalid_duration_notice(self, validator):
        result = validator.validate("water", "shower", "-5")
        assert validator.get_rejection_notice(result) == "Please enter a valid duration"

    def test_summary_for_valid(self, validator):
        result = validator.validate("water", "shower", "40")
        assert validator.get_user_friendly_summary(result) == "✅ Activity looks good."

    def test_summary_lists_errors_and_fixes(self, validator):
        result = validator.validate("water", "shower", "-5")
        summary = validator.get_user_friendly_summary(result)

        assert "could not be logged" in summary
        assert "greater than zero" in summary
        assert "Enter a positive amount" in summary

    def test_summary_lists_warnings(self, validator):
        result = validator.validate("water", "aquarium", "20")
        summary = validator.get_user_friendly_summary(result)

        assert summary.startswith("⚠️ Please note:")
        assert "aquarium" in summary


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
