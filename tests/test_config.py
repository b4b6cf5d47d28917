"""
Tests for configuration loading.
"""

import pytest

from eco_helper.config import AppSettings, get_settings, validate_all_settings


class TestAppSettings:
    """Tests for AppSettings defaults and validation."""

    def test_defaults(self, monkeypatch):
        for name in (
            "WATER_SAVING_RATE", "ENERGY_SAVING_RATE", "MAX_TIPS",
            "RECENT_ACTIVITY_LIMIT", "LOG_LEVEL", "DEBUG_MODE",
        ):
            monkeypatch.delenv(f"ECO_HELPER_{name}", raising=False)

        settings = AppSettings(_env_file=None)
        assert settings.water_saving_rate == 0.20
        assert settings.energy_saving_rate == 0.15
        assert settings.max_tips == 6
        assert settings.recent_activity_limit == 10
        assert settings.log_level == "INFO"
        assert settings.debug_mode is False
        assert settings.effective_log_level == "INFO"

    def test_max_tips_accepts_whole_catalog_window(self):
        assert AppSettings(_env_file=None, max_tips=6).max_tips == 6

    def test_debug_mode_forces_debug_level(self):
        settings = AppSettings(_env_file=None, debug_mode=True, log_level="warning")

        assert settings.log_level == "WARNING"
        assert settings.effective_log_level == "DEBUG"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("ECO_HELPER_RECENT_ACTIVITY_LIMIT", "25")
        monkeypatch.setenv("ECO_HELPER_LOG_LEVEL", "debug")

        settings = AppSettings(_env_file=None)
        assert settings.recent_activity_limit == 25
        assert settings.log_level == "DEBUG"

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValueError):
            AppSettings(_env_file=None, log_level="chatty")

    @pytest.mark.parametrize("field,value", [
        ("water_saving_rate", 1.5),
        ("energy_saving_rate", -0.1),
        ("max_tips", 0),
        ("max_tips", 7),
        ("recent_activity_limit", 0),
    ])
    def test_rejects_out_of_range(self, field, value):
        with pytest.raises(ValueError):
            AppSettings(_env_file=None, **{field: value})


class TestSettingsContainer:
    """Tests for the cached root container."""

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()

    def test_validate_all_settings(self):
        get_settings.cache_clear()
        assert validate_all_settings() == {"app": True}

    def test_validate_all_settings_reports_errors(self, monkeypatch):
        monkeypatch.setenv("ECO_HELPER_MAX_TIPS", "100")
        get_settings.cache_clear()

        results = validate_all_settings()
        assert results["app"] is False
        assert "max_tips" in results["app_error"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
