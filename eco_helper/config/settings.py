"""
Configuration Management for Eco Helper

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The saving rates and display limits live here rather than as magic
numbers inside the aggregator or the tip selector.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from ECO_HELPER_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ECO_HELPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for the structured logger"
    )

    # Potential saving estimates
    water_saving_rate: float = Field(
        default=0.20,
        ge=0.0,
        le=1.0,
        description="Share of water usage counted as a potential saving"
    )
    energy_saving_rate: float = Field(
        default=0.15,
        ge=0.0,
        le=1.0,
        description="Share of energy usage counted as a potential saving"
    )

    # Display limits
    max_tips: int = Field(
        default=6,
        ge=1,
        le=6,
        description="Maximum number of tips shown in the tips panel"
    )
    recent_activity_limit: int = Field(
        default=10,
        ge=1,
        le=100,
        description="How many recent activities the log shows"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept standard logging level names."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = v.strip().upper()
        if level not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return level

    @property
    def effective_log_level(self) -> str:
        """Debug mode forces DEBUG output regardless of log_level."""
        return "DEBUG" if self.debug_mode else self.log_level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    try:
        _ = settings.app
        results["app"] = True
    except Exception as e:
        results["app"] = False
        results["app_error"] = str(e)

    return results
