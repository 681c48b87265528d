"""Unit tests for engine configuration.

Tests the Settings class in technical_levels.core.config, ensuring level
detection defaults and environment overrides behave as expected.
"""
import pytest
from pydantic import ValidationError

from technical_levels.core.config import Settings, get_settings
from technical_levels.schemas.levels import LevelSettings


class TestSettingsDefaults:
    """Tests for Settings default values."""

    def test_level_detection_defaults(self) -> None:
        """Test level detection config fields have correct defaults."""
        settings = Settings()
        assert settings.default_swing_lookback == 3
        assert settings.default_proximity_percent == 0.006
        assert settings.default_max_levels_per_side == 4
        assert settings.default_use_volume_confirmation is True

    def test_log_level_default(self, monkeypatch) -> None:
        """Test log level defaults to INFO when LOG_LEVEL is unset."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        assert Settings().log_level == "INFO"


class TestSettingsOverrides:
    """Tests for environment-driven overrides."""

    def test_env_override(self, monkeypatch) -> None:
        """Test environment variables override defaults (case-insensitive)."""
        monkeypatch.setenv("default_proximity_percent", "0.01")
        monkeypatch.setenv("DEFAULT_USE_VOLUME_CONFIRMATION", "false")

        settings = Settings()

        assert settings.default_proximity_percent == 0.01
        assert settings.default_use_volume_confirmation is False

    def test_invalid_default_rejected(self, monkeypatch) -> None:
        """Test out-of-range configured defaults fail fast."""
        monkeypatch.setenv("DEFAULT_SWING_LOOKBACK", "0")

        with pytest.raises(ValidationError):
            Settings()

    def test_level_settings_from_config(self) -> None:
        """Test LevelSettings built from configuration defaults."""
        level_settings = LevelSettings.from_config(
            Settings(default_swing_lookback=5, default_max_levels_per_side=2)
        )

        assert level_settings.swing_lookback == 5
        assert level_settings.max_levels_per_side == 2
        assert level_settings.proximity_percent == 0.006


class TestGetSettings:
    """Tests for get_settings() function."""

    def test_get_settings_returns_settings_instance(self) -> None:
        """Test that get_settings() returns a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self) -> None:
        """Test that get_settings() returns the same cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
