"""
Unit tests for Pydantic Settings configuration.

Tests settings loading, validation and logging setup.
"""

import logging

import pytest

from recruiting.config.logging_config import configure_logging
from recruiting.config.settings import Settings, get_settings
from recruiting.infrastructure.exceptions import ConfigurationError


@pytest.mark.usefixtures("clean_settings_cache")
class TestSettings:
    """Tests for Settings configuration."""

    def test_settings_has_defaults(self, monkeypatch):
        """Settings should have sensible defaults."""
        monkeypatch.delenv("RECRUITING_ENVIRONMENT", raising=False)
        monkeypatch.delenv("RECRUITING_LOG_LEVEL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.debug is False
        assert settings.is_development is True
        assert settings.is_production is False

    def test_settings_loads_from_env(self, monkeypatch):
        """Settings should load from RECRUITING_* environment variables."""
        monkeypatch.setenv("RECRUITING_ENVIRONMENT", "Production")
        monkeypatch.setenv("RECRUITING_LOG_LEVEL", "warning")
        monkeypatch.setenv("RECRUITING_DEBUG", "true")

        settings = get_settings()

        assert settings.is_production is True
        assert settings.log_level == "WARNING"
        assert settings.log_level_value == logging.WARNING
        assert settings.debug is True

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_invalid_log_level_raises_configuration_error(self, monkeypatch):
        monkeypatch.setenv("RECRUITING_LOG_LEVEL", "verbose")

        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()

        assert exc_info.value.details["invalid_keys"] == ["log_level"]
        assert exc_info.value.original_error is not None

    def test_invalid_environment_raises_configuration_error(self, monkeypatch):
        monkeypatch.setenv("RECRUITING_ENVIRONMENT", "staging")

        with pytest.raises(ConfigurationError, match="environment"):
            get_settings()


class TestConfigureLogging:
    """Tests for host application logging setup."""

    def test_applies_level(self):
        settings = Settings(_env_file=None, log_level="error")

        logger = configure_logging(settings)

        assert logger.name == "recruiting"
        assert logger.level == logging.ERROR
        assert logging.getLogger().level == logging.ERROR

    def test_debug_enables_package_debug_logs(self):
        settings = Settings(_env_file=None, log_level="warning", debug=True)

        logger = configure_logging(settings)

        assert logger.level == logging.DEBUG
