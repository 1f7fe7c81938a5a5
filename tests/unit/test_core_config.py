"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from environment variables
- Environment detection
- Log level validation
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from storefront.core.config import Settings, get_settings
from storefront.core.enums import Environment


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"

    @pytest.mark.parametrize(
        ("environment", "expected"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_renders_json_logs(self, environment, expected):
        assert environment.renders_json_logs is expected


class TestSettingsDefaults:
    def test_defaults_without_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()
        assert settings.environment == Environment.DEVELOPMENT
        assert settings.app_name == "Storefront"
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.is_development is True


class TestSettingsFromEnvironment:
    def test_values_loaded_case_insensitively(self):
        env_values = {
            "ENVIRONMENT": "production",
            "APP_NAME": "Shop",
            "log_level": "warning",
            "LOG_JSON": "true",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()
        assert settings.is_production is True
        assert settings.app_name == "Shop"
        assert settings.log_level == "WARNING"
        assert settings.log_json is True

    @pytest.mark.parametrize("env", ["testing", "ci"])
    def test_is_testing(self, env):
        with patch.dict(os.environ, {"ENVIRONMENT": env}, clear=True):
            settings = Settings()
        assert settings.is_testing is True
        assert settings.is_development is False

    def test_invalid_log_level_rejected(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "verbose"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()
        assert any("log_level must be one of" in str(e) for e in exc_info.value.errors())

    def test_invalid_environment_rejected(self):
        with patch.dict(os.environ, {"ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    def test_unknown_variables_ignored(self):
        with patch.dict(os.environ, {"DATABASE_URL": "postgresql://x"}, clear=True):
            settings = Settings()
        assert not hasattr(settings, "database_url")


class TestGetSettings:
    def test_get_settings_is_cached(self):
        with patch.dict(os.environ, {}, clear=True):
            get_settings.cache_clear()
            assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        with patch.dict(os.environ, {"APP_NAME": "First"}, clear=True):
            get_settings.cache_clear()
            assert get_settings().app_name == "First"
        with patch.dict(os.environ, {"APP_NAME": "Second"}, clear=True):
            get_settings.cache_clear()
            assert get_settings().app_name == "Second"
