"""Tests for PermcoreConfig."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from permcore import ConfigurationError, LogLevel, PermcoreConfig, load_config_from_env


class TestPermcoreConfig:
    """Tests for PermcoreConfig model."""

    def test_create_default_config(self) -> None:
        """Defaults are INFO, plain text, non-strict."""
        config = PermcoreConfig()
        assert config.log_level == LogLevel.INFO
        assert config.log_json is False
        assert config.service_name is None
        assert config.strict_models is False

    def test_log_level_from_string(self) -> None:
        """Log level strings are accepted case-insensitively."""
        assert PermcoreConfig(log_level="debug").log_level == LogLevel.DEBUG

    def test_log_level_invalid(self) -> None:
        """Unknown log levels are rejected."""
        with pytest.raises(ValueError, match="Invalid log level"):
            PermcoreConfig(log_level="INVALID")

    def test_extra_fields_forbidden(self) -> None:
        """Unknown settings are rejected."""
        with pytest.raises(ValueError):
            PermcoreConfig(redis_url="redis://localhost:6379/0")


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env."""

    def test_defaults(self) -> None:
        """An empty environment gives the defaults."""
        with patch.dict(os.environ, {}, clear=True):
            config = load_config_from_env()
        assert config.log_level == LogLevel.INFO
        assert config.log_json is False
        assert config.service_name is None
        assert config.strict_models is False

    def test_from_env(self) -> None:
        """PERMCORE_* variables are read."""
        env = {
            "PERMCORE_LOG_LEVEL": "WARNING",
            "PERMCORE_LOG_JSON": "true",
            "PERMCORE_SERVICE_NAME": "acl-service",
            "PERMCORE_STRICT_MODELS": "1",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config_from_env()
        assert config.log_level == LogLevel.WARNING
        assert config.log_json is True
        assert config.service_name == "acl-service"
        assert config.strict_models is True

    def test_invalid_env_raises_configuration_error(self) -> None:
        """Invalid values raise ConfigurationError."""
        with patch.dict(os.environ, {"PERMCORE_LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ConfigurationError) as exc_info:
                load_config_from_env()
        assert exc_info.value.code == "CONFIGURATION_ERROR"
