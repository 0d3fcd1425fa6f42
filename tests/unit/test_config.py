# File: tests/unit/test_config.py
"""
Unit tests for configuration loading and validation.
"""

import logging
from dataclasses import FrozenInstanceError

import pytest

from notion_scheduler.core.config_manager import Config
from notion_scheduler.core.exceptions import ConfigurationError


class TestConfigFromEnv:
    """Tests for Config.from_env."""

    def test_defaults(self, env_vars):
        config = Config.from_env(env_vars)

        assert config.timezone == "UTC"
        assert config.log_level == "INFO"
        assert config.log_level_value == logging.INFO
        assert config.max_retries == 3
        assert config.retry_delay_ms == 1000
        assert config.request_timeout == 30.0

    def test_optional_settings(self, env_vars):
        env_vars.update({
            "TIMEZONE": "America/Bogota",
            "LOG_LEVEL": "debug",
            "MAX_RETRIES": "5",
            "RETRY_DELAY_MS": "250",
            "NOTION_TIMEOUT": "10",
        })

        config = Config.from_env(env_vars)

        assert config.timezone == "America/Bogota"
        assert config.log_level == "DEBUG"
        assert config.max_retries == 5
        assert config.retry_delay_ms == 250
        assert config.request_timeout == 10.0

    def test_missing_settings_reported_together(self):
        with pytest.raises(ConfigurationError) as excinfo:
            Config.from_env({"NOTION_API_KEY": "key"})

        message = str(excinfo.value)
        assert "TEMPLATE_DB_ID" in message
        assert "CALENDAR_DB_ID" in message
        assert "NOTION_API_KEY" not in message

    def test_unknown_timezone(self, env_vars):
        env_vars["TIMEZONE"] = "Mars/Olympus_Mons"

        with pytest.raises(ConfigurationError, match="TIMEZONE"):
            Config.from_env(env_vars)

    def test_unknown_log_level(self, env_vars):
        env_vars["LOG_LEVEL"] = "chatty"

        with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
            Config.from_env(env_vars)

    def test_non_numeric_setting(self, env_vars):
        env_vars["MAX_RETRIES"] = "three"

        with pytest.raises(ConfigurationError, match="MAX_RETRIES"):
            Config.from_env(env_vars)

    def test_zero_retries_rejected(self, env_vars):
        env_vars["MAX_RETRIES"] = "0"

        with pytest.raises(ConfigurationError):
            Config.from_env(env_vars)


class TestConfigValue:
    """Tests for the Config value itself."""

    def test_is_immutable(self, config):
        with pytest.raises(FrozenInstanceError):
            config.timezone = "UTC"

    def test_direct_construction_is_validated(self):
        with pytest.raises(ConfigurationError):
            Config(notion_api_key="", template_db_id="t", calendar_db_id="c")

    def test_summary_hides_secrets(self, config):
        summary = config.summary()

        assert "secret_test_key" not in summary
        assert "tmpl-db-..." in summary
        assert "America/Bogota" in summary
