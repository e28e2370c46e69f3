"""Unit tests for configuration management."""

import pytest

from creatorscore.config import ScoreConfig, LogFormat, load_config
from creatorscore.exceptions import ConfigError


class TestScoreConfigDefaults:
    """Test default configuration values."""

    def test_default_log_level(self):
        config = ScoreConfig()
        assert config.log_level == "INFO"

    def test_default_log_format(self):
        config = ScoreConfig()
        assert config.log_format == LogFormat.CONSOLE

    def test_default_batch_size(self):
        config = ScoreConfig()
        assert config.api_max_batch_size == 100

    def test_default_port(self):
        config = ScoreConfig()
        assert config.api_port == 8000


class TestScoreConfigEnvVars:
    """Test configuration from environment variables."""

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("CREATORSCORE_LOG_LEVEL", "debug")
        config = ScoreConfig()
        assert config.log_level == "DEBUG"

    def test_log_format_from_env(self, monkeypatch):
        monkeypatch.setenv("CREATORSCORE_LOG_FORMAT", "json")
        config = ScoreConfig()
        assert config.log_format == LogFormat.JSON

    def test_batch_size_from_env(self, monkeypatch):
        monkeypatch.setenv("CREATORSCORE_API_MAX_BATCH_SIZE", "5")
        config = ScoreConfig()
        assert config.api_max_batch_size == 5


class TestScoreConfigValidation:
    """Test rejected values."""

    def test_unknown_log_level(self):
        with pytest.raises(ConfigError):
            load_config(log_level="LOUD")

    def test_zero_batch_size(self):
        with pytest.raises(ConfigError):
            load_config(api_max_batch_size=0)

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv("CREATORSCORE_LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigError, match="log level"):
            load_config()

    def test_overrides_apply(self):
        assert load_config(log_level="warning").log_level == "WARNING"


class TestLogFormatEnum:
    """Test LogFormat enum values."""

    def test_log_formats(self):
        assert LogFormat.JSON.value == "json"
        assert LogFormat.CONSOLE.value == "console"
