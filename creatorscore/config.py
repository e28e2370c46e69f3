"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings

from creatorscore.exceptions import ConfigError


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class ScoreConfig(BaseSettings):
    """Configuration for the creatorscore CLI and API."""

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_max_batch_size: int = 100

    model_config = {
        "env_prefix": "CREATORSCORE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("api_max_batch_size")
    @classmethod
    def _check_batch_size(cls, value: int) -> int:
        if value < 1:
            raise ValueError("api_max_batch_size must be at least 1")
        return value


def load_config(**overrides) -> ScoreConfig:
    """
    Build configuration from the environment plus explicit overrides.

    Raises:
        ConfigError: If any value fails validation
    """
    try:
        return ScoreConfig(**overrides)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
