"""Process settings loaded from environment variables."""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pwstrength.evaluator.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Ambient settings. Nothing here changes how passwords are scored."""

    model_config = SettingsConfigDict(
        env_prefix="PWSTRENGTH_",
        case_sensitive=False,
        extra="ignore",
    )

    app_env: Environment = Environment.DEVELOPMENT
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_settings() -> Settings:
    """Read settings from the environment.

    Raises:
        ConfigurationError: An environment variable holds an invalid value.
    """
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid settings: {exc.error_count()} error(s)",
            context={"errors": [e["loc"] for e in exc.errors()]},
        ) from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Invalid environment values are reported once as a warning and the
    defaults are used instead.
    """
    try:
        return load_settings()
    except ConfigurationError as exc:
        logger.warning("%s, using defaults; context=%s", exc, exc.context)
        return Settings.model_construct()
