import logging
import sys
from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from messagekit.locales import DEFAULT_LOCALE, Locale


class LogLevels(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Config(BaseSettings):
    LOG_LEVEL: LogLevels = LogLevels.INFO
    DEFAULT_LOCALE: Locale = DEFAULT_LOCALE

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value


@lru_cache
def get_config() -> Config:
    """Settings from the environment, read on first use."""
    return Config()


def setup_logging(config: Config | None = None) -> None:
    config = config or get_config()
    logging.basicConfig(level=config.LOG_LEVEL.value, stream=sys.stdout)
