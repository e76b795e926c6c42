"""
Server configuration loaded from the environment (and a local .env file).
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .base import ConfigurationError

DEFAULT_BASE_URL = "https://api.freepik.com"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """
    Read settings from the environment.
    Raises ConfigurationError if FREEPIK_API_KEY is missing or empty, or
    LOG_LEVEL is not a logging level name.
    """
    load_dotenv()

    api_key = os.getenv("FREEPIK_API_KEY")
    if not api_key:
        raise ConfigurationError("FREEPIK_API_KEY environment variable is required")

    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"LOG_LEVEL must be a logging level name, got: {log_level}")

    return Settings(
        api_key=api_key,
        base_url=os.getenv("FREEPIK_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        log_level=log_level,
    )
