"""
Runtime settings.

Read from the environment:

    COLORCODE_LOG_LEVEL          logging level for configure_logging() (WARNING)
    COLORCODE_DISPLAY_PRECISION  significant digits in engineering_notation() (3)

The library itself never touches .env files or logging handlers. An
application entry point opts in at startup:

    from colorcode import configure_logging, load_env

    load_env()
    configure_logging()
"""

import logging
import os
import sys
from functools import lru_cache
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    log_level: str = Field("WARNING", description="Logging level name")
    display_precision: int = Field(3, ge=1, le=15, description="Significant digits for display")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level


def load_env(path: Optional[str] = None) -> bool:
    """
    Load a .env file into os.environ for an application entry point.

    Without a path, the file is searched for from the working directory
    upwards. Cached settings are dropped so the next get_settings() sees
    the new values. Returns True if a file was loaded.
    """
    loaded = load_dotenv(path or find_dotenv(usecwd=True))
    get_settings.cache_clear()
    return loaded


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once; call get_settings.cache_clear() to re-read the environment."""
    values = {}
    log_level = os.getenv("COLORCODE_LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level
    precision = os.getenv("COLORCODE_DISPLAY_PRECISION")
    if precision:
        values["display_precision"] = precision
    return Settings(**values)


def configure_logging(level: Optional[str] = None) -> None:
    """Send colorcode logs to stdout. Called by entry points, never on import."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
