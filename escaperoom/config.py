"""
Settings for the escape-room entry point, read from the environment.

A .env file in the working directory is loaded first, so local overrides
do not need to be exported in the shell.
"""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MAX_TURNS = 15
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GameSettings(BaseModel):
    """Validated runtime settings.

    Attributes:
        max_turns: Claimed commands allowed before the player fails
        log_level: Name of the logging level for the stderr handler
    """

    max_turns: int = Field(default=DEFAULT_MAX_TURNS, ge=1)
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


def get_max_turns() -> str:
    """Get configured turn limit (unvalidated)"""
    return os.getenv("ESCAPE_ROOM_MAX_TURNS", str(DEFAULT_MAX_TURNS))


def get_log_level() -> str:
    """Get configured log level name (unvalidated)"""
    return os.getenv("ESCAPE_ROOM_LOG_LEVEL", DEFAULT_LOG_LEVEL)


def load_settings() -> GameSettings:
    """Build settings from the environment.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    settings = GameSettings(max_turns=get_max_turns(), log_level=get_log_level())
    logger.debug(f"Loaded settings: {settings}")
    return settings
