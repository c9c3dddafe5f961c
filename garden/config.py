"""Configuration management"""
import os
import logging
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from dotenv import load_dotenv

from garden.exceptions import ConfigurationError

load_dotenv()

# Storage
DATA_PATH: Path = Path(os.getenv("GARDEN_DATA_PATH", "./data"))

# Storage keys carry the schema version so an incompatible shape can live
# beside old data instead of overwriting it
PROFILE_STORAGE_KEY: str = "scg-state-v2"
JOURNAL_STORAGE_KEY: str = "scg-journal-entries"
MUTED_STORAGE_KEY: str = "scg-muted"
THEME_STORAGE_KEY: str = "scg-theme"

# Calendar
TIMEZONE: str = os.getenv("GARDEN_TIMEZONE", "UTC")

# Progression
WEEKLY_CHALLENGE_TARGET: int = int(os.getenv("WEEKLY_CHALLENGE_TARGET", "5"))

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


# Validation
def validate_config() -> None:
    """Validate configuration"""
    try:
        ZoneInfo(TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(
            f"Unknown timezone: {TIMEZONE}",
            config_key="GARDEN_TIMEZONE",
            cause=e,
        )
    if WEEKLY_CHALLENGE_TARGET < 1:
        raise ConfigurationError(
            "WEEKLY_CHALLENGE_TARGET must be positive",
            config_key="WEEKLY_CHALLENGE_TARGET",
        )
    if not isinstance(logging.getLevelName(LOG_LEVEL.upper()), int):
        raise ConfigurationError(
            f"Unknown log level: {LOG_LEVEL}",
            config_key="LOG_LEVEL",
        )
