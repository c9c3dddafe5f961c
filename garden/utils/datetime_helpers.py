"""
Standardized Date Handling Utilities

Calendar rules used by the progression engine:
1. "Today" is the wall-clock date in the configured timezone
2. Dates are stored as ISO strings (YYYY-MM-DD)
3. Weekly windows are keyed by ISO-8601 week ("2026-W42")

The engine only talks to a Clock, so tests can swap in a fixed one.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

# Default timezone if none is configured
DEFAULT_TIMEZONE = "UTC"


class Clock(ABC):
    """Wall-clock date provider"""

    @abstractmethod
    def today(self) -> date:
        pass

    def week_id(self, day: Optional[date] = None) -> str:
        """ISO week identifier for `day`, or for today"""
        return iso_week_id(day or self.today())


class SystemClock(Clock):
    """Clock backed by real time in a fixed timezone"""

    def __init__(self, tz_name: str = DEFAULT_TIMEZONE):
        self.tz = ZoneInfo(tz_name)

    def today(self) -> date:
        return datetime.now(self.tz).date()


def iso_week_id(day: date) -> str:
    """
    Get ISO week identifier for a date

    Uses the ISO week-numbering year, so 2027-01-01 belongs to "2026-W53".

    Args:
        day: Calendar date

    Returns:
        Identifier such as "2026-W42"
    """
    iso_year, week, _ = day.isocalendar()
    return f"{iso_year}-W{week:02d}"


def previous_day(day: date) -> date:
    return day - timedelta(days=1)


def to_iso(day: date) -> str:
    return day.isoformat()


def parse_iso_date(text: Optional[str]) -> Optional[date]:
    """
    Parse a stored YYYY-MM-DD string

    Returns:
        The date, or None when text is missing or malformed
    """
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring malformed stored date: {text!r}")
        return None


def format_display_date(day: date) -> str:
    """Short display date used for journal history (e.g. 10/17/2026)"""
    return f"{day.month}/{day.day}/{day.year}"


def format_long_date(day: date) -> str:
    """Long display date (e.g. Saturday, October 17, 2026)"""
    return f"{day.strftime('%A, %B')} {day.day}, {day.year}"
