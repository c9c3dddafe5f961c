"""Unit tests for Datetime Helpers (garden/utils/datetime_helpers.py)"""
import pytest
from datetime import date, datetime
from zoneinfo import ZoneInfo

from garden.utils.datetime_helpers import (
    Clock,
    SystemClock,
    format_display_date,
    format_long_date,
    iso_week_id,
    parse_iso_date,
    previous_day,
    to_iso,
)
from tests.helpers import FixedClock


# ============================================================================
# ISO Week Tests
# ============================================================================

@pytest.mark.parametrize("day,expected", [
    (date(2026, 10, 12), "2026-W42"),  # Monday
    (date(2026, 10, 18), "2026-W42"),  # Sunday
    (date(2026, 10, 19), "2026-W43"),
    (date(2027, 1, 1), "2026-W53"),
    (date(2024, 12, 30), "2025-W01"),
    (date(2026, 1, 5), "2026-W02"),
])
def test_iso_week_id(day, expected):
    """Test week ids follow ISO-8601 week numbering"""
    assert iso_week_id(day) == expected


def test_clock_week_id_defaults_to_today():
    clock = FixedClock(date(2026, 10, 14))

    assert clock.week_id() == "2026-W42"
    assert clock.week_id(date(2026, 10, 19)) == "2026-W43"


def test_clock_requires_today():
    """Test a clock without today() cannot be instantiated"""
    with pytest.raises(TypeError):
        Clock()


def test_system_clock_uses_timezone():
    """Test SystemClock reports the date in its timezone"""
    clock = SystemClock("UTC")
    expected = datetime.now(ZoneInfo("UTC")).date()

    assert clock.today() in (expected, previous_day(expected), date.fromordinal(expected.toordinal() + 1))


# ============================================================================
# Parsing & Formatting Tests
# ============================================================================

def test_previous_day_crosses_year():
    assert previous_day(date(2026, 1, 1)) == date(2025, 12, 31)


def test_to_iso():
    assert to_iso(date(2026, 3, 7)) == "2026-03-07"


def test_parse_iso_date():
    assert parse_iso_date("2026-10-14") == date(2026, 10, 14)


@pytest.mark.parametrize("text", [None, "", "yesterday", "2026-13-01"])
def test_parse_iso_date_invalid(text):
    """Test missing or malformed stored dates parse to None"""
    assert parse_iso_date(text) is None


def test_format_display_date():
    assert format_display_date(date(2026, 10, 5)) == "10/5/2026"


def test_format_long_date():
    assert format_long_date(date(2026, 10, 17)) == "Saturday, October 17, 2026"
