"""Shared test helpers (clock, profile builders, event filters)"""
from datetime import date, timedelta

from garden.gamification.rules import GardenRules
from garden.models.profile import Profile, default_profile
from garden.utils.datetime_helpers import Clock, to_iso


class FixedClock(Clock):
    """Clock whose date only changes when a test says so"""

    def __init__(self, today: date):
        self.current = today

    def today(self) -> date:
        return self.current

    def advance(self, days: int = 1) -> date:
        self.current = self.current + timedelta(days=days)
        return self.current


def make_profile(clock: Clock, **overrides) -> Profile:
    """Build a profile for the clock's current day, overriding stored fields"""
    record = default_profile(
        today=to_iso(clock.today()),
        week_id=clock.week_id(),
        tasks=GardenRules().daily_tasks,
    )
    record.update(overrides)
    return Profile.model_validate(record)


def events_of(events, kind: str) -> list:
    return [e for e in events if e.kind == kind]
