"""Global test fixtures for garden tests"""
import pytest
from datetime import date

from garden.events import EventQueue
from garden.gamification.rules import GardenRules
from garden.models.profile import default_profile
from garden.services import GardenContext, GardenService
from garden.storage import MemoryKeyValueStore, ProfileStore
from garden.utils.datetime_helpers import to_iso
from tests.helpers import FixedClock


# ============================================================================
# Clock Fixtures
# ============================================================================

@pytest.fixture
def today():
    """Standard test date (a Wednesday, ISO week 2026-W42)"""
    return date(2026, 10, 14)


@pytest.fixture
def clock(today):
    return FixedClock(today)


# ============================================================================
# Storage & Context Fixtures
# ============================================================================

@pytest.fixture
def backend():
    """Fresh in-memory key-value storage"""
    return MemoryKeyValueStore()


@pytest.fixture
def rules():
    return GardenRules(weekly_target=5)


@pytest.fixture
def profile_store(backend, clock, rules):
    return ProfileStore(
        backend,
        defaults_factory=lambda: default_profile(
            today=to_iso(clock.today()),
            week_id=clock.week_id(),
            tasks=rules.daily_tasks,
            weekly_target=rules.weekly_target,
        ),
    )


@pytest.fixture
def ctx(profile_store, clock, rules):
    """Context holding a default profile, not yet checked in"""
    return GardenContext(
        profile=profile_store.load(),
        profile_store=profile_store,
        clock=clock,
        rules=rules,
        events=EventQueue(),
    )


@pytest.fixture
def service(backend, clock, rules):
    """GardenService opened on empty storage (first run, already checked in)"""
    svc = GardenService.open(backend, clock=clock, rules=rules)
    svc.drain_events()
    return svc
