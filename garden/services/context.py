"""
Garden Context

Everything one engine instance needs, passed explicitly to every engine
operation: the profile, where it is persisted, the clock, the rules and the
outbound event queue. Several contexts can live side by side (tests do this).
"""

from dataclasses import dataclass, field
import logging

from garden.events import EventQueue
from garden.gamification.rules import GardenRules
from garden.models.events import GardenEvent, Toast
from garden.models.profile import Profile
from garden.storage.profile_store import ProfileStore
from garden.utils.datetime_helpers import Clock

logger = logging.getLogger(__name__)


@dataclass
class GardenContext:
    """Profile owner for the progression engine"""

    profile: Profile
    profile_store: ProfileStore
    clock: Clock
    rules: GardenRules = field(default_factory=GardenRules)
    events: EventQueue = field(default_factory=EventQueue)

    def save(self) -> None:
        self.profile_store.save(self.profile)

    def emit(self, event: GardenEvent) -> None:
        self.events.emit(event)

    def toast(self, message: str) -> None:
        self.emit(Toast(message=message))
