"""Static progression configuration shared by the engine"""
from dataclasses import dataclass, field
from typing import List

from garden.config import WEEKLY_CHALLENGE_TARGET
from garden.models.achievement import AchievementDefinition
from garden.models.profile import Task
from garden.gamification.xp_system import LEVEL_THRESHOLDS
from garden.gamification.achievement_system import DEFAULT_ACHIEVEMENTS

DEFAULT_DAILY_TASKS: List[Task] = [
    Task(id="breathe", label="Take 3 deep breaths", xp=10),
    Task(id="journal", label="Write one thought", xp=15),
    Task(id="water", label="Drink water", xp=5),
]


@dataclass
class GardenRules:
    """Threshold table, ritual list, weekly target and achievement list"""
    level_thresholds: List[int] = field(default_factory=lambda: list(LEVEL_THRESHOLDS))
    daily_tasks: List[Task] = field(default_factory=lambda: list(DEFAULT_DAILY_TASKS))
    weekly_target: int = WEEKLY_CHALLENGE_TARGET
    achievements: List[AchievementDefinition] = field(default_factory=lambda: list(DEFAULT_ACHIEVEMENTS))
