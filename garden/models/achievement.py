"""Achievement models for gamification"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel


class CriteriaType(str, Enum):
    """What an achievement condition measures"""
    LEVEL = "level"
    STREAK = "streak"
    STAT = "stat"  # a named counter in Profile.stats
    TOTAL_XP = "total_xp"
    WEEKLY_COUNT = "weekly_count"


class AchievementCriteria(BaseModel):
    """Unlock condition: measured value >= value"""
    type: CriteriaType
    value: int
    stat: Optional[str] = None  # breath, journal, quests, game_high


class AchievementDefinition(BaseModel):
    """Achievement definition (static configuration, never persisted)"""
    id: str
    icon: str
    title: str
    desc: str
    criteria: AchievementCriteria
