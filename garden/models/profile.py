"""Profile models for the progression engine"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Task(BaseModel):
    """Daily ritual; only `done` changes at runtime"""
    id: str
    label: str
    done: bool = False
    xp: int = Field(gt=0)


class Stats(BaseModel):
    """Activity counters. game_high is a high-water mark, the rest are cumulative"""
    model_config = ConfigDict(populate_by_name=True)

    breath: int = Field(default=0, ge=0)
    journal: int = Field(default=0, ge=0)
    quests: int = Field(default=0, ge=0)
    game_high: int = Field(default=0, ge=0, alias="gameHigh")


class DailyState(BaseModel):
    """Today's ritual checklist"""
    date: str  # ISO YYYY-MM-DD
    tasks: list[Task] = Field(default_factory=list)


class WeeklyChallenge(BaseModel):
    """Quest counter for one ISO week"""
    id: str  # e.g. "2026-W42"
    count: int = Field(default=0, ge=0)
    target: int = Field(default=5, gt=0)


class Profile(BaseModel):
    """The single persisted progression record"""
    model_config = ConfigDict(populate_by_name=True)

    name: str = "Friend"
    xp: int = Field(default=0, ge=0)
    level: int = Field(default=1, ge=1)
    streak: int = Field(default=0, ge=0)
    last_visit: Optional[str] = Field(default=None, alias="lastVisit")
    stats: Stats = Field(default_factory=Stats)
    daily: DailyState
    weekly: WeeklyChallenge
    achievements: list[str] = Field(default_factory=list)

    @field_validator("achievements")
    @classmethod
    def _unique_achievements(cls, value: list[str]) -> list[str]:
        # Membership is what matters; keep first-seen order
        return list(dict.fromkeys(value))

    def has_achievement(self, achievement_id: str) -> bool:
        return achievement_id in self.achievements

    def find_task(self, task_id: str) -> Optional[Task]:
        for task in self.daily.tasks:
            if task.id == task_id:
                return task
        return None

    def to_record(self) -> dict:
        """Serializable dict using the stored (camelCase) field names"""
        return self.model_dump(mode="json", by_alias=True)


def default_profile(
    today: str,
    week_id: str,
    tasks: list[Task],
    weekly_target: int = 5
) -> dict:
    """
    Build the default profile record

    Returned as a plain dict so a stored record can be shallow-merged over it
    before validation.
    """
    return {
        "name": "Friend",
        "xp": 0,
        "level": 1,
        "streak": 0,
        "lastVisit": None,
        "stats": Stats().model_dump(by_alias=True),
        "daily": {
            "date": today,
            "tasks": [task.model_copy(update={"done": False}).model_dump() for task in tasks],
        },
        "weekly": {"id": week_id, "count": 0, "target": weekly_target},
        "achievements": [],
    }
