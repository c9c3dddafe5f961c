"""Notification events emitted by the progression engine"""
from typing import Literal, Union
from pydantic import BaseModel

from garden.models.profile import Task


class LevelUp(BaseModel):
    kind: Literal["level_up"] = "level_up"
    new_level: int


class AchievementUnlocked(BaseModel):
    kind: Literal["achievement_unlocked"] = "achievement_unlocked"
    achievement_id: str
    title: str


class TaskCompleted(BaseModel):
    kind: Literal["task_completed"] = "task_completed"
    task: Task


class Toast(BaseModel):
    kind: Literal["toast"] = "toast"
    message: str


GardenEvent = Union[LevelUp, AchievementUnlocked, TaskCompleted, Toast]
