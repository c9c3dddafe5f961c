"""
Self-care activities

Each activity reports its outcome to GardenService as a single event at its
natural end (breathing stop, game over, saved entry, completed quest).
"""

from garden.activities.breathing import BreathingSession, BreathPhase, PATTERNS
from garden.activities.runner_game import RunnerGame, GameState
from garden.activities.journal import random_prompt, reflect
from garden.activities.quests import roll_quest
from garden.activities.moods import MOODS, validate_mood

__all__ = [
    "BreathingSession",
    "BreathPhase",
    "PATTERNS",
    "RunnerGame",
    "GameState",
    "random_prompt",
    "reflect",
    "roll_quest",
    "MOODS",
    "validate_mood",
]
