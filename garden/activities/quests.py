"""Micro-quests offered by the quest roller"""
import random
from typing import Optional

QUESTS = [
    "Stretch for 5m",
    "Drink Water",
    "Look out window",
    "Relax Jaw",
    "3 Deep Breaths",
]


def roll_quest(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(QUESTS)
