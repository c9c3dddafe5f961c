"""
Progress Displays

Pull-side helpers a render layer uses after an action completes: progress
bar percentages, the garden growth stage and certificate text. Percentages
are clamped here for display only; stored values are never clamped.
"""

import logging
from datetime import date
from typing import Dict, List

from garden.gamification.xp_system import LEVEL_THRESHOLDS, calculate_level_from_xp
from garden.models.profile import Profile
from garden.utils.datetime_helpers import format_long_date

logger = logging.getLogger(__name__)

GARDEN_STAGES = ["Seed", "Sprout", "Plant", "Flower", "Lush"]


def xp_progress(profile: Profile, thresholds: List[int] = LEVEL_THRESHOLDS) -> Dict[str, any]:
    """
    XP bar for the current level

    Returns:
        {'percent': float 0-100, 'label': str such as "105 / 250 XP"}
    """
    info = calculate_level_from_xp(profile.xp, thresholds)
    base = info["xp_for_current_level"]
    target = info["xp_for_next_level"]

    if target is None or target <= base:
        return {"percent": 100.0, "label": f"{profile.xp} XP (max level)"}

    percent = (profile.xp - base) / (target - base) * 100
    return {
        "percent": max(0.0, min(100.0, percent)),
        "label": f"{profile.xp} / {target} XP",
    }


def weekly_progress(profile: Profile) -> Dict[str, any]:
    """Weekly challenge bar, e.g. {'percent': 40.0, 'label': '2/5'}"""
    weekly = profile.weekly
    percent = weekly.count / weekly.target * 100
    return {
        "percent": min(100.0, percent),
        "label": f"{weekly.count}/{weekly.target}",
    }


def garden_stage(level: int) -> str:
    """Growth stage shown for a level (capped at the last stage)"""
    index = max(0, min(level - 1, len(GARDEN_STAGES) - 1))
    return GARDEN_STAGES[index]


def certificate_lines(profile: Profile, generated_on: date) -> List[str]:
    """Text content of the printable certificate"""
    return [
        "Certificate of Self-Care",
        f"Presented to {profile.name}",
        f"🌱 Current Level: {profile.level}",
        f"🔥 Day Streak: {profile.streak}",
        f"✍️ Thoughts Journaled: {profile.stats.journal}",
        f"Generated on {format_long_date(generated_on)}",
    ]


def format_daily_snapshot(profile: Profile, thresholds: List[int] = LEVEL_THRESHOLDS) -> str:
    """
    One-screen text summary of today's progress

    Args:
        profile: Current profile snapshot
        thresholds: Level threshold table

    Returns:
        Formatted multi-line string
    """
    xp_bar = xp_progress(profile, thresholds)
    weekly = weekly_progress(profile)
    done = sum(1 for task in profile.daily.tasks if task.done)

    lines = [
        f"Welcome back, {profile.name}",
        f"Level {profile.level} ({garden_stage(profile.level)}) - {xp_bar['label']}",
        f"🔥 Streak: {profile.streak} days",
        f"✅ Rituals: {done}/{len(profile.daily.tasks)}",
        f"🗓️ Weekly challenge: {weekly['label']}",
    ]

    for task in profile.daily.tasks:
        mark = "x" if task.done else " "
        lines.append(f"  [{mark}] {task.label} (+{task.xp}XP)")

    return "\n".join(lines)
