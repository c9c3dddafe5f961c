"""
XP and Leveling System

Manages XP awards and level calculations against a fixed threshold table.

Leveling Curve (total XP needed to reach each level):
- Level 1: 0
- Level 2: 100
- Level 3: 250
- Level 4: 450
- Level 5: 700
- Level 6: 1000
- Level 7: 1500
- Level 8: 2500 (top of the table, no further levels)

XP Award Rules:
- Daily ritual: the task's own XP (5-15)
- Breathing session: 5 XP
- Journal entry: 20 XP
- Quest: 10 XP
- Mood check-in: 5 XP
- Runner game: score // 2 XP
"""

from typing import Dict, List, Optional, TYPE_CHECKING
import logging

from garden.models.events import LevelUp
from garden.gamification.achievement_system import check_and_award_achievements

if TYPE_CHECKING:
    from garden.services.context import GardenContext

logger = logging.getLogger(__name__)

LEVEL_THRESHOLDS: List[int] = [0, 100, 250, 450, 700, 1000, 1500, 2500]


def threshold_for_next_level(level: int, thresholds: List[int] = LEVEL_THRESHOLDS) -> Optional[int]:
    """
    Total XP needed to advance past `level`

    Returns:
        The threshold, or None when `level` is the top of the table
    """
    if 1 <= level < len(thresholds):
        return thresholds[level]
    return None


def level_for_xp(total_xp: int, thresholds: List[int] = LEVEL_THRESHOLDS) -> int:
    """Largest level L with thresholds[L-1] <= total_xp"""
    level = 1
    while level < len(thresholds) and thresholds[level] <= total_xp:
        level += 1
    return level


def calculate_level_from_xp(total_xp: int, thresholds: List[int] = LEVEL_THRESHOLDS) -> Dict[str, any]:
    """
    Calculate level from total XP

    Returns:
        {
            'current_level': int,
            'xp_for_current_level': int,
            'xp_for_next_level': int or None (top level),
            'xp_to_next_level': int or None (top level),
            'is_max_level': bool
        }
    """
    level = level_for_xp(total_xp, thresholds)
    next_threshold = threshold_for_next_level(level, thresholds)

    return {
        "current_level": level,
        "xp_for_current_level": thresholds[level - 1],
        "xp_for_next_level": next_threshold,
        "xp_to_next_level": next_threshold - total_xp if next_threshold is not None else None,
        "is_max_level": next_threshold is None,
    }


def award_xp(
    ctx: "GardenContext",
    amount: int,
    source_type: str = "activity"
) -> Dict[str, any]:
    """
    Award XP and level up as many times as the new total allows

    Emits one LevelUp event per level crossed, persists the profile, then
    runs the achievement scan.

    Args:
        ctx: Garden context holding the profile
        amount: Positive XP amount; anything else is ignored
        source_type: Type of activity (task, breathing, journal, quest, mood, game)

    Returns:
        {
            'xp_awarded': int,
            'new_total_xp': int,
            'old_total_xp': int,
            'leveled_up': bool,
            'old_level': int,
            'new_level': int,
            'xp_to_next_level': int or None,
            'achievements_unlocked': list of achievement ids
        }
    """
    profile = ctx.profile
    old_level = profile.level
    old_total_xp = profile.xp

    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        logger.warning(f"Ignoring XP award of {amount!r} from {source_type}")
        return {
            "xp_awarded": 0,
            "new_total_xp": old_total_xp,
            "old_total_xp": old_total_xp,
            "leveled_up": False,
            "old_level": old_level,
            "new_level": old_level,
            "xp_to_next_level": _xp_to_next(profile.xp, profile.level, ctx.rules.level_thresholds),
            "achievements_unlocked": [],
        }

    profile.xp += amount

    # A large award can cross several thresholds at once
    while True:
        next_threshold = threshold_for_next_level(profile.level, ctx.rules.level_thresholds)
        if next_threshold is None or next_threshold > profile.xp:
            break
        profile.level += 1
        ctx.emit(LevelUp(new_level=profile.level))
        ctx.toast(f"Level Up! Welcome to Level {profile.level} 🌟")
        logger.info(f"Leveled up to {profile.level} at {profile.xp} XP")

    ctx.save()

    logger.info(
        f"Awarded {amount} XP for {source_type}. "
        f"Total: {profile.xp} XP, Level: {profile.level}"
    )

    unlocked = check_and_award_achievements(ctx)

    return {
        "xp_awarded": amount,
        "new_total_xp": profile.xp,
        "old_total_xp": old_total_xp,
        "leveled_up": profile.level > old_level,
        "old_level": old_level,
        "new_level": profile.level,
        "xp_to_next_level": _xp_to_next(profile.xp, profile.level, ctx.rules.level_thresholds),
        "achievements_unlocked": unlocked,
    }


def reconcile_level(ctx: "GardenContext") -> bool:
    """
    Raise a stored level that lags behind its XP

    Never lowers a level and emits no events. Returns True when the profile
    changed (and was saved).
    """
    profile = ctx.profile
    expected = level_for_xp(profile.xp, ctx.rules.level_thresholds)
    if profile.level >= expected:
        return False

    logger.info(f"Stored level {profile.level} lags {profile.xp} XP, raising to {expected}")
    profile.level = expected
    ctx.save()
    return True


def get_xp_for_activity(activity_type: str, **kwargs) -> int:
    """
    Calculate XP amount for different activity types

    Args:
        activity_type: Type of activity
        **kwargs: Additional context (score for the runner game)

    Returns:
        XP amount to award (0 means nothing to award)
    """
    base_xp = {
        "breathing": 5,
        "journal": 20,
        "quest": 10,
        "mood": 5,
    }

    if activity_type == "game":
        return max(0, kwargs.get("score", 0)) // 2

    return base_xp.get(activity_type, 0)


def _xp_to_next(total_xp: int, level: int, thresholds: List[int]) -> Optional[int]:
    next_threshold = threshold_for_next_level(level, thresholds)
    return next_threshold - total_xp if next_threshold is not None else None
