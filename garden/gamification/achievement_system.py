"""
Achievement System

Achievements are plain data: each definition carries a criteria block
({type, value, stat}) and one generic evaluator decides whether it is met.

Criteria types:
- level: current level >= value
- streak: current streak >= value
- stat: a named stats counter >= value (breath, journal, quests, game_high)
- total_xp: total XP >= value
- weekly_count: this week's quest count >= value

Unlocks are one-way and recorded once; scanning again without a profile
change unlocks nothing.
"""

from typing import Dict, List, Optional, TYPE_CHECKING
import logging

from garden.models.achievement import AchievementCriteria, AchievementDefinition, CriteriaType
from garden.models.events import AchievementUnlocked
from garden.models.profile import Profile

if TYPE_CHECKING:
    from garden.services.context import GardenContext

logger = logging.getLogger(__name__)


DEFAULT_ACHIEVEMENTS: List[AchievementDefinition] = [
    AchievementDefinition(
        id="level5",
        icon="🌳",
        title="Dedicated Gardener",
        desc="Reach Level 5",
        criteria=AchievementCriteria(type=CriteriaType.LEVEL, value=5),
    ),
    AchievementDefinition(
        id="streak3",
        icon="🔥",
        title="On Fire",
        desc="3 Day Streak",
        criteria=AchievementCriteria(type=CriteriaType.STREAK, value=3),
    ),
    AchievementDefinition(
        id="writer",
        icon="✍️",
        title="Storyteller",
        desc="5 Journal Entries",
        criteria=AchievementCriteria(type=CriteriaType.STAT, stat="journal", value=5),
    ),
    AchievementDefinition(
        id="gamer",
        icon="🎮",
        title="Pro Jumper",
        desc="Score 20 in Game",
        criteria=AchievementCriteria(type=CriteriaType.STAT, stat="game_high", value=20),
    ),
]

# Stored records use camelCase; criteria may name either spelling
_STAT_ALIASES = {"gameHigh": "game_high"}


def check_and_award_achievements(ctx: "GardenContext") -> List[str]:
    """
    Scan every locked achievement in definition order and unlock those met

    Persists once if anything was unlocked, then emits one
    AchievementUnlocked event (plus a toast) per unlock, in scan order.

    Returns:
        Ids of newly unlocked achievements
    """
    profile = ctx.profile
    newly_unlocked: List[AchievementDefinition] = []

    for achievement in ctx.rules.achievements:
        # Skip if already unlocked
        if profile.has_achievement(achievement.id):
            continue

        if _is_met(profile, achievement.criteria):
            profile.achievements.append(achievement.id)
            newly_unlocked.append(achievement)
            logger.info(f"Unlocked achievement: {achievement.id} ({achievement.title})")

    if newly_unlocked:
        ctx.save()
        for achievement in newly_unlocked:
            ctx.emit(AchievementUnlocked(achievement_id=achievement.id, title=achievement.title))
            ctx.toast(f"Achievement Unlocked: {achievement.title}")

    return [achievement.id for achievement in newly_unlocked]


def get_achievement_board(
    profile: Profile,
    definitions: List[AchievementDefinition] = DEFAULT_ACHIEVEMENTS
) -> List[Dict[str, any]]:
    """
    Achievement grid content: every achievement with lock state and progress

    Returns:
        [
            {
                'id': str,
                'icon': str,
                'title': str,
                'desc': str,
                'unlocked': bool,
                'progress': {'current': int, 'required': int, 'percentage': int}
            }
        ]
    """
    board = []
    for achievement in definitions:
        unlocked = profile.has_achievement(achievement.id)
        progress = _calculate_achievement_progress(profile, achievement.criteria)
        if unlocked:
            progress["percentage"] = 100

        board.append({
            "id": achievement.id,
            "icon": achievement.icon,
            "title": achievement.title,
            "desc": achievement.desc,
            "unlocked": unlocked,
            "progress": progress,
        })
    return board


# ============================================
# Helper Functions for Achievement Criteria
# ============================================

def _is_met(profile: Profile, criteria: AchievementCriteria) -> bool:
    current = _measure(profile, criteria)
    if current is None:
        return False
    return current >= criteria.value


def _measure(profile: Profile, criteria: AchievementCriteria) -> Optional[int]:
    """Current value of whatever the criteria measures"""
    if criteria.type == CriteriaType.LEVEL:
        return profile.level

    elif criteria.type == CriteriaType.STREAK:
        return profile.streak

    elif criteria.type == CriteriaType.TOTAL_XP:
        return profile.xp

    elif criteria.type == CriteriaType.WEEKLY_COUNT:
        return profile.weekly.count

    elif criteria.type == CriteriaType.STAT:
        stat = _STAT_ALIASES.get(criteria.stat, criteria.stat)
        if stat not in type(profile.stats).model_fields:
            logger.warning(f"Achievement criteria names unknown stat {criteria.stat!r}")
            return None
        return getattr(profile.stats, stat)

    logger.warning(f"Unknown achievement criteria type: {criteria.type!r}")
    return None


def _calculate_achievement_progress(profile: Profile, criteria: AchievementCriteria) -> Dict[str, int]:
    current = _measure(profile, criteria) or 0
    required = criteria.value
    percentage = min(100, int(current / required * 100)) if required > 0 else 100

    return {
        "current": current,
        "required": required,
        "percentage": percentage,
    }
