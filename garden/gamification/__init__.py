"""
Progression engine for Self-Care Garden

- XP and leveling against a fixed threshold table
- Daily reset and streak tracking
- Weekly challenge window
- Data-driven achievements
"""

from garden.gamification.xp_system import award_xp, calculate_level_from_xp, level_for_xp, reconcile_level
from garden.gamification.streak_system import check_daily_reset
from garden.gamification.challenges import check_weekly_reset, increment_weekly_progress
from garden.gamification.achievement_system import check_and_award_achievements, get_achievement_board

__all__ = [
    "award_xp",
    "calculate_level_from_xp",
    "level_for_xp",
    "reconcile_level",
    "check_daily_reset",
    "check_weekly_reset",
    "increment_weekly_progress",
    "check_and_award_achievements",
    "get_achievement_board",
]
