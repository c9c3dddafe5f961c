"""
Weekly Challenge

One counter per ISO week: every completed quest adds 1 until the target is
reached. The week id is re-checked before every increment so progress made
after a week boundary never lands in the previous week.
"""

import logging
from typing import Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from garden.services.context import GardenContext

logger = logging.getLogger(__name__)


def check_weekly_reset(ctx: "GardenContext", save: bool = True) -> bool:
    """
    Start a new weekly window if the ISO week changed

    Args:
        ctx: Garden context
        save: Persist immediately when a reset happens

    Returns:
        True when the window was reset
    """
    weekly = ctx.profile.weekly
    current_week = ctx.clock.week_id()

    if weekly.id == current_week:
        return False

    logger.info(f"Weekly challenge rollover {weekly.id} → {current_week} (had {weekly.count}/{weekly.target})")
    weekly.id = current_week
    weekly.count = 0
    weekly.target = ctx.rules.weekly_target

    if save:
        ctx.save()
    return True


def increment_weekly_progress(ctx: "GardenContext") -> Dict[str, any]:
    """
    Count one quest toward this week's challenge

    Does not persist; the caller saves (award_xp does) as part of the same action.

    Returns:
        {
            'count': int,
            'target': int,
            'week_id': str,
            'rolled_over': bool,
            'completed': bool  # target reached by this increment
        }
    """
    rolled_over = check_weekly_reset(ctx, save=False)
    weekly = ctx.profile.weekly
    weekly.count += 1

    completed = weekly.count == weekly.target
    if completed:
        ctx.toast("Weekly challenge complete!")
        logger.info(f"Weekly challenge {weekly.id} completed")

    return {
        "count": weekly.count,
        "target": weekly.target,
        "week_id": weekly.id,
        "rolled_over": rolled_over,
        "completed": completed,
    }
