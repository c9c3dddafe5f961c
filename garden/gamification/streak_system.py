"""
Daily Reset and Streak Tracking

Runs once per load:
- Same day as the last visit: nothing changes
- New day: the ritual checklist is reloaded with every task undone
- Visit on the day after the last one: streak continues
- Any other gap (or first run): streak restarts at 1
"""

from typing import Dict, TYPE_CHECKING
import logging

from garden.gamification.challenges import check_weekly_reset
from garden.utils.datetime_helpers import parse_iso_date, previous_day, to_iso

if TYPE_CHECKING:
    from garden.services.context import GardenContext

logger = logging.getLogger(__name__)


def check_daily_reset(ctx: "GardenContext") -> Dict[str, any]:
    """
    Apply the daily reset rule for the clock's current date

    Returns:
        {
            'reset': bool,  # False when already checked in today
            'tasks_reset': bool,
            'weekly_reset': bool,
            'streak': int,
            'old_streak': int,
            'streak_broken': bool
        }
    """
    profile = ctx.profile
    today = ctx.clock.today()
    today_str = to_iso(today)
    old_streak = profile.streak

    if profile.last_visit == today_str:
        return {
            "reset": False,
            "tasks_reset": False,
            "weekly_reset": False,
            "streak": profile.streak,
            "old_streak": old_streak,
            "streak_broken": False,
        }

    tasks_reset = False
    if profile.daily.date != today_str:
        profile.daily.date = today_str
        profile.daily.tasks = [
            task.model_copy(update={"done": False}) for task in ctx.rules.daily_tasks
        ]
        tasks_reset = True
        logger.info(f"New day {today_str}: reloaded {len(profile.daily.tasks)} daily tasks")

    streak_broken = False
    # A malformed stored date is logged and counts as a gap
    if parse_iso_date(profile.last_visit) == previous_day(today):
        profile.streak += 1
    else:
        streak_broken = old_streak > 1
        profile.streak = 1
        logger.info(f"Streak restarted (last visit: {profile.last_visit}, was {old_streak} days)")

    profile.last_visit = today_str
    weekly_reset = check_weekly_reset(ctx, save=False)
    ctx.save()

    logger.info(f"Daily check-in {today_str}: streak {old_streak} → {profile.streak}")

    return {
        "reset": True,
        "tasks_reset": tasks_reset,
        "weekly_reset": weekly_reset,
        "streak": profile.streak,
        "old_streak": old_streak,
        "streak_broken": streak_broken,
    }
