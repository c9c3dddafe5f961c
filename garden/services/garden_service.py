"""
GardenService - Self-Care Garden Business Logic

Entry point for every UI action. Each method runs to completion
synchronously: mutate the profile, award XP (which levels up, persists and
scans achievements) and leave notification events on the queue for the
render layer.
"""

import logging
import random
from typing import Any, Callable, Dict, List, Optional

from garden.activities.journal import reflect
from garden.activities.moods import MOOD_FEEDBACK, validate_mood
from garden.activities.quests import roll_quest
from garden.config import TIMEZONE
from garden.events import EventQueue
from garden.exceptions import RecordNotFoundError
from garden.gamification import (
    award_xp,
    check_and_award_achievements,
    check_daily_reset,
    get_achievement_board,
    increment_weekly_progress,
    reconcile_level,
)
from garden.gamification.dashboards import certificate_lines, format_daily_snapshot
from garden.gamification.rules import GardenRules
from garden.gamification.xp_system import get_xp_for_activity
from garden.models.events import GardenEvent, TaskCompleted
from garden.models.journal import JournalEntry
from garden.models.profile import Profile, default_profile
from garden.services.context import GardenContext
from garden.storage import JournalStore, KeyValueStore, PreferencesStore, ProfileStore
from garden.utils.datetime_helpers import Clock, SystemClock, format_display_date, to_iso

logger = logging.getLogger(__name__)


class GardenService:
    """
    Service for the garden's user actions.

    Responsibilities:
    - Daily check-in (task reset, streak)
    - Ritual, quest, journal, breathing, game and mood rewards
    - Profile snapshot and progress displays for rendering
    - Full data reset
    """

    def __init__(
        self,
        ctx: GardenContext,
        journal_store: JournalStore,
        preferences: PreferencesStore
    ):
        """
        Initialize GardenService.

        Args:
            ctx: Garden context (profile, store, clock, rules, events)
            journal_store: Journal history record
            preferences: Mute and theme flags
        """
        self.ctx = ctx
        self.journal_store = journal_store
        self.preferences = preferences
        logger.debug("GardenService initialized")

    @classmethod
    def open(
        cls,
        backend: KeyValueStore,
        clock: Optional[Clock] = None,
        rules: Optional[GardenRules] = None,
        events: Optional[EventQueue] = None
    ) -> "GardenService":
        """
        Load the stored profile (or defaults) and run the daily check-in

        Args:
            backend: Key-value storage holding both records
            clock: Date provider (defaults to the configured timezone)
            rules: Progression configuration
            events: Outbound queue to use (a new one by default)
        """
        clock = clock or SystemClock(TIMEZONE)
        rules = rules or GardenRules()

        def _defaults() -> dict:
            return default_profile(
                today=to_iso(clock.today()),
                week_id=clock.week_id(),
                tasks=rules.daily_tasks,
                weekly_target=rules.weekly_target,
            )

        profile_store = ProfileStore(backend, defaults_factory=_defaults)
        ctx = GardenContext(
            profile=profile_store.load(),
            profile_store=profile_store,
            clock=clock,
            rules=rules,
            events=events if events is not None else EventQueue(),
        )
        service = cls(ctx, JournalStore(backend), PreferencesStore(backend))
        service._start_session()
        return service

    def _start_session(self) -> None:
        reconcile_level(self.ctx)
        result = self.check_in()
        logger.info(
            f"Session opened: level={self.ctx.profile.level}, xp={self.ctx.profile.xp}, "
            f"streak={result['streak']}"
        )

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def get_profile_snapshot(self) -> Profile:
        """Independent copy of the profile; changing it does not affect the engine"""
        return self.ctx.profile.model_copy(deep=True)

    def drain_events(self) -> List[GardenEvent]:
        return self.ctx.events.drain()

    def subscribe(self, handler: Callable[[GardenEvent], None]) -> None:
        self.ctx.events.subscribe(handler)

    def achievement_board(self) -> List[Dict[str, Any]]:
        return get_achievement_board(self.ctx.profile, self.ctx.rules.achievements)

    def journal_history(self, limit: Optional[int] = 5) -> List[JournalEntry]:
        if limit is None:
            return self.journal_store.entries()
        return self.journal_store.recent(limit)

    def summary(self) -> str:
        return format_daily_snapshot(self.ctx.profile, self.ctx.rules.level_thresholds)

    def certificate(self) -> List[str]:
        return certificate_lines(self.ctx.profile, self.ctx.clock.today())

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def check_in(self) -> Dict[str, Any]:
        """
        Run the daily reset, then the achievement scan.

        Called on open and again by sessions left open past midnight, so a
        streak reached by checking in unlocks right away.

        Returns:
            check_daily_reset result plus 'achievements_unlocked'
        """
        result = check_daily_reset(self.ctx)
        result["achievements_unlocked"] = check_and_award_achievements(self.ctx)
        return result

    def complete_task(self, task_id: str) -> Dict[str, Any]:
        """
        Mark a daily ritual done and award its XP.

        Re-completing a finished task changes nothing.

        Returns:
            {'completed': bool, 'task_id': str, **award_xp result}
        """
        task = self.ctx.profile.find_task(task_id)
        if task is None:
            raise RecordNotFoundError(
                f"No daily task with id {task_id!r}",
                record_type="Task",
                record_id=task_id,
                operation="complete_task",
            )

        if task.done:
            logger.debug(f"Task {task_id} already done today")
            return {"completed": False, "task_id": task_id, "xp_awarded": 0, "leveled_up": False,
                    "achievements_unlocked": []}

        task.done = True
        self.ctx.emit(TaskCompleted(task=task.model_copy()))
        xp_result = award_xp(self.ctx, task.xp, source_type="task")
        self.ctx.toast("Ritual complete!")

        return {"completed": True, "task_id": task_id, **xp_result}

    def roll_quest(self, rng: Optional[random.Random] = None) -> str:
        return roll_quest(rng)

    def complete_quest(self) -> Dict[str, Any]:
        """
        Count a finished quest toward stats and this week's challenge, then award XP.

        Returns:
            award_xp result plus 'weekly' (see increment_weekly_progress)
        """
        weekly = increment_weekly_progress(self.ctx)
        self.ctx.profile.stats.quests += 1
        xp_result = award_xp(self.ctx, get_xp_for_activity("quest"), source_type="quest")
        self.ctx.toast("Quest Complete!")

        return {**xp_result, "weekly": weekly}

    def save_journal_entry(self, text: str) -> Dict[str, Any]:
        """
        Save a journal entry, reward it and return a reflection.

        Blank text is ignored.

        Returns:
            {'saved': bool, 'entry': JournalEntry, 'reflection': str, **award_xp result}
        """
        text = (text or "").strip()
        if not text:
            return {"saved": False, "entry": None, "reflection": None, "xp_awarded": 0,
                    "leveled_up": False, "achievements_unlocked": []}

        entry = self.journal_store.add(format_display_date(self.ctx.clock.today()), text)
        self.ctx.profile.stats.journal += 1
        xp_result = award_xp(self.ctx, get_xp_for_activity("journal"), source_type="journal")
        self.ctx.toast("Saved to your mind space.")

        return {"saved": True, "entry": entry, "reflection": reflect(text), **xp_result}

    def finish_breathing(self, cycles_completed: int) -> Dict[str, Any]:
        """
        Reward a breathing session that ran at least one full cycle.

        Args:
            cycles_completed: Value returned by BreathingSession.stop()
        """
        if cycles_completed < 1:
            logger.debug("Breathing session ended before a full cycle, no reward")
            return {"rewarded": False, "xp_awarded": 0, "leveled_up": False, "achievements_unlocked": []}

        self.ctx.profile.stats.breath += 1
        xp_result = award_xp(self.ctx, get_xp_for_activity("breathing"), source_type="breathing")
        return {"rewarded": True, **xp_result}

    def finish_game(self, score: int) -> Dict[str, Any]:
        """
        Record a finished runner game: high score and score // 2 XP.

        Returns:
            {'new_high_score': bool, 'high_score': int, **award_xp result}
        """
        stats = self.ctx.profile.stats
        new_high_score = score > stats.game_high
        if new_high_score:
            stats.game_high = score
            self.ctx.toast("New High Score!")

        xp_amount = get_xp_for_activity("game", score=score)
        if xp_amount > 0:
            xp_result = award_xp(self.ctx, xp_amount, source_type="game")
        else:
            if new_high_score:
                self.ctx.save()
            xp_result = {"xp_awarded": 0, "leveled_up": False,
                         "achievements_unlocked": check_and_award_achievements(self.ctx)}

        return {"new_high_score": new_high_score, "high_score": stats.game_high, **xp_result}

    def log_mood(self, mood: str) -> Dict[str, Any]:
        """Mood check-in: 5 XP and an acknowledgement"""
        validate_mood(mood)
        xp_result = award_xp(self.ctx, get_xp_for_activity("mood"), source_type="mood")
        return {"mood": mood, "feedback": MOOD_FEEDBACK, **xp_result}

    def update_name(self, name: str) -> bool:
        """Change the display name; blank names are ignored"""
        name = (name or "").strip()
        if not name:
            return False

        self.ctx.profile.name = name
        self.ctx.save()
        self.ctx.toast("Name updated!")
        return True

    def reset_all_data(self) -> None:
        """
        Delete the profile and journal records and start over.

        Irreversible; confirmation is the caller's job.
        """
        logger.warning("Resetting all garden data")
        self.ctx.profile_store.clear()
        self.journal_store.clear()
        self.ctx.profile = self.ctx.profile_store.load()
        self._start_session()
