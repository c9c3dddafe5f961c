"""Unit tests for the weekly challenge (garden/gamification/challenges.py)"""
from garden.gamification.challenges import check_weekly_reset, increment_weekly_progress
from tests.helpers import events_of


def test_week_change_resets_count(ctx):
    """Test a new ISO week zeroes the count and updates the id"""
    ctx.profile.weekly.id = "2026-W41"
    ctx.profile.weekly.count = 3

    assert check_weekly_reset(ctx) is True
    assert ctx.profile.weekly.id == "2026-W42"
    assert ctx.profile.weekly.count == 0


def test_same_week_unchanged(ctx):
    """Test the current week is left alone"""
    ctx.profile.weekly.count = 3

    assert check_weekly_reset(ctx) is False
    assert ctx.profile.weekly.count == 3


def test_week_reset_applies_configured_target(ctx):
    """Test a new window picks up the configured target"""
    ctx.profile.weekly.id = "2026-W41"
    ctx.profile.weekly.target = 9

    check_weekly_reset(ctx)

    assert ctx.profile.weekly.target == ctx.rules.weekly_target


def test_week_reset_persists(ctx, profile_store):
    """Test a reset is saved by default"""
    ctx.profile.weekly.id = "2026-W41"

    check_weekly_reset(ctx)

    assert profile_store.load().weekly.id == "2026-W42"


def test_increment_resets_stale_week_first(ctx):
    """Test progress after a week boundary never lands in the old week"""
    ctx.profile.weekly.id = "2026-W41"
    ctx.profile.weekly.count = 4

    result = increment_weekly_progress(ctx)

    assert result["rolled_over"] is True
    assert result["count"] == 1
    assert ctx.profile.weekly.id == "2026-W42"


def test_increment_reports_completion_once(ctx):
    """Test reaching the target is reported on the increment that reaches it"""
    ctx.profile.weekly.count = 3

    first = increment_weekly_progress(ctx)
    second = increment_weekly_progress(ctx)
    third = increment_weekly_progress(ctx)

    assert first["completed"] is False
    assert second["completed"] is True
    assert third["completed"] is False
    assert third["count"] == 6

    toasts = [e.message for e in events_of(ctx.events.drain(), "toast")]
    assert toasts == ["Weekly challenge complete!"]
