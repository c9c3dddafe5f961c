"""Unit tests for the runner minigame (garden/activities/runner_game.py)"""
from garden.activities.runner_game import GameState, PLAYER_REST_Y, RunnerGame


class StubRandom:
    """Returns queued values, then values that never spawn"""

    def __init__(self, values=()):
        self.values = list(values)

    def random(self):
        return self.values.pop(0) if self.values else 0.99


def _run(game, ticks):
    for _ in range(ticks):
        game.tick()


def test_game_starts_ready():
    game = RunnerGame(rng=StubRandom())

    assert game.state == GameState.READY
    assert game.tick() == GameState.READY
    assert game.jump() is False


def test_start_resets_game():
    game = RunnerGame(rng=StubRandom())
    game.start()

    assert game.state == GameState.RUNNING
    assert game.score == 0
    assert game.obstacles == []
    assert game.player.y == PLAYER_REST_Y


def test_jump_only_from_ground():
    """Test a second jump in mid-air is refused"""
    game = RunnerGame(rng=StubRandom())
    game.start()

    assert game.jump() is True
    game.tick()
    assert game.player.y < PLAYER_REST_Y
    assert game.jump() is False


def test_player_lands_after_jump():
    game = RunnerGame(rng=StubRandom())
    game.start()
    game.jump()

    _run(game, 40)

    assert game.player.grounded is True
    assert game.player.y == PLAYER_REST_Y


def test_standing_player_hits_obstacle():
    """Test an obstacle spawned at the right edge reaches the player on frame 133"""
    game = RunnerGame(rng=StubRandom([0.0]))
    game.start()

    _run(game, 132)
    assert game.state == GameState.RUNNING

    assert game.tick() == GameState.GAME_OVER
    assert game.score == 0


def test_jumping_over_obstacle_scores():
    """Test clearing an obstacle scores once it leaves the screen"""
    game = RunnerGame(rng=StubRandom([0.0]))
    game.start()

    _run(game, 125)
    assert game.jump() is True
    _run(game, 35)

    assert game.state == GameState.RUNNING
    assert game.score == 1
    assert game.obstacles == []


def test_ticks_after_game_over_change_nothing():
    game = RunnerGame(rng=StubRandom([0.0]))
    game.start()
    _run(game, 133)

    assert game.tick() == GameState.GAME_OVER
    assert game.jump() is False


def test_stop_reports_score_once():
    """Test stop ends a running game and is idempotent"""
    game = RunnerGame(rng=StubRandom())
    game.start()
    game.score = 7

    assert game.stop() == 7
    assert game.state == GameState.GAME_OVER
    assert game.stop() is None


def test_restart_after_game_over():
    game = RunnerGame(rng=StubRandom([0.0]))
    game.start()
    _run(game, 133)

    game.start()

    assert game.state == GameState.RUNNING
    assert game.obstacles == []
