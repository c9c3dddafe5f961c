"""
Runner Minigame

Frame-stepped state machine for the jump-over-the-rocks game. The caller
drives it with one tick() per animation frame and draws the returned
state; the outcome (final score) is reported once, at GAME_OVER.

Coordinates follow a 200px-high playfield with the ground line at y=170.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 600
GROUND_LINE = 170
PLAYER_X = 50
PLAYER_SIZE = 20
PLAYER_REST_Y = GROUND_LINE - PLAYER_SIZE
JUMP_POWER = -10.0
GRAVITY = 0.6
OBSTACLE_WIDTH = 20
OBSTACLE_HEIGHT = 30
OBSTACLE_SPEED = 4
SPAWN_CHANCE = 0.015


class GameState(str, Enum):
    READY = "ready"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class Obstacle:
    x: float
    w: int = OBSTACLE_WIDTH
    h: int = OBSTACLE_HEIGHT


@dataclass
class Player:
    y: float = PLAYER_REST_Y
    dy: float = 0.0
    grounded: bool = True


class RunnerGame:
    """One runner game; start() again after GAME_OVER to retry"""

    def __init__(self, width: int = DEFAULT_WIDTH, rng: Optional[random.Random] = None):
        self.width = width
        self.rng = rng or random.Random()
        self.state = GameState.READY
        self.score = 0
        self.player = Player()
        self.obstacles: List[Obstacle] = []

    @property
    def running(self) -> bool:
        return self.state == GameState.RUNNING

    def start(self) -> None:
        self.state = GameState.RUNNING
        self.score = 0
        self.player = Player()
        self.obstacles = []
        logger.debug("Runner game started")

    def jump(self) -> bool:
        """Jump if running and on the ground"""
        if not self.running or not self.player.grounded:
            return False
        self.player.dy = JUMP_POWER
        self.player.grounded = False
        return True

    def tick(self) -> GameState:
        """Advance one frame"""
        if not self.running:
            return self.state

        self._move_player()

        if self.rng.random() < SPAWN_CHANCE:
            self.obstacles.append(Obstacle(x=self.width))

        remaining = []
        for obstacle in self.obstacles:
            obstacle.x -= OBSTACLE_SPEED
            if self._collides(obstacle):
                self._game_over()
                return self.state
            if obstacle.x + obstacle.w < 0:
                self.score += 1
            else:
                remaining.append(obstacle)
        self.obstacles = remaining

        return self.state

    def stop(self) -> Optional[int]:
        """
        End a running game early

        Returns:
            Final score, or None when no game was running
        """
        if not self.running:
            return None
        self._game_over()
        return self.score

    def _move_player(self) -> None:
        player = self.player
        player.dy += GRAVITY
        player.y += player.dy
        if player.y > PLAYER_REST_Y:
            player.y = PLAYER_REST_Y
            player.dy = 0.0
            player.grounded = True

    def _collides(self, obstacle: Obstacle) -> bool:
        player = self.player
        return (
            PLAYER_X < obstacle.x + obstacle.w
            and PLAYER_X + PLAYER_SIZE > obstacle.x
            and player.y < GROUND_LINE
            and player.y + PLAYER_SIZE > GROUND_LINE - obstacle.h
        )

    def _game_over(self) -> None:
        self.state = GameState.GAME_OVER
        logger.debug(f"Runner game over, score {self.score}")
