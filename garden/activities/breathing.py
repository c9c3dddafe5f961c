"""
Breathing Cycle

A finite-state machine driven by an external timer: the caller feeds elapsed
seconds to tick() and renders whatever phase comes back. Nothing here
schedules itself, so stop() is all it takes to end a session.

Phase order per cycle: INHALE → HOLD → EXHALE → POST_HOLD, with zero-length
phases skipped. A cycle counts as completed when the next INHALE begins.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from garden.exceptions import ValidationError

logger = logging.getLogger(__name__)


class BreathPhase(str, Enum):
    """Breathing session states"""
    IDLE = "idle"
    INHALE = "inhale"
    HOLD = "hold"
    EXHALE = "exhale"
    POST_HOLD = "post_hold"


PHASE_LABELS = {
    BreathPhase.IDLE: "Ready",
    BreathPhase.INHALE: "Inhale",
    BreathPhase.HOLD: "Hold",
    BreathPhase.EXHALE: "Exhale",
    BreathPhase.POST_HOLD: "Wait",
}

_CYCLE = [BreathPhase.INHALE, BreathPhase.HOLD, BreathPhase.EXHALE, BreathPhase.POST_HOLD]


@dataclass(frozen=True)
class BreathingPattern:
    """Phase durations in seconds"""
    name: str
    inhale: float
    hold: float
    exhale: float
    post_hold: float

    def duration(self, phase: BreathPhase) -> float:
        return {
            BreathPhase.INHALE: self.inhale,
            BreathPhase.HOLD: self.hold,
            BreathPhase.EXHALE: self.exhale,
            BreathPhase.POST_HOLD: self.post_hold,
        }.get(phase, 0.0)


PATTERNS: Dict[str, BreathingPattern] = {
    "4-4": BreathingPattern("4-4", inhale=4, hold=0, exhale=4, post_hold=0),
    "4-7-8": BreathingPattern("4-7-8", inhale=4, hold=7, exhale=8, post_hold=0),
    "4-4-4-4": BreathingPattern("4-4-4-4", inhale=4, hold=4, exhale=4, post_hold=4),
}

DEFAULT_PATTERN = "4-4"


def get_pattern(name: str) -> BreathingPattern:
    pattern = PATTERNS.get(name)
    if pattern is None:
        raise ValidationError(
            f"Unknown breathing pattern (choose from {', '.join(PATTERNS)})",
            field="pattern",
            value=name,
        )
    return pattern


class BreathingSession:
    """One start-to-stop breathing exercise"""

    def __init__(self, pattern: str = DEFAULT_PATTERN):
        self.pattern = get_pattern(pattern)
        self.phase = BreathPhase.IDLE
        self.remaining = 0.0
        self.cycles_completed = 0

    @property
    def active(self) -> bool:
        return self.phase != BreathPhase.IDLE

    @property
    def label(self) -> str:
        return PHASE_LABELS[self.phase]

    def start(self) -> BreathPhase:
        """Begin with an inhale; starting an active session changes nothing"""
        if self.active:
            return self.phase

        self.phase = BreathPhase.INHALE
        self.remaining = self.pattern.inhale
        self.cycles_completed = 0
        logger.debug(f"Breathing started ({self.pattern.name})")
        return self.phase

    def tick(self, elapsed: float) -> List[BreathPhase]:
        """
        Advance the session clock

        Args:
            elapsed: Seconds since the previous tick

        Returns:
            Phases entered during this tick, in order
        """
        entered: List[BreathPhase] = []
        if not self.active or elapsed <= 0:
            return entered

        while self.active and elapsed >= self.remaining:
            elapsed -= self.remaining
            self._advance()
            entered.append(self.phase)

        if self.active:
            self.remaining -= elapsed
        return entered

    def stop(self) -> int:
        """
        End the session

        Returns:
            Cycles completed; 0 when the session was not running
        """
        if not self.active:
            return 0

        cycles = self.cycles_completed
        self.phase = BreathPhase.IDLE
        self.remaining = 0.0
        self.cycles_completed = 0
        logger.debug(f"Breathing stopped after {cycles} cycles")
        return cycles

    def _advance(self) -> None:
        index = _CYCLE.index(self.phase)
        while True:
            index = (index + 1) % len(_CYCLE)
            if index == 0:
                self.cycles_completed += 1
            duration = self.pattern.duration(_CYCLE[index])
            if duration > 0:
                self.phase = _CYCLE[index]
                self.remaining = duration
                return
