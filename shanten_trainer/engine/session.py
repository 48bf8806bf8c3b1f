"""Practice session: one question at a time, guess the shanten of a hand.

Status flow per question:
    idle --start()--> ongoing --answer()/stop()--> answered
generate_hand() deals a new question from any status and returns to idle.
"""

import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from shanten_trainer.core.notation import Tile, to_counts, to_tenhou
from shanten_trainer.engine.event import EventBus, EventType, TrainerEvent
from shanten_trainer.engine.sampler import generate_random_hand
from shanten_trainer.rules.shanten import ShantenCache, shanten


class SessionStatus(Enum):
    IDLE = "idle"
    ONGOING = "ongoing"
    ANSWERED = "answered"


class SessionError(RuntimeError):
    """Raised for an action the current session status does not allow."""


@dataclass
class AnswerResult:
    """Outcome of one question."""
    notation: str
    shanten: int
    guess: Optional[int]
    elapsed: float

    @property
    def is_correct(self) -> bool:
        return self.guess is not None and self.guess == self.shanten


class PracticeSession:
    """Holds the current question and running statistics."""

    def __init__(self, event_bus: Optional[EventBus] = None, hand_size: int = 13,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.event_bus = event_bus or EventBus()
        self.hand_size = hand_size
        self._rng = rng or random.Random()
        self._clock = clock
        # Sub-vectors recur between hands, so one cache serves the session
        self._cache: ShantenCache = {}

        self.hand: Optional[List[Tile]] = None
        self.shanten: Optional[int] = None
        self.status = SessionStatus.IDLE
        self.results: List[AnswerResult] = []
        self._started_at: Optional[float] = None

    @property
    def notation(self) -> str:
        return to_tenhou(self.hand) if self.hand else ""

    @property
    def answered_count(self) -> int:
        return sum(1 for r in self.results if r.guess is not None)

    @property
    def correct_count(self) -> int:
        return sum(1 for r in self.results if r.is_correct)

    @property
    def accuracy(self) -> float:
        answered = self.answered_count
        return self.correct_count / answered if answered else 0.0

    @property
    def average_time(self) -> float:
        timed = [r.elapsed for r in self.results if r.guess is not None]
        return sum(timed) / len(timed) if timed else 0.0

    def generate_hand(self, tiles: Optional[List[Tile]] = None) -> List[Tile]:
        """Deal a new question (random unless tiles are given)."""
        hand = list(tiles) if tiles is not None else generate_random_hand(self.hand_size, self._rng)
        value = shanten(to_counts(hand), self._cache)

        self.hand = hand
        self.shanten = value
        self.status = SessionStatus.IDLE
        self._started_at = None

        self.event_bus.emit(TrainerEvent(EventType.HAND_DEALT, {
            "notation": self.notation,
            "shanten": value,
        }))
        return hand

    def start(self):
        """Show the hand and start timing."""
        if self.hand is None:
            raise SessionError("no hand dealt")
        if self.status != SessionStatus.IDLE:
            raise SessionError(f"cannot start from status {self.status.value}")
        self.status = SessionStatus.ONGOING
        self._started_at = self._clock()
        self.event_bus.emit(TrainerEvent(EventType.QUESTION_START, {
            "notation": self.notation,
        }))

    def answer(self, guess: int) -> AnswerResult:
        """Submit a guess for the running question."""
        result = self._finish(guess)
        self.event_bus.emit(TrainerEvent(EventType.ANSWERED, {"result": result}))
        return result

    def stop(self) -> AnswerResult:
        """Reveal the answer without guessing."""
        result = self._finish(None)
        self.event_bus.emit(TrainerEvent(EventType.REVEALED, {"result": result}))
        return result

    def _finish(self, guess: Optional[int]) -> AnswerResult:
        if self.status != SessionStatus.ONGOING:
            raise SessionError(f"no question in progress (status {self.status.value})")
        elapsed = self._clock() - self._started_at
        result = AnswerResult(self.notation, self.shanten, guess, elapsed)
        self.results.append(result)
        self.status = SessionStatus.ANSWERED
        return result

    def end(self):
        """Close the session; listeners get the final statistics."""
        self.event_bus.emit(TrainerEvent(EventType.SESSION_END, {
            "answered": self.answered_count,
            "correct": self.correct_count,
            "accuracy": self.accuracy,
            "average_time": self.average_time,
        }))

    def reset(self):
        """Drop statistics and memoized search states, then deal a fresh hand."""
        self.results.clear()
        self._cache.clear()
        self.generate_hand()
