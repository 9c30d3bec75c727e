"""
Timed "name every country" game.

The player types names in any order; each accepted guess removes that
candidate from further matching until the list is exhausted or time runs out.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from typing import Optional

from ..core.matching import Candidate, CandidateMatcher, MatchResult
from .types import NamingStatus, SessionStateError

logger = logging.getLogger(__name__)

DEFAULT_TIME_LIMIT = 15 * 60


class NamingSession:
    def __init__(
        self,
        candidates: Sequence[Candidate],
        *,
        time_limit: float = DEFAULT_TIME_LIMIT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.matcher = CandidateMatcher(candidates)
        self.time_limit = time_limit
        self.clock = clock
        self.status = NamingStatus.IDLE
        self.guessed: set[str] = set()
        self.reveal_all = False
        self._started_at: Optional[float] = None
        self._ended_at: Optional[float] = None

    @property
    def total(self) -> int:
        return len(self.matcher)

    @property
    def score(self) -> int:
        return len(self.guessed)

    @property
    def time_left(self) -> float:
        if self._started_at is None:
            return float(self.time_limit)
        now = self._ended_at if self._ended_at is not None else self.clock()
        return max(0.0, self.time_limit - (now - self._started_at))

    def start(self) -> None:
        self.status = NamingStatus.PLAYING
        self.guessed = set()
        self.reveal_all = False
        self._started_at = self.clock()
        self._ended_at = None
        logger.info("Naming game started: %d candidates, %ss", self.total, self.time_limit)

    def _finish(self, status: NamingStatus) -> None:
        self.status = status
        self._ended_at = self.clock()
        logger.info("Naming game %s with %d/%d", status.value, self.score, self.total)

    def refresh(self) -> NamingStatus:
        """Apply timer expiry; returns the current status."""
        if self.status is NamingStatus.PLAYING and self.time_left <= 0:
            self._finish(NamingStatus.LOST)
        return self.status

    def submit(self, text: str) -> MatchResult | None:
        if self.status is NamingStatus.IDLE:
            raise SessionStateError("Naming game has not been started")
        if self.refresh() is not NamingStatus.PLAYING:
            return None
        result = self.matcher.match(text, self.guessed)
        if result is None:
            return None
        self.guessed.add(result.identifier)
        if len(self.guessed) == self.total:
            self._finish(NamingStatus.WON)
        return result

    def give_up(self) -> None:
        if self.status is not NamingStatus.PLAYING:
            raise SessionStateError(f"Cannot give up a game that is {self.status.value}")
        self.reveal_all = True
        self._finish(NamingStatus.LOST)

    def remaining(self) -> list[Candidate]:
        return [c for c in self.matcher.candidates if c.identifier not in self.guessed]
