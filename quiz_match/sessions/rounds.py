"""
One-prompt-at-a-time quizzes (flags, capitals).

Each card shows one candidate; a wrong answer costs a life and the quiz
moves on either way. Running out of lives ends the quiz early.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import Optional

from ..core.matching import Candidate, match_against_candidates, match_against_one
from ..core.matching.matcher import MIN_SIMILARITY
from .types import QuizMode, RoundOutcome, RoundPhase, SessionStateError

logger = logging.getLogger(__name__)

DEFAULT_MAX_WRONG = 3


def check_flag_answer(guess: str, candidate: Candidate) -> Optional[float]:
    result = match_against_candidates(guess.strip(), [candidate], set())
    return result.score if result else None


def check_capital_answer(guess: str, candidate: Candidate) -> Optional[float]:
    """Exact (case-insensitive) hit on the capital or an accepted spelling, else fuzzy."""
    lowered = guess.strip().lower()
    if lowered == candidate.canonical_name.lower():
        return 1.0
    if any(lowered == accepted.lower() for accepted in candidate.aliases):
        return 1.0
    score = match_against_one(guess, candidate.canonical_name, candidate.aliases)
    if score is not None and score >= MIN_SIMILARITY:
        return score
    return None


CHECKERS = {
    QuizMode.FLAGS: check_flag_answer,
    QuizMode.CAPITALS: check_capital_answer,
}


class RoundSession:
    def __init__(
        self,
        candidates: Sequence[Candidate],
        mode: QuizMode = QuizMode.FLAGS,
        *,
        max_wrong: int = DEFAULT_MAX_WRONG,
        rng: Optional[random.Random] = None,
        shuffle: bool = True,
    ) -> None:
        if not candidates:
            raise ValueError("A quiz needs at least one candidate")
        self.candidates = tuple(candidates)
        self.mode = mode
        self.max_wrong = max_wrong
        self.rng = rng or random.Random()
        self.shuffle = shuffle
        self._check = CHECKERS[mode]
        self.restart()

    def restart(self) -> None:
        deck = list(self.candidates)
        if self.shuffle:
            self.rng.shuffle(deck)
        self.deck = deck
        self.index = 0
        self.correct_count = 0
        self.wrong_count = 0
        self.phase = RoundPhase.PLAYING
        logger.info("%s quiz started with %d cards", self.mode.value.capitalize(), len(self.deck))

    @property
    def current(self) -> Candidate:
        return self.deck[self.index]

    @property
    def total(self) -> int:
        return len(self.deck)

    @property
    def lives_left(self) -> int:
        return self.max_wrong - self.wrong_count

    def submit(self, guess: str) -> RoundOutcome:
        if self.phase is not RoundPhase.PLAYING:
            raise SessionStateError(f"Quiz is over ({self.phase.value})")
        if not guess.strip():
            raise SessionStateError("Empty guess")

        card = self.current
        score = self._check(guess, card)
        if score is not None:
            self.correct_count += 1
        else:
            self.wrong_count += 1
            logger.debug("Wrong answer %r for %s", guess, card.identifier)

        if self.wrong_count >= self.max_wrong:
            self.phase = RoundPhase.GAMEOVER
        elif self.index + 1 >= len(self.deck):
            self.phase = RoundPhase.VICTORY
        else:
            self.index += 1

        if self.phase is not RoundPhase.PLAYING:
            logger.info(
                "%s quiz %s: %d correct, %d wrong",
                self.mode.value.capitalize(),
                self.phase.value,
                self.correct_count,
                self.wrong_count,
            )
        return RoundOutcome(correct=score is not None, expected=card.canonical_name, score=score)
