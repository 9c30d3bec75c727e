from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SessionStateError(RuntimeError):
    """Raised when a session is driven in a state that does not accept the call."""


class NamingStatus(Enum):
    """Lifecycle of a timed naming game."""
    IDLE = "idle"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class RoundPhase(Enum):
    """Lifecycle of a one-prompt-at-a-time quiz."""
    PLAYING = "playing"
    GAMEOVER = "gameover"
    VICTORY = "victory"


class QuizMode(Enum):
    FLAGS = "flags"
    CAPITALS = "capitals"


@dataclass(frozen=True)
class RoundOutcome:
    correct: bool
    expected: str
    score: Optional[float] = None
