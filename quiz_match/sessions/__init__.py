"""
Game sessions driven by the answer matcher.

Sessions hold all per-game state explicitly; nothing is kept at module level.
"""

from __future__ import annotations

from .daily import daily_selection, day_of_year, todays_selection
from .naming import NamingSession
from .rounds import RoundSession, check_capital_answer, check_flag_answer
from .types import NamingStatus, QuizMode, RoundOutcome, RoundPhase, SessionStateError

__all__ = [
    "NamingSession",
    "NamingStatus",
    "QuizMode",
    "RoundOutcome",
    "RoundPhase",
    "RoundSession",
    "SessionStateError",
    "check_capital_answer",
    "check_flag_answer",
    "daily_selection",
    "day_of_year",
    "todays_selection",
]
