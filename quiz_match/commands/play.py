from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from typing import Optional

from ..config import Settings
from ..reference_data import CountryRecord, capital_candidates, country_candidates
from ..sessions import (
    NamingSession,
    NamingStatus,
    QuizMode,
    RoundPhase,
    RoundSession,
    todays_selection,
)

GIVE_UP = ":give-up"
QUIT = ":quit"

REGIONAL_INDICATOR_A = 0x1F1E6
UNKNOWN_FLAG = "\N{WHITE FLAG}"


def _format_clock(seconds: float) -> str:
    whole = int(seconds)
    return f"{whole // 60:02d}:{whole % 60:02d}"


def flag_symbol(code: str) -> str:
    """Terminal stand-in for the flag image: the pair of regional indicator letters."""
    code = code.strip().upper()
    if len(code) != 2 or not code.isascii() or not code.isalpha():
        return UNKNOWN_FLAG
    return "".join(chr(REGIONAL_INDICATOR_A + ord(c) - ord("A")) for c in code)


def run_naming(
    settings: Settings,
    records: Sequence[CountryRecord],
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> NamingSession:
    session = NamingSession(
        country_candidates(records),
        time_limit=settings.naming.time_limit_seconds,
    )
    session.start()
    write(f"Name all {session.total} countries. Type {GIVE_UP} to reveal the rest.")
    names = {c.identifier: c.canonical_name for c in session.matcher.candidates}
    while session.status is NamingStatus.PLAYING:
        try:
            text = read(f"[{_format_clock(session.time_left)} {session.score}/{session.total}] > ")
        except EOFError:
            text = GIVE_UP
        if text.strip() in {GIVE_UP, QUIT}:
            session.give_up()
            break
        result = session.submit(text)
        if result:
            write(f"  ✓ {names[result.identifier]}")
    if session.status is NamingStatus.WON:
        write(f"You named all {session.total} countries!")
    else:
        write(f"Final score {session.score}/{session.total}")
        missing = [c.canonical_name for c in session.remaining()]
        if missing and session.reveal_all:
            write("Missed: " + ", ".join(missing))
    return session


def run_quiz(
    settings: Settings,
    records: Sequence[CountryRecord],
    mode: QuizMode,
    *,
    daily: bool = False,
    seed: Optional[int] = None,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> RoundSession:
    candidates = capital_candidates(records) if mode is QuizMode.CAPITALS else country_candidates(records)
    names = {record.code: record.name for record in records}
    if daily:
        deck = todays_selection(candidates, settings.rounds.daily_count)
        session = RoundSession(deck, mode, max_wrong=settings.rounds.max_wrong, shuffle=False)
    else:
        session = RoundSession(
            candidates,
            mode,
            max_wrong=settings.rounds.max_wrong,
            rng=random.Random(seed),
        )
    while session.phase is RoundPhase.PLAYING:
        card = session.current
        if mode is QuizMode.CAPITALS:
            prompt = f"Capital of {names.get(card.identifier, card.identifier)}"
        else:
            prompt = f"Flag {flag_symbol(card.identifier)}"
        try:
            guess = read(f"[{session.index + 1}/{session.total} lives {session.lives_left}] {prompt}: ")
        except EOFError:
            break
        if guess.strip() == QUIT:
            break
        if not guess.strip():
            continue
        outcome = session.submit(guess)
        if outcome.correct:
            write("  ✓ correct")
        else:
            write(f"  ✗ it was {outcome.expected}")
    write(f"{session.correct_count} correct, {session.wrong_count} wrong ({session.phase.value})")
    return session
