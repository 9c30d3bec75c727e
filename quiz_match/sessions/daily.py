from __future__ import annotations

import datetime as dt
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280
DEFAULT_DAILY_COUNT = 10


def day_of_year(day: dt.date) -> int:
    """1-based ordinal of ``day`` within its year."""
    return day.timetuple().tm_yday


def daily_selection(items: Sequence[T], seed: int, count: int = DEFAULT_DAILY_COUNT) -> list[T]:
    """
    Pick up to ``count`` distinct items with a small linear congruential generator.

    The same seed (normally the day of the year) always yields the same
    selection, so every player gets the same daily challenge.
    """
    target = min(count, len(items))
    selected: list[T] = []
    used: set[int] = set()
    state = seed
    while len(selected) < target:
        state = (state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        index = int(state / LCG_MODULUS * len(items))
        if index in used:
            continue
        used.add(index)
        selected.append(items[index])
    return selected


def todays_selection(items: Sequence[T], count: int = DEFAULT_DAILY_COUNT, today: dt.date | None = None) -> list[T]:
    return daily_selection(items, day_of_year(today or dt.date.today()), count)
