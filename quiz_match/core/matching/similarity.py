"""
Heuristic similarity between two answers.

The score is not a metric: the containment shortcut and the short-string
boost are directional, only the edit-distance term is symmetric.
"""

from __future__ import annotations

from .distance import edit_distance
from .normalize import normalize_text

SHORT_STRING_LENGTH = 6
SHORT_STRING_BOOST = 0.1


def containment_ratio(first: str, second: str) -> float | None:
    """
    Length ratio when one normalized string contains the other.

    Returns None when neither contains the other.
    """
    if first in second or second in first:
        shorter, longer = sorted((first, second), key=len)
        if not longer:
            return 1.0
        return len(shorter) / len(longer)
    return None


def similarity(a: str, b: str) -> float:
    """
    Score two strings in [0, 1], higher is more similar.

    Rules, first that applies wins:
    1. Identical after normalization → 1.0
    2. One contains the other (neither empty) → len(shorter) / len(longer)
    3. 1 - edit_distance / max_len, plus a 0.1 boost when either string is
       shorter than 6 characters, clamped to [0, 1]
    """
    norm_a = normalize_text(a)
    norm_b = normalize_text(b)

    if norm_a == norm_b:
        return 1.0

    if norm_a and norm_b:
        ratio = containment_ratio(norm_a, norm_b)
        if ratio is not None:
            return ratio

    max_len = max(len(norm_a), len(norm_b))
    if max_len == 0:
        return 1.0
    score = 1 - edit_distance(norm_a, norm_b) / max_len

    if len(norm_a) < SHORT_STRING_LENGTH or len(norm_b) < SHORT_STRING_LENGTH:
        score += SHORT_STRING_BOOST

    return max(0.0, min(1.0, score))
