from __future__ import annotations

import re
import unicodedata

_DISALLOWED = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(value: str) -> str:
    """
    Canonicalize a string before any comparison.

    Process:
    1. Lowercase
    2. Canonical decomposition (NFD), dropping combining marks
    3. Remove everything except a-z, 0-9 and whitespace
    4. Collapse whitespace runs and trim

    Examples:
        "Côte d'Ivoire" → "cote divoire"
        "  São   Tomé " → "sao tome"
    """
    if not value:
        return ""
    lowered = value.lower()
    decomposed = unicodedata.normalize("NFD", lowered)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    cleaned = _DISALLOWED.sub("", stripped)
    return _WHITESPACE.sub(" ", cleaned).strip()
