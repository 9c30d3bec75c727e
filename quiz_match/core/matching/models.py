"""
Domain models for answer matching.

These are pure data models with no dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Candidate:
    """
    A reference entity the player is trying to name.

    Example:
        Candidate for the United States:
        - identifier: "US"
        - canonical_name: "United States"
        - aliases: ("usa", "us", "america")
    """
    identifier: str
    """Unique identifier (e.g. ISO country code)"""

    canonical_name: str
    """Display name, also the primary match target"""

    aliases: tuple[str, ...] = field(default_factory=tuple)
    """Accepted alternate names, spellings and abbreviations"""


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Best candidate for a guess and its score in [0, 1]."""
    identifier: str
    score: float
