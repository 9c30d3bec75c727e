"""
Free-text answer matching.

This module handles:
- Text normalization (case, accents, punctuation, whitespace)
- Levenshtein edit distance
- Heuristic similarity scoring
- Candidate matching with aliases and exclusion

All logic is pure and stateless between calls.
"""

from __future__ import annotations

from .distance import edit_distance
from .matcher import CandidateMatcher, match_against_candidates, match_against_one
from .models import Candidate, MatchResult
from .normalize import normalize_text
from .similarity import similarity

__all__ = [
    "Candidate",
    "CandidateMatcher",
    "MatchResult",
    "edit_distance",
    "match_against_candidates",
    "match_against_one",
    "normalize_text",
    "similarity",
]
