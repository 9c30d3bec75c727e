"""
Candidate matching for free-text answers.

Strategies are applied in order:
1. Exact match against the canonical name or any alias (score 1.0)
2. Containment of input and canonical name, trusted at a ratio of 0.6 or more
3. Best similarity over canonical name and aliases, gated by a threshold that
   is stricter for very short inputs

All functions are pure and have no I/O dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Sequence

from .models import Candidate, MatchResult
from .normalize import normalize_text
from .similarity import containment_ratio, similarity

logger = logging.getLogger(__name__)

PARTIAL_MATCH_MIN = 0.6
MIN_SIMILARITY = 0.75
SHORT_INPUT_MIN_SIMILARITY = 0.85
SHORT_INPUT_LENGTH = 4


def match_against_one(text: str, canonical_name: str, aliases: Iterable[str] = ()) -> float | None:
    """
    Score a guess against one candidate.

    Args:
        text: Raw player input
        canonical_name: Candidate display name
        aliases: Accepted alternate names

    Returns:
        Score in [0, 1], or None when the guess does not clear the threshold
    """
    aliases = list(aliases)
    norm_input = normalize_text(text)
    norm_canonical = normalize_text(canonical_name)

    if norm_input == norm_canonical:
        return 1.0

    for alias in aliases:
        if norm_input == normalize_text(alias):
            return 1.0

    # Containment below the cutoff falls through to the general scorer.
    partial = containment_ratio(norm_input, norm_canonical)
    if partial is not None and partial >= PARTIAL_MATCH_MIN:
        return partial

    best = similarity(norm_input, norm_canonical)
    for alias in aliases:
        best = max(best, similarity(norm_input, alias))

    threshold = SHORT_INPUT_MIN_SIMILARITY if len(norm_input) <= SHORT_INPUT_LENGTH else MIN_SIMILARITY
    return best if best >= threshold else None


def match_against_candidates(
    text: str,
    candidates: Iterable[Candidate],
    excluded: Collection[str] = (),
) -> MatchResult | None:
    """
    Pick the best eligible candidate for a guess.

    Candidates whose identifier is in ``excluded`` are skipped. On equal
    scores the candidate seen first is kept.
    """
    best: MatchResult | None = None
    for candidate in candidates:
        if candidate.identifier in excluded:
            continue
        score = match_against_one(text, candidate.canonical_name, candidate.aliases)
        if score is None:
            continue
        if best is None or score > best.score:
            best = MatchResult(identifier=candidate.identifier, score=score)
    return best


class CandidateMatcher:
    """
    Matches guesses against a fixed, read-only candidate list.

    Usage:
        matcher = CandidateMatcher(candidates)
        result = matcher.match("Germny", excluded={"FR"})
        if result:
            print(f"{result.identifier} ({result.score:.2f})")
    """

    def __init__(self, candidates: Sequence[Candidate]) -> None:
        self.candidates = tuple(candidates)
        self._by_id = {candidate.identifier: candidate for candidate in self.candidates}

    def __len__(self) -> int:
        return len(self.candidates)

    def get(self, identifier: str) -> Candidate | None:
        return self._by_id.get(identifier)

    def score(self, text: str, candidate: Candidate) -> float | None:
        return match_against_one(text, candidate.canonical_name, candidate.aliases)

    def match(self, text: str, excluded: Collection[str] = ()) -> MatchResult | None:
        result = match_against_candidates(text, self.candidates, excluded)
        if result:
            logger.debug(
                "Matched %r to %s (score %.3f)",
                text,
                result.identifier,
                result.score,
            )
        return result
