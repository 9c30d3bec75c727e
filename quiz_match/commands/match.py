from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..core.matching import CandidateMatcher, MatchResult
from ..reference_data import CountryRecord, capital_candidates, country_candidates


@dataclass(slots=True)
class MatchReport:
    result: MatchResult | None
    line: str

    @property
    def ok(self) -> bool:
        return self.result is not None


def run(
    records: Sequence[CountryRecord],
    text: str,
    *,
    excluded: Iterable[str] = (),
    capitals: bool = False,
) -> MatchReport:
    candidates = capital_candidates(records) if capitals else country_candidates(records)
    matcher = CandidateMatcher(candidates)
    excluded_codes = {code.strip().upper() for code in excluded}
    result = matcher.match(text, excluded_codes)
    if result is None:
        return MatchReport(None, "no match")
    candidate = matcher.get(result.identifier)
    name = candidate.canonical_name if candidate else result.identifier
    return MatchReport(result, f"{result.identifier} {name} (score {result.score:.2f})")
