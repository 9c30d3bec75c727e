from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from importlib import resources
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from .core.matching import Candidate

logger = logging.getLogger(__name__)

BUNDLED_PACKAGE = "quiz_match.data"
BUNDLED_COUNTRIES = "countries.json"


class ReferenceDataError(ValueError):
    """Raised when a reference data file cannot be parsed or validated."""


class CountryRecord(BaseModel):
    name: str = Field(min_length=1)
    code: str = Field(min_length=1)
    accepted_names: List[str] = Field(default_factory=list)
    capital: Optional[str] = None
    accepted_capitals: List[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("code", mode="before")
    @classmethod
    def _upper_code(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("capital", mode="before")
    @classmethod
    def _blank_capital(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @field_validator("accepted_names", "accepted_capitals", mode="before")
    @classmethod
    def _clean_aliases(cls, values: Optional[List[str] | str]) -> List[str]:
        if not values:
            return []
        if isinstance(values, str):
            values = [values]
        return [str(v).strip() for v in values if v and str(v).strip()]


_RECORDS = TypeAdapter(List[CountryRecord])


def _read_raw(path: Path) -> object:
    suffix = path.suffix.lower()
    if suffix not in {".json", ".yaml", ".yml"}:
        raise ReferenceDataError(f"Unsupported reference data format: {path}")
    with path.open("r", encoding="utf-8") as fh:
        if suffix == ".json":
            return json.load(fh)
        return yaml.safe_load(fh)


def _read_bundled() -> object:
    source = resources.files(BUNDLED_PACKAGE).joinpath(BUNDLED_COUNTRIES)
    with source.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def parse_countries(raw: object, source: str = "<memory>") -> list[CountryRecord]:
    try:
        records = _RECORDS.validate_python(raw)
    except ValidationError as exc:
        raise ReferenceDataError(f"Invalid country records in {source}: {exc}") from exc

    seen: set[str] = set()
    for record in records:
        if record.code in seen:
            raise ReferenceDataError(f"Duplicate country code {record.code} in {source}")
        seen.add(record.code)
    return records


def load_countries(
    path: Optional[Path] = None,
    extra_aliases: Optional[Mapping[str, Iterable[str]]] = None,
) -> list[CountryRecord]:
    """
    Load and validate country reference data.

    Args:
        path: JSON or YAML file; the bundled data set is used when omitted
        extra_aliases: Additional accepted names keyed by country code

    Returns:
        Validated records in file order
    """
    if path is None:
        source = f"bundled {BUNDLED_COUNTRIES}"
        raw = _read_bundled()
    else:
        source = str(path)
        try:
            raw = _read_raw(path)
        except FileNotFoundError:
            raise
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as exc:
            raise ReferenceDataError(f"Could not parse {path}: {exc}") from exc
        except OSError as exc:
            raise ReferenceDataError(f"Could not read {path}: {exc}") from exc

    records = parse_countries(raw, source)
    if extra_aliases:
        records = _apply_extra_aliases(records, extra_aliases)
    logger.info("Loaded %d countries from %s", len(records), source)
    return records


def _apply_extra_aliases(
    records: list[CountryRecord],
    extra_aliases: Mapping[str, Iterable[str]],
) -> list[CountryRecord]:
    extras = {code.strip().upper(): list(names) for code, names in extra_aliases.items()}
    known = {record.code for record in records}
    for code in sorted(set(extras) - known):
        logger.warning("Ignoring extra aliases for unknown country code %s", code)

    updated = []
    for record in records:
        names = extras.get(record.code)
        if names:
            merged = record.accepted_names + [n.strip() for n in names if n and n.strip()]
            record = record.model_copy(update={"accepted_names": merged})
        updated.append(record)
    return updated


def country_candidates(records: Iterable[CountryRecord]) -> tuple[Candidate, ...]:
    return tuple(
        Candidate(
            identifier=record.code,
            canonical_name=record.name,
            aliases=tuple(record.accepted_names),
        )
        for record in records
    )


def capital_candidates(records: Iterable[CountryRecord]) -> tuple[Candidate, ...]:
    """Candidates keyed by country code whose target is the capital city."""
    return tuple(
        Candidate(
            identifier=record.code,
            canonical_name=record.capital,
            aliases=tuple(record.accepted_capitals),
        )
        for record in records
        if record.capital
    )
