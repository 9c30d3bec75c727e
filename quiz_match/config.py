from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

CONFIG_NAMES = ("quiz-match.yaml", "quiz-match.yml")


class DataSettings(BaseModel):
    countries_path: Optional[Path] = None
    extra_aliases: Dict[str, List[str]] = Field(default_factory=dict)

    @field_validator("countries_path", mode="before")
    @classmethod
    def _expand_countries(cls, value: Optional[str | Path]) -> Optional[Path]:
        if value is None:
            return None
        return Path(value).expanduser().resolve()

    @field_validator("extra_aliases", mode="before")
    @classmethod
    def _upper_codes(cls, value: Optional[Dict[str, List[str]]]) -> Dict[str, List[str]]:
        if not value:
            return {}
        return {str(code).strip().upper(): names for code, names in value.items()}


class NamingSettings(BaseModel):
    time_limit_seconds: int = Field(default=15 * 60, gt=0)


class RoundSettings(BaseModel):
    max_wrong: int = Field(default=3, gt=0)
    daily_count: int = Field(default=10, gt=0)


class Settings(BaseModel):
    data: DataSettings = DataSettings()
    naming: NamingSettings = NamingSettings()
    rounds: RoundSettings = RoundSettings()

    @classmethod
    def load(cls, path: Path) -> "Settings":
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})


def find_config(explicit_path: Optional[Path]) -> Optional[Path]:
    if explicit_path:
        if not explicit_path.exists():
            raise FileNotFoundError(f"Config file not found: {explicit_path}")
        return explicit_path
    cwd = Path.cwd()
    for name in CONFIG_NAMES:
        candidate = cwd / name
        if candidate.exists():
            return candidate
    return None


def load_settings(explicit_path: Optional[Path] = None) -> Settings:
    path = find_config(explicit_path)
    if path is None:
        return Settings()
    return Settings.load(path)
