"""Pydantic config models + YAML loading."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator, model_validator

from .keys import LL_KEYS


class InteractiveStyleSymbols(BaseModel):
    """Single-character symbols for the three Interactive Style bands."""

    introvert: str = "I"
    balanced: str = "B"
    extrovert: str = "E"

    @field_validator("introvert", "balanced", "extrovert")
    @classmethod
    def _single_character(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"interactive style symbol must be a single character, found {v!r}")
        return v.upper()

    @model_validator(mode="after")
    def _distinct(self) -> "InteractiveStyleSymbols":
        if len({self.introvert, self.balanced, self.extrovert}) != 3:
            raise ValueError("interactive style symbols must be distinct")
        return self


class LocaleConfig(BaseModel):
    interactive_style: InteractiveStyleSymbols = InteractiveStyleSymbols()
    shorthand: dict[str, str] = {key: key[0].upper() for key in LL_KEYS}
    labels: dict[str, str] = {key: key.capitalize() for key in LL_KEYS}
    score_level_labels: list[str] = ["Very Low", "Low", "Moderate", "High", "Very High"]
    indicator_level_labels: list[str] = ["Low", "Moderate", "High"]

    @field_validator("shorthand", "labels")
    @classmethod
    def _every_category(cls, v: dict[str, str]) -> dict[str, str]:
        missing = [key for key in LL_KEYS if key not in v]
        if missing:
            raise ValueError(f"missing entries for [{', '.join(missing)}]")
        return v

    @field_validator("score_level_labels")
    @classmethod
    def _five_labels(cls, v: list[str]) -> list[str]:
        if len(v) != 5:
            raise ValueError(f"expected 5 score level labels, found {len(v)}")
        return v

    @field_validator("indicator_level_labels")
    @classmethod
    def _three_labels(cls, v: list[str]) -> list[str]:
        if len(v) != 3:
            raise ValueError(f"expected 3 indicator level labels, found {len(v)}")
        return v


class AppConfig(BaseModel):
    locale: LocaleConfig = LocaleConfig()
    log_level: str = "INFO"


DEFAULT_LOCALE = LocaleConfig()


def load_config(path: str | Path) -> AppConfig:
    """Load config from YAML, merging with defaults."""
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return AppConfig(**raw)
