"""CommunicationIndicators: one person's nine Communication Indicator scores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional

from ..config import DEFAULT_LOCALE, LocaleConfig
from ..keys import CI_KEYS, INTERACTIVE_STYLE_SPLIT_KEYS, LEARNING_PREFERENCE_KEYS
from ..scoring.interactive_style import Band, compose_band, compose_interactive_style, normalize_from_record
from ..scoring.levels import indicator_level
from ..scoring.validation import FieldSpec, require_fields, validate_fields

SCORE_MIN = 0
SCORE_MAX = 100

# Record key -> attribute name
_ATTRS = {
    "acceptanceLevel": "acceptance_level",
    "interactiveStyle": "interactive_style",
    "internalControl": "internal_control",
    "intrusionLevel": "intrusion_level",
    "projectiveLevel": "projective_level",
    "susceptibilityToStress": "susceptibility_to_stress",
    "learningPreferenceAuditory": "learning_preference_auditory",
    "learningPreferenceVisual": "learning_preference_visual",
    "learningPreferencePhysical": "learning_preference_physical",
}

# Interactive Style is validated by the codec, in whichever form it arrives
INDICATOR_FIELDS = [
    FieldSpec(k, low=SCORE_MIN, high=SCORE_MAX) for k in CI_KEYS if k != "interactiveStyle"
]
_TRIGGER_KEYS = frozenset(CI_KEYS + INTERACTIVE_STYLE_SPLIT_KEYS)


def has_indicator_fields(record: Mapping[str, Any]) -> bool:
    """True when a record carries any Communication Indicator field."""
    return any(k in record for k in _TRIGGER_KEYS)


def required_indicator_fields(record: Mapping[str, Any]) -> list[str]:
    """Indicator fields a record must carry; both split fields stand in for interactiveStyle."""
    if all(k in record for k in INTERACTIVE_STYLE_SPLIT_KEYS):
        return [k for k in CI_KEYS if k != "interactiveStyle"]
    return list(CI_KEYS)


def preferred_learning_style(scores: Mapping[str, float]) -> tuple[str, ...]:
    """Learning-preference keys tied for the highest score, in fixed order."""
    top = max(scores[k] for k in LEARNING_PREFERENCE_KEYS)
    return tuple(k for k in LEARNING_PREFERENCE_KEYS if scores[k] == top)


@dataclass(frozen=True)
class CommunicationIndicators:
    acceptance_level: float
    interactive_style: float  # normalized, 0-300
    internal_control: float
    intrusion_level: float
    projective_level: float
    susceptibility_to_stress: float
    learning_preference_auditory: float
    learning_preference_visual: float
    learning_preference_physical: float
    preferred_learning_style: tuple[str, ...]

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        locale: LocaleConfig = DEFAULT_LOCALE,
        subject: Optional[str] = None,
    ) -> "CommunicationIndicators":
        """Validate and build from a raw record.

        Interactive Style may be given normalized, as a combined string, or as
        interactiveStyleScore + interactiveStyleType.
        """
        require_fields(record, required_indicator_fields(record), subject)
        validate_fields(record, INDICATOR_FIELDS, subject)

        values = {_ATTRS[spec.name]: record[spec.name] for spec in INDICATOR_FIELDS}
        values["interactive_style"] = normalize_from_record(record, locale, subject)

        return cls(
            **values,
            preferred_learning_style=preferred_learning_style(record),
        )

    def __getitem__(self, key: str) -> float:
        """Look up an indicator by its record key, e.g. ci["acceptanceLevel"]."""
        try:
            return getattr(self, _ATTRS[key])
        except KeyError:
            raise KeyError(f"Unknown Communication Indicator: {key}") from None

    def items(self) -> Iterator[tuple[str, float]]:
        for key in CI_KEYS:
            yield key, self[key]

    def to_dict(self) -> dict[str, float]:
        return dict(self.items())

    @property
    def interactive_style_band(self) -> Band:
        return compose_band(self.interactive_style)

    def interactive_style_parts(self, locale: LocaleConfig = DEFAULT_LOCALE) -> tuple[float, str]:
        """(magnitude 0-100, band symbol) for display."""
        return compose_interactive_style(self.interactive_style, locale)

    def level(self, key: str) -> int:
        """3-band level; Interactive Style is banded on its magnitude."""
        if key == "interactiveStyle":
            return indicator_level(compose_interactive_style(self.interactive_style)[0])
        return indicator_level(self[key])

    @property
    def learning_style_tied(self) -> bool:
        return len(self.preferred_learning_style) > 1
