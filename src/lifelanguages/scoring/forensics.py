"""Forensic attribution: which Life Languages explain a Communication Indicator.

For each indicator (other than Susceptibility to Stress and the learning
preferences) every Life Language gets a marker: its shorthand letter, emphasized
when that language plausibly accounts for the indicator's current value.

Most (indicator, language) pairs are a plain threshold rule:
    LOW       emphasize when value <= 33
    MODERATE  emphasize when 33 < value < 66
    HIGH      emphasize when value >= 66
A few pairs use a custom rule, and Interactive Style uses a fixed rule per band
instead of thresholds.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from ..config import DEFAULT_LOCALE, LocaleConfig
from ..errors import ConfigurationError
from ..keys import CI_KEYS, FORENSIC_EXEMPT_KEYS, LL_KEYS
from .interactive_style import Band, band_for, compose_band

LOW = 33
HIGH = 66


class Threshold(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


@dataclass(frozen=True)
class ForensicMarker:
    """Letter to show for one Life Language, and how to show it."""

    letter: str
    emphasized: bool = False
    starred: bool = False

    def render(self) -> str:
        text = self.letter + ("*" if self.starred else "")
        return f"<strong>{text}</strong>" if self.emphasized else text

    def __str__(self) -> str:
        return self.render()


def _threshold_hit(threshold: Threshold, value: float) -> bool:
    if threshold is Threshold.LOW:
        return value <= LOW
    if threshold is Threshold.HIGH:
        return value >= HIGH
    return LOW < value < HIGH


def _low_starred(value: float, letter: str) -> ForensicMarker:
    # Starred rows: Contemplator under Acceptance Level and Internal Control, Producer under Internal Control
    if value <= LOW:
        return ForensicMarker(letter.upper(), emphasized=True, starred=True)
    return ForensicMarker(letter.lower(), starred=True)


def _projective_level_shaper(value: float, letter: str) -> ForensicMarker:
    if value >= HIGH:
        return ForensicMarker(letter.lower(), emphasized=True)
    if value >= LOW:
        return ForensicMarker(letter.upper(), emphasized=True)
    return ForensicMarker(letter.lower())


Rule = Union[Threshold, Callable[[float, str], ForensicMarker]]

_L, _M, _H = Threshold.LOW, Threshold.MODERATE, Threshold.HIGH

FORENSIC_TABLE: dict[str, dict[str, Rule]] = {
    "acceptanceLevel": {
        "mover": _L, "doer": _H, "influencer": _H, "responder": _L,
        "shaper": _H, "producer": _H, "contemplator": _low_starred,
    },
    "internalControl": {
        "mover": _L, "doer": _H, "influencer": _L, "responder": _L,
        "shaper": _H, "producer": _low_starred, "contemplator": _low_starred,
    },
    "intrusionLevel": {
        "mover": _L, "doer": _L, "influencer": _H, "responder": _H,
        "shaper": _H, "producer": _M, "contemplator": _H,
    },
    "projectiveLevel": {
        "mover": _L, "doer": _H, "influencer": _H, "responder": _H,
        "shaper": _projective_level_shaper, "producer": _H, "contemplator": _L,
    },
}

# Bands in which each language is emphasized for Interactive Style
INTERACTIVE_STYLE_RULES: dict[str, frozenset[Band]] = {
    "mover": frozenset([Band.INTROVERT, Band.BALANCED]),
    "doer": frozenset([Band.INTROVERT]),
    "influencer": frozenset([Band.EXTROVERT]),
    "responder": frozenset([Band.INTROVERT]),
    "shaper": frozenset([Band.EXTROVERT]),
    "producer": frozenset([Band.EXTROVERT]),
    "contemplator": frozenset([Band.INTROVERT]),
}


def _check_tables() -> None:
    for indicator in CI_KEYS:
        if indicator in FORENSIC_EXEMPT_KEYS or indicator == "interactiveStyle":
            continue
        row = FORENSIC_TABLE.get(indicator)
        if row is None:
            raise ConfigurationError(f"Forensic table has no row for {indicator}")
        missing = [k for k in LL_KEYS if k not in row]
        if missing:
            raise ConfigurationError(
                f"Forensic table row {indicator} is missing [{', '.join(missing)}]"
            )
    missing = [k for k in LL_KEYS if k not in INTERACTIVE_STYLE_RULES]
    if missing:
        raise ConfigurationError(
            f"Interactive Style forensic rules are missing [{', '.join(missing)}]"
        )


_check_tables()


def has_forensics(indicator: str) -> bool:
    return indicator == "interactiveStyle" or indicator in FORENSIC_TABLE


def _letter(category: str, locale: LocaleConfig) -> str:
    if category not in LL_KEYS:
        raise ConfigurationError(f"Unknown Life Language: {category}")
    return locale.shorthand[category]


def interactive_style_marker(
    category: str,
    style_type: Union[Band, str],
    locale: LocaleConfig = DEFAULT_LOCALE,
) -> ForensicMarker:
    """Marker for `category` given the decomposed Interactive Style band.

    `style_type` is a Band or a band symbol such as "I".
    """
    band = style_type if isinstance(style_type, Band) else band_for(style_type, locale)
    letter = _letter(category, locale)
    if band not in INTERACTIVE_STYLE_RULES[category]:
        return ForensicMarker(letter.lower())
    # Mover keeps its lowercase letter on the Introvert side
    if category == "mover" and band is Band.INTROVERT:
        return ForensicMarker(letter.lower(), emphasized=True)
    return ForensicMarker(letter.upper(), emphasized=True)


def forensic_marker(
    indicator: str,
    category: str,
    value: float,
    locale: LocaleConfig = DEFAULT_LOCALE,
) -> ForensicMarker:
    """Marker for how strongly `category` explains `indicator` at `value`.

    For Interactive Style `value` is the normalized 0-300 number.
    """
    if indicator == "interactiveStyle":
        return interactive_style_marker(category, compose_band(value), locale)

    row = FORENSIC_TABLE.get(indicator)
    if row is None:
        raise ConfigurationError(f"No forensic rules for indicator {indicator}")
    letter = _letter(category, locale)
    rule = row[category]
    if isinstance(rule, Threshold):
        if _threshold_hit(rule, value):
            return ForensicMarker(letter.upper(), emphasized=True)
        return ForensicMarker(letter.lower())
    return rule(value, letter)


def person_forensics(person, indicator: str, locale: LocaleConfig = DEFAULT_LOCALE) -> list[ForensicMarker]:
    """One marker per Life Language, in the person's ranked order."""
    if not has_forensics(indicator):
        raise ConfigurationError(f"No forensic rules for indicator {indicator}")
    if person.ci is None:
        raise ValueError(f'Person "{person.full_name}" has no Communication Indicators')
    value = person.ci[indicator]
    return [forensic_marker(indicator, s.key, value, locale) for s in person.sorted_scores]
