"""Interactive Style codec.

Interactive Style is one axis running Introvert -> Balanced -> Extrovert. Each band
carries a 1-100 magnitude. Externally it shows up in three forms:

    "80.4E"                       combined string, magnitude + band symbol
    score=80.4, type="E"          split fields
    280.4                         normalized number on 0-300

Normalized values sort along the axis: bands sit at offsets I=0, B=100, E=200 and
the Introvert band is reversed, so a strong Introvert sorts toward 0.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Mapping, Optional

from ..config import DEFAULT_LOCALE, LocaleConfig
from ..errors import ValidationError
from .validation import check_range, check_type

SCORE_MIN = 1
SCORE_MAX = 100
NORMALIZED_MIN = 0
NORMALIZED_MAX = 300

# Decimal places kept by normalize and compose
PRECISION = 10

_COMBINED_RE = re.compile(r"^\s*(\d+(?:\.\d*)?|\.\d+)\s*([^\d\s.+\-])\s*$")


class Band(str, Enum):
    INTROVERT = "introvert"
    BALANCED = "balanced"
    EXTROVERT = "extrovert"


BAND_OFFSETS = {Band.INTROVERT: 0, Band.BALANCED: 100, Band.EXTROVERT: 200}


def symbol_for(band: Band, locale: LocaleConfig = DEFAULT_LOCALE) -> str:
    return getattr(locale.interactive_style, band.value)


def band_for(symbol: Any, locale: LocaleConfig = DEFAULT_LOCALE, subject: Optional[str] = None) -> Band:
    """Map a band symbol (case-insensitive) to its Band."""
    check_type(symbol, "character", "interactiveStyleType", subject)
    wanted = symbol.upper()
    for band in Band:
        if symbol_for(band, locale) == wanted:
            return band
    symbols = [symbol_for(b, locale) for b in Band]
    raise ValidationError(
        f'{_who(subject)} field interactiveStyleType should be one of '
        f'{", ".join(repr(s) for s in symbols)}, found "{symbol}"',
        subject=subject,
        field="interactiveStyleType",
        value=symbol,
    )


def _who(subject: Optional[str]) -> str:
    return f'Person "{subject}"' if subject else "Person"


def normalize_interactive_style(
    score: Any,
    style_type: Any,
    locale: LocaleConfig = DEFAULT_LOCALE,
    subject: Optional[str] = None,
) -> float:
    """Turn a (magnitude, band symbol) pair into a normalized 0-300 number."""
    check_range(score, SCORE_MIN, SCORE_MAX, "interactiveStyleScore", subject)
    band = band_for(style_type, locale, subject)
    magnitude = SCORE_MAX - score if band is Band.INTROVERT else score
    return round(BAND_OFFSETS[band] + magnitude, PRECISION)


def compose_interactive_style(
    value: float, locale: LocaleConfig = DEFAULT_LOCALE
) -> tuple[float, str]:
    """Inverse of normalize: normalized 0-300 number -> (magnitude, band symbol)."""
    if value > 200:
        return round(value - 200, PRECISION), symbol_for(Band.EXTROVERT, locale)
    if value > 100:
        return round(value - 100, PRECISION), symbol_for(Band.BALANCED, locale)
    return round(100 - value, PRECISION), symbol_for(Band.INTROVERT, locale)


def compose_band(value: float) -> Band:
    if value > 200:
        return Band.EXTROVERT
    if value > 100:
        return Band.BALANCED
    return Band.INTROVERT


def parse_interactive_style(
    text: Any, locale: LocaleConfig = DEFAULT_LOCALE, subject: Optional[str] = None
) -> tuple[float, str]:
    """Split a combined string like "80.4E" into (80.4, "E").

    Only the shape is checked here; normalize_interactive_style checks the values.
    """
    check_type(text, "string", "interactiveStyle", subject)
    m = _COMBINED_RE.match(text)
    if m is None:
        raise ValidationError(
            f'{_who(subject)} field interactiveStyle should be a number followed by a '
            f'band symbol, found "{text}"',
            subject=subject,
            field="interactiveStyle",
            value=text,
        )
    return float(m.group(1)), m.group(2).upper()


def normalize_from_record(
    record: Mapping[str, Any],
    locale: LocaleConfig = DEFAULT_LOCALE,
    subject: Optional[str] = None,
) -> float:
    """Read Interactive Style from a record in any of its three forms."""
    if "interactiveStyle" in record:
        value = record["interactiveStyle"]
        if isinstance(value, str):
            score, symbol = parse_interactive_style(value, locale, subject)
            return normalize_interactive_style(score, symbol, locale, subject)
        check_range(value, NORMALIZED_MIN, NORMALIZED_MAX, "interactiveStyle", subject)
        return value

    missing = [k for k in ("interactiveStyleScore", "interactiveStyleType") if k not in record]
    if missing:
        raise ValidationError(
            f"{_who(subject)} is missing required fields [interactiveStyle] "
            f"(or [{', '.join(missing)}])",
            subject=subject,
            field=["interactiveStyle"] + missing,
        )
    return normalize_interactive_style(
        record["interactiveStyleScore"], record["interactiveStyleType"], locale, subject
    )
