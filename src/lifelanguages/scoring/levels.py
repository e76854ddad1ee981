"""Score banding: 5-band score levels, 3-band indicator levels, gap levels."""

from __future__ import annotations

from ..config import DEFAULT_LOCALE, LocaleConfig

# Upper bounds (exclusive) of each band but the last
SCORE_LEVEL_BOUNDS = (15, 35, 65, 85)
INDICATOR_LEVEL_BOUNDS = (35, 65)

GAP_COMPRESSED = 5
GAP_EXPANDED = 10


def _band(value: float, bounds: tuple[float, ...]) -> int:
    for level, bound in enumerate(bounds):
        if value < bound:
            return level
    return len(bounds)


def score_level(value: float) -> int:
    """Very Low (0) .. Very High (4). Used for scores, intensity, and range."""
    return _band(value, SCORE_LEVEL_BOUNDS)


def indicator_level(value: float) -> int:
    """Low (0), Moderate (1), High (2) for Communication Indicators."""
    return _band(value, INDICATOR_LEVEL_BOUNDS)


def gap_level(gap: float) -> int:
    """0 below 5 (compressed), 1 from 5 to 10 inclusive, 2 above 10 (expanded)."""
    if gap < GAP_COMPRESSED:
        return 0
    if gap <= GAP_EXPANDED:
        return 1
    return 2


def score_level_label(value: float, locale: LocaleConfig = DEFAULT_LOCALE) -> str:
    return locale.score_level_labels[score_level(value)]


def indicator_level_label(value: float, locale: LocaleConfig = DEFAULT_LOCALE) -> str:
    return locale.indicator_level_labels[indicator_level(value)]
