"""Group aggregation: per-category statistics over the active members of a group."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence

import numpy as np

from ..config import DEFAULT_LOCALE, LocaleConfig
from ..keys import CI_KEYS, LL_KEYS
from ..models.indicators import preferred_learning_style
from ..models.person import Person
from ..scoring.interactive_style import compose_interactive_style
from ..scoring.levels import gap_level, indicator_level, score_level

ActivePredicate = Callable[[Person], bool]


def round_half_up(value: float) -> int:
    """Display rounding: .5 always rounds up."""
    return int(math.floor(value + 0.5))


def _describe(values: Sequence[float]) -> tuple[float, float, float, float]:
    """(min, max, mean, population std). All zero for an empty group."""
    if not values:
        return 0.0, 0.0, 0.0, 0.0
    arr = np.asarray(values, dtype=float)
    return float(arr.min()), float(arr.max()), float(arr.mean()), float(arr.std())


@dataclass(frozen=True)
class CategoryStats:
    key: str
    min: float
    max: float
    avg: float
    std_dev: float
    gap: float = 0.0  # distance below the previous category's avg

    @property
    def avg_level(self) -> int:
        return score_level(self.avg)

    @property
    def gap_level(self) -> int:
        return gap_level(self.gap)

    @property
    def compressed(self) -> bool:
        return self.gap_level == 0

    @property
    def expanded(self) -> bool:
        return self.gap_level == 2

    def rounded(self) -> dict[str, int]:
        return {
            "min": round_half_up(self.min),
            "max": round_half_up(self.max),
            "avg": round_half_up(self.avg),
            "std_dev": round_half_up(self.std_dev),
            "gap": round_half_up(self.gap),
        }


@dataclass(frozen=True)
class GroupSummary:
    categories: tuple[CategoryStats, ...]  # descending by avg
    range: float
    overall_intensity: float
    member_count: int

    @property
    def range_level(self) -> int:
        return score_level(self.range)

    @property
    def overall_intensity_level(self) -> int:
        return score_level(self.overall_intensity)

    def category(self, key: str) -> CategoryStats:
        for stats in self.categories:
            if stats.key == key:
                return stats
        raise KeyError(key)


def active_members(people: Sequence[Person], is_active: Optional[ActivePredicate] = None) -> list[Person]:
    if is_active is None:
        return [p for p in people if p.state]
    return [p for p in people if is_active(p)]


def summarize_group(
    people: Sequence[Person],
    is_active: Optional[ActivePredicate] = None,
) -> GroupSummary:
    """Min/avg/max/std per Life Language over active members, ranked by avg.

    Ties keep the fixed category order. With no active members every
    statistic is 0.
    """
    members = active_members(people, is_active)

    stats = []
    for key in LL_KEYS:
        lo, hi, avg, std = _describe([p.score(key) for p in members])
        stats.append(CategoryStats(key, lo, hi, avg, std))

    ordered = sorted(stats, key=lambda s: s.avg, reverse=True)
    ranked = []
    previous = None
    for s in ordered:
        gap = 0.0 if previous is None else max(previous - s.avg, 0.0)
        ranked.append(replace(s, gap=gap))
        previous = s.avg

    intensity = _describe([p.overall_intensity for p in members])[2]
    return GroupSummary(
        categories=tuple(ranked),
        range=ranked[0].avg - ranked[-1].avg,
        overall_intensity=intensity,
        member_count=len(members),
    )


@dataclass(frozen=True)
class IndicatorStats:
    key: str
    min: float
    max: float
    avg: float
    std_dev: float

    @property
    def level(self) -> int:
        if self.key == "interactiveStyle":
            return indicator_level(compose_interactive_style(self.avg)[0])
        return indicator_level(self.avg)


@dataclass(frozen=True)
class IndicatorSummary:
    indicators: tuple[IndicatorStats, ...]  # fixed indicator order
    member_count: int

    def indicator(self, key: str) -> IndicatorStats:
        for stats in self.indicators:
            if stats.key == key:
                return stats
        raise KeyError(key)

    def interactive_style_parts(self, locale: LocaleConfig = DEFAULT_LOCALE) -> tuple[float, str]:
        """Average Interactive Style as (magnitude, band symbol)."""
        return compose_interactive_style(self.indicator("interactiveStyle").avg, locale)

    @property
    def preferred_learning_style(self) -> tuple[str, ...]:
        if not self.member_count:
            return ()
        return preferred_learning_style({s.key: s.avg for s in self.indicators})


def summarize_indicators(
    people: Sequence[Person],
    is_active: Optional[ActivePredicate] = None,
) -> IndicatorSummary:
    """Per-indicator statistics over active members that carry indicators.

    Interactive Style is averaged in its normalized 0-300 form.
    """
    members = [p for p in active_members(people, is_active) if p.ci is not None]
    stats = []
    for key in CI_KEYS:
        lo, hi, avg, std = _describe([p.ci[key] for p in members])
        stats.append(IndicatorStats(key, lo, hi, avg, std))
    return IndicatorSummary(indicators=tuple(stats), member_count=len(members))
