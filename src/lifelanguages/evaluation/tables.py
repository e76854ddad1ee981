"""Console table formatting for people and group summaries."""

from __future__ import annotations

from typing import Sequence

from tabulate import tabulate

from ..config import DEFAULT_LOCALE, LocaleConfig
from ..keys import LL_KEYS
from ..models.person import Person
from ..scoring.levels import indicator_level_label, score_level_label
from .group import GroupSummary, IndicatorSummary, round_half_up

GAP_FLAGS = {0: "compressed", 1: "", 2: "expanded"}

SHORT_INDICATOR_NAMES = {
    "acceptanceLevel": "AL",
    "interactiveStyle": "IS",
    "internalControl": "IC",
    "intrusionLevel": "IL",
    "projectiveLevel": "PL",
    "susceptibilityToStress": "SS",
    "learningPreferenceAuditory": "LPA",
    "learningPreferenceVisual": "LPV",
    "learningPreferencePhysical": "LPP",
}


def format_people_table(people: Sequence[Person], locale: LocaleConfig = DEFAULT_LOCALE) -> str:
    """One row per person: scores in category order, intensity, shorthand."""
    headers = ["", "Full Name"] + [locale.shorthand[k] for k in LL_KEYS] + ["OI", "Shorthand"]
    rows = []
    for p in people:
        row = ["x" if p.state else "", p.full_name]
        row += [round_half_up(p.score(k)) for k in LL_KEYS]
        row += [round_half_up(p.overall_intensity), p.shorthand(locale)]
        rows.append(row)
    return tabulate(rows, headers=headers, tablefmt="grid")


def format_group_table(summary: GroupSummary, locale: LocaleConfig = DEFAULT_LOCALE) -> str:
    """Ranked Life Languages for the group, with range and intensity below."""
    headers = ["Language", "Avg", "Rating", "Min", "Max", "Std Dev", "Gap", ""]
    rows = []
    for i, s in enumerate(summary.categories):
        r = s.rounded()
        row = [
            locale.labels[s.key],
            r["avg"],
            score_level_label(s.avg, locale),
            r["min"],
            r["max"],
            r["std_dev"],
            r["gap"] if i else "",
            GAP_FLAGS[s.gap_level] if i else "",
        ]
        rows.append(row)

    lines = [tabulate(rows, headers=headers, tablefmt="grid")]
    lines.append(
        f"Range: {round_half_up(summary.range)} "
        f"({score_level_label(summary.range, locale)})"
    )
    lines.append(
        f"Overall Intensity: {round_half_up(summary.overall_intensity)} "
        f"({score_level_label(summary.overall_intensity, locale)})"
    )
    lines.append(f"Members: {summary.member_count}")
    return "\n".join(lines)


def format_indicator_table(summary: IndicatorSummary, locale: LocaleConfig = DEFAULT_LOCALE) -> str:
    """Group Communication Indicators in fixed order."""
    headers = ["Indicator", "Avg", "Level", "Min", "Max", "Std Dev"]
    rows = []
    for s in summary.indicators:
        if s.key == "interactiveStyle":
            magnitude, symbol = summary.interactive_style_parts(locale)
            avg = f"{round_half_up(magnitude)} {symbol}"
            banded = magnitude
        else:
            avg = round_half_up(s.avg)
            banded = s.avg
        rows.append([
            SHORT_INDICATOR_NAMES[s.key],
            avg,
            indicator_level_label(banded, locale),
            round_half_up(s.min),
            round_half_up(s.max),
            round_half_up(s.std_dev),
        ])
    return tabulate(rows, headers=headers, tablefmt="grid")
