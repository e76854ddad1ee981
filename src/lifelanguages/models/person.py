"""Person: one individual's Life Language profile and its derived rankings."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from ..config import DEFAULT_LOCALE, LocaleConfig
from ..errors import ValidationError
from ..keys import LL_KEYS
from ..scoring.levels import GAP_COMPRESSED, GAP_EXPANDED, gap_level, score_level
from ..scoring.validation import FieldSpec, check_type, require_fields, validate_fields
from .indicators import CommunicationIndicators, has_indicator_fields, required_indicator_fields

SCORE_MIN = 0
SCORE_MAX = 100

PERSON_FIELDS = (
    [FieldSpec("fullName", "string")]
    + [FieldSpec(k, low=SCORE_MIN, high=SCORE_MAX) for k in LL_KEYS]
    + [FieldSpec("overallIntensity", low=SCORE_MIN, high=SCORE_MAX)]
)

# Shorthand separators between adjacent ranked languages
MODERATE_GAP_MARK = "·"
EXPANDED_GAP_MARK = "-"


@dataclass(frozen=True)
class SortedScore:
    key: str
    value: float
    value_level: int
    gap: float  # distance below the previous ranked score, 0 for the first
    gap_level: int


def rank_scores(scores: Mapping[str, float]) -> tuple[SortedScore, ...]:
    """Rank Life Language scores high to low; ties keep category order."""
    ordered = sorted(LL_KEYS, key=lambda k: scores[k], reverse=True)
    ranked = []
    previous = None
    for key in ordered:
        value = scores[key]
        gap = 0 if previous is None else previous - value
        ranked.append(SortedScore(key, value, score_level(value), gap, gap_level(gap)))
        previous = value
    return tuple(ranked)


class Person:
    """Validated Life Language scores for one individual.

    Everything but `state` is fixed at construction. `state` is the
    show/select flag owned by whoever presents the people.
    """

    def __init__(
        self,
        person_id: int,
        full_name: str,
        scores: Mapping[str, float],
        overall_intensity: float,
        company_name: str = "",
        ci: Optional[CommunicationIndicators] = None,
        state: bool = True,
    ):
        self._id = person_id
        self._full_name = full_name
        self._company_name = company_name
        self._scores = MappingProxyType({k: scores[k] for k in LL_KEYS})
        self._overall_intensity = overall_intensity
        self._ci = ci
        self._sorted_scores = rank_scores(self._scores)
        self._range = self._sorted_scores[0].value - self._sorted_scores[-1].value
        self.state = state

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        person_id: int,
        locale: LocaleConfig = DEFAULT_LOCALE,
    ) -> "Person":
        """Validate a raw record and build a Person. Raises ValidationError."""
        name = record.get("fullName")
        subject = name if isinstance(name, str) and name else None
        has_ci = has_indicator_fields(record)

        required = [spec.name for spec in PERSON_FIELDS]
        if has_ci:
            required += required_indicator_fields(record)
        require_fields(record, required, subject)

        validate_fields(record, PERSON_FIELDS, subject)
        if not name.strip():
            raise ValidationError(
                "Person field fullName must not be empty", field="fullName", value=name
            )

        company = record.get("companyName")
        if company is None:
            company = ""
        check_type(company, "string", "companyName", subject)

        ci = CommunicationIndicators.from_record(record, locale, subject) if has_ci else None

        state = record.get("state")
        return cls(
            person_id,
            name,
            {k: record[k] for k in LL_KEYS},
            record["overallIntensity"],
            company_name=company,
            ci=ci,
            state=state if isinstance(state, bool) else True,
        )

    @property
    def id(self) -> int:
        return self._id

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def company_name(self) -> str:
        return self._company_name

    @property
    def scores(self) -> Mapping[str, float]:
        return self._scores

    @property
    def overall_intensity(self) -> float:
        return self._overall_intensity

    @property
    def overall_intensity_level(self) -> int:
        return score_level(self._overall_intensity)

    @property
    def sorted_scores(self) -> tuple[SortedScore, ...]:
        return self._sorted_scores

    @property
    def range(self) -> float:
        return self._range

    @property
    def range_level(self) -> int:
        return score_level(self._range)

    @property
    def ci(self) -> Optional[CommunicationIndicators]:
        return self._ci

    @property
    def has_indicators(self) -> bool:
        return self._ci is not None

    def score(self, key: str) -> float:
        return self._scores[key]

    def language_scores(self) -> Iterator[tuple[str, float]]:
        """(key, score) in fixed category order."""
        for key in LL_KEYS:
            yield key, self._scores[key]

    def indicator(self, key: str) -> float:
        """Communication Indicator by record key; raises if the person has none."""
        if self._ci is None:
            raise ValueError(f'Person "{self._full_name}" has no Communication Indicators')
        return self._ci[key]

    def shorthand(self, locale: LocaleConfig = DEFAULT_LOCALE) -> str:
        """Ranked letters, e.g. "M-I·rsp-cd".

        Uppercase for scores >= 50. A gap of 5-10 is marked with "·", over 10 with "-".
        """
        parts = []
        for i, s in enumerate(self._sorted_scores):
            if i:
                if s.gap > GAP_EXPANDED:
                    parts.append(EXPANDED_GAP_MARK)
                elif s.gap >= GAP_COMPRESSED:
                    parts.append(MODERATE_GAP_MARK)
            letter = locale.shorthand[s.key]
            parts.append(letter.upper() if s.value >= 50 else letter.lower())
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Person(id={self._id}, full_name={self._full_name!r}, shorthand={self.shorthand()!r})"
