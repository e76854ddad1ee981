"""Batch construction of people with skip-and-report on invalid records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from ..errors import InsufficientDataError, ValidationError
from ..models.factory import PersonFactory
from ..models.person import Person

logger = logging.getLogger("lifelanguages")


@dataclass
class RejectedRecord:
    index: int
    record: Any
    error: ValidationError

    @property
    def reason(self) -> str:
        return str(self.error)


@dataclass
class BatchResult:
    people: list[Person] = field(default_factory=list)
    rejected: list[RejectedRecord] = field(default_factory=list)


def build_people(
    records: Iterable[Any],
    factory: Optional[PersonFactory] = None,
) -> BatchResult:
    """Validate every record independently and build the valid ones.

    A failing record is logged and listed in `rejected`; the rest still load.
    Raises InsufficientDataError when no record is valid.
    """
    factory = factory or PersonFactory()
    result = BatchResult()

    for i, record in enumerate(records):
        try:
            if not isinstance(record, Mapping):
                raise ValidationError(
                    f"Record {i} is not an object, found {type(record).__name__}", value=record
                )
            result.people.append(factory.build(record))
        except ValidationError as e:
            logger.warning(f"Skipping record {i}: {e}")
            result.rejected.append(RejectedRecord(i, record, e))

    logger.info(f"Loaded {len(result.people)} people, rejected {len(result.rejected)}")
    if not result.people:
        raise InsufficientDataError(
            f"Need at least one valid person, found 0 of {len(result.rejected)} records",
            rejected=result.rejected,
        )
    return result
