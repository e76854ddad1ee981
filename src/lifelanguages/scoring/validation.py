"""Field presence, type, and range checks for raw person records.

Every check raises ValidationError on the first violation, except
require_fields which reports every missing field at once.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from ..errors import ValidationError

SUPPORTED_TYPES = ("number", "string", "character", "boolean")


@dataclass(frozen=True)
class FieldSpec:
    """Declared type and optional inclusive range for one record field."""

    name: str
    type: str = "number"
    low: Optional[float] = None
    high: Optional[float] = None


def _prefix(subject: Optional[str]) -> str:
    return f'Person "{subject}"' if subject else "Person"


def describe_type(value: Any) -> str:
    """Name the type of a record value the way error messages report it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "NaN" if isinstance(value, float) and math.isnan(value) else "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    return "object"


def _repr(value: Any) -> str:
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


def require_fields(
    record: Mapping[str, Any], fields: Sequence[str], subject: Optional[str] = None
) -> None:
    """Raise if any of `fields` is absent from `record`, naming all of them."""
    missing = [f for f in fields if f not in record]
    if missing:
        raise ValidationError(
            f"{_prefix(subject)} is missing required fields [{', '.join(missing)}]",
            subject=subject,
            field=missing,
        )


def check_type(value: Any, expected: str, field: str, subject: Optional[str] = None) -> None:
    """Raise unless `value` has the declared type.

    "character" means a string of exactly one code point.
    """
    if expected not in SUPPORTED_TYPES:
        raise ValueError(f"Unknown field type: {expected}")

    actual = describe_type(value)
    if expected == "character":
        ok = actual == "string" and len(value) == 1
    else:
        ok = actual == expected
    if not ok:
        raise ValidationError(
            f"{_prefix(subject)} field {field} has an invalid type, "
            f"expected {expected} but found {actual} {_repr(value)}",
            subject=subject,
            field=field,
            value=value,
        )


def check_range(
    value: Any, low: float, high: float, field: str, subject: Optional[str] = None
) -> None:
    """Raise unless `value` is a number within [low, high]."""
    check_type(value, "number", field, subject)
    if not low <= value <= high:
        raise ValidationError(
            f"{_prefix(subject)} field {field} must be a number between {low} and {high}, "
            f"found {value}",
            subject=subject,
            field=field,
            value=value,
        )


def validate_fields(
    record: Mapping[str, Any], specs: Sequence[FieldSpec], subject: Optional[str] = None
) -> None:
    """Check presence of every declared field, then each field's type and range."""
    require_fields(record, [s.name for s in specs], subject)
    for spec in specs:
        value = record[spec.name]
        if spec.low is not None and spec.high is not None:
            check_range(value, spec.low, spec.high, spec.name, subject)
        else:
            check_type(value, spec.type, spec.name, subject)
