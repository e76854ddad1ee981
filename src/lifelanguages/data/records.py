"""Loading person records from disk + coercing text-sourced values."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from ..keys import CI_KEYS, LL_KEYS

PERSON_FIELD_TYPES: dict[str, str] = {
    "fullName": "string",
    "companyName": "string",
    **{key: "number" for key in LL_KEYS},
    "overallIntensity": "number",
    **{key: "number" for key in CI_KEYS},
    "interactiveStyleScore": "number",
    "interactiveStyleType": "character",
    "state": "boolean",
}


def _to_number(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        # e.g. "80.4E"; validation decides what to make of it
        return value


def _to_character(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()[:1]
    return value


def _to_boolean(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip()[:1].lower() in ("y", "t", "1")
    return value == 1


_CONVERTERS = {
    "string": lambda v: v,
    "number": _to_number,
    "character": _to_character,
    "boolean": _to_boolean,
}


def coerce_record(
    raw: Mapping[str, Any], field_types: Mapping[str, str] = PERSON_FIELD_TYPES
) -> dict[str, Any]:
    """Convert string values from delimited-text imports to the record shape.

    Only fields named in `field_types` are kept; empty values are dropped so
    that validation reports them as missing.
    """
    out = {}
    for key, kind in field_types.items():
        value = raw.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        out[key] = _CONVERTERS[kind](value)
    return out


def load_records(path: str | Path) -> list[dict[str, Any]]:
    """Load a JSON array of person records (or {"people": [...]})."""
    with open(Path(path)) as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("people", [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of person records")
    return data
