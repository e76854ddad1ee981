"""Exception types raised by the scoring core."""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union


class ValidationError(ValueError):
    """Raised when an input record is missing fields or carries invalid values.

    Attributes:
        subject: Name of the person the record describes, when known.
        field: Offending field, or the list of missing fields.
        value: Offending value (None for missing fields).
    """

    def __init__(
        self,
        message: str,
        subject: Optional[str] = None,
        field: Union[str, Sequence[str], None] = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.subject = subject
        self.field = field
        self.value = value


class ConfigurationError(RuntimeError):
    """A lookup table is malformed or asked for an entry it does not define."""


class InsufficientDataError(ValueError):
    """A batch of records yielded no valid people.

    `rejected` lists the records that failed and why.
    """

    def __init__(self, message: str, rejected: Sequence[Any] = ()):
        super().__init__(message)
        self.rejected = list(rejected)
