"""Person factory: raw record -> Person with a sequential id."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..config import DEFAULT_LOCALE, LocaleConfig
from .person import Person


class IdSequence:
    """Monotonic id generator. Each factory owns one; reset() restarts at `start`."""

    def __init__(self, start: int = 0):
        self._start = start
        self._next = start

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        return self._next

    def reset(self) -> None:
        self._next = self._start


class PersonFactory:
    """Builds validated Person objects, numbering them in construction order.

    An id is only consumed when construction succeeds.
    """

    def __init__(self, ids: Optional[IdSequence] = None, locale: LocaleConfig = DEFAULT_LOCALE):
        self.ids = ids if ids is not None else IdSequence()
        self.locale = locale

    def build(self, record: Mapping[str, Any]) -> Person:
        person = Person.from_record(record, self.ids.peek(), self.locale)
        self.ids.next()
        return person
