from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class CalendarDate:
    """A calendar-native date. ``month`` is 0-based, ``day`` is 1-based."""
    year: int
    month: int
    day: int

    def __iter__(self):
        yield self.year
        yield self.month
        yield self.day


@runtime_checkable
class SupportsToDatetime(Protocol):
    """Any object that can hand back a Gregorian datetime (e.g. CalendarDateTime)."""
    def to_datetime(self) -> datetime: ...
