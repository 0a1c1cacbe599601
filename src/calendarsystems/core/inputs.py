"""Decoding of the date-like values accepted by ``convert_from_gregorian``."""
from __future__ import annotations
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Mapping

from dateutil import parser as dateutil_parser

from .errors import InvalidDateInputError
from .types import CalendarDate, SupportsToDatetime

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _from_fields(year: Any, month: Any, day: Any) -> datetime:
    try:
        return datetime(int(year), int(month) + 1, int(day))
    except (TypeError, ValueError) as e:
        raise InvalidDateInputError(f"Invalid date fields: {year}-{month}-{day}") from e


def normalize_date_input(value: Any = None) -> datetime:
    """Turn any supported date-like value into a Gregorian ``datetime``.

    Accepted shapes, tried in order:

    - ``None``: now (local time, naive).
    - ``datetime`` (returned unchanged) or ``date`` (midnight).
    - ``str``: ISO 8601, parsed with :func:`dateutil.parser.isoparse`.
    - ``int`` / ``float``: milliseconds since the Unix epoch, UTC.
    - :class:`CalendarDate` or a mapping with ``year``/``month``/``day``
      (month 0-based), read as Gregorian fields.
    - anything with ``to_datetime()`` (e.g. ``CalendarDateTime``).

    Anything else raises :class:`InvalidDateInputError`.
    """
    if value is None:
        return datetime.now()
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str):
        try:
            return dateutil_parser.isoparse(value)
        except (ValueError, OverflowError) as e:
            raise InvalidDateInputError(f"Invalid date string: {value!r}") from e
    if isinstance(value, bool):
        raise InvalidDateInputError(f"Invalid date: {value!r}")
    if isinstance(value, (int, float)):
        try:
            return _UNIX_EPOCH + timedelta(milliseconds=value)
        except OverflowError as e:
            raise InvalidDateInputError(f"Timestamp out of range: {value!r}") from e
    if isinstance(value, CalendarDate):
        return _from_fields(value.year, value.month, value.day)
    if isinstance(value, Mapping):
        if all(k in value for k in ("year", "month", "day")):
            return _from_fields(value["year"], value["month"], value["day"])
        raise InvalidDateInputError(f"Mapping lacks year/month/day: {sorted(value)}")
    if isinstance(value, SupportsToDatetime):
        return value.to_datetime()
    raise InvalidDateInputError(f"Invalid date: unsupported input type {type(value).__name__}")
