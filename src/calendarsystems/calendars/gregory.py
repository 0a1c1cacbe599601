from __future__ import annotations
from typing import Any, Optional

from ..core.inputs import normalize_date_input
from ..core.time import day_fraction, gregorian_to_jd, jd_to_gregorian, leap_gregorian
from ..core.types import CalendarDate
from .base import CalendarSystem

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class GregoryCalendarSystem(CalendarSystem):
    """Proleptic Gregorian; conversions are pass-through."""

    name = "gregory"
    intl_calendar = "gregory"
    first_month_name = "January"
    first_day_of_week = 0

    def to_julian_day(self, year, month, day, hour=0, minute=0, second=0) -> float:
        return gregorian_to_jd(year, month + 1, day) + day_fraction(hour, minute, second)

    def from_julian_day(self, jd: float) -> CalendarDate:
        y, m, d = jd_to_gregorian(jd)
        return CalendarDate(y, m - 1, d)

    def convert_from_gregorian(self, value: Any = None) -> CalendarDate:
        dt = normalize_date_input(value)
        return CalendarDate(dt.year, dt.month - 1, dt.day)

    def convert_to_gregorian(self, year, month, day, hour=0, minute=0, second=0, millisecond=0) -> CalendarDate:
        return CalendarDate(year, month, day)

    def is_leap_year(self, year: int) -> bool:
        return leap_gregorian(year)

    def days_in_month(self, year: int, month: int) -> int:
        self._check_month(year, month)
        if month == 1 and leap_gregorian(year):
            return 29
        return _MONTH_DAYS[month]
