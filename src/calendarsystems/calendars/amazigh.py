from __future__ import annotations

from ..core.time import day_fraction, jd_to_julian, julian_to_jd, leap_julian
from ..core.types import CalendarDate
from .base import CalendarSystem

# Amazigh year = Julian year + 950; Yennayer 1 falls on Julian January 1.
AMAZIGH_YEAR_OFFSET = 950

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class AmazighCalendarSystem(CalendarSystem):
    """Berber agrarian calendar.

    Months and leap days are those of the Julian calendar, so Yennayer 1 is
    January 14 (Gregorian) between 1900 and 2099.
    """

    name = "amazigh"
    intl_calendar = "amazigh"
    first_month_name = "Yennayer"
    first_day_of_week = 1  # Monday

    def to_julian_day(self, year, month, day, hour=0, minute=0, second=0) -> float:
        return julian_to_jd(year - AMAZIGH_YEAR_OFFSET, month + 1, day) + day_fraction(hour, minute, second)

    def from_julian_day(self, jd: float) -> CalendarDate:
        y, m, d = jd_to_julian(jd)
        return CalendarDate(y + AMAZIGH_YEAR_OFFSET, m - 1, d)

    def is_leap_year(self, year: int) -> bool:
        return leap_julian(year - AMAZIGH_YEAR_OFFSET)

    def days_in_month(self, year: int, month: int) -> int:
        self._check_month(year, month)
        if month == 1 and self.is_leap_year(year):
            return 29
        return _MONTH_DAYS[month]
