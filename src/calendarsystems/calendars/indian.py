from __future__ import annotations

from ..core.time import day_fraction, gregorian_to_jd, jd_to_gregorian, leap_gregorian, midnight
from ..core.types import CalendarDate
from .base import CalendarSystem

SAKA_OFFSET = 78


def saka_leap(year: int) -> bool:
    return leap_gregorian(year + SAKA_OFFSET)


def saka_month_days(year: int, month: int) -> int:
    if month == 0:
        return 31 if saka_leap(year) else 30
    if month <= 5:
        return 31
    return 30


def saka_year_start(year: int) -> float:
    """JD of Chaitra 1: March 21 in a Gregorian leap year, else March 22."""
    g = year + SAKA_OFFSET
    return gregorian_to_jd(g, 3, 21 if leap_gregorian(g) else 22)


def saka_to_jd(year: int, month: int, day: int) -> float:
    jd = saka_year_start(year)
    for m in range(month):
        jd += saka_month_days(year, m)
    return jd + day - 1


def jd_to_saka(jd: float) -> CalendarDate:
    wjd = midnight(jd)
    year = jd_to_gregorian(wjd)[0] - SAKA_OFFSET
    while wjd < saka_year_start(year):
        year -= 1
    while wjd >= saka_year_start(year + 1):
        year += 1

    yday = int(wjd - saka_year_start(year))
    month = 0
    while yday >= saka_month_days(year, month):
        yday -= saka_month_days(year, month)
        month += 1
    return CalendarDate(year, month, yday + 1)


class IndianCalendarSystem(CalendarSystem):
    """Indian national (Saka) calendar."""

    name = "indian"
    intl_calendar = "indian"
    first_month_name = "Chaitra"
    first_day_of_week = 0

    def to_julian_day(self, year, month, day, hour=0, minute=0, second=0) -> float:
        return saka_to_jd(year, month, day) + day_fraction(hour, minute, second)

    def from_julian_day(self, jd: float) -> CalendarDate:
        return jd_to_saka(jd)

    def is_leap_year(self, year: int) -> bool:
        return saka_leap(year)

    def days_in_month(self, year: int, month: int) -> int:
        self._check_month(year, month)
        return saka_month_days(year, month)
