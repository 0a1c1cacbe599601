from __future__ import annotations
from typing import Optional

from ..core.time import day_fraction, midnight
from ..core.types import CalendarDate
from .base import CalendarSystem

# Meskerem 1, 1 E.C. (29 August 8 CE, Julian)
ETHIOPIAN_EPOCH = 1724220.5
PAGUMEN = 12


def ethiopian_leap(year: int) -> bool:
    return (year + 1) % 4 == 0


def ethiopian_to_jd(year: int, month: int, day: int) -> float:
    """``month`` is 0-based: Meskerem = 0, Pagumen = 12."""
    return ETHIOPIAN_EPOCH - 1 + 365 * (year - 1) + year // 4 + 30 * month + day


def jd_to_ethiopian(jd: float) -> CalendarDate:
    wjd = midnight(jd)
    days = int(wjd - ETHIOPIAN_EPOCH)
    year = (4 * days + 1463) // 1461
    month = int(wjd - ethiopian_to_jd(year, 0, 1)) // 30
    day = int(wjd - ethiopian_to_jd(year, month, 1)) + 1
    return CalendarDate(year, month, day)


class EthiopianCalendarSystem(CalendarSystem):
    """Ethiopian (Ge'ez) calendar: twelve 30-day months and Pagumen of 5 or 6 days."""

    name = "ethiopic"
    intl_calendar = "ethiopic"
    first_month_name = "Meskerem"
    first_day_of_week = 0

    def to_julian_day(self, year, month, day, hour=0, minute=0, second=0) -> float:
        return ethiopian_to_jd(year, month, day) + day_fraction(hour, minute, second)

    def from_julian_day(self, jd: float) -> CalendarDate:
        return jd_to_ethiopian(jd)

    def is_leap_year(self, year: int) -> bool:
        return ethiopian_leap(year)

    def months_in_year(self, year: Optional[int] = None) -> int:
        return 13

    def days_in_month(self, year: int, month: int) -> int:
        self._check_month(year, month)
        if month == PAGUMEN:
            return 6 if ethiopian_leap(year) else 5
        return 30
