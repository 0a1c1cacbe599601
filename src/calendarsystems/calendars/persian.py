from __future__ import annotations

from ..core.arithmetic import jd_to_persian, leap_persian, persian_to_jd
from ..core.time import day_fraction
from ..core.types import CalendarDate
from .base import CalendarSystem


class PersianCalendarSystem(CalendarSystem):
    """Solar Hijri (Jalali) calendar on the 33-year arithmetic cycle.

    Farvardin..Shahrivar have 31 days, Mehr..Bahman 30, Esfand 29 (30 in a
    leap year). Month lengths are read back from the JD converter rather than
    tabulated here.
    """

    name = "persian"
    intl_calendar = "persian"
    first_month_name = "Farvardin"
    first_day_of_week = 6  # Saturday

    def to_julian_day(self, year, month, day, hour=0, minute=0, second=0) -> float:
        return persian_to_jd(year, month + 1, day) + day_fraction(hour, minute, second)

    def from_julian_day(self, jd: float) -> CalendarDate:
        y, m, d = jd_to_persian(jd)
        return CalendarDate(y, m - 1, d)

    def is_leap_year(self, year: int) -> bool:
        return leap_persian(year)

    def days_in_month(self, year: int, month: int) -> int:
        return self._month_length_from_jd(year, month)
