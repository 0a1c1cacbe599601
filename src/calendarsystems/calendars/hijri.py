from __future__ import annotations
import logging
from typing import Any, Tuple

from hijri_converter import Gregorian, Hijri

from ..core.arithmetic import islamic_to_jd, jd_to_islamic, leap_islamic
from ..core.errors import InvalidDateValueError
from ..core.inputs import normalize_date_input
from ..core.time import day_fraction, gregorian_to_jd, jd_to_gregorian, midnight
from ..core.types import CalendarDate
from .base import CalendarSystem

log = logging.getLogger(__name__)

# Half-width of the JD window searched around the tabular estimate
SEARCH_WINDOW = 400


class HijriCalendarSystem(CalendarSystem):
    """Islamic calendar, Umm al-Qura variant.

    Gregorian -> Hijri reads the Umm al-Qura tables of ``hijri_converter``
    (AH 1343-1500) and falls back to the tabular 30-year cycle outside them.
    Hijri -> Gregorian has no closed form for an observed calendar, so it
    binary-searches the JD line for the day whose forward conversion matches.
    """

    name = "islamic"
    intl_calendar = "islamic"
    first_month_name = "Muharram"
    first_day_of_week = 6  # Saturday

    # ---- forward ----

    def _civil_to_hijri(self, y: int, m: int, d: int) -> Tuple[int, int, int]:
        """Gregorian (1-based month) to Hijri (1-based month)."""
        try:
            h = Gregorian(y, m, d).to_hijri()
            return h.year, h.month, h.day
        except (OverflowError, ValueError):
            log.debug("%04d-%02d-%02d outside Umm al-Qura range; using tabular Islamic", y, m, d)
            return jd_to_islamic(gregorian_to_jd(y, m, d))

    def _jd_to_hijri(self, jd: float) -> Tuple[int, int, int]:
        y, m, d = jd_to_gregorian(jd)
        return self._civil_to_hijri(y, m, d)

    def from_julian_day(self, jd: float) -> CalendarDate:
        y, m, d = self._jd_to_hijri(jd)
        return CalendarDate(y, m - 1, d)

    def convert_from_gregorian(self, value: Any = None) -> CalendarDate:
        dt = normalize_date_input(value)
        y, m, d = self._civil_to_hijri(dt.year, dt.month, dt.day)
        return CalendarDate(y, m - 1, d)

    # ---- inverse ----

    def _search_jd(self, year: int, month: int, day: int) -> float:
        """Midnight JD of Hijri (year, month 1-based, day)."""
        target = (year, month, day)
        estimate = midnight(islamic_to_jd(year, month, day))
        lo = int(estimate - 0.5) - SEARCH_WINDOW
        hi = int(estimate - 0.5) + SEARCH_WINDOW
        while lo <= hi:
            mid = (lo + hi) // 2
            got = self._jd_to_hijri(mid + 0.5)
            if got == target:
                return mid + 0.5
            if got < target:
                lo = mid + 1
            else:
                hi = mid - 1
        raise InvalidDateValueError(
            f"No Gregorian date matches Hijri {year:04d}-{month:02d}-{day:02d} ({self.name})"
        )

    def to_julian_day(self, year, month, day, hour=0, minute=0, second=0) -> float:
        return self._search_jd(year, month + 1, day) + day_fraction(hour, minute, second)

    # ---- year structure ----

    def is_leap_year(self, year: int) -> bool:
        return leap_islamic(year)

    def days_in_month(self, year: int, month: int) -> int:
        self._check_month(year, month)
        try:
            return Hijri(year, month + 1, 1).month_length()
        except (OverflowError, ValueError):
            log.debug("Hijri %d outside Umm al-Qura range; using tabular month lengths", year)
        if month == 11:
            return 30 if leap_islamic(year) else 29
        return 30 if month % 2 == 0 else 29
