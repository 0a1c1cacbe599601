from __future__ import annotations
from typing import List, Optional, Tuple

from ..core.arithmetic import hebrew_leap, hebrew_month_days, hebrew_to_jd, hebrew_year_months, jd_to_hebrew
from ..core.time import day_fraction
from ..core.types import CalendarDate
from .base import CalendarSystem

TISHRI = 6
ADAR = 11
ADAR_II = 12

# Names for Adar I / Adar II in a leap year
LEAP_ADAR_NAMES = {
    "en": ("Adar I", "Adar II"),
    "he": ("אדר א׳", "אדר ב׳"),
}


class HebrewCalendarSystem(CalendarSystem):
    """Hebrew lunisolar calendar.

    Month indices follow the biblical count: Nisan = 0, Tishri = 6,
    Adar = 11 and, in leap years, Adar II = 12. The civil year turns over
    at Tishri, so month arithmetic walks Tishri..Elul.
    """

    name = "hebrew"
    intl_calendar = "hebrew"
    first_month_name = "Nisan"
    first_day_of_week = 0

    def to_julian_day(self, year, month, day, hour=0, minute=0, second=0) -> float:
        return hebrew_to_jd(year, month + 1, day) + day_fraction(hour, minute, second)

    def from_julian_day(self, jd: float) -> CalendarDate:
        y, m, d = jd_to_hebrew(jd)
        return CalendarDate(y, m - 1, d)

    def is_leap_year(self, year: int) -> bool:
        return hebrew_leap(year)

    def months_in_year(self, year: Optional[int] = None) -> int:
        if year is None:
            return 13
        return hebrew_year_months(year)

    def year_start_month(self, year: int) -> int:
        return TISHRI

    def days_in_month(self, year: int, month: int) -> int:
        self._check_month(year, month)
        return hebrew_month_days(year, month + 1)

    # Position of a month counted from Tishri
    def _ordinal(self, year: int, month: int) -> int:
        n = hebrew_year_months(year)
        return month - TISHRI if month >= TISHRI else month + n - TISHRI

    def _from_ordinal(self, year: int, pos: int) -> int:
        n = hebrew_year_months(year)
        return pos + TISHRI if pos < n - TISHRI else pos - (n - TISHRI)

    def add_months(self, year: int, month: int, amount: int) -> Tuple[int, int]:
        if month == ADAR_II and not hebrew_leap(year):
            month = ADAR
        pos = self._ordinal(year, month) + amount
        while pos < 0:
            year -= 1
            pos += hebrew_year_months(year)
        while pos >= hebrew_year_months(year):
            pos -= hebrew_year_months(year)
            year += 1
        return year, self._from_ordinal(year, pos)

    def month_names(self, locale: Optional[str] = None, year: Optional[int] = None) -> List[str]:
        names = super().month_names(locale, year)
        if year is not None and hebrew_leap(year):
            lang = (locale or self.locale).split("-", 1)[0]
            adar_1, adar_2 = LEAP_ADAR_NAMES.get(lang, LEAP_ADAR_NAMES["en"])
            names[ADAR] = adar_1
            names.append(adar_2)
        return names

    def get_localized_month_name(self, month_index: int) -> str:
        if month_index == ADAR_II:
            lang = self.locale.split("-", 1)[0]
            return LEAP_ADAR_NAMES.get(lang, LEAP_ADAR_NAMES["en"])[1]
        return super().get_localized_month_name(month_index)
