"""Chinese lunisolar calendar (approximate).

Dates between 1900 and 2100 are read from the ``lunarcalendar`` tables.
Outside that window, or when the tables reject a date, the conversion falls
back to a table of Chinese New Year dates and 29.5-day mean months. Leap
months are not distinguished: a day in a leap month reports the number of
the month it repeats, so conversions do not always round-trip.

Years count in the Huangdi era: Gregorian 2024 is 4721.
"""
from __future__ import annotations
import logging
import math
from datetime import date, timedelta
from typing import Any, Dict, Optional, Tuple

from lunarcalendar import Converter, DateNotExist, Lunar, Solar

from ..core.inputs import normalize_date_input
from ..core.time import day_fraction, gregorian_to_jd, jd_to_gregorian
from ..core.types import CalendarDate
from .base import CalendarSystem

log = logging.getLogger(__name__)

HUANGDI_OFFSET = 2697
MEAN_MONTH_DAYS = 29.5

# Window covered by the lunarcalendar tables
TABLE_FIRST_DAY = date(1900, 1, 31)
TABLE_LAST_DAY = date(2100, 12, 31)
TABLE_YEARS = (1900, 2099)

HEAVENLY_STEMS = ("Jiǎ", "Yǐ", "Bǐng", "Dīng", "Wù", "Jǐ", "Gēng", "Xīn", "Rén", "Guǐ")
EARTHLY_BRANCHES = ("Zǐ", "Chǒu", "Yín", "Mǎo", "Chén", "Sì", "Wǔ", "Wèi", "Shēn", "Yǒu", "Xū", "Hài")
ZODIAC_ANIMALS = ("Rat", "Ox", "Tiger", "Rabbit", "Dragon", "Snake",
                  "Horse", "Goat", "Monkey", "Rooster", "Dog", "Pig")

# Gregorian date of New Year (month 1-based) by Gregorian year
CHINESE_NEW_YEAR_DATES: Dict[int, Tuple[int, int]] = {
    2020: (1, 25), 2021: (2, 12), 2022: (2, 1), 2023: (1, 22), 2024: (2, 10),
    2025: (1, 29), 2026: (2, 17), 2027: (2, 6), 2028: (1, 26), 2029: (2, 13),
    2030: (2, 3), 2031: (1, 23), 2032: (2, 11), 2033: (1, 31), 2034: (2, 19),
    2035: (2, 8), 2036: (1, 28), 2037: (2, 15), 2038: (2, 4), 2039: (1, 24),
    2040: (2, 12), 2041: (2, 1), 2042: (1, 22), 2043: (2, 10), 2044: (1, 30),
    2045: (2, 17), 2046: (2, 6), 2047: (1, 26), 2048: (2, 14), 2049: (2, 2),
    2050: (1, 23),
}
DEFAULT_NEW_YEAR = (1, 25)

# Gregorian years whose Chinese year holds a leap (13th) month
CHINESE_LEAP_YEARS = frozenset({2023, 2025, 2028, 2031, 2033, 2036, 2039, 2042, 2044, 2047, 2050})


def new_year_date(gregorian_year: int) -> date:
    month, day = CHINESE_NEW_YEAR_DATES.get(gregorian_year, DEFAULT_NEW_YEAR)
    return date(gregorian_year, month, day)


class ChineseCalendarSystem(CalendarSystem):
    name = "chinese"
    intl_calendar = "chinese"
    first_month_name = "Zhēngyuè"
    first_day_of_week = 1  # Monday

    # ---- table-backed conversion ----

    def _from_table(self, d: date) -> Optional[CalendarDate]:
        if not TABLE_FIRST_DAY <= d <= TABLE_LAST_DAY:
            return None
        lunar = Converter.Solar2Lunar(Solar(d.year, d.month, d.day))
        return CalendarDate(lunar.year + HUANGDI_OFFSET, lunar.month - 1, lunar.day)

    def _to_table(self, year: int, month: int, day: int) -> Optional[date]:
        related = year - HUANGDI_OFFSET
        if not TABLE_YEARS[0] <= related <= TABLE_YEARS[1]:
            return None
        try:
            solar = Converter.Lunar2Solar(Lunar(related, month + 1, day, isleap=False))
        except DateNotExist:
            log.debug("Lunar %d-%02d-%02d rejected by tables; interpolating", related, month + 1, day)
            return None
        return date(solar.year, solar.month, solar.day)

    # ---- mean-month fallback ----

    def approximate_from_gregorian(self, d: date) -> CalendarDate:
        related = d.year
        ny = new_year_date(related)
        if d < ny:
            related -= 1
            ny = new_year_date(related)
        elapsed = (d - ny).days
        month = 0
        while month < 11 and math.floor((month + 1) * MEAN_MONTH_DAYS) <= elapsed:
            month += 1
        day = min(elapsed - math.floor(month * MEAN_MONTH_DAYS) + 1, 30)
        return CalendarDate(related + HUANGDI_OFFSET, month, day)

    def approximate_to_gregorian(self, year: int, month: int, day: int) -> date:
        related = year - HUANGDI_OFFSET
        offset = math.floor(month * MEAN_MONTH_DAYS) + day - 1
        return new_year_date(related) + timedelta(days=offset)

    # ---- contract ----

    def convert_from_gregorian(self, value: Any = None) -> CalendarDate:
        dt = normalize_date_input(value)
        d = date(dt.year, dt.month, dt.day)
        found = self._from_table(d)
        if found is None:
            log.debug("%s outside lunar tables; using New Year table", d)
            return self.approximate_from_gregorian(d)
        return found

    def _to_civil(self, year: int, month: int, day: int) -> date:
        found = self._to_table(year, month, day)
        if found is None:
            return self.approximate_to_gregorian(year, month, day)
        return found

    def convert_to_gregorian(self, year, month, day, hour=0, minute=0, second=0, millisecond=0) -> CalendarDate:
        d = self._to_civil(year, month, day)
        return CalendarDate(d.year, d.month - 1, d.day)

    def to_julian_day(self, year, month, day, hour=0, minute=0, second=0) -> float:
        d = self._to_civil(year, month, day)
        return gregorian_to_jd(d.year, d.month, d.day) + day_fraction(hour, minute, second)

    def from_julian_day(self, jd: float) -> CalendarDate:
        y, m, d = jd_to_gregorian(jd)
        return self.convert_from_gregorian(date(y, m, d))

    def is_leap_year(self, year: int) -> bool:
        return (year - HUANGDI_OFFSET) in CHINESE_LEAP_YEARS

    def days_in_month(self, year: int, month: int) -> int:
        self._check_month(year, month)
        return 30 if month % 2 == 0 else 29

    # ---- sexagenary cycle ----

    def get_sexagenary_cycle(self, year: int) -> Dict[str, str]:
        stem = HEAVENLY_STEMS[(year - 1) % 10]
        branch_index = (year - 1) % 12
        branch = EARTHLY_BRANCHES[branch_index]
        return {
            "stem": stem,
            "branch": branch,
            "animal": ZODIAC_ANIMALS[branch_index],
            "cycle_name": f"{stem}-{branch}",
        }

    def get_zodiac_animal(self, year: int) -> str:
        return ZODIAC_ANIMALS[(year - 1) % 12]
