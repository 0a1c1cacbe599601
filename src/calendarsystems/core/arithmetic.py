"""Arithmetic (rule-based) calendars expressed against the Julian Day.

Hebrew and tabular Islamic follow the classic Fourmilab formulation; Persian
uses the 33-year cycle. Month and day arguments are 1-based here; the
calendar classes translate to 0-based months. Every ``*_to_jd`` returns a
midnight JD and every ``jd_to_*`` snaps its argument to midnight first.
"""
from __future__ import annotations
import math
from functools import lru_cache
from typing import Tuple

from .time import midnight

# ------------------------------------------------------------
# Hebrew
# ------------------------------------------------------------

HEBREW_EPOCH = 347995.5


def hebrew_leap(year: int) -> bool:
    return ((year * 7) + 1) % 19 < 7


def hebrew_year_months(year: int) -> int:
    return 13 if hebrew_leap(year) else 12


@lru_cache(maxsize=4096)
def _hebrew_delay_1(year: int) -> int:
    """Molad of Tishri with the dehiyyah that keeps Rosh Hashanah off Sun/Wed/Fri."""
    months = math.floor(((235 * year) - 234) / 19)
    parts = 12084 + 13753 * months
    day = months * 29 + math.floor(parts / 25920)
    if (3 * (day + 1)) % 7 < 3:
        day += 1
    return day


def _hebrew_delay_2(year: int) -> int:
    last = _hebrew_delay_1(year - 1)
    present = _hebrew_delay_1(year)
    nxt = _hebrew_delay_1(year + 1)
    if nxt - present == 356:
        return 2
    if present - last == 382:
        return 1
    return 0


@lru_cache(maxsize=4096)
def hebrew_year_days(year: int) -> int:
    return int(hebrew_to_jd(year + 1, 7, 1) - hebrew_to_jd(year, 7, 1))


def hebrew_month_days(year: int, month: int) -> int:
    """Length of Hebrew month ``month`` (Nisan = 1, Tishri = 7, Adar II = 13)."""
    if month in (2, 4, 6, 10, 13):
        return 29
    if month == 12 and not hebrew_leap(year):
        return 29
    # Heshvan is short unless the year is complete
    if month == 8 and hebrew_year_days(year) % 10 != 5:
        return 29
    # Kislev is short in a deficient year
    if month == 9 and hebrew_year_days(year) % 10 == 3:
        return 29
    return 30


def hebrew_to_jd(year: int, month: int, day: int) -> float:
    months = hebrew_year_months(year)
    jd = HEBREW_EPOCH + _hebrew_delay_1(year) + _hebrew_delay_2(year) + day + 1

    if month < 7:
        for mon in range(7, months + 1):
            jd += hebrew_month_days(year, mon)
        for mon in range(1, month):
            jd += hebrew_month_days(year, mon)
    else:
        for mon in range(7, month):
            jd += hebrew_month_days(year, mon)
    return jd


def jd_to_hebrew(jd: float) -> Tuple[int, int, int]:
    jd = midnight(jd)
    count = math.floor(((jd - HEBREW_EPOCH) * 98496.0) / 35975351.0)
    year = count - 1
    i = count
    while jd >= hebrew_to_jd(i, 7, 1):
        year += 1
        i += 1

    first = 7 if jd < hebrew_to_jd(year, 1, 1) else 1
    month = first
    while jd > hebrew_to_jd(year, month, hebrew_month_days(year, month)):
        month += 1
    day = int(jd - hebrew_to_jd(year, month, 1)) + 1
    return int(year), int(month), day

# ------------------------------------------------------------
# Islamic (tabular, 30-year cycle with 11 leap years)
# ------------------------------------------------------------

ISLAMIC_EPOCH = 1948439.5


def leap_islamic(year: int) -> bool:
    return ((year * 11) + 14) % 30 < 11


def islamic_to_jd(year: int, month: int, day: int) -> float:
    return (
        day
        + math.ceil(29.5 * (month - 1))
        + (year - 1) * 354
        + math.floor((3 + (11 * year)) / 30)
        + ISLAMIC_EPOCH
        - 1
    )


def jd_to_islamic(jd: float) -> Tuple[int, int, int]:
    jd = midnight(jd)
    year = math.floor(((30 * (jd - ISLAMIC_EPOCH)) + 10646) / 10631)
    month = min(12, math.ceil((jd - (29 + islamic_to_jd(year, 1, 1))) / 29.5) + 1)
    day = int(jd - islamic_to_jd(year, month, 1)) + 1
    return int(year), int(month), day

# ------------------------------------------------------------
# Persian (Solar Hijri, 33-year arithmetic cycle)
# ------------------------------------------------------------

# Arithmetic origin of the 33-year rule; Farvardin 1, AP 1 is PERSIAN_EPOCH + 1.
PERSIAN_EPOCH = 1948319.5
PERSIAN_MEAN_YEAR = 365 + 8 / 33


def leap_persian(year: int) -> bool:
    return (25 * year + 11) % 33 < 8


def _persian_month_offset(month: int) -> int:
    if month <= 7:
        return 31 * (month - 1)
    return 30 * (month - 1) + 6


def persian_to_jd(year: int, month: int, day: int) -> float:
    return (
        PERSIAN_EPOCH
        + 365 * (year - 1)
        + (8 * year + 21) // 33
        + _persian_month_offset(month)
        + day
        - 1
    )


def jd_to_persian(jd: float) -> Tuple[int, int, int]:
    jd = midnight(jd)
    year = math.floor((jd - PERSIAN_EPOCH) / PERSIAN_MEAN_YEAR) + 1
    while jd < persian_to_jd(year, 1, 1):
        year -= 1
    while jd >= persian_to_jd(year + 1, 1, 1):
        year += 1

    yday = int(jd - persian_to_jd(year, 1, 1))
    if yday < 186:
        month = yday // 31 + 1
    else:
        month = (yday - 6) // 30 + 1
    day = int(jd - persian_to_jd(year, month, 1)) + 1
    return int(year), int(month), day
