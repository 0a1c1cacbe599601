"""Darian calendar for Mars (Gangale, 1985).

Sols are counted by the Mars Sol Date (MSD), a continuous sol count whose
zero falls on 1873-12-29 ~12:09 UTC. Darian year 0 begins at MSD 0; a year
has 24 months of 28 sols, except that every sixth month has 27 and the last
month gains a 28th sol in leap years.
"""
from __future__ import annotations
import math
from typing import Any, Dict, Optional

from .. import localization
from ..core.types import CalendarDate
from .base import CalendarSystem

SECONDS_PER_SOL = 88775.244
EARTH_DAYS_PER_SOL = 1.0274912517
SOLS_PER_MARS_YEAR = 668.5907

MSD_JULIAN_OFFSET = 2451549.5
MSD_BASE_OFFSET = 44796.0
MSD_CORRECTION = 0.0009626

SOLS_PER_MONTH = tuple(27 if m % 6 == 5 else 28 for m in range(24))
LAST_MONTH = 23

# Absorbs float noise when an instant sits exactly on a sol boundary
SOL_EPSILON = 1e-6

WEEKDAYS = ("Sol Solis", "Sol Lunae", "Sol Martis", "Sol Mercurii", "Sol Jovis", "Sol Veneris", "Sol Saturni")
WEEKDAYS_SHORT = ("Sol", "Lun", "Mar", "Mer", "Jov", "Ven", "Sat")
WEEKDAYS_MIN = ("So", "Lu", "Ma", "Me", "Jo", "Ve", "Sa")


def jd_to_msd(jd: float) -> float:
    return (jd - MSD_JULIAN_OFFSET) / EARTH_DAYS_PER_SOL + MSD_BASE_OFFSET - MSD_CORRECTION


def msd_to_jd(msd: float) -> float:
    return (msd - MSD_BASE_OFFSET + MSD_CORRECTION) * EARTH_DAYS_PER_SOL + MSD_JULIAN_OFFSET


def mars_leap(year: int) -> bool:
    # Year 0 and earlier carry no leap sol.
    if year <= 0:
        return False
    if year % 100 == 0 and year % 500 != 0:
        return False
    return year % 2 == 1 or year % 10 == 0


def sols_in_year(year: int) -> int:
    return 669 if mars_leap(year) else 668


def _leaps_before(year: int) -> int:
    """Leap years in [1, year)."""
    if year <= 1:
        return 0
    n = year - 1
    odd = (n + 1) // 2
    tens = n // 10
    centuries = n // 100 - n // 500
    return odd + tens - centuries


def year_start_msd(year: int) -> int:
    return 668 * year + _leaps_before(year)


def sols_in_month(year: int, month: int) -> int:
    if month == LAST_MONTH and mars_leap(year):
        return 28
    return SOLS_PER_MONTH[month]


def darian_to_msd(year: int, month: int, day: int) -> int:
    msd = year_start_msd(year)
    for m in range(month):
        msd += sols_in_month(year, m)
    return msd + day - 1


def msd_to_darian(msd: float) -> CalendarDate:
    sol = math.floor(msd + SOL_EPSILON)
    year = math.floor(sol / SOLS_PER_MARS_YEAR)
    while sol < year_start_msd(year):
        year -= 1
    while sol >= year_start_msd(year + 1):
        year += 1

    remaining = sol - year_start_msd(year)
    month = 0
    while remaining >= sols_in_month(year, month):
        remaining -= sols_in_month(year, month)
        month += 1
    return CalendarDate(year, month, remaining + 1)


class MarsCalendarSystem(CalendarSystem):
    name = "mars"
    intl_calendar = "mars"
    first_month_name = "Sagittarius"
    first_day_of_week = 0  # Sol Solis

    def to_julian_day(self, year, month, day, hour=0, minute=0, second=0) -> float:
        # Clock fields count Earth seconds elapsed since the sol began.
        fraction = (second + 60 * (minute + 60 * hour)) / SECONDS_PER_SOL
        return msd_to_jd(darian_to_msd(year, month, day) + fraction)

    def from_julian_day(self, jd: float) -> CalendarDate:
        return msd_to_darian(jd_to_msd(jd))

    def to_mars_sol_date(self, jd: float) -> float:
        return jd_to_msd(jd)

    def from_mars_sol_date(self, msd: float) -> CalendarDate:
        return msd_to_darian(msd)

    def is_leap_year(self, year: int) -> bool:
        return mars_leap(year)

    def sols_in_year(self, year: int) -> int:
        return sols_in_year(year)

    def months_in_year(self, year: Optional[int] = None) -> int:
        return 24

    def days_in_month(self, year: int, month: int) -> int:
        self._check_month(year, month)
        return sols_in_month(year, month)

    def locale_override(self, locale: Optional[str] = None, year: Optional[int] = None) -> Dict[str, Any]:
        out = super().locale_override(locale, year)
        out.update(
            months_short=localization.short_names(out["months"], 4),
            weekdays=list(WEEKDAYS),
            weekdays_short=list(WEEKDAYS_SHORT),
            weekdays_min=list(WEEKDAYS_MIN),
        )
        return out
