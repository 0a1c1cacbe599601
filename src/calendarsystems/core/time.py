"""Julian Day arithmetic for the Gregorian and Julian (Old Style) calendars.

Conventions used across the package:

* Years are astronomical: year 0 is 1 BCE, year -1 is 2 BCE.
* Months and days passed to these functions are 1-based.
* ``*_to_jd`` returns the JD of *midnight* starting the day, so results end in .5.
* ``jd_to_*`` accepts any JD inside the civil day (a time-of-day fraction
  from :func:`day_fraction` may be added) and first snaps it to that midnight.
"""
from __future__ import annotations
import math
from datetime import datetime, timedelta, tzinfo
from typing import Optional, Tuple

GREGORIAN_EPOCH = 1721425.5
JULIAN_CALENDAR_EPOCH = 1721423.5
SECONDS_PER_DAY = 86400.0


def midnight(jd: float) -> float:
    """JD of the midnight that starts the civil day containing ``jd``."""
    return math.floor(jd - 0.5) + 0.5


def day_fraction(hour: int = 0, minute: int = 0, second: float = 0) -> float:
    """Fraction of a civil day elapsed at hour:minute:second, rounded to the second."""
    return math.floor(second + 60 * (minute + 60 * hour) + 0.5) / SECONDS_PER_DAY


def leap_gregorian(year: int) -> bool:
    return year % 4 == 0 and not (year % 100 == 0 and year % 400 != 0)


def gregorian_to_jd(year: int, month: int, day: int) -> float:
    y1 = year - 1
    if month <= 2:
        adj = 0
    elif leap_gregorian(year):
        adj = -1
    else:
        adj = -2
    return (
        (GREGORIAN_EPOCH - 1)
        + 365 * y1
        + math.floor(y1 / 4)
        - math.floor(y1 / 100)
        + math.floor(y1 / 400)
        + math.floor((367 * month - 362) / 12 + adj + day)
    )


def jd_to_gregorian(jd: float) -> Tuple[int, int, int]:
    """Inverse of :func:`gregorian_to_jd` (quadricentennial decomposition)."""
    wjd = midnight(jd)
    depoch = wjd - GREGORIAN_EPOCH
    quadricent = math.floor(depoch / 146097)
    dqc = depoch % 146097
    cent = math.floor(dqc / 36524)
    dcent = dqc % 36524
    quad = math.floor(dcent / 1461)
    dquad = dcent % 1461
    yindex = math.floor(dquad / 365)
    year = quadricent * 400 + cent * 100 + quad * 4 + yindex
    if not (cent == 4 or yindex == 4):
        year += 1

    yearday = wjd - gregorian_to_jd(year, 1, 1)
    if wjd < gregorian_to_jd(year, 3, 1):
        leapadj = 0
    elif leap_gregorian(year):
        leapadj = 1
    else:
        leapadj = 2
    month = math.floor(((yearday + leapadj) * 12 + 373) / 367)
    day = int(wjd - gregorian_to_jd(year, month, 1)) + 1
    return int(year), int(month), day


def leap_julian(year: int) -> bool:
    return year % 4 == 0


def julian_to_jd(year: int, month: int, day: int) -> float:
    """Julian (Old Style) calendar date to JD, astronomical years."""
    if month <= 2:
        year -= 1
        month += 12
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        - 1524.5
    )


def jd_to_julian(jd: float) -> Tuple[int, int, int]:
    z = math.floor(midnight(jd) + 0.5)
    b = z + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    day = b - d - math.floor(30.6001 * e)
    return int(year), int(month), int(day)


def weekday_from_jd(jd: float) -> int:
    """Day of week for the civil day containing ``jd``; 0 = Sunday."""
    return int(math.floor(midnight(jd) + 1.5)) % 7


def datetime_to_jd(dt: datetime) -> float:
    """JD of a datetime's wall-clock reading, to the microsecond. tzinfo is ignored."""
    seconds = dt.hour * 3600 + dt.minute * 60 + dt.second + dt.microsecond / 1e6
    return gregorian_to_jd(dt.year, dt.month, dt.day) + seconds / SECONDS_PER_DAY


def jd_to_datetime(jd: float, tz: Optional[tzinfo] = None) -> datetime:
    """Inverse of :func:`datetime_to_jd`, rounded to the millisecond."""
    y, m, d = jd_to_gregorian(jd)
    ms = round((jd - midnight(jd)) * SECONDS_PER_DAY * 1000)
    return datetime(y, m, d, tzinfo=tz) + timedelta(milliseconds=ms)
