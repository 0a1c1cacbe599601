# tests/test_time.py

import random
from datetime import datetime, timezone

import pytest

from calendarsystems.core import time as t


def test_known_epochs():
    assert t.gregorian_to_jd(1, 1, 1) == t.GREGORIAN_EPOCH
    assert t.gregorian_to_jd(2000, 1, 1) == 2451544.5
    assert t.gregorian_to_jd(1970, 1, 1) == 2440587.5
    assert t.gregorian_to_jd(2023, 5, 24) == 2460088.5
    assert t.julian_to_jd(1, 1, 1) == t.JULIAN_CALENDAR_EPOCH


def test_gregorian_roundtrip():
    random.seed(42)
    for _ in range(5000):
        jd = random.randint(1, 4_000_000) + 0.5
        y, m, d = t.jd_to_gregorian(jd)
        assert t.gregorian_to_jd(y, m, d) == jd


def test_julian_roundtrip():
    random.seed(7)
    for _ in range(5000):
        jd = random.randint(1, 4_000_000) + 0.5
        y, m, d = t.jd_to_julian(jd)
        assert t.julian_to_jd(y, m, d) == jd


def test_year_zero_is_astronomical():
    """Year 0 is 1 BCE (a leap year); year -1 is 2 BCE."""
    assert t.leap_gregorian(0)
    assert t.gregorian_to_jd(1, 1, 1) - t.gregorian_to_jd(0, 12, 31) == 1
    assert t.gregorian_to_jd(0, 1, 1) - t.gregorian_to_jd(-1, 12, 31) == 1
    assert t.jd_to_gregorian(t.gregorian_to_jd(0, 2, 29)) == (0, 2, 29)
    assert t.jd_to_gregorian(t.gregorian_to_jd(-1, 12, 31)) == (-1, 12, 31)
    assert t.gregorian_to_jd(1, 1, 1) - t.gregorian_to_jd(0, 1, 1) == 366


def test_julian_gregorian_offset():
    # Julian 2023-05-11 is Gregorian 2023-05-24
    assert t.julian_to_jd(2023, 5, 11) == t.gregorian_to_jd(2023, 5, 24)
    # The calendars agree in the third century
    assert t.julian_to_jd(250, 3, 1) == t.gregorian_to_jd(250, 3, 1)


def test_time_of_day_stays_in_civil_day():
    base = t.gregorian_to_jd(2023, 5, 24)
    assert t.jd_to_gregorian(base + t.day_fraction(23, 59, 59)) == (2023, 5, 24)
    assert t.jd_to_gregorian(base + t.day_fraction(12, 0, 0)) == (2023, 5, 24)
    assert t.day_fraction(12) == pytest.approx(0.5)


def test_weekday():
    assert t.weekday_from_jd(t.gregorian_to_jd(2000, 1, 1)) == 6  # Saturday
    assert t.weekday_from_jd(t.gregorian_to_jd(2023, 5, 24)) == 3  # Wednesday


def test_datetime_jd_roundtrip():
    random.seed(42)
    for _ in range(1000):
        jd = random.uniform(2400000.5, 2500000.5)
        dt = t.jd_to_datetime(jd)
        assert t.datetime_to_jd(dt) == pytest.approx(jd, abs=1e-7)


def test_jd_to_datetime_keeps_tz():
    dt = t.jd_to_datetime(2440587.5 + 0.25, timezone.utc)
    assert dt == datetime(1970, 1, 1, 6, 0, tzinfo=timezone.utc)
