# tests/test_hijri.py

from datetime import date, datetime, timezone

import pytest

from calendarsystems import CalendarDate, HijriCalendarSystem, InvalidDateValueError
from calendarsystems.core.arithmetic import jd_to_islamic
from calendarsystems.core.time import gregorian_to_jd

cal = HijriCalendarSystem()


def test_umm_al_qura_beats_tabular():
    """2025-07-06 is Muharram 11, 1447 (the tabular cycle gives the 10th)."""
    assert cal.convert_from_gregorian(date(2025, 7, 6)) == CalendarDate(1447, 0, 11)
    assert jd_to_islamic(gregorian_to_jd(2025, 7, 6)) == (1447, 1, 10)


def test_time_and_timezone_do_not_shift_day():
    utc = datetime(2025, 7, 6, 12, 0, tzinfo=timezone.utc)
    naive = datetime(2025, 7, 6, 23, 30)
    assert cal.convert_from_gregorian(utc) == cal.convert_from_gregorian(naive) == CalendarDate(1447, 0, 11)


def test_known_dates():
    assert cal.convert_from_gregorian(date(2023, 5, 24)) == CalendarDate(1444, 10, 4)
    assert cal.convert_from_gregorian(date(2023, 4, 10)) == CalendarDate(1444, 8, 19)
    assert cal.convert_from_gregorian(date(2023, 4, 14)) == CalendarDate(1444, 8, 23)


def test_inverse_by_search():
    assert cal.convert_to_gregorian(1447, 0, 11) == CalendarDate(2025, 6, 6)
    assert cal.convert_to_gregorian(1444, 8, 23) == CalendarDate(2023, 3, 14)


def test_missing_day_raises():
    short = next(m for m in range(12) if cal.days_in_month(1445, m) == 29)
    with pytest.raises(InvalidDateValueError):
        cal.convert_to_gregorian(1445, short, 30)


def test_outside_table_uses_tabular_cycle():
    d = date(1800, 6, 1)
    y, m, dd = jd_to_islamic(gregorian_to_jd(1800, 6, 1))
    native = cal.convert_from_gregorian(d)
    assert native == CalendarDate(y, m - 1, dd)
    assert cal.convert_to_gregorian(*native) == CalendarDate(1800, 5, 1)


def test_month_lengths():
    for m in range(12):
        assert cal.days_in_month(1445, m) in (29, 30)
    assert cal.days_in_month(1200, 0) == 30
    assert cal.days_in_month(1200, 1) == 29


def test_leap_year_is_bool():
    assert isinstance(cal.is_leap_year(1445), bool)
    assert cal.first_day_of_week == 6
