# tests/test_indian.py

from datetime import date

import pytest

from calendarsystems import CalendarDate, IndianCalendarSystem

cal = IndianCalendarSystem()


@pytest.mark.parametrize("year, leap", [
    (1946, True), (1942, True), (1922, True), (1842, True), (1522, True),
    (1945, False), (1943, False), (1921, False), (1322, False), (1622, False),
])
def test_leap_follows_gregorian_year(year, leap):
    assert cal.is_leap_year(year) is leap


def test_month_lengths():
    assert cal.days_in_month(1946, 0) == 31
    assert cal.days_in_month(1945, 0) == 30
    assert [cal.days_in_month(1945, m) for m in range(1, 12)] == [31] * 5 + [30] * 6


def test_known_dates():
    assert cal.convert_from_gregorian(date(2023, 3, 22)) == CalendarDate(1945, 0, 1)
    assert cal.convert_from_gregorian(date(2023, 4, 21)) == CalendarDate(1945, 1, 1)
    assert cal.convert_from_gregorian(date(2024, 3, 21)) == CalendarDate(1946, 0, 1)
    assert cal.convert_to_gregorian(1945, 0, 1) == CalendarDate(2023, 2, 22)
