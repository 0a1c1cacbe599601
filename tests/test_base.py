# tests/test_base.py

import pytest

from calendarsystems import CalendarSystem, UnimplementedCapabilityError


def test_unimplemented_contract():
    cal = CalendarSystem()
    with pytest.raises(UnimplementedCapabilityError):
        cal.to_julian_day(2000, 0, 1)
    with pytest.raises(UnimplementedCapabilityError):
        cal.from_julian_day(2451544.5)
    with pytest.raises(UnimplementedCapabilityError):
        cal.convert_from_gregorian("2000-01-01")
    with pytest.raises(UnimplementedCapabilityError):
        cal.convert_to_gregorian(2000, 0, 1)
    with pytest.raises(NotImplementedError):
        cal.is_leap_year(2000)


def test_default_locale_and_names():
    cal = CalendarSystem()
    assert cal.locale == "en"
    assert cal.months_in_year() == 12
    assert cal.month_names()[0] == "January"


def test_default_month_arithmetic():
    cal = CalendarSystem()
    assert cal.add_months(2000, 11, 1) == (2001, 0)
    assert cal.add_months(2000, 0, -1) == (1999, 11)
    assert cal.add_months(2000, 5, 30) == (2002, 11)
    assert cal.add_years(2000, 5, -3) == (1997, 5)
