# tests/test_api.py

from datetime import date

import pytest

import calendarsystems as cs
from calendarsystems import CalendarDate, PersianCalendarSystem, UnregisteredCalendarError
from calendarsystems.api import set_registry
from calendarsystems._bootstrap import build_registry


@pytest.fixture
def fresh_registry():
    saved = cs.get_registry()
    set_registry(build_registry())
    yield cs.get_registry()
    set_registry(saved)


def test_list_calendars():
    names = cs.list_calendars()
    assert "gregory" in names
    assert "mars" in names


def test_convert_from_gregorian():
    assert cs.convert(date(2023, 5, 24), "persian") == CalendarDate(1402, 2, 3)
    assert cs.convert("2023-05-24", "hebrew") == CalendarDate(5783, 2, 4)


def test_convert_between_calendars():
    assert cs.convert(CalendarDate(1402, 2, 3), "hebrew", source="persian") == CalendarDate(5783, 2, 4)
    assert cs.convert({"year": 5783, "month": 2, "day": 4}, "gregory", source="hebrew") == CalendarDate(2023, 4, 24)


def test_unknown_calendar():
    with pytest.raises(UnregisteredCalendarError):
        cs.convert(date(2023, 5, 24), "klingon")


def test_register_custom(fresh_registry):
    cs.register_calendar("persian-fa", PersianCalendarSystem("fa"))
    assert cs.month_names("persian-fa")[0] == "فروردین"
    assert "persian-fa" in cs.list_calendars()


def test_calendar_info():
    info = cs.calendar_info("hebrew")
    assert info["class"] == "HebrewCalendarSystem"
    assert info["first_month_name"] == "Nisan"
    assert info["months_in_year"] == 13
