# tests/test_calendars.py
"""Properties every built-in calendar shares."""

import random
from datetime import date, timedelta

import pytest

from calendarsystems import CalendarDate, InvalidMonthIndexError
from calendarsystems.calendars import BUILTIN_CALENDARS

EXACT = ["gregory", "persian", "islamic", "hebrew", "ethiopic", "amazigh", "indian"]


@pytest.mark.parametrize("name", EXACT)
def test_gregorian_roundtrip(registry, name):
    cal = registry.get(name)
    random.seed(42)
    start = date(1930, 1, 1)
    for _ in range(150):
        d = start + timedelta(days=random.randint(0, 140 * 365))
        native = cal.convert_from_gregorian(d)
        back = cal.convert_to_gregorian(native.year, native.month, native.day)
        assert back == CalendarDate(d.year, d.month - 1, d.day), (name, d, native)


@pytest.mark.parametrize("name", ["gregory", "persian", "ethiopic", "amazigh", "indian"])
def test_year_length_matches_leap_rule(registry, name):
    cal = registry.get(name)
    for year in range(1, 3000, 37):
        total = sum(cal.days_in_month(year, m) for m in range(cal.months_in_year(year)))
        assert total == (366 if cal.is_leap_year(year) else 365), (name, year)


def test_hebrew_year_length(registry):
    cal = registry.get("hebrew")
    for year in range(5770, 5800):
        total = sum(cal.days_in_month(year, m) for m in range(cal.months_in_year(year)))
        expected = (383, 384, 385) if cal.is_leap_year(year) else (353, 354, 355)
        assert total in expected


def test_mars_year_length(registry):
    cal = registry.get("mars")
    for year in (0, 1, 2, 10, 11, 100, 500):
        total = sum(cal.days_in_month(year, m) for m in range(24))
        assert total == (669 if cal.is_leap_year(year) else 668)


@pytest.mark.parametrize("name", sorted(BUILTIN_CALENDARS))
def test_month_index_validity(registry, name):
    cal = registry.get(name)
    names = cal.month_names()
    assert cal.get_localized_month_name(0) == names[0]
    assert cal.get_localized_month_name(len(names) - 1) == names[-1]
    with pytest.raises(InvalidMonthIndexError):
        cal.get_localized_month_name(-1)
    with pytest.raises(InvalidMonthIndexError):
        # Hebrew also accepts index 12 (Adar II)
        cal.get_localized_month_name(cal.months_in_year())


@pytest.mark.parametrize("name", sorted(BUILTIN_CALENDARS))
def test_days_in_month_rejects_bad_index(registry, name):
    cal = registry.get(name)
    with pytest.raises(InvalidMonthIndexError):
        cal.days_in_month(2000, -1)
    with pytest.raises(IndexError):
        cal.days_in_month(2000, 99)


def test_scenario_2023_05_24(registry):
    d = date(2023, 5, 24)
    assert registry.get("hebrew").convert_from_gregorian(d) == CalendarDate(5783, 2, 4)
    assert registry.get("persian").convert_from_gregorian(d) == CalendarDate(1402, 2, 3)
    assert registry.get("gregory").convert_from_gregorian(d) == CalendarDate(2023, 4, 24)
    assert registry.get("islamic").convert_from_gregorian(d) == CalendarDate(1444, 10, 4)
    assert registry.get("amazigh").convert_from_gregorian(d) == CalendarDate(2973, 4, 11)


def test_cross_calendar_conversions_commute(registry):
    d = date(2023, 5, 24)
    for src in EXACT:
        native = registry.get(src).convert_from_gregorian(d)
        g = registry.get(src).convert_to_gregorian(*native)
        for dst in EXACT:
            assert registry.get(dst).convert_from_gregorian(g) == registry.get(dst).convert_from_gregorian(d)


@pytest.mark.parametrize("name", sorted(BUILTIN_CALENDARS))
def test_locale_override_shape(registry, name):
    cal = registry.get(name)
    data = cal.locale_override("en")
    assert data["months"] == cal.month_names("en")
    assert len(data["months_short"]) == len(data["months"])
    assert data["gregorian_months"][0] == "January"
