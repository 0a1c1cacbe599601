# tests/test_chinese.py

from datetime import date

from calendarsystems import CalendarDate, ChineseCalendarSystem

cal = ChineseCalendarSystem()


def test_new_year_from_tables():
    assert cal.convert_from_gregorian(date(2024, 2, 10)) == CalendarDate(4721, 0, 1)
    assert cal.convert_from_gregorian(date(2023, 1, 22)) == CalendarDate(4720, 0, 1)


def test_table_round_trip():
    native = cal.convert_from_gregorian(date(2024, 5, 1))
    assert cal.convert_to_gregorian(*native) == CalendarDate(2024, 4, 1)


def test_fallback_outside_tables():
    native = cal.convert_from_gregorian(date(1850, 3, 1))
    assert native == CalendarDate(4547, 1, 7)
    assert cal.convert_to_gregorian(*native) == CalendarDate(1850, 2, 1)


def test_julian_day_matches_gregorian_bridge():
    jd = cal.to_julian_day(4721, 0, 1)
    assert jd == 2460350.5
    assert cal.from_julian_day(jd) == CalendarDate(4721, 0, 1)


def test_sexagenary_cycle():
    assert cal.get_sexagenary_cycle(4721) == {
        "stem": "Jiǎ",
        "branch": "Chén",
        "animal": "Dragon",
        "cycle_name": "Jiǎ-Chén",
    }
    assert cal.get_sexagenary_cycle(1) == cal.get_sexagenary_cycle(61)
    assert cal.get_zodiac_animal(4720) == "Rabbit"


def test_year_structure():
    assert cal.is_leap_year(4720)
    assert not cal.is_leap_year(4721)
    assert cal.days_in_month(4721, 0) == 30
    assert cal.days_in_month(4721, 1) == 29
    assert cal.first_day_of_week == 1
