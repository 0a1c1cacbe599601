# tests/test_registry.py

import logging

import pytest

from calendarsystems import (
    CalendarAlreadyRegisteredError,
    CalendarRegistry,
    GregoryCalendarSystem,
    PersianCalendarSystem,
    UnregisteredCalendarError,
)


def test_starts_with_gregory():
    reg = CalendarRegistry()
    assert reg.list() == ["gregory"]
    assert isinstance(reg.get("gregory"), GregoryCalendarSystem)
    assert "gregory" in reg


def test_builtin_registry(registry):
    assert registry.list() == sorted(
        ["amazigh", "chinese", "ethiopic", "gregory", "hebrew", "indian", "islamic", "mars", "persian"]
    )


def test_unknown_name():
    reg = CalendarRegistry()
    with pytest.raises(UnregisteredCalendarError) as exc:
        reg.get("klingon")
    assert "klingon" in str(exc.value)
    assert "gregory" in str(exc.value)
    # also a KeyError for callers catching the builtin
    with pytest.raises(KeyError):
        reg.get("klingon")
    assert reg.find("klingon") is None


def test_register_and_overwrite(caplog):
    reg = CalendarRegistry()
    first = PersianCalendarSystem()
    reg.register("persian", first)
    assert reg.get("persian") is first

    with pytest.raises(CalendarAlreadyRegisteredError):
        reg.register("persian", PersianCalendarSystem())
    assert reg.get("persian") is first

    second = PersianCalendarSystem("fa")
    with caplog.at_level(logging.WARNING, logger="calendarsystems.core.registry"):
        reg.register("persian", second, overwrite=True)
    assert reg.get("persian") is second
    assert any("Replacing" in r.getMessage() for r in caplog.records)


def test_rejects_non_calendar():
    with pytest.raises(TypeError):
        CalendarRegistry().register("bogus", object())
