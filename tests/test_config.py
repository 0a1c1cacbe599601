# tests/test_config.py

import pytest

import calendarsystems as cs
from calendarsystems.core.config import ENV_DEFAULT_CALENDAR, ENV_LOCALE, Settings


def test_defaults():
    s = Settings()
    assert s.default_calendar == "gregory"
    assert s.locale == "en"


def test_from_env():
    s = Settings.from_env({ENV_DEFAULT_CALENDAR: "persian", ENV_LOCALE: "fa"})
    assert s == Settings(default_calendar="persian", locale="fa")
    assert Settings.from_env({ENV_LOCALE: ""}) == Settings()


def test_from_process_env(monkeypatch):
    monkeypatch.setenv(ENV_DEFAULT_CALENDAR, "hebrew")
    assert Settings.from_env().default_calendar == "hebrew"


def test_tweak_is_a_copy():
    s = Settings()
    t = s.tweak(locale="he")
    assert s.locale == "en"
    assert t.locale == "he"


@pytest.fixture
def restore_settings():
    saved = cs.get_settings()
    yield
    cs.configure(default_calendar=saved.default_calendar, locale=saved.locale)


def test_configure_changes_adapter_default(restore_settings):
    cs.configure(default_calendar="persian")
    assert cs.get_settings().default_calendar == "persian"
    assert cs.CalendarDateTime("2023-03-21").calendar == "persian"
