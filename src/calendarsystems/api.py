from __future__ import annotations
from typing import Any, Dict, List, Optional

from .calendars.base import CalendarSystem
from .core.config import Settings
from .core.registry import CalendarRegistry
from .core.types import CalendarDate

_registry: Optional[CalendarRegistry] = None
_settings: Settings = Settings.from_env()


def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry


def get_registry() -> CalendarRegistry:
    return _reg()


def get_settings() -> Settings:
    return _settings


def configure(**changes: Any) -> Settings:
    """Change process defaults, e.g. ``configure(default_calendar="persian", locale="fa")``."""
    global _settings
    _settings = _settings.tweak(**changes)
    return _settings


def list_calendars() -> List[str]:
    return _reg().list()


def get_calendar(name: str) -> CalendarSystem:
    return _reg().get(name)


def register_calendar(name: str, calendar: CalendarSystem, *, overwrite: bool = False) -> None:
    _reg().register(name, calendar, overwrite=overwrite)


def convert(value: Any, to: str, *, source: str = "gregory") -> CalendarDate:
    """Convert a date between two registered calendars through the Gregorian bridge.

    With ``source="gregory"`` ``value`` is any date-like input; otherwise it is
    a ``CalendarDate`` (or mapping) in the source calendar.
    """
    reg = _reg()
    target = reg.get(to)
    if source == "gregory":
        return target.convert_from_gregorian(value)
    src = reg.get(source)
    if isinstance(value, CalendarDate):
        y, m, d = value
    else:
        y, m, d = value["year"], value["month"], value["day"]
    return target.convert_from_gregorian(src.convert_to_gregorian(y, m, d))


def month_names(calendar: str, locale: Optional[str] = None) -> List[str]:
    return _reg().get(calendar).month_names(locale)


def calendar_info(name: str) -> Dict[str, Any]:
    cal = _reg().get(name)
    return {
        "name": name,
        "class": type(cal).__name__,
        "locale": cal.locale,
        "first_month_name": cal.first_month_name,
        "first_day_of_week": cal.first_day_of_week,
        "months_in_year": cal.months_in_year(),
    }
