from __future__ import annotations

from calendarsystems.calendars import BUILTIN_CALENDARS
from calendarsystems.core.registry import CalendarRegistry


def build_registry(locale: str = "en") -> CalendarRegistry:
    reg = CalendarRegistry({"gregory": BUILTIN_CALENDARS["gregory"](locale)})
    for name, cls in BUILTIN_CALENDARS.items():
        if name not in reg:
            reg.register(name, cls(locale))
    return reg
