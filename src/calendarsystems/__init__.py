"""calendarsystems public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""
import logging

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .adapter import CalendarDateTime
from .api import (
    calendar_info,
    configure,
    convert,
    get_calendar,
    get_registry,
    get_settings,
    list_calendars,
    month_names,
    register_calendar,
)
from .calendars import (
    AmazighCalendarSystem,
    CalendarSystem,
    ChineseCalendarSystem,
    EthiopianCalendarSystem,
    GregoryCalendarSystem,
    HebrewCalendarSystem,
    HijriCalendarSystem,
    IndianCalendarSystem,
    MarsCalendarSystem,
    PersianCalendarSystem,
)
from .core.config import Settings
from .core.errors import (
    CalendarAlreadyRegisteredError,
    CalendarError,
    InvalidDateInputError,
    InvalidDateValueError,
    InvalidMonthIndexError,
    UnimplementedCapabilityError,
    UnregisteredCalendarError,
)
from .core.registry import CalendarRegistry
from .core.types import CalendarDate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalendarDateTime",
    "CalendarDate",
    "CalendarRegistry",
    "CalendarSystem",
    "Settings",
    "calendar_info",
    "configure",
    "convert",
    "get_calendar",
    "get_registry",
    "get_settings",
    "list_calendars",
    "month_names",
    "register_calendar",
    "AmazighCalendarSystem",
    "ChineseCalendarSystem",
    "EthiopianCalendarSystem",
    "GregoryCalendarSystem",
    "HebrewCalendarSystem",
    "HijriCalendarSystem",
    "IndianCalendarSystem",
    "MarsCalendarSystem",
    "PersianCalendarSystem",
    "CalendarError",
    "CalendarAlreadyRegisteredError",
    "InvalidDateInputError",
    "InvalidDateValueError",
    "InvalidMonthIndexError",
    "UnimplementedCapabilityError",
    "UnregisteredCalendarError",
]
