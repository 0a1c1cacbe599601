from .base import CalendarSystem
from .gregory import GregoryCalendarSystem
from .persian import PersianCalendarSystem
from .hijri import HijriCalendarSystem
from .hebrew import HebrewCalendarSystem
from .ethiopian import EthiopianCalendarSystem
from .amazigh import AmazighCalendarSystem
from .chinese import ChineseCalendarSystem
from .indian import IndianCalendarSystem
from .mars import MarsCalendarSystem

# Registry name -> class
BUILTIN_CALENDARS = {
    "gregory": GregoryCalendarSystem,
    "persian": PersianCalendarSystem,
    "islamic": HijriCalendarSystem,
    "hebrew": HebrewCalendarSystem,
    "ethiopic": EthiopianCalendarSystem,
    "amazigh": AmazighCalendarSystem,
    "chinese": ChineseCalendarSystem,
    "indian": IndianCalendarSystem,
    "mars": MarsCalendarSystem,
}

__all__ = [
    "CalendarSystem",
    "GregoryCalendarSystem",
    "PersianCalendarSystem",
    "HijriCalendarSystem",
    "HebrewCalendarSystem",
    "EthiopianCalendarSystem",
    "AmazighCalendarSystem",
    "ChineseCalendarSystem",
    "IndianCalendarSystem",
    "MarsCalendarSystem",
    "BUILTIN_CALENDARS",
]
