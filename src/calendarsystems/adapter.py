"""``CalendarDateTime``: date arithmetic that respects a calendar's own months.

The wrapper holds a Gregorian ``datetime`` (the authoritative instant, also
exposed as the Gregorian shadow) together with the active calendar's native
(year, month, day). Day-sized and smaller steps move the ``datetime`` and
re-derive the native fields; month and year steps are composed on the native
fields and converted back through the calendar. Every operation returns a new
object.
"""
from __future__ import annotations
import calendar as _gregorian_calendar
import re
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from dateutil.relativedelta import relativedelta

from .calendars.base import CalendarSystem
from .core.errors import UnimplementedCapabilityError
from .core.inputs import normalize_date_input
from .core.time import datetime_to_jd, jd_to_datetime, weekday_from_jd
from .core.types import CalendarDate
from . import localization

if TYPE_CHECKING:
    from .core.registry import CalendarRegistry

GREGORY = "gregory"

_SHORT_UNITS = {
    "ms": "millisecond",
    "s": "second",
    "m": "minute",
    "h": "hour",
    "d": "day",
    "D": "date",
    "w": "week",
    "M": "month",
    "Q": "quarter",
    "y": "year",
}
_UNITS = {"millisecond", "second", "minute", "hour", "day", "date", "week", "month", "quarter", "year"}

_FORMAT_TOKENS = re.compile(r"\[([^\]]*)]|Y{4}|Y{2}|M{1,4}|D{1,2}|d{1,4}|H{1,2}|h{1,2}|a|A|m{1,2}|s{1,2}|Z{1,2}|SSS")

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def normalize_unit(unit: str) -> str:
    """Map day.js-style unit spellings (``"M"``, ``"days"``, ``"Month"``) to a canonical name."""
    if unit in _SHORT_UNITS:
        return _SHORT_UNITS[unit]
    u = unit.lower()
    if u.endswith("s") and u[:-1] in _UNITS:
        u = u[:-1]
    if u not in _UNITS:
        raise ValueError(f"Unknown unit '{unit}'")
    return u


def _default_registry() -> "CalendarRegistry":
    from .api import _reg
    return _reg()


def _default_settings():
    from .api import get_settings
    return get_settings()


def _native_to_datetime(
    cal: "CalendarSystem",
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
    tz=None,
) -> datetime:
    try:
        dt = jd_to_datetime(cal.to_julian_day(year, month, day, hour, minute, second), tz)
    except UnimplementedCapabilityError:
        g = cal.convert_to_gregorian(year, month, day, hour, minute, second)
        dt = datetime(g.year, g.month + 1, g.day, hour, minute, second, tzinfo=tz)
    return dt + timedelta(microseconds=microsecond)


class CalendarDateTime:
    """A point in time viewed through one registered calendar."""

    def __init__(
        self,
        value: Any = None,
        *,
        calendar: Optional[str] = None,
        locale: Optional[str] = None,
        registry: Optional["CalendarRegistry"] = None,
    ) -> None:
        settings = _default_settings()
        self._registry = registry if registry is not None else _default_registry()
        self._dt = normalize_date_input(value)
        self._locale = locale or settings.locale
        self._calendar = GREGORY
        self._native = CalendarDate(self._dt.year, self._dt.month - 1, self._dt.day)
        target = calendar or settings.default_calendar
        if target != GREGORY:
            self._switch(target)

    # ---- construction helpers ----

    @classmethod
    def from_calendar_system(
        cls,
        name: str,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        locale: Optional[str] = None,
        registry: Optional["CalendarRegistry"] = None,
    ) -> "CalendarDateTime":
        reg = registry if registry is not None else _default_registry()
        cal = reg.get(name)
        dt = _native_to_datetime(cal, year, month, day, hour, minute, second, millisecond * 1000)
        return cls(dt, calendar=name, locale=locale, registry=reg)

    def _copy(self) -> "CalendarDateTime":
        out = object.__new__(type(self))
        out._registry = self._registry
        out._dt = self._dt
        out._locale = self._locale
        out._calendar = self._calendar
        out._native = self._native
        return out

    def clone(self) -> "CalendarDateTime":
        return self._copy()

    def _switch(self, name: str) -> None:
        self._registry.get(name)
        self._calendar = name
        self._resync()

    def _resync(self) -> None:
        if self._calendar == GREGORY:
            self._native = CalendarDate(self._dt.year, self._dt.month - 1, self._dt.day)
        else:
            self._native = self.calendar_system.convert_from_gregorian(self._dt)

    def _with_dt(self, dt: datetime) -> "CalendarDateTime":
        out = self._copy()
        out._dt = dt
        out._resync()
        return out

    def _with_native(self, year: int, month: int, day: int, *, keep_time: bool = True) -> "CalendarDateTime":
        dt = self._dt
        if keep_time:
            new_dt = _native_to_datetime(
                self.calendar_system, year, month, day,
                dt.hour, dt.minute, dt.second, dt.microsecond, dt.tzinfo,
            )
        else:
            new_dt = _native_to_datetime(self.calendar_system, year, month, day, tz=dt.tzinfo)
        return self._with_dt(new_dt)

    # ---- calendar switching ----

    def to_calendar_system(self, name: str) -> "CalendarDateTime":
        """Same instant, read in calendar ``name``; raises if ``name`` is unregistered."""
        out = self._copy()
        out._switch(name)
        return out

    def with_locale(self, locale: str) -> "CalendarDateTime":
        out = self._copy()
        out._locale = locale
        return out

    # ---- accessors ----

    @property
    def calendar(self) -> str:
        return self._calendar

    @property
    def calendar_system(self) -> "CalendarSystem":
        return self._registry.get(self._calendar)

    @property
    def native(self) -> CalendarDate:
        return self._native

    @property
    def gregorian(self) -> CalendarDate:
        return CalendarDate(self._dt.year, self._dt.month - 1, self._dt.day)

    @property
    def year(self) -> int:
        return self._native.year

    @property
    def month(self) -> int:
        return self._native.month

    @property
    def day(self) -> int:
        return self._native.day

    @property
    def weekday(self) -> int:
        """0 = Sunday."""
        return weekday_from_jd(datetime_to_jd(self._dt))

    @property
    def hour(self) -> int:
        return self._dt.hour

    @property
    def minute(self) -> int:
        return self._dt.minute

    @property
    def second(self) -> int:
        return self._dt.second

    @property
    def millisecond(self) -> int:
        return self._dt.microsecond // 1000

    def to_datetime(self) -> datetime:
        return self._dt

    def value_of(self) -> int:
        """Milliseconds since the Unix epoch; naive values are read as UTC."""
        dt = self._dt if self._dt.tzinfo is not None else self._dt.replace(tzinfo=timezone.utc)
        return (dt - _UNIX_EPOCH) // timedelta(milliseconds=1)

    # ---- year structure ----

    def days_in_month(self) -> int:
        cal = self.calendar_system
        return self._month_length(cal, self._native.year, self._native.month)

    def _month_length(self, cal: "CalendarSystem", year: int, month: int) -> int:
        fn = getattr(cal, "days_in_month", None)
        if fn is None:
            return _gregorian_calendar.monthrange(self._dt.year, self._dt.month)[1]
        return fn(year, month)

    def is_leap_year(self) -> bool:
        return self.calendar_system.is_leap_year(self._native.year)

    def months_in_year(self) -> int:
        return self.calendar_system.months_in_year(self._native.year)

    # ---- arithmetic ----

    def add(self, amount: float, unit: str = "millisecond") -> "CalendarDateTime":
        unit = normalize_unit(unit)
        if unit in ("day", "date"):
            return self._with_dt(self._dt + timedelta(days=amount))
        if unit == "week":
            return self._with_dt(self._dt + timedelta(weeks=amount))
        if unit == "hour":
            return self._with_dt(self._dt + timedelta(hours=amount))
        if unit == "minute":
            return self._with_dt(self._dt + timedelta(minutes=amount))
        if unit == "second":
            return self._with_dt(self._dt + timedelta(seconds=amount))
        if unit == "millisecond":
            return self._with_dt(self._dt + timedelta(milliseconds=amount))

        months = int(amount) * 3 if unit == "quarter" else int(amount)
        if self._calendar == GREGORY:
            if unit == "year":
                return self._with_dt(self._dt + relativedelta(years=months))
            return self._with_dt(self._dt + relativedelta(months=months))

        cal = self.calendar_system
        y, m, d = self._native
        if unit == "year":
            y, m = cal.add_years(y, m, months)
        else:
            y, m = cal.add_months(y, m, months)
        d = min(d, self._month_length(cal, y, m))
        return self._with_native(y, m, d)

    def subtract(self, amount: float, unit: str = "millisecond") -> "CalendarDateTime":
        return self.add(-amount, unit)

    def set(self, unit: str, value: int) -> "CalendarDateTime":
        """Set one field. Day-of-month overflow rolls into the next month; month and year clamp the day."""
        unit = normalize_unit(unit)
        cal = self.calendar_system
        y, m, d = self._native
        if unit == "date":
            first = self._with_native(y, m, 1)
            return first._with_dt(first._dt + timedelta(days=value - 1))
        if unit == "month":
            if 0 <= value < cal.months_in_year(y):
                m = value
            else:
                y, m = cal.add_months(y, m, value - m)
            return self._with_native(y, m, min(d, self._month_length(cal, y, m)))
        if unit == "year":
            y, m = cal.add_years(value, m, 0)
            return self._with_native(y, m, min(d, self._month_length(cal, y, m)))
        if unit == "day":
            return self._with_dt(self._dt + timedelta(days=value - self.weekday))

        dt = self._dt
        if unit == "hour":
            dt = dt.replace(hour=0) + timedelta(hours=value)
        elif unit == "minute":
            dt = dt.replace(minute=0) + timedelta(minutes=value)
        elif unit == "second":
            dt = dt.replace(second=0) + timedelta(seconds=value)
        elif unit == "millisecond":
            dt = dt.replace(microsecond=0) + timedelta(milliseconds=value)
        else:
            raise ValueError(f"Cannot set unit '{unit}'")
        return self._with_dt(dt)

    def start_of(self, unit: str) -> "CalendarDateTime":
        unit = normalize_unit(unit)
        cal = self.calendar_system
        y, m, _ = self._native
        if unit == "year":
            return self._with_native(y, cal.year_start_month(y), 1, keep_time=False)
        if unit == "quarter":
            start = cal.year_start_month(y)
            n = cal.months_in_year(y)
            pos = (m - start) % n
            qy, qm = cal.add_months(y, m, -(pos % 3))
            return self._with_native(qy, qm, 1, keep_time=False)
        if unit == "month":
            return self._with_native(y, m, 1, keep_time=False)

        dt = self._dt
        if unit in ("week", "day", "date"):
            dt = dt.replace(hour=0, minute=0, second=0, microsecond=0)
            if unit == "week":
                dt -= timedelta(days=(self.weekday - cal.first_day_of_week) % 7)
        elif unit == "hour":
            dt = dt.replace(minute=0, second=0, microsecond=0)
        elif unit == "minute":
            dt = dt.replace(second=0, microsecond=0)
        elif unit == "second":
            dt = dt.replace(microsecond=0)
        return self._with_dt(dt)

    def end_of(self, unit: str) -> "CalendarDateTime":
        unit = normalize_unit(unit)
        if unit == "millisecond":
            return self.clone()
        nxt = self.start_of(unit).add(1, unit)
        return nxt._with_dt(nxt._dt - timedelta(milliseconds=1))

    # ---- formatting ----

    def month_names(self) -> List[str]:
        return self.calendar_system.month_names(self._locale, self._native.year)

    def _locale_data(self) -> Dict[str, Any]:
        data = self.calendar_system.locale_override(self._locale, self._native.year)
        if "weekdays" not in data:
            weekdays = list(localization.weekday_names(self._locale))
            data["weekdays"] = weekdays
            data["weekdays_short"] = localization.short_names(weekdays)
            data["weekdays_min"] = localization.short_names(weekdays, 2)
        return data

    def format(self, template: str = "YYYY-MM-DDTHH:mm:ss") -> str:
        """Render with day.js tokens; month names come from the active calendar."""
        data = self._locale_data()
        dt = self._dt
        y, m, d = self._native

        def offset(sep: str) -> str:
            off = dt.utcoffset()
            if off is None:
                return ""
            total = int(off.total_seconds()) // 60
            sign = "+" if total >= 0 else "-"
            hh, mm = divmod(abs(total), 60)
            return f"{sign}{hh:02d}{sep}{mm:02d}"

        def repl(match: "re.Match[str]") -> str:
            if match.group(1) is not None:
                return match.group(1)
            tok = match.group(0)
            if tok == "YYYY":
                return f"-{abs(y):04d}" if y < 0 else f"{y:04d}"
            if tok == "YY":
                return f"{y % 100:02d}"
            if tok == "M":
                return str(m + 1)
            if tok == "MM":
                return f"{m + 1:02d}"
            if tok == "MMM":
                return data["months_short"][m]
            if tok == "MMMM":
                return data["months"][m]
            if tok == "D":
                return str(d)
            if tok == "DD":
                return f"{d:02d}"
            if tok == "d":
                return str(self.weekday)
            if tok == "dd":
                return data["weekdays_min"][self.weekday]
            if tok == "ddd":
                return data["weekdays_short"][self.weekday]
            if tok == "dddd":
                return data["weekdays"][self.weekday]
            if tok == "H":
                return str(dt.hour)
            if tok == "HH":
                return f"{dt.hour:02d}"
            if tok in ("h", "hh"):
                h12 = dt.hour % 12 or 12
                return str(h12) if tok == "h" else f"{h12:02d}"
            if tok == "a":
                return "am" if dt.hour < 12 else "pm"
            if tok == "A":
                return "AM" if dt.hour < 12 else "PM"
            if tok == "m":
                return str(dt.minute)
            if tok == "mm":
                return f"{dt.minute:02d}"
            if tok == "s":
                return str(dt.second)
            if tok == "ss":
                return f"{dt.second:02d}"
            if tok == "SSS":
                return f"{dt.microsecond // 1000:03d}"
            if tok == "Z":
                return offset(":")
            return offset("")

        return _FORMAT_TOKENS.sub(repl, template)

    def __repr__(self) -> str:
        return f"CalendarDateTime({self.format('YYYY-MM-DD HH:mm:ss')} {self._calendar})"

    def __str__(self) -> str:
        return self._dt.isoformat()
