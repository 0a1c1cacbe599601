from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple

from ..core.errors import InvalidMonthIndexError, UnimplementedCapabilityError
from ..core.inputs import normalize_date_input
from ..core.time import datetime_to_jd, jd_to_gregorian
from ..core.types import CalendarDate
from .. import localization


class CalendarSystem:
    """Conversion contract shared by every calendar.

    Subclasses supply ``to_julian_day`` / ``from_julian_day`` (or override the
    two ``convert_*`` methods directly) and ``is_leap_year``. Months are
    0-based and days 1-based on every public method.

    ``days_in_month(year, month)`` is optional; the adapter looks it up with
    ``getattr`` and falls back to Gregorian month lengths. ``add_months``,
    ``add_years`` and ``year_start_month`` shape month/year arithmetic and
    ``start_of("year")`` for calendars whose year does not open at month 0.
    """

    name = "base"
    intl_calendar = "gregory"
    first_month_name = "January"
    first_day_of_week = 0  # 0 = Sunday

    def __init__(self, locale: str = "en") -> None:
        self.locale = locale

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self.locale!r})"

    # ---- Julian Day ----

    def to_julian_day(
        self, year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: float = 0
    ) -> float:
        raise UnimplementedCapabilityError(f"{type(self).__name__}.to_julian_day must be implemented by subclass")

    def from_julian_day(self, jd: float) -> CalendarDate:
        raise UnimplementedCapabilityError(f"{type(self).__name__}.from_julian_day must be implemented by subclass")

    # ---- Gregorian bridge ----

    def convert_from_gregorian(self, value: Any = None) -> CalendarDate:
        dt = normalize_date_input(value)
        return self.from_julian_day(datetime_to_jd(dt))

    def convert_to_gregorian(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> CalendarDate:
        jd = self.to_julian_day(year, month, day, hour, minute, second)
        gy, gm, gd = jd_to_gregorian(jd)
        return CalendarDate(gy, gm - 1, gd)

    # ---- Year structure ----

    def is_leap_year(self, year: int) -> bool:
        raise UnimplementedCapabilityError(f"{type(self).__name__}.is_leap_year must be implemented by subclass")

    def months_in_year(self, year: Optional[int] = None) -> int:
        return 12

    def year_start_month(self, year: int) -> int:
        """0-based index of the month that opens ``year``."""
        return 0

    def add_months(self, year: int, month: int, amount: int) -> Tuple[int, int]:
        """Shift (year, month) by ``amount`` months, rolling the year as needed."""
        month += amount
        while month < 0:
            year -= 1
            month += self.months_in_year(year)
        while month >= self.months_in_year(year):
            month -= self.months_in_year(year)
            year += 1
        return year, month

    def add_years(self, year: int, month: int, amount: int) -> Tuple[int, int]:
        year += amount
        return year, min(month, self.months_in_year(year) - 1)

    def _check_month(self, year: Optional[int], month: int) -> None:
        count = self.months_in_year(year)
        if not 0 <= month < count:
            raise InvalidMonthIndexError(
                f"Invalid month index {month} for {self.name}: expected 0..{count - 1}"
            )

    def _month_length_from_jd(self, year: int, month: int) -> int:
        """Days in a month measured as the JD gap to the next month's first day."""
        self._check_month(year, month)
        ny, nm = self.add_months(year, month, 1)
        return int(self.to_julian_day(ny, nm, 1) - self.to_julian_day(year, month, 1))

    # ---- Names ----

    def month_names(self, locale: Optional[str] = None, year: Optional[int] = None) -> List[str]:
        return list(localization.month_names(locale or self.locale, self.intl_calendar, self.first_month_name))

    def get_localized_month_name(self, month_index: int) -> str:
        names = self.month_names()
        if not 0 <= month_index < len(names):
            raise InvalidMonthIndexError(
                f"Invalid month index {month_index} for {self.name}: expected 0..{len(names) - 1}"
            )
        return names[month_index]

    def locale_override(self, locale: Optional[str] = None, year: Optional[int] = None) -> Dict[str, Any]:
        """Locale data a formatter merges in so native dates print native month names."""
        locale = locale or self.locale
        months = self.month_names(locale, year)
        gregorian = list(localization.month_names(locale, "gregory", "January"))
        return {
            "gregorian_months": gregorian,
            "months": months,
            "months_short": localization.short_names(months),
        }
