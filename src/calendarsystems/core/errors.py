class CalendarError(Exception):
    """Base error."""

class InvalidDateInputError(CalendarError, ValueError):
    """Raised when a date-like value has a shape that cannot be decoded."""

class InvalidDateValueError(CalendarError, ValueError):
    """Raised when no Gregorian date corresponds to a calendar date."""

class UnregisteredCalendarError(CalendarError, KeyError):
    """Raised on a registry lookup for a name that was never registered."""

    def __str__(self) -> str:
        # KeyError repr-quotes its message otherwise
        return str(self.args[0]) if self.args else ""

class CalendarAlreadyRegisteredError(CalendarError, KeyError):
    """Raised when a name is registered twice without overwrite=True."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""

class InvalidMonthIndexError(CalendarError, IndexError):
    """Raised for a month index outside [0, months_in_year - 1]."""

class UnimplementedCapabilityError(CalendarError, NotImplementedError):
    """Raised by CalendarSystem methods a subclass must override."""
