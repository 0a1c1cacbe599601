from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from .errors import CalendarAlreadyRegisteredError, UnregisteredCalendarError

if TYPE_CHECKING:
    from ..calendars.base import CalendarSystem

log = logging.getLogger(__name__)


@dataclass
class CalendarRegistry:
    """Name -> CalendarSystem mapping.

    Starts with ``"gregory"`` registered. Entries are never removed; reads
    are lock-free and writes take a lock so a registry can be shared across
    threads once built.
    """
    _calendars: Dict[str, "CalendarSystem"] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def __post_init__(self) -> None:
        if "gregory" not in self._calendars:
            from ..calendars.gregory import GregoryCalendarSystem
            self._calendars["gregory"] = GregoryCalendarSystem()

    def get(self, name: str) -> "CalendarSystem":
        try:
            return self._calendars[name]
        except KeyError:
            raise UnregisteredCalendarError(
                f"Calendar '{name}' is not registered. Available: {self.list()}"
            ) from None

    def __contains__(self, name: str) -> bool:
        return name in self._calendars

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: "CalendarSystem", *, overwrite: bool = False) -> None:
        from ..calendars.base import CalendarSystem

        if not isinstance(calendar, CalendarSystem):
            raise TypeError(
                f"Cannot register '{name}': {type(calendar).__name__} is not a CalendarSystem"
            )
        with self._lock:
            if name in self._calendars:
                if not overwrite:
                    raise CalendarAlreadyRegisteredError(
                        f"Calendar '{name}' already exists. Use overwrite=True to replace."
                    )
                log.warning("Replacing registered calendar %r", name)
            self._calendars[name] = calendar
        log.info("Registered calendar %r (%s)", name, type(calendar).__name__)

    def find(self, name: str) -> Optional["CalendarSystem"]:
        return self._calendars.get(name)
