from __future__ import annotations
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

ENV_DEFAULT_CALENDAR = "CALENDARSYSTEMS_DEFAULT_CALENDAR"
ENV_LOCALE = "CALENDARSYSTEMS_LOCALE"


@dataclass(frozen=True)
class Settings:
    """Process defaults used when a caller does not name a calendar or locale."""
    default_calendar: str = "gregory"
    locale: str = "en"

    def tweak(self, **changes) -> "Settings":
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        base = cls()
        return cls(
            default_calendar=env.get(ENV_DEFAULT_CALENDAR) or base.default_calendar,
            locale=env.get(ENV_LOCALE) or base.locale,
        )
