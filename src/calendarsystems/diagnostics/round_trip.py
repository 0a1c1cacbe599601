from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, Optional

from ..core.registry import CalendarRegistry
from ..core.time import gregorian_to_jd


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calendarsystems[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calendarsystems[diagnostics]"') from e


def _registry(reg: Optional[CalendarRegistry]) -> CalendarRegistry:
    if reg is not None:
        return reg
    from ..api import get_registry
    return get_registry()


@dataclass(frozen=True)
class DriftReport:
    calendar: str
    start: date
    days: int
    drift: Any  # np.ndarray of int, days (back - original)
    exact: int
    max_abs: int
    mean_abs: float

    def summary(self) -> Dict[str, Any]:
        return {
            "calendar": self.calendar,
            "start": self.start.isoformat(),
            "days": self.days,
            "exact": self.exact,
            "max_abs": self.max_abs,
            "mean_abs": self.mean_abs,
        }


def drift_report(
    calendar: str,
    start: date,
    days: int,
    *,
    registry: Optional[CalendarRegistry] = None,
) -> DriftReport:
    """Convert each of ``days`` consecutive days to ``calendar`` and back; record the drift in days."""
    np = _need_numpy()
    cal = _registry(registry).get(calendar)

    drift = np.zeros(days, dtype=int)
    for i in range(days):
        d = start + timedelta(days=i)
        native = cal.convert_from_gregorian(d)
        g = cal.convert_to_gregorian(native.year, native.month, native.day)
        back = gregorian_to_jd(g.year, g.month + 1, g.day)
        drift[i] = int(back - gregorian_to_jd(d.year, d.month, d.day))

    absd = np.abs(drift)
    return DriftReport(
        calendar=calendar,
        start=start,
        days=days,
        drift=drift,
        exact=int(np.count_nonzero(drift == 0)),
        max_abs=int(absd.max()) if days else 0,
        mean_abs=float(absd.mean()) if days else 0.0,
    )


def plot_drift(report: DriftReport, *, out: Optional[str] = None):
    np = _need_numpy()
    plt = _need_matplotlib()

    x = np.arange(report.days)
    fig, ax = plt.subplots(figsize=(10, 3.5))
    ax.plot(x, report.drift, lw=1.0, color="0.15")
    ax.axhline(0, color="0.6", lw=0.8)
    ax.set_xlabel(f"days since {report.start.isoformat()}")
    ax.set_ylabel("drift (days)")
    ax.set_title(f"{report.calendar}: Gregorian round-trip drift")
    fig.tight_layout()
    if out:
        fig.savefig(out, dpi=150)
    return fig
