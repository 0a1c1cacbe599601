# tests/test_diagnostics.py

from datetime import date

import pytest

np = pytest.importorskip("numpy")

from calendarsystems.diagnostics.round_trip import drift_report, plot_drift  # noqa: E402


def test_persian_round_trip_is_exact(registry):
    rep = drift_report("persian", date(2020, 1, 1), 800, registry=registry)
    assert rep.exact == 800
    assert rep.max_abs == 0
    assert rep.summary()["start"] == "2020-01-01"


def test_chinese_drift_is_bounded(registry):
    rep = drift_report("chinese", date(2023, 1, 1), 400, registry=registry)
    assert rep.drift.shape == (400,)
    assert rep.max_abs <= 60


def test_plot(tmp_path, registry):
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    rep = drift_report("hebrew", date(2023, 1, 1), 30, registry=registry)
    out = tmp_path / "drift.png"
    plot_drift(rep, out=str(out))
    assert out.exists()
