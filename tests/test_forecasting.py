"""
tests/test_forecasting.py
─────────────────────────
Tests for simulated demand history, projection and client comparison.
"""
import numpy as np
import pytest

from fleetview.analytics.forecasting import (
    client_comparison,
    demand_forecast,
    project_demand,
    simulate_history,
    trend_factor,
)
from fleetview.data.records import RecordStore

from conftest import make_client


class TestTrendFactor:
    def test_up(self):
        assert trend_factor("up", 0) == 1.0
        assert trend_factor("up", 2) == pytest.approx(1.2)

    def test_down(self):
        assert trend_factor("down", 3) == pytest.approx(0.85)

    def test_stable(self):
        assert trend_factor("stable", 5) == 1.0

    def test_unknown_is_flat(self):
        assert trend_factor("sideways", 4) == 1.0


class TestSimulateHistory:
    def test_reproducible_with_seed(self, now):
        client = make_client(1, avg_monthly_demand=100.0)
        a = simulate_history(client, rng=np.random.default_rng(7), now=now)
        b = simulate_history(client, rng=np.random.default_rng(7), now=now)
        assert a.equals(b)

    def test_within_variation(self, rng, now):
        df = simulate_history(make_client(1, avg_monthly_demand=100.0), rng=rng, now=now)
        assert len(df) == 12
        assert df["demand"].between(85, 115).all()

    def test_months_end_at_current(self, rng, now):
        df = simulate_history(make_client(1), rng=rng, months=3, now=now)
        assert list(df["month"]) == ["Apr 24", "May 24", "Jun 24"]

    def test_forecast_overlay_on_recent_months(self, rng, now):
        df = simulate_history(make_client(1, forecasted_demand=12.0), rng=rng, now=now)
        assert df["forecast"].isna().sum() == 8
        assert list(df["forecast"].tail(4)) == [12.0] * 4


class TestProjectDemand:
    def test_month_count(self, now):
        assert len(project_demand(make_client(1), 30, now)) == 1
        assert len(project_demand(make_client(1), 31, now)) == 2
        assert len(project_demand(make_client(1), 180, now)) == 6

    def test_trend_and_risk(self, now):
        client = make_client(1, forecasted_demand=100.0, demand_trend="up",
                             forecasted_weather_risk=0.2, war_risk=0.5)
        df = project_demand(client, 90, now)
        # 100 × (1 + 0.1i) × 0.8 × 0.5
        assert list(df["forecast"]) == [40, 44, 48]
        assert df["demand"].isna().all()
        assert list(df["month"]) == ["Jul 24", "Aug 24", "Sep 24"]

    def test_clipped_at_zero(self, now):
        client = make_client(1, forecasted_demand=10.0, demand_trend="down")
        df = project_demand(client, 30 * 25, now)
        assert (df["forecast"] >= 0).all()
        assert df["forecast"].iloc[-1] == 0


class TestDemandForecast:
    def test_history_then_projection(self, rng, now):
        df = demand_forecast(make_client(1), 60, rng=rng, now=now)
        assert len(df) == 14
        assert df["demand"].iloc[:12].notna().all()
        assert df["demand"].iloc[12:].isna().all()


class TestClientComparison:
    def test_sorted_by_forecast(self, records):
        df = client_comparison(records)
        assert list(df["client_name"]) == ["Client 1", "Client 2"]
        assert list(df["active_rentals"]) == [1, 1]

    def test_ordering_by_forecast(self):
        store = RecordStore(
            clients=[make_client(1, forecasted_demand=3.0), make_client(2, forecasted_demand=9.6)]
        )
        df = client_comparison(store)
        assert list(df["client_id"]) == [2, 1]
        assert list(df["forecasted_demand"]) == [10, 3]
