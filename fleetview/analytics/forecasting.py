"""
fleetview/analytics/forecasting.py
──────────────────────────────────
Client demand forecasting.

History is simulated: each past month is the client's average monthly demand
with a uniform ±15% variation. Reproducible with FORECAST_SEED.

Projection starts from the client's forecasted demand and applies:
  - trend      up: +10% per month ahead, down: -5% per month ahead
  - risk       × (1 - weather_risk) × (1 - war_risk)
clipped at zero and rounded to whole units.
"""
from __future__ import annotations

import math
from datetime import datetime

import numpy as np
import pandas as pd

from config.fleet import (
    FORECAST_OVERLAY_MONTHS,
    FORECAST_VARIATION,
    TREND_DECLINE_PER_MONTH,
    TREND_GROWTH_PER_MONTH,
    DemandTrend,
)
from config.settings import settings
from fleetview.analytics.rounding import round_half_up
from fleetview.data.models import Client
from fleetview.data.records import RecordStore

_COLUMNS = ["month", "demand", "forecast"]


def _month_label(ts: pd.Timestamp) -> str:
    return ts.strftime("%b %y")


def trend_factor(trend: str, months_ahead: int) -> float:
    """Multiplier for the `months_ahead`-th projected month (0-based)."""
    if trend == DemandTrend.UP:
        return 1.0 + months_ahead * TREND_GROWTH_PER_MONTH
    if trend == DemandTrend.DOWN:
        return 1.0 - months_ahead * TREND_DECLINE_PER_MONTH
    return 1.0


def simulate_history(
    client: Client,
    rng: np.random.Generator | None = None,
    months: int = settings.FORECAST_HISTORY_MONTHS,
    now: datetime | None = None,
) -> pd.DataFrame:
    """
    Simulated monthly demand ending with the current month.

    The trailing FORECAST_OVERLAY_MONTHS rows also carry the client's
    forecasted demand so the chart can overlay it on recent history.
    """
    if rng is None:
        rng = np.random.default_rng(settings.FORECAST_SEED)
    anchor = pd.Timestamp(now or datetime.now())

    variation = rng.uniform(-FORECAST_VARIATION, FORECAST_VARIATION, size=months)
    demand = np.maximum(0, np.floor(client.avg_monthly_demand * (1 + variation) + 0.5)).astype(int)

    rows = []
    for i in range(months):
        month = anchor - pd.DateOffset(months=months - 1 - i)
        rows.append(
            {
                "month": _month_label(month),
                "demand": int(demand[i]),
                "forecast": client.forecasted_demand if i >= months - FORECAST_OVERLAY_MONTHS else None,
            }
        )
    return pd.DataFrame(rows, columns=_COLUMNS)


def project_demand(client: Client, days: int, now: datetime | None = None) -> pd.DataFrame:
    """Projected demand for each month covering the next `days` days."""
    anchor = pd.Timestamp(now or datetime.now())
    risk = (1 - client.forecasted_weather_risk) * (1 - client.war_risk)

    rows = []
    for i in range(math.ceil(days / 30)):
        value = client.forecasted_demand * trend_factor(client.demand_trend, i) * risk
        rows.append(
            {
                "month": _month_label(anchor + pd.DateOffset(months=i + 1)),
                "demand": None,
                "forecast": max(0, round_half_up(value)),
            }
        )
    return pd.DataFrame(rows, columns=_COLUMNS)


def demand_forecast(
    client: Client,
    days: int,
    rng: np.random.Generator | None = None,
    now: datetime | None = None,
) -> pd.DataFrame:
    """Simulated history followed by the projection, one row per month."""
    history = simulate_history(client, rng=rng, now=now)
    projection = project_demand(client, days, now=now)
    return pd.concat([history, projection], ignore_index=True)


def client_comparison(records: RecordStore) -> pd.DataFrame:
    """Current vs forecasted demand per client, highest forecast first."""
    df = pd.DataFrame(
        [
            {
                "client_id": c.client_id,
                "client_name": c.client_name,
                "current_demand": c.avg_monthly_demand,
                "forecasted_demand": round_half_up(c.forecasted_demand),
                "reliability_score": c.reliability_score,
                "trend": c.demand_trend,
                "active_rentals": sum(
                    1 for r in records.rentals if r.client_id == c.client_id and r.is_active
                ),
            }
            for c in records.clients
        ],
        columns=[
            "client_id", "client_name", "current_demand", "forecasted_demand",
            "reliability_score", "trend", "active_rentals",
        ],
    )
    return df.sort_values("forecasted_demand", ascending=False, kind="stable").reset_index(drop=True)
