"""
fleetview/analytics/suggestions.py
──────────────────────────────────
Operator suggestions for the GPS view.

Each rule looks at the site overview or the classified positions and emits at
most one suggestion, naming the worst offender.
"""
from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from config.fleet import (
    SUGGEST_FAR_FROM_SITE_FACTOR,
    SUGGEST_FUEL_DEVIATION,
    SUGGEST_HIGH_DEMAND,
    SUGGEST_WEATHER_RISK,
)
from fleetview.analytics.rounding import fixed, round_half_up
from fleetview.data.models import ClassifiedPosition


@dataclass(frozen=True)
class Suggestion:
    id: str
    kind: str      # "warning" | "info"
    title: str
    message: str
    priority: str  # "high" | "medium"


def generate_suggestions(
    overview: pd.DataFrame,
    positions: list[ClassifiedPosition],
) -> list[Suggestion]:
    suggestions: list[Suggestion] = []

    if not overview.empty:
        risky = overview[overview["weather_risk"] > SUGGEST_WEATHER_RISK].sort_values(
            "weather_risk", ascending=False, kind="stable"
        )
        if not risky.empty:
            names = ", ".join(risky["site_name"])
            worst = round_half_up(float(risky["weather_risk"].iloc[0]) * 100)
            suggestions.append(Suggestion(
                id="weather-risk",
                kind="warning",
                title="Weather Risk Alert",
                message=(
                    f"Sites {names} have high weather risk ({worst}%). "
                    "Consider equipment protection measures."
                ),
                priority="high",
            ))

    thirsty = sorted(
        (p for p in positions if p.fuel_deviation > SUGGEST_FUEL_DEVIATION),
        key=lambda p: p.fuel_deviation,
        reverse=True,
    )
    if thirsty:
        top = thirsty[0]
        suggestions.append(Suggestion(
            id="fuel-deviation",
            kind="warning",
            title="Fuel Usage Anomaly",
            message=(
                f"Equipment {top.equipment_code} is consuming {fixed(top.fuel_deviation)}L/hr "
                "more than expected. Investigate possible issues."
            ),
            priority="medium",
        ))

    far = sorted(
        (p for p in positions if p.distance_m > p.geofence_radius_m * SUGGEST_FAR_FROM_SITE_FACTOR),
        key=lambda p: p.distance_m,
        reverse=True,
    )
    if far:
        top = far[0]
        suggestions.append(Suggestion(
            id="distance-alert",
            kind="warning",
            title="Equipment Far From Site",
            message=(
                f"Equipment {top.equipment_code} is {round_half_up(top.distance_m / 1000)}km from site. "
                "Verify if this is expected."
            ),
            priority="medium",
        ))

    if not overview.empty:
        busy = overview[overview["forecasted_demand"] > SUGGEST_HIGH_DEMAND].sort_values(
            "forecasted_demand", ascending=False, kind="stable"
        )
        if not busy.empty:
            row = busy.iloc[0]
            suggestions.append(Suggestion(
                id="high-demand",
                kind="info",
                title="High Demand Forecast",
                message=(
                    f"Site {row['site_name']} has high forecasted demand "
                    f"({row['forecasted_demand']} units). Prepare additional equipment."
                ),
                priority="medium",
            ))

        violating = overview[overview["violations"] > 0].sort_values(
            "violations", ascending=False, kind="stable"
        )
        if not violating.empty:
            row = violating.iloc[0]
            suggestions.append(Suggestion(
                id="violations",
                kind="warning",
                title="Geofence Violations",
                message=(
                    f"{row['violations']} equipment at {row['site_name']} have geofence "
                    "violations. Review site protocols."
                ),
                priority="high",
            ))

    return suggestions
