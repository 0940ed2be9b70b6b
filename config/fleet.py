"""
config/fleet.py
───────────────
Fleet status vocabularies, utilization bands and suggestion thresholds.
"""
from dataclasses import dataclass
from enum import Enum


class EquipmentStatus(str, Enum):
    RENTED = "rented"
    MAINTENANCE = "maintenance"
    IDLE = "idle"


class RentalStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"


class DemandTrend(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


STATUS_COLORS: dict[str, str] = {
    EquipmentStatus.RENTED: "#2ea44f",
    EquipmentStatus.MAINTENANCE: "#e8a020",
    EquipmentStatus.IDLE: "#8b949e",
}


@dataclass(frozen=True)
class UtilizationBand:
    """Closed upper edge; a value belongs to the first band whose `upper` it does not exceed."""
    label: str
    upper: float
    color: str


UTILIZATION_BANDS: tuple[UtilizationBand, ...] = (
    UtilizationBand("0-20%", 20.0, "#da3633"),
    UtilizationBand("21-40%", 40.0, "#f0883e"),
    UtilizationBand("41-60%", 60.0, "#e8a020"),
    UtilizationBand("61-80%", 80.0, "#7fba3c"),
    UtilizationBand("81-100%", 100.0, "#2ea44f"),
)

UNDER_UTILIZED_PCT = 60.0
HIGH_UTILIZATION_PCT = 80.0


# ── GPS page suggestion thresholds ────────────────────────────────────────────
SUGGEST_WEATHER_RISK = 0.5          # fraction
SUGGEST_FUEL_DEVIATION = 5.0        # L/h
SUGGEST_FAR_FROM_SITE_FACTOR = 2.0  # × geofence radius
SUGGEST_HIGH_DEMAND = 10.0          # units
MAX_SUGGESTIONS = 4                 # shown at once on the GPS page


# ── Demand forecasting ────────────────────────────────────────────────────────
FORECAST_VARIATION = 0.15           # ± fraction applied to historical months
FORECAST_OVERLAY_MONTHS = 4         # trailing history months showing the forecast line
TREND_GROWTH_PER_MONTH = 0.10
TREND_DECLINE_PER_MONTH = 0.05
FORECAST_HORIZON_OPTIONS = (30, 60, 90, 180)
