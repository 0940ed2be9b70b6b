"""
fleetview/data/models.py
────────────────────────
Pydantic v2 models for the six fleet record sets and the derived values
(alerts, geofence-classified positions) computed from them.

Field names match the CSV column headers so rows validate directly.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from config.alerts import AlertSeverity, AlertType
from config.fleet import EquipmentStatus, RentalStatus


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class Equipment(_Record):
    equipment_id: int
    equipment_code: str
    type: str
    status: EquipmentStatus
    ideal_fuel_usage_per_hour: float = Field(ge=0.0)
    recommended_service_period: int = Field(ge=0)  # days


class Site(_Record):
    site_id: int
    site_name: str
    location: str | None = None
    client_id: int
    latitude: float
    longitude: float
    geofence_radius_meters: float = Field(ge=0.0)


class Rental(_Record):
    rental_id: int
    equipment_id: int
    client_id: int
    site_id: int
    check_out_date: datetime
    expected_return_date: datetime
    check_in_date: datetime | None = None
    engine_hours_per_day: float = Field(ge=0.0)
    idle_hours_per_day: float = Field(ge=0.0)
    operating_days: int = 0
    status: RentalStatus
    fuel_usage_per_hour: float = Field(ge=0.0)

    @property
    def is_active(self) -> bool:
        return self.status == RentalStatus.ACTIVE


class Client(_Record):
    client_id: int
    client_name: str
    reliability_score: float = 0.0
    past_delays_count: int = 0
    historical_demand: str = ""
    avg_monthly_demand: float = 0.0
    delay_history: float = 0.0
    forecasted_weather_risk: float = Field(default=0.0, ge=0.0, le=1.0)
    war_risk: float = Field(default=0.0, ge=0.0, le=1.0)
    demand_trend: str = "stable"
    forecasted_demand: float = 0.0


class EquipmentTracking(_Record):
    tracking_id: int
    equipment_id: int
    timestamp: datetime
    latitude: float
    longitude: float


class Maintenance(_Record):
    maintenance_id: int
    equipment_id: int
    service_date: datetime
    service_logs: str = ""


# ── Derived values ────────────────────────────────────────────────────────────


class Alert(_Record):
    id: str
    type: AlertType
    equipment_id: int | None = None
    client_id: int | None = None
    message: str
    severity: AlertSeverity
    timestamp: datetime
    resolved: bool = False


class ClassifiedPosition(_Record):
    """One GPS ping joined to its active rental's site and checked against the geofence."""
    tracking_id: int
    equipment_id: int
    equipment_code: str
    equipment_type: str
    site_id: int
    site_name: str
    client_id: int
    distance_m: float
    geofence_radius_m: float
    violation: bool
    latitude: float
    longitude: float
    site_latitude: float
    site_longitude: float
    timestamp: datetime
    fuel_usage: float
    ideal_fuel_usage: float

    @property
    def fuel_deviation(self) -> float:
        return abs(self.fuel_usage - self.ideal_fuel_usage)
