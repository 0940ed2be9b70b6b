"""
fleetview/analytics/geofence.py
───────────────────────────────
Geofence classification of GPS pings.

A ping is located by joining it to its equipment's active rental and that
rental's site. It is in violation when its distance from the site centre
exceeds the site radius plus a fixed buffer (strictly greater).

`locate_ping` is the single join + distance + violation primitive; both the
GPS view (`classify_geofence`) and the geofence alert rule go through it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import pandas as pd

from config.alerts import GEOFENCE_BUFFER_M
from fleetview.analytics.geo import compute_distance
from fleetview.analytics.rounding import fixed
from fleetview.data.models import ClassifiedPosition, EquipmentTracking, Rental, Site
from fleetview.data.records import RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PingLocation:
    ping: EquipmentTracking
    rental: Rental
    site: Site
    distance_m: float
    violation: bool

    @property
    def meters_outside(self) -> float:
        return self.distance_m - self.site.geofence_radius_meters


def is_geofence_violation(distance_m: float, radius_m: float) -> bool:
    """True when `distance_m` exceeds `radius_m` + buffer. NaN never violates."""
    return distance_m > radius_m + GEOFENCE_BUFFER_M


def locate_ping(records: RecordStore, ping: EquipmentTracking) -> PingLocation | None:
    """
    Join a ping to its active rental and site and measure the distance.

    Returns None when the equipment has no active rental, or when the rental's
    site id does not resolve (logged).
    """
    rental = records.active_rental_for(ping.equipment_id)
    if rental is None:
        return None

    site = records.site_by_id(rental.site_id)
    if site is None:
        logger.warning(
            "No site found for equipment %s (rental.site_id = %s)",
            ping.equipment_id,
            rental.site_id,
        )
        return None

    distance = compute_distance(ping.latitude, ping.longitude, site.latitude, site.longitude)
    return PingLocation(
        ping=ping,
        rental=rental,
        site=site,
        distance_m=distance,
        violation=is_geofence_violation(distance, site.geofence_radius_meters),
    )


def classify_geofence(records: RecordStore) -> list[ClassifiedPosition]:
    """One classified row per locatable ping, in tracking order."""
    positions: list[ClassifiedPosition] = []
    for ping in records.tracking:
        loc = locate_ping(records, ping)
        if loc is None:
            continue
        eq = records.equipment_by_id(ping.equipment_id)
        positions.append(
            ClassifiedPosition(
                tracking_id=ping.tracking_id,
                equipment_id=ping.equipment_id,
                equipment_code=eq.equipment_code if eq else "Unknown",
                equipment_type=eq.type if eq else "Unknown",
                site_id=loc.site.site_id,
                site_name=loc.site.site_name,
                client_id=loc.rental.client_id,
                distance_m=loc.distance_m,
                geofence_radius_m=loc.site.geofence_radius_meters,
                violation=loc.violation,
                latitude=ping.latitude,
                longitude=ping.longitude,
                site_latitude=loc.site.latitude,
                site_longitude=loc.site.longitude,
                timestamp=ping.timestamp,
                fuel_usage=loc.rental.fuel_usage_per_hour,
                ideal_fuel_usage=eq.ideal_fuel_usage_per_hour if eq else 0.0,
            )
        )
    return positions


# ── Aggregates for the GPS view ───────────────────────────────────────────────


def site_overview(records: RecordStore, positions: list[ClassifiedPosition]) -> pd.DataFrame:
    """Per-site active equipment, violation count and client risk/demand figures."""
    rows = []
    for site in records.sites:
        client = records.client_by_id(site.client_id)
        rows.append(
            {
                "site_id": site.site_id,
                "site_name": site.site_name,
                "active_equipment": sum(
                    1 for r in records.rentals if r.site_id == site.site_id and r.is_active
                ),
                "violations": sum(
                    1 for p in positions if p.site_name == site.site_name and p.violation
                ),
                "geofence_radius": site.geofence_radius_meters,
                "client_name": client.client_name if client else "Unknown",
                "forecasted_demand": float(fixed(client.forecasted_demand, 2)) if client else 0.0,
                "weather_risk": client.forecasted_weather_risk if client else 0.0,
            }
        )
    return pd.DataFrame(
        rows,
        columns=[
            "site_id", "site_name", "active_equipment", "violations",
            "geofence_radius", "client_name", "forecasted_demand", "weather_risk",
        ],
    )


def type_violation_breakdown(positions: list[ClassifiedPosition]) -> pd.DataFrame:
    """Ping count and violating ping count per equipment type."""
    if not positions:
        return pd.DataFrame(columns=["type", "count", "violations"])
    df = pd.DataFrame(
        {"type": [p.equipment_type for p in positions], "violation": [p.violation for p in positions]}
    )
    out = df.groupby("type", sort=False).agg(count=("violation", "size"), violations=("violation", "sum"))
    out["violations"] = out["violations"].astype(int)
    return out.reset_index()
