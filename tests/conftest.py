"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the Fleet Monitor test suite.

Records are built in memory; only the loader tests touch the filesystem.
"""
import math
from datetime import datetime, timedelta

import numpy as np
import pytest

from fleetview.data.models import (
    Client,
    Equipment,
    EquipmentTracking,
    Maintenance,
    Rental,
    Site,
)
from fleetview.data.records import RecordStore

SITE_LAT = 40.0
SITE_LON = -74.0


def lat_offset(meters: float) -> float:
    """Latitude delta (degrees) that the distance function measures as `meters`."""
    return meters * 180_000.0 / (math.pi * 6_371_000.0)


# ── Record builders ───────────────────────────────────────────────────────────


def make_equipment(equipment_id: int = 1, **overrides) -> Equipment:
    data = {
        "equipment_id": equipment_id,
        "equipment_code": f"EQ-{equipment_id:03d}",
        "type": "Excavator",
        "status": "rented",
        "ideal_fuel_usage_per_hour": 10.0,
        "recommended_service_period": 30,
    }
    data.update(overrides)
    return Equipment(**data)


def make_site(site_id: int = 1, **overrides) -> Site:
    data = {
        "site_id": site_id,
        "site_name": f"Site {site_id}",
        "client_id": 1,
        "latitude": SITE_LAT,
        "longitude": SITE_LON,
        "geofence_radius_meters": 100.0,
    }
    data.update(overrides)
    return Site(**data)


def make_client(client_id: int = 1, **overrides) -> Client:
    data = {
        "client_id": client_id,
        "client_name": f"Client {client_id}",
        "avg_monthly_demand": 10.0,
        "forecasted_demand": 12.0,
    }
    data.update(overrides)
    return Client(**data)


def make_rental(rental_id: int = 1, now: datetime = datetime(2024, 6, 1, 12, 0), **overrides) -> Rental:
    data = {
        "rental_id": rental_id,
        "equipment_id": 1,
        "client_id": 1,
        "site_id": 1,
        "check_out_date": now - timedelta(days=10),
        "expected_return_date": now + timedelta(days=20),
        "engine_hours_per_day": 6.0,
        "idle_hours_per_day": 2.0,
        "operating_days": 10,
        "status": "active",
        "fuel_usage_per_hour": 12.0,
    }
    data.update(overrides)
    return Rental(**data)


def make_ping(tracking_id: int = 1, meters: float = 0.0, now: datetime = datetime(2024, 6, 1, 12, 0), **overrides) -> EquipmentTracking:
    """Ping `meters` north of the default site centre."""
    data = {
        "tracking_id": tracking_id,
        "equipment_id": 1,
        "timestamp": now - timedelta(hours=1),
        "latitude": SITE_LAT + lat_offset(meters),
        "longitude": SITE_LON,
    }
    data.update(overrides)
    return EquipmentTracking(**data)


def make_maintenance(maintenance_id: int = 1, **overrides) -> Maintenance:
    data = {
        "maintenance_id": maintenance_id,
        "equipment_id": 1,
        "service_date": datetime(2024, 5, 1),
        "service_logs": "Oil change",
    }
    data.update(overrides)
    return Maintenance(**data)


# ── Fixtures ──────────────────────────────────────────────────────────────────


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 1, 12, 0, 0)


@pytest.fixture
def records(now) -> RecordStore:
    """
    Small fleet:
      EQ-001 rented, 75% utilization, no alerts, ping inside the geofence
      EQ-002 rented, fuel 26 vs 10 (high fuel alert), ping 300 m out
      EQ-003 idle, completed rental only
    """
    return RecordStore(
        equipment=[
            make_equipment(1),
            make_equipment(2, type="Crane"),
            make_equipment(3, status="idle"),
        ],
        sites=[make_site(1), make_site(2, client_id=2, site_name="Harbor")],
        clients=[make_client(1), make_client(2, forecasted_weather_risk=0.7)],
        rentals=[
            make_rental(1, now),
            make_rental(2, now, equipment_id=2, client_id=2, site_id=2, fuel_usage_per_hour=26.0,
                        engine_hours_per_day=2.0, idle_hours_per_day=6.0),
            make_rental(3, now, equipment_id=3, status="completed",
                        check_in_date=now - timedelta(days=40),
                        check_out_date=now - timedelta(days=90),
                        expected_return_date=now - timedelta(days=40)),
        ],
        tracking=[
            make_ping(1, 50.0, now),
            make_ping(2, 300.0, now, equipment_id=2),
            make_ping(3, 500.0, now, equipment_id=3),
        ],
        maintenance=[
            make_maintenance(1),
            make_maintenance(2, service_date=datetime(2024, 5, 20), service_logs="Track check"),
            make_maintenance(3, equipment_id=2),
        ],
    )
