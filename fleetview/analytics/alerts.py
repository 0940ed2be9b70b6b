"""
fleetview/analytics/alerts.py
─────────────────────────────
Alert feed generation.

generate_alerts() rescans the record store on every call and returns the full
current alert list. Four rule passes run in a fixed order, each preserving
source order:

  fuel        active rental fuel usage deviates > 10 L/h from ideal
              (high when > 15 L/h)
  service     whole days since check-out is a positive multiple of 30
              (edge-triggered: only on the boundary day itself)
  geofence    GPS ping farther than site radius + 150 m (high)
  rental_due  whole days until expected return in [0, 3]
              (high when due today)

Alerts are never persisted or deduplicated; `resolved` is always False.
Missing equipment/client names degrade to "Unknown" in messages.
"""
from __future__ import annotations

from collections import Counter
from datetime import datetime, timedelta

import pandas as pd

from config.alerts import (
    FUEL_DEVIATION_ALERT,
    FUEL_DEVIATION_HIGH,
    RENTAL_DUE_WINDOW_DAYS,
    SERVICE_INTERVAL_DAYS,
    UPCOMING_RETURN_HORIZON_DAYS,
    AlertSeverity,
    AlertType,
)
from fleetview.analytics.geofence import locate_ping
from fleetview.analytics.rounding import fixed, round_half_up
from fleetview.data.models import Alert
from fleetview.data.records import RecordStore

_ONE_DAY = timedelta(days=1)


# ── Date helpers ──────────────────────────────────────────────────────────────


def _align(value: datetime, reference: datetime) -> datetime:
    """Bring `value` to the same naive/aware form as `reference`."""
    if value.tzinfo is not None and reference.tzinfo is None:
        return value.astimezone().replace(tzinfo=None)
    if value.tzinfo is None and reference.tzinfo is not None:
        return value.replace(tzinfo=reference.tzinfo)
    return value


def whole_days_between(start: datetime, end: datetime) -> int:
    """Full days from `start` to `end`, truncated toward zero (negative if end < start)."""
    return int((_align(end, start) - start) / _ONE_DAY)


# ── Rule passes ───────────────────────────────────────────────────────────────


def _fuel_alerts(records: RecordStore, now: datetime) -> list[Alert]:
    alerts = []
    for rental in records.active_rentals():
        eq = records.equipment_by_id(rental.equipment_id)
        if eq is None:
            continue
        deviation = abs(rental.fuel_usage_per_hour - eq.ideal_fuel_usage_per_hour)
        if deviation <= FUEL_DEVIATION_ALERT:
            continue
        alerts.append(
            Alert(
                id=f"fuel-{rental.rental_id}",
                type=AlertType.FUEL,
                equipment_id=rental.equipment_id,
                message=f"Equipment {eq.equipment_code} fuel usage deviation: {fixed(deviation)}L/hr",
                severity=AlertSeverity.HIGH if deviation > FUEL_DEVIATION_HIGH else AlertSeverity.MEDIUM,
                timestamp=now,
            )
        )
    return alerts


def _service_alerts(records: RecordStore, now: datetime) -> list[Alert]:
    alerts = []
    for rental in records.active_rentals():
        days = whole_days_between(rental.check_out_date, now)
        if days < SERVICE_INTERVAL_DAYS or days % SERVICE_INTERVAL_DAYS != 0:
            continue
        alerts.append(
            Alert(
                id=f"service-{rental.rental_id}",
                type=AlertType.SERVICE,
                equipment_id=rental.equipment_id,
                message=(
                    f"Equipment {records.equipment_code(rental.equipment_id)} "
                    f"requires service ({days} days)"
                ),
                severity=AlertSeverity.MEDIUM,
                timestamp=now,
            )
        )
    return alerts


def _geofence_alerts(records: RecordStore) -> list[Alert]:
    alerts = []
    for ping in records.tracking:
        loc = locate_ping(records, ping)
        if loc is None or not loc.violation:
            continue
        alerts.append(
            Alert(
                id=f"geofence-{ping.tracking_id}",
                type=AlertType.GEOFENCE,
                equipment_id=ping.equipment_id,
                message=(
                    f"Equipment {records.equipment_code(ping.equipment_id)} is "
                    f"{round_half_up(loc.distance_m)}m from site "
                    f"({round_half_up(loc.meters_outside)}m outside geofence)"
                ),
                severity=AlertSeverity.HIGH,
                timestamp=ping.timestamp,
            )
        )
    return alerts


def _rental_due_alerts(records: RecordStore, now: datetime) -> list[Alert]:
    alerts = []
    for rental in records.active_rentals():
        days = whole_days_between(now, rental.expected_return_date)
        if not 0 <= days <= RENTAL_DUE_WINDOW_DAYS:
            continue
        alerts.append(
            Alert(
                id=f"rental-due-{rental.rental_id}",
                type=AlertType.RENTAL_DUE,
                equipment_id=rental.equipment_id,
                client_id=rental.client_id,
                message=(
                    f"Rental for {records.equipment_code(rental.equipment_id)} "
                    f"({records.client_name(rental.client_id)}) due in {days} days"
                ),
                severity=AlertSeverity.HIGH if days == 0 else AlertSeverity.MEDIUM,
                timestamp=now,
            )
        )
    return alerts


# ── Public API ────────────────────────────────────────────────────────────────


def generate_alerts(records: RecordStore, now: datetime | None = None) -> list[Alert]:
    """
    Compute the full alert feed for the current snapshot.

    Args:
        records: The loaded record store
        now: Evaluation time; defaults to the local wall clock

    Returns:
        Alerts ordered fuel, service, geofence, rental_due
    """
    if now is None:
        now = datetime.now()
    return [
        *_fuel_alerts(records, now),
        *_service_alerts(records, now),
        *_geofence_alerts(records),
        *_rental_due_alerts(records, now),
    ]


def upcoming_returns(
    records: RecordStore,
    now: datetime | None = None,
    horizon_days: int = UPCOMING_RETURN_HORIZON_DAYS,
) -> pd.DataFrame:
    """Active rentals due back within `horizon_days`, soonest first."""
    if now is None:
        now = datetime.now()
    rows = []
    for rental in records.active_rentals():
        days = whole_days_between(now, rental.expected_return_date)
        if 0 <= days <= horizon_days:
            rows.append(
                {
                    "rental_id": rental.rental_id,
                    "equipment_code": records.equipment_code(rental.equipment_id),
                    "client_name": records.client_name(rental.client_id),
                    "expected_return_date": rental.expected_return_date,
                    "days_until_return": days,
                }
            )
    df = pd.DataFrame(
        rows,
        columns=["rental_id", "equipment_code", "client_name", "expected_return_date", "days_until_return"],
    )
    return df.sort_values("days_until_return", kind="stable").reset_index(drop=True)


def alert_stats(alerts: list[Alert]) -> dict[str, int]:
    """Counts per severity and per type, plus the total. Every key is always present."""
    by_severity = Counter(a.severity.value for a in alerts)
    by_type = Counter(a.type.value for a in alerts)
    stats = {"total": len(alerts)}
    stats.update({s.value: by_severity.get(s.value, 0) for s in AlertSeverity})
    stats.update({t.value: by_type.get(t.value, 0) for t in AlertType})
    return stats


def alerts_to_frame(alerts: list[Alert]) -> pd.DataFrame:
    """One row per alert in feed order."""
    columns = ["id", "type", "equipment_id", "client_id", "message", "severity", "timestamp", "resolved"]
    return pd.DataFrame([a.model_dump() for a in alerts], columns=columns)
