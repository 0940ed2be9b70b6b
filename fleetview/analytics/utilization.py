"""
fleetview/analytics/utilization.py
──────────────────────────────────
Equipment utilization: share of daily operating hours under engine load.

  utilization = engine_h / (engine_h + idle_h) × 100

taken from the equipment's active rental. No active rental, or a zero-hour
day, yields 0.
"""
from __future__ import annotations

import pandas as pd

from config.fleet import UNDER_UTILIZED_PCT, UTILIZATION_BANDS, EquipmentStatus
from fleetview.analytics.rounding import round_half_up
from fleetview.data.models import Rental
from fleetview.data.records import RecordStore

_TABLE_COLUMNS = [
    "equipment_id", "equipment_code", "type", "status", "utilization",
    "engine_hours", "idle_hours", "operating_days", "fuel_usage", "client_name",
]


def rental_utilization(rental: Rental) -> float:
    total_hours = rental.engine_hours_per_day + rental.idle_hours_per_day
    if total_hours <= 0:
        return 0.0
    return rental.engine_hours_per_day / total_hours * 100.0


def compute_utilization(records: RecordStore, equipment_id: int) -> float:
    """Utilization percentage in [0, 100] for one equipment."""
    rental = records.active_rental_for(equipment_id)
    if rental is None:
        return 0.0
    return rental_utilization(rental)


def utilization_table(records: RecordStore) -> pd.DataFrame:
    """Per-equipment utilization rows, least utilized first."""
    rows = []
    for eq in records.equipment:
        rental = records.active_rental_for(eq.equipment_id)
        if rental is None:
            client_name = "Not Rented"
        else:
            client_name = records.client_name(rental.client_id)
        rows.append(
            {
                "equipment_id": eq.equipment_id,
                "equipment_code": eq.equipment_code,
                "type": eq.type,
                "status": eq.status.value,
                "utilization": round_half_up(compute_utilization(records, eq.equipment_id)),
                "engine_hours": rental.engine_hours_per_day if rental else 0.0,
                "idle_hours": rental.idle_hours_per_day if rental else 0.0,
                "operating_days": rental.operating_days if rental else 0,
                "fuel_usage": rental.fuel_usage_per_hour if rental else 0.0,
                "client_name": client_name,
            }
        )
    df = pd.DataFrame(rows, columns=_TABLE_COLUMNS)
    return df.sort_values("utilization", kind="stable").reset_index(drop=True)


def _rented(table: pd.DataFrame) -> pd.DataFrame:
    return table[table["status"] == EquipmentStatus.RENTED.value]


def under_utilized(table: pd.DataFrame, limit: float = UNDER_UTILIZED_PCT) -> pd.DataFrame:
    rented = _rented(table)
    return rented[rented["utilization"] < limit]


def utilization_by_type(records: RecordStore) -> pd.DataFrame:
    """Mean utilization per equipment type across all equipment (idle units count as 0)."""
    if not records.equipment:
        return pd.DataFrame(columns=["type", "avg_utilization", "count"])
    df = pd.DataFrame(
        {
            "type": [eq.type for eq in records.equipment],
            "utilization": [compute_utilization(records, eq.equipment_id) for eq in records.equipment],
        }
    )
    out = df.groupby("type", sort=False).agg(
        avg_utilization=("utilization", "mean"), count=("utilization", "size")
    )
    out["avg_utilization"] = out["avg_utilization"].map(round_half_up).astype(int)
    return out.reset_index()


def utilization_distribution(table: pd.DataFrame) -> pd.DataFrame:
    """Count of rented equipment per utilization band."""
    counts = {band.label: 0 for band in UTILIZATION_BANDS}
    for value in _rented(table)["utilization"]:
        for band in UTILIZATION_BANDS:
            if value <= band.upper:
                counts[band.label] += 1
                break
    return pd.DataFrame(
        {
            "range": list(counts),
            "count": list(counts.values()),
            "color": [band.color for band in UTILIZATION_BANDS],
        }
    )


def average_utilization(values) -> float:
    """Mean of `values`, 0 for an empty sequence."""
    values = list(values)
    return sum(values) / len(values) if values else 0.0


def fleet_summary(records: RecordStore) -> dict:
    """Headline fleet figures for the overview page."""
    active = records.active_rentals()
    status_counts: dict[str, int] = {}
    for eq in records.equipment:
        status_counts[eq.status.value] = status_counts.get(eq.status.value, 0) + 1

    type_counts: dict[str, dict[str, int]] = {}
    for eq in records.equipment:
        entry = type_counts.setdefault(eq.type, {"total": 0, "rented": 0})
        entry["total"] += 1
        if eq.status == EquipmentStatus.RENTED:
            entry["rented"] += 1

    return {
        "total_equipment": len(records.equipment),
        "active_rentals": len(active),
        "sites": len({r.site_id for r in records.rentals}),
        "avg_utilization": average_utilization(
            rental_utilization(r) for r in active
        ),
        "status_counts": status_counts,
        "type_counts": type_counts,
    }
