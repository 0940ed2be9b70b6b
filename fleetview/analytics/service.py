"""
fleetview/analytics/service.py
──────────────────────────────
Service scheduling view and maintenance log export.
"""
from __future__ import annotations

import io
from datetime import datetime

import pandas as pd

from config.alerts import FUEL_DEVIATION_ALERT
from config.fleet import EquipmentStatus
from fleetview.analytics.alerts import whole_days_between
from fleetview.data.records import RecordStore

SERVICE_LOG_HEADER = ["Date", "Service Log", "Equipment Code"]


def service_status(records: RecordStore, now: datetime | None = None) -> pd.DataFrame:
    """
    One row per equipment with days since check-out of its active rental
    (0 when not rented), whether that exceeds the recommended service period,
    the current fuel deviation and the latest maintenance date.
    """
    if now is None:
        now = datetime.now()
    rows = []
    for eq in records.equipment:
        rental = records.active_rental_for(eq.equipment_id)
        logs = records.maintenance_for(eq.equipment_id)
        last = max((m.service_date for m in logs), default=None)

        days = whole_days_between(rental.check_out_date, now) if rental else 0
        rows.append(
            {
                "equipment_id": eq.equipment_id,
                "equipment_code": eq.equipment_code,
                "type": eq.type,
                "status": eq.status.value,
                "days_since_service": days,
                "recommended_service_period": eq.recommended_service_period,
                "service_due": days >= eq.recommended_service_period,
                "fuel_deviation": (
                    abs(rental.fuel_usage_per_hour - eq.ideal_fuel_usage_per_hour) if rental else 0.0
                ),
                "last_maintenance": last,
            }
        )
    return pd.DataFrame(
        rows,
        columns=[
            "equipment_id", "equipment_code", "type", "status", "days_since_service",
            "recommended_service_period", "service_due", "fuel_deviation", "last_maintenance",
        ],
    )


def fuel_deviation_chart_data(status: pd.DataFrame) -> pd.DataFrame:
    """Fuel deviation of rented equipment against the alert threshold."""
    rented = status[status["status"] == EquipmentStatus.RENTED.value]
    return pd.DataFrame(
        {
            "equipment": rented["equipment_code"].to_list(),
            "deviation": rented["fuel_deviation"].to_list(),
            "threshold": [FUEL_DEVIATION_ALERT] * len(rented),
        }
    )


def service_log_csv(records: RecordStore, equipment_id: int) -> tuple[str, str]:
    """
    Export one equipment's maintenance history.

    Returns:
        (filename, csv_text); the file name embeds the equipment code
        ("Unknown" when the equipment id does not resolve).
    """
    code = records.equipment_code(equipment_id)
    df = pd.DataFrame(
        [
            (m.service_date.date().isoformat(), m.service_logs, code)
            for m in records.maintenance_for(equipment_id)
        ],
        columns=SERVICE_LOG_HEADER,
    )
    buf = io.StringIO()
    df.to_csv(buf, index=False, lineterminator="\n")
    return f"service_log_{code}.csv", buf.getvalue()
