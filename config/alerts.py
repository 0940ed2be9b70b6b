"""
config/alerts.py
────────────────
Alert types, severity levels, rule thresholds and display configuration.
"""

from enum import Enum


class AlertType(str, Enum):
    FUEL = "fuel"
    SERVICE = "service"
    GEOFENCE = "geofence"
    RENTAL_DUE = "rental_due"


class AlertSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# ── Rule thresholds ───────────────────────────────────────────────────────────

# |actual - ideal| fuel usage in L/h
FUEL_DEVIATION_ALERT = 10.0
FUEL_DEVIATION_HIGH = 15.0

# Service reminder fires on each multiple of this many days since check-out
SERVICE_INTERVAL_DAYS = 30

# Rental due alert window, in whole days before expected return
RENTAL_DUE_WINDOW_DAYS = 3

# Tolerance added to every site's geofence radius (meters)
GEOFENCE_BUFFER_M = 150.0

# Horizon for the "upcoming returns" table on the alerts page
UPCOMING_RETURN_HORIZON_DAYS = 7


# ── Display ───────────────────────────────────────────────────────────────────

SEVERITY_COLORS: dict[str, str] = {
    AlertSeverity.LOW: "#58a6ff",
    AlertSeverity.MEDIUM: "#e8a020",
    AlertSeverity.HIGH: "#da3633",
}

SEVERITY_BG: dict[str, str] = {
    AlertSeverity.LOW: "rgba(88,166,255,0.12)",
    AlertSeverity.MEDIUM: "rgba(232,160,32,0.12)",
    AlertSeverity.HIGH: "rgba(218,54,51,0.12)",
}

SEVERITY_LABELS: dict[str, str] = {
    AlertSeverity.LOW: "Low",
    AlertSeverity.MEDIUM: "Medium",
    AlertSeverity.HIGH: "High",
}

TYPE_LABELS: dict[str, str] = {
    AlertType.FUEL: "Fuel Usage",
    AlertType.SERVICE: "Service Due",
    AlertType.GEOFENCE: "Geofence",
    AlertType.RENTAL_DUE: "Rental Due",
}

TYPE_ICONS: dict[str, str] = {
    AlertType.FUEL: "⛽",
    AlertType.SERVICE: "🔧",
    AlertType.GEOFENCE: "📍",
    AlertType.RENTAL_DUE: "📅",
}


MAX_ALERTS_DISPLAY = 100
