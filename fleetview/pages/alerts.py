"""
fleetview/pages/alerts.py
─────────────────────────
Alert center page with type filter and upcoming returns.
"""
from dash import html

from config.alerts import TYPE_LABELS, UPCOMING_RETURN_HORIZON_DAYS, AlertType
from fleetview.layout.components.panel import graph, labelled_dropdown, page, panel, panel_row, slot

_TYPE_OPTIONS = [{"label": "All Alerts", "value": "all"}] + [
    {"label": TYPE_LABELS[t], "value": t.value} for t in AlertType
]


def layout() -> html.Div:
    return page(
        "Alert Center",
        "Fuel, service, geofence and rental due alerts, recomputed on every refresh",
        slot("alerts-summary-badges", className="mb-3"),
        panel_row((3, html.Div(labelled_dropdown("Type", "alerts-filter-type", options=_TYPE_OPTIONS, value="all")))),
        panel_row(
            (5, panel("Alerts by Type", graph("alerts-type-chart"))),
            (7, panel(f"Upcoming Returns ({UPCOMING_RETURN_HORIZON_DAYS} days)", slot("alerts-upcoming-returns"))),
        ),
        panel_row((12, panel("Alerts", slot("alerts-table"))), last=True),
    )
