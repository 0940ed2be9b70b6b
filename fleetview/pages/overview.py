"""
fleetview/pages/overview.py
───────────────────────────
Fleet dashboard page.

Static structure; dynamic KPI data injected via callbacks.
"""
from dash import html

from fleetview.layout.components.panel import graph, page, panel, panel_row, slot


def layout() -> html.Div:
    return page(
        "Fleet Dashboard",
        "Equipment status, active rentals and utilization at a glance",
        slot("overview-kpi-banner", className="mb-4"),
        panel_row(
            (5, panel("Equipment Status", graph("overview-status-chart"))),
            (7, panel("Equipment by Type", graph("overview-type-chart"))),
        ),
        panel_row((12, panel("Active Rentals", slot("overview-rentals-table"))), last=True),
    )
