"""
fleetview/pages/gps.py
──────────────────────
GPS tracking and geofencing page.
"""
from dash import html

from fleetview.layout.components.panel import graph, labelled_dropdown, page, panel, panel_row, slot


def layout() -> html.Div:
    return page(
        "GPS Tracking & Geofencing",
        "",
        slot("gps-suggestions", className="mb-3"),
        panel_row((3, html.Div(labelled_dropdown("Site", "gps-site-filter", value="all")))),
        panel_row(
            (8, panel("Equipment Positions", graph("gps-position-chart", toolbar=True))),
            (4, panel("Pings by Equipment Type", graph("gps-type-chart"))),
        ),
        panel_row((12, panel("Site Overview", slot("gps-site-table")))),
        panel_row((12, panel("Tracked Positions", slot("gps-position-table"))), last=True),
        subtitle_id="gps-subtitle",
    )
