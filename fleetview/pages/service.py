"""
fleetview/pages/service.py
──────────────────────────
Service management page: service due status, fuel deviation and
maintenance log download.
"""
import dash_bootstrap_components as dbc
from dash import dcc, html

from fleetview.layout.components.panel import graph, labelled_dropdown, page, panel, panel_row, slot


def layout() -> html.Div:
    export = panel(
        "Service Log Export",
        *labelled_dropdown("Equipment", "service-log-equipment"),
        dbc.Button("Download CSV", id="service-log-btn", n_clicks=0, color="warning", size="sm", className="mt-3"),
        dcc.Download(id="service-log-download"),
    )
    return page(
        "Service Management",
        "Service schedule, fuel efficiency and maintenance history",
        panel_row(
            (5, panel("Service & Fuel Alerts", slot("service-alerts"))),
            (7, panel("Fuel Usage Deviation (L/hr)", graph("service-fuel-chart"))),
        ),
        panel_row((9, panel("Service Status", slot("service-table"))), (3, export), last=True),
    )
