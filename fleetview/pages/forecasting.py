"""
fleetview/pages/forecasting.py
──────────────────────────────
Client demand forecasting page.
"""
from dash import html

from config.fleet import FORECAST_HORIZON_OPTIONS
from fleetview.layout.components.panel import graph, labelled_dropdown, page, panel, panel_row, slot

_HORIZON_OPTIONS = [{"label": f"{d} days", "value": d} for d in FORECAST_HORIZON_OPTIONS]


def layout() -> html.Div:
    return page(
        "Demand Forecasting",
        "Simulated history and trend/risk adjusted projection per client",
        panel_row(
            (4, html.Div(labelled_dropdown("Client", "forecast-client"))),
            (2, html.Div(labelled_dropdown("Horizon", "forecast-horizon", options=_HORIZON_OPTIONS, value=FORECAST_HORIZON_OPTIONS[0]))),
        ),
        slot("forecast-client-kpis", className="mb-3"),
        panel_row((12, panel("Demand Trend", graph("forecast-chart")))),
        panel_row(
            (6, panel("Client Comparison", graph("forecast-comparison-chart"))),
            (6, panel("Client Details", slot("forecast-client-table"))),
            last=True,
        ),
    )
