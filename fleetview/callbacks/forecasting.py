"""
fleetview/callbacks/forecasting.py
──────────────────────────────────
Demand forecasting page callbacks.
"""
from __future__ import annotations

import numpy as np
import plotly.graph_objects as go
from dash import Input, Output, html

from config.fleet import DemandTrend
from config.settings import settings
from fleetview.analytics.forecasting import client_comparison, demand_forecast
from fleetview.data.records import RecordStore
from fleetview.layout.components.kpi_card import empty_state, kpi_card, kpi_row
from fleetview.layout.components.table import simple_table

CARD_BG = "#161b22"
GRID_CLR = "#30363d"
MUTED = "#8b949e"
PLOTLY_TMPL = "plotly_dark"

_TREND_DISPLAY = {
    DemandTrend.UP: ("▲ Up", "#2ea44f"),
    DemandTrend.DOWN: ("▼ Down", "#da3633"),
    DemandTrend.STABLE: ("● Stable", "#58a6ff"),
}


def _layout(height: int = 300) -> dict:
    return {
        "template": PLOTLY_TMPL,
        "paper_bgcolor": CARD_BG,
        "plot_bgcolor": CARD_BG,
        "margin": {"l": 10, "r": 10, "t": 10, "b": 10},
        "font": {"color": "#c9d1d9", "size": 11},
        "xaxis": {"gridcolor": GRID_CLR},
        "yaxis": {"gridcolor": GRID_CLR},
        "legend": {"bgcolor": "rgba(0,0,0,0)", "font": {"size": 10}},
        "height": height,
    }


def _trend_span(trend: str) -> html.Span:
    label, color = _TREND_DISPLAY.get(trend, (str(trend).capitalize(), MUTED))
    return html.Span(label, style={"color": color, "fontWeight": "700"})


def register(app, records: RecordStore) -> None:

    @app.callback(
        [
            Output("forecast-client", "options"),
            Output("forecast-client", "value"),
        ],
        Input("url", "pathname"),
    )
    def populate_client_options(pathname: str):
        options = [{"label": c.client_name, "value": c.client_id} for c in records.clients]
        return options, (options[0]["value"] if options else None)

    @app.callback(
        [
            Output("forecast-client-kpis", "children"),
            Output("forecast-chart", "figure"),
        ],
        [
            Input("forecast-client", "value"),
            Input("forecast-horizon", "value"),
        ],
    )
    def update_client_forecast(client_id: int | None, horizon_days: int):
        client = records.client_by_id(client_id) if client_id is not None else None
        if client is None:
            empty = go.Figure()
            empty.update_layout(**_layout())
            return empty_state("Select a client."), empty

        # Seeded per client so the simulated history is stable between refreshes
        rng = np.random.default_rng(settings.FORECAST_SEED + client.client_id)
        df = demand_forecast(client, int(horizon_days), rng=rng)

        fig = go.Figure()
        fig.add_scatter(
            x=df["month"],
            y=df["demand"],
            mode="lines+markers",
            line={"color": "#58a6ff", "width": 2},
            name="Historical",
            connectgaps=False,
        )
        fig.add_scatter(
            x=df["month"],
            y=df["forecast"],
            mode="lines+markers",
            line={"color": "#e8a020", "width": 2, "dash": "dash"},
            name="Forecast",
            connectgaps=False,
        )
        fig.update_layout(**_layout(320))

        kpis = kpi_row(
            [
                kpi_card("Avg Monthly Demand", f"{client.avg_monthly_demand:.0f}", "#58a6ff"),
                kpi_card("Forecasted Demand", f"{client.forecasted_demand:.0f}", "#e8a020"),
                kpi_card("Reliability", f"{client.reliability_score:.0f}", "#2ea44f"),
                kpi_card(
                    "Risk", f"{client.forecasted_weather_risk:.0%}", "#da3633",
                    sub_label=f"war risk {client.war_risk:.0%}",
                ),
            ]
        )
        return kpis, fig

    @app.callback(
        [
            Output("forecast-comparison-chart", "figure"),
            Output("forecast-client-table", "children"),
        ],
        Input("interval-live", "n_intervals"),
    )
    def update_comparison(n_intervals: int):
        df = client_comparison(records)

        fig = go.Figure()
        fig.add_bar(x=df["client_name"], y=df["current_demand"], name="Current", marker_color="#58a6ff")
        fig.add_bar(x=df["client_name"], y=df["forecasted_demand"], name="Forecast", marker_color="#e8a020")
        fig.update_layout(**_layout(), barmode="group")

        if df.empty:
            table = empty_state("No client records.")
        else:
            table = simple_table(
                ["Client", "Current", "Forecast", "Reliability", "Trend", "Active Rentals"],
                [
                    [row.client_name, f"{row.current_demand:.0f}", str(row.forecasted_demand),
                     f"{row.reliability_score:.0f}", _trend_span(row.trend), str(row.active_rentals)]
                    for row in df.itertuples()
                ],
            )
        return fig, table
