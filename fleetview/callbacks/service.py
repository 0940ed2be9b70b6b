"""
fleetview/callbacks/service.py
──────────────────────────────
Service management page callbacks, including the maintenance log download.
"""
from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
from dash import Input, Output, State, dcc, html, no_update

from config.alerts import FUEL_DEVIATION_ALERT, TYPE_ICONS, AlertType
from fleetview.analytics.alerts import generate_alerts
from fleetview.analytics.rounding import fixed
from fleetview.analytics.service import fuel_deviation_chart_data, service_log_csv, service_status
from fleetview.data.records import RecordStore
from fleetview.layout.components.alert_badge import alert_badge
from fleetview.layout.components.kpi_card import empty_state
from fleetview.layout.components.table import simple_table

CARD_BG = "#161b22"
GRID_CLR = "#30363d"
PLOTLY_TMPL = "plotly_dark"

_SHOWN_ALERTS = 5


def register(app, records: RecordStore) -> None:

    @app.callback(
        [
            Output("service-log-equipment", "options"),
            Output("service-log-equipment", "value"),
        ],
        Input("url", "pathname"),
    )
    def populate_equipment_options(pathname: str):
        options = [
            {"label": f"{eq.equipment_code} ({eq.type})", "value": eq.equipment_id}
            for eq in records.equipment
        ]
        return options, (options[0]["value"] if options else None)

    @app.callback(
        [
            Output("service-alerts", "children"),
            Output("service-fuel-chart", "figure"),
            Output("service-table", "children"),
        ],
        Input("interval-live", "n_intervals"),
    )
    def update_service(n_intervals: int):
        alerts = [
            a for a in generate_alerts(records)
            if a.type in (AlertType.FUEL, AlertType.SERVICE)
        ]
        if not alerts:
            alert_block = empty_state("No fuel or service alerts.")
        else:
            alert_block = html.Div(
                [
                    html.Div(
                        [
                            html.Span(TYPE_ICONS[a.type], style={"marginRight": "8px"}),
                            html.Span(a.message, style={"fontSize": ".78rem", "marginRight": "8px"}),
                            alert_badge(a.severity.value),
                        ],
                        style={"padding": "6px 0", "borderBottom": f"1px solid {GRID_CLR}"},
                    )
                    for a in alerts[:_SHOWN_ALERTS]
                ]
            )

        status = service_status(records)
        chart = fuel_deviation_chart_data(status)
        fig = go.Figure()
        fig.add_bar(
            x=chart["equipment"],
            y=chart["deviation"],
            marker_color=["#da3633" if d > FUEL_DEVIATION_ALERT else "#58a6ff" for d in chart["deviation"]],
            name="Deviation",
        )
        fig.add_hline(
            y=FUEL_DEVIATION_ALERT, line_dash="dash", line_color="#e8a020", line_width=1,
            annotation_text="Threshold", annotation_font_color="#e8a020", annotation_font_size=9,
        )
        fig.update_layout(
            template=PLOTLY_TMPL,
            paper_bgcolor=CARD_BG,
            plot_bgcolor=CARD_BG,
            margin={"l": 10, "r": 10, "t": 20, "b": 10},
            font={"color": "#c9d1d9", "size": 11},
            yaxis={"gridcolor": GRID_CLR},
            height=260,
        )

        if status.empty:
            table = empty_state("No equipment records.")
        else:
            rows = []
            for row in status.itertuples():
                due_color = "#da3633" if row.service_due else "#2ea44f"
                last = row.last_maintenance.strftime("%Y-%m-%d") if pd.notna(row.last_maintenance) else "No records"
                rows.append([
                    html.Span(row.equipment_code, style={"color": "#58a6ff", "fontWeight": "600"}),
                    row.type,
                    row.status.capitalize(),
                    f"{row.days_since_service} / {row.recommended_service_period}",
                    html.Span("Due" if row.service_due else "OK", style={"color": due_color, "fontWeight": "700"}),
                    fixed(row.fuel_deviation),
                    last,
                ])
            table = simple_table(
                ["Equipment", "Type", "Status", "Days / Period", "Service", "Fuel Dev. (L/hr)", "Last Maintenance"],
                rows,
            )

        return alert_block, fig, table

    @app.callback(
        Output("service-log-download", "data"),
        Input("service-log-btn", "n_clicks"),
        State("service-log-equipment", "value"),
        prevent_initial_call=True,
    )
    def download_service_log(n_clicks: int, equipment_id: int | None):
        if equipment_id is None:
            return no_update
        filename, content = service_log_csv(records, equipment_id)
        return dcc.send_string(content, filename)
