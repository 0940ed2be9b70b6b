"""
fleetview/callbacks/alerts.py
─────────────────────────────
Alert center page callbacks.
"""
from __future__ import annotations

import dash_bootstrap_components as dbc
import pandas as pd
import plotly.graph_objects as go
from dash import Input, Output, html

from config.alerts import (
    MAX_ALERTS_DISPLAY,
    SEVERITY_BG,
    SEVERITY_COLORS,
    SEVERITY_LABELS,
    TYPE_ICONS,
    TYPE_LABELS,
    AlertSeverity,
    AlertType,
)
from fleetview.analytics.alerts import alert_stats, alerts_to_frame, generate_alerts, upcoming_returns
from fleetview.data.records import RecordStore
from fleetview.layout.components.alert_badge import alert_badge
from fleetview.layout.components.kpi_card import empty_state
from fleetview.layout.components.table import simple_table

CARD_BG = "#161b22"
BORDER = "#30363d"
MUTED = "#8b949e"
PLOTLY_TMPL = "plotly_dark"

_TYPE_COLORS = {
    AlertType.FUEL: "#e8a020",
    AlertType.SERVICE: "#58a6ff",
    AlertType.GEOFENCE: "#da3633",
    AlertType.RENTAL_DUE: "#a371f7",
}


def _summary_badges(stats: dict[str, int]) -> dbc.Row:
    def badge(value: int, label: str, color: str) -> dbc.Col:
        return dbc.Col(
            html.Div(
                [
                    html.Div(str(value), style={"fontSize": "1.4rem", "fontWeight": "700", "color": color}),
                    html.Div(label, style={"fontSize": ".65rem", "color": MUTED, "textTransform": "uppercase"}),
                ],
                style={"backgroundColor": CARD_BG, "border": f"1px solid {BORDER}", "borderRadius": "8px", "padding": "10px 16px"},
            ),
            xs=6, md=3,
        )

    return dbc.Row(
        [badge(stats["total"], "Total", "#c9d1d9")]
        + [
            badge(stats[sev.value], SEVERITY_LABELS[sev], SEVERITY_COLORS[sev])
            for sev in (AlertSeverity.HIGH, AlertSeverity.MEDIUM, AlertSeverity.LOW)
        ],
        className="g-2",
    )


def alert_table(frame: pd.DataFrame) -> html.Div:
    """Alert rows from `alerts_to_frame`, first MAX_ALERTS_DISPLAY only."""
    if frame.empty:
        return empty_state("No alerts for the selected filter.")
    rows = []
    for row in frame.head(MAX_ALERTS_DISPLAY).itertuples():
        rows.append(
            [
                html.Span(row.timestamp.strftime("%d/%m %H:%M"), style={"color": MUTED}),
                html.Span(f"{TYPE_ICONS[row.type]} {TYPE_LABELS[row.type]}"),
                alert_badge(row.severity),
                html.Span(
                    row.message,
                    style={
                        "backgroundColor": SEVERITY_BG[row.severity],
                        "borderRadius": "4px",
                        "padding": "1px 6px",
                    },
                ),
            ]
        )
    return simple_table(["Time", "Type", "Severity", "Message"], rows)


def register(app, records: RecordStore) -> None:

    @app.callback(
        [
            Output("alerts-summary-badges", "children"),
            Output("alerts-type-chart", "figure"),
            Output("alerts-upcoming-returns", "children"),
            Output("alerts-table", "children"),
        ],
        [
            Input("interval-live", "n_intervals"),
            Input("alerts-filter-type", "value"),
        ],
    )
    def update_alerts(n_intervals: int, type_filter: str):
        alerts = generate_alerts(records)
        stats = alert_stats(alerts)

        fig = go.Figure()
        fig.add_bar(
            x=[TYPE_LABELS[t] for t in AlertType],
            y=[stats[t.value] for t in AlertType],
            marker_color=[_TYPE_COLORS[t] for t in AlertType],
            hovertemplate="%{x}<br>%{y} alerts<extra></extra>",
        )
        fig.update_layout(
            template=PLOTLY_TMPL,
            paper_bgcolor=CARD_BG,
            plot_bgcolor=CARD_BG,
            margin={"l": 10, "r": 10, "t": 20, "b": 10},
            font={"color": "#c9d1d9", "size": 11},
            yaxis={"gridcolor": BORDER},
            height=260,
        )

        returns = upcoming_returns(records)
        if returns.empty:
            returns_block = empty_state("No rentals due back this week.")
        else:
            returns_block = simple_table(
                ["Equipment", "Client", "Expected Return", "Days Left"],
                [
                    [row.equipment_code, row.client_name, row.expected_return_date.strftime("%Y-%m-%d"),
                     html.Span(
                         str(row.days_until_return),
                         style={"color": "#da3633" if row.days_until_return == 0 else "#e8a020", "fontWeight": "700"},
                     )]
                    for row in returns.itertuples()
                ],
            )

        if type_filter and type_filter != "all":
            alerts = [a for a in alerts if a.type == type_filter]

        return _summary_badges(stats), fig, returns_block, alert_table(alerts_to_frame(alerts))
