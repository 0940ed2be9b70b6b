"""
fleetview/callbacks/usage.py
────────────────────────────
Usage page callbacks.
"""
from __future__ import annotations

import plotly.graph_objects as go
from dash import Input, Output, html

from config.fleet import HIGH_UTILIZATION_PCT, UNDER_UTILIZED_PCT, EquipmentStatus
from fleetview.analytics.rounding import round_half_up
from fleetview.analytics.utilization import (
    average_utilization,
    under_utilized,
    utilization_by_type,
    utilization_distribution,
    utilization_table,
)
from fleetview.data.records import RecordStore
from fleetview.layout.components.kpi_card import empty_state, kpi_card, kpi_row, utilization_color
from fleetview.layout.components.table import simple_table

CARD_BG = "#161b22"
GRID_CLR = "#30363d"
PLOTLY_TMPL = "plotly_dark"


def _base_layout(height: int = 260) -> dict:
    return {
        "template": PLOTLY_TMPL,
        "paper_bgcolor": CARD_BG,
        "plot_bgcolor": CARD_BG,
        "margin": {"l": 10, "r": 10, "t": 20, "b": 10},
        "font": {"color": "#c9d1d9", "size": 11},
        "xaxis": {"gridcolor": GRID_CLR},
        "yaxis": {"gridcolor": GRID_CLR},
        "height": height,
    }


def register(app, records: RecordStore) -> None:

    @app.callback(
        [
            Output("usage-subtitle", "children"),
            Output("usage-kpi-banner", "children"),
            Output("usage-type-chart", "figure"),
            Output("usage-distribution-chart", "figure"),
            Output("usage-under-utilized", "children"),
            Output("usage-table", "children"),
        ],
        Input("interval-live", "n_intervals"),
    )
    def update_usage(n_intervals: int):
        table = utilization_table(records)
        rented = table[table["status"] == EquipmentStatus.RENTED.value]

        avg_util = average_utilization(rented["utilization"])
        high_count = int((rented["utilization"] >= HIGH_UTILIZATION_PCT).sum())
        total_engine_hours = float((table["engine_hours"] * table["operating_days"]).sum())
        low = under_utilized(table)

        subtitle = f"Monitoring {len(rented)} active rentals"
        kpis = kpi_row(
            [
                kpi_card("Avg Utilization", f"{round_half_up(avg_util)}%", utilization_color(avg_util)),
                kpi_card("Under-utilized", str(len(low)), "#da3633" if len(low) else "#2ea44f"),
                kpi_card("High Performers", str(high_count), "#2ea44f"),
                kpi_card("Total Engine Hours", f"{total_engine_hours:,.0f}", "#58a6ff"),
            ]
        )

        by_type = utilization_by_type(records)
        fig_type = go.Figure()
        fig_type.add_bar(
            x=by_type["type"],
            y=by_type["avg_utilization"],
            marker_color=[utilization_color(v) for v in by_type["avg_utilization"]],
            hovertemplate="%{x}<br>%{y}%<extra></extra>",
        )
        fig_type.update_layout(**{**_base_layout(), "yaxis": {"range": [0, 100], "gridcolor": GRID_CLR}})

        dist = utilization_distribution(table)
        fig_dist = go.Figure()
        fig_dist.add_pie(
            labels=dist["range"],
            values=dist["count"],
            marker={"colors": dist["color"].to_list()},
            hole=0.45,
            sort=False,
        )
        fig_dist.update_layout(**_base_layout())

        if low.empty:
            low_block = empty_state(f"All rented equipment is at or above {UNDER_UTILIZED_PCT:g}% utilization.")
        else:
            low_block = simple_table(
                ["Equipment", "Type", "Client", "Utilization", "Idle h/day"],
                [
                    [row.equipment_code, row.type, row.client_name,
                     html.Span(f"{row.utilization}%", style={"color": "#da3633", "fontWeight": "700"}),
                     f"{row.idle_hours:.1f}"]
                    for row in low.itertuples()
                ],
            )

        if table.empty:
            detail = empty_state("No equipment records.")
        else:
            detail = simple_table(
                ["Equipment", "Type", "Status", "Client", "Engine h/day", "Idle h/day", "Operating days", "Fuel L/hr", "Utilization"],
                [
                    [row.equipment_code, row.type, row.status.capitalize(), row.client_name,
                     f"{row.engine_hours:.1f}", f"{row.idle_hours:.1f}", str(row.operating_days),
                     f"{row.fuel_usage:.1f}",
                     html.Span(f"{row.utilization}%", style={"color": utilization_color(row.utilization), "fontWeight": "700"})]
                    for row in table.itertuples()
                ],
            )

        return subtitle, kpis, fig_type, fig_dist, low_block, detail
