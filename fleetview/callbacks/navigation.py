"""
fleetview/callbacks/navigation.py: Page routing and dashboard (overview) callbacks.
"""
from __future__ import annotations

from datetime import datetime

import plotly.graph_objects as go
from dash import Input, Output, State, html

from config.fleet import STATUS_COLORS
from fleetview.analytics.alerts import generate_alerts
from fleetview.analytics.rounding import round_half_up
from fleetview.analytics.utilization import fleet_summary, rental_utilization
from fleetview.data.records import RecordStore
from fleetview.layout.components.kpi_card import empty_state, kpi_card, kpi_row, utilization_color
from fleetview.layout.components.table import simple_table

CARD_BG = "#161b22"
GRID_CLR = "#30363d"
MUTED = "#8b949e"
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
        "legend": {"bgcolor": "rgba(0,0,0,0)", "font": {"size": 10}},
        "height": height,
    }


def register(app, records: RecordStore) -> None:
    """Register navigation + overview page callbacks."""

    # ── Page routing ──────────────────────────────────────────────────────────
    from fleetview.pages import alerts, forecasting, gps, overview, service, usage

    @app.callback(
        Output("page-content", "children"),
        Input("url", "pathname"),
    )
    def display_page(pathname: str):
        routes = {
            "/": overview.layout,
            "/usage": usage.layout,
            "/service": service.layout,
            "/gps": gps.layout,
            "/alerts": alerts.layout,
            "/forecasting": forecasting.layout,
        }
        return routes.get(pathname, overview.layout)()

    # ── Navbar collapse ───────────────────────────────────────────────────────
    @app.callback(
        Output("navbar-collapse", "is_open"),
        Input("navbar-toggler", "n_clicks"),
        State("navbar-collapse", "is_open"),
        prevent_initial_call=True,
    )
    def toggle_navbar(n_clicks: int, is_open: bool) -> bool:
        return not is_open

    # ── Open alert counter ────────────────────────────────────────────────────
    @app.callback(
        Output("nav-alert-count", "children"),
        Input("interval-live", "n_intervals"),
    )
    def update_alert_count(n_intervals: int) -> str:
        return str(len(generate_alerts(records)))

    # ── Overview ──────────────────────────────────────────────────────────────
    @app.callback(
        [
            Output("overview-kpi-banner", "children"),
            Output("overview-status-chart", "figure"),
            Output("overview-type-chart", "figure"),
            Output("overview-rentals-table", "children"),
        ],
        Input("interval-live", "n_intervals"),
    )
    def update_overview(n_intervals: int):
        summary = fleet_summary(records)
        avg_util = summary["avg_utilization"]

        kpi_banner = kpi_row(
            [
                kpi_card("Total Equipment", str(summary["total_equipment"]), "#58a6ff", icon="🚜"),
                kpi_card("Active Rentals", str(summary["active_rentals"]), "#2ea44f", icon="📋"),
                kpi_card("Sites", str(summary["sites"]), "#e8a020", icon="📍"),
                kpi_card("Avg Utilization", f"{round_half_up(avg_util)}%", utilization_color(avg_util), icon="⚡"),
            ]
        )

        # Status pie
        status_counts = summary["status_counts"]
        fig_status = go.Figure()
        if status_counts:
            fig_status.add_pie(
                labels=[s.capitalize() for s in status_counts],
                values=list(status_counts.values()),
                marker={"colors": [STATUS_COLORS.get(s, MUTED) for s in status_counts]},
                hole=0.45,
                textinfo="label+value",
            )
        fig_status.update_layout(**_base_layout())

        # Type bars: total vs rented
        types = summary["type_counts"]
        fig_type = go.Figure()
        fig_type.add_bar(x=list(types), y=[v["total"] for v in types.values()], name="Total", marker_color="#58a6ff")
        fig_type.add_bar(x=list(types), y=[v["rented"] for v in types.values()], name="Rented", marker_color="#2ea44f")
        fig_type.update_layout(**_base_layout(), barmode="group")

        # Active rentals table
        active = records.active_rentals()
        if not active:
            rentals_table = empty_state("No active rentals.")
        else:
            rows = []
            now = datetime.now()
            for rental in active:
                util = rental_utilization(rental)
                overdue = rental.expected_return_date.replace(tzinfo=None) < now
                rows.append([
                    html.Span(records.equipment_code(rental.equipment_id), style={"color": "#58a6ff", "fontWeight": "600"}),
                    records.client_name(rental.client_id),
                    rental.check_out_date.strftime("%Y-%m-%d"),
                    html.Span(
                        rental.expected_return_date.strftime("%Y-%m-%d"),
                        style={"color": "#da3633" if overdue else "#c9d1d9"},
                    ),
                    html.Span(f"{round_half_up(util)}%", style={"color": utilization_color(util), "fontWeight": "700"}),
                ])
            rentals_table = simple_table(
                ["Equipment", "Client", "Check-out", "Expected Return", "Utilization"], rows
            )

        return kpi_banner, fig_status, fig_type, rentals_table
