"""
fleetview/callbacks/gps.py
──────────────────────────
GPS tracking and geofencing page callbacks.
"""
from __future__ import annotations

import dash_bootstrap_components as dbc
import plotly.graph_objects as go
from dash import Input, Output, html

from config.alerts import AlertType
from config.fleet import MAX_SUGGESTIONS
from fleetview.analytics.alerts import generate_alerts
from fleetview.analytics.geofence import classify_geofence, site_overview, type_violation_breakdown
from fleetview.analytics.rounding import fixed, round_half_up
from fleetview.analytics.suggestions import Suggestion, generate_suggestions
from fleetview.data.loader import records_to_frame
from fleetview.data.models import ClassifiedPosition, Site
from fleetview.data.records import RecordStore
from fleetview.layout.components.kpi_card import empty_state
from fleetview.layout.components.table import simple_table

CARD_BG = "#161b22"
GRID_CLR = "#30363d"
PLOTLY_TMPL = "plotly_dark"

SAFE_COLOR = "#4ecdc4"
VIOLATION_COLOR = "#ff6b6b"
SITE_COLOR = "#e8a020"


def _base_layout(height: int = 300) -> dict:
    return {
        "template": PLOTLY_TMPL,
        "paper_bgcolor": CARD_BG,
        "plot_bgcolor": CARD_BG,
        "margin": {"l": 10, "r": 10, "t": 20, "b": 10},
        "font": {"color": "#c9d1d9", "size": 11},
        "xaxis": {"gridcolor": GRID_CLR, "title": "Longitude"},
        "yaxis": {"gridcolor": GRID_CLR, "title": "Latitude"},
        "legend": {"bgcolor": "rgba(0,0,0,0)", "font": {"size": 10}},
        "height": height,
    }


def suggestion_alerts(suggestions: list[Suggestion]) -> html.Div:
    """Alert boxes for the first MAX_SUGGESTIONS suggestions."""
    return html.Div(
        [
            dbc.Alert(
                [html.Strong(s.title + ": "), s.message],
                color="warning" if s.kind == "warning" else "info",
                className="py-2 mb-2",
                style={"fontSize": ".8rem"},
            )
            for s in suggestions[:MAX_SUGGESTIONS]
        ]
    )


def position_figure(positions: list[ClassifiedPosition], sites: list[Site]) -> go.Figure:
    """Pings coloured by violation, sites as diamonds."""
    fig = go.Figure()
    df = records_to_frame(positions)
    if not df.empty:
        df["fuel_deviation"] = (df["fuel_usage"] - df["ideal_fuel_usage"]).abs()
        for violation, color, name in ((False, SAFE_COLOR, "Within geofence"), (True, VIOLATION_COLOR, "Outside geofence")):
            subset = df[df["violation"] == violation]
            if subset.empty:
                continue
            fig.add_scatter(
                x=subset["longitude"],
                y=subset["latitude"],
                mode="markers",
                marker={"color": color, "size": 10, "line": {"color": "#ffffff", "width": 1}},
                name=name,
                text=[
                    f"{row.equipment_code} ({row.equipment_type})<br>{row.site_name}<br>"
                    f"{round_half_up(row.distance_m)}m · fuel dev {fixed(row.fuel_deviation)}L/hr"
                    for row in subset.itertuples()
                ],
                hovertemplate="%{text}<extra></extra>",
            )
    if sites:
        fig.add_scatter(
            x=[s.longitude for s in sites],
            y=[s.latitude for s in sites],
            mode="markers",
            marker={"color": SITE_COLOR, "size": 14, "symbol": "diamond"},
            name="Site",
            text=[s.site_name for s in sites],
            hovertemplate="%{text}<extra></extra>",
        )
    fig.update_layout(**_base_layout(360))
    return fig


def register(app, records: RecordStore) -> None:

    @app.callback(
        Output("gps-site-filter", "options"),
        Input("url", "pathname"),
    )
    def populate_site_options(pathname: str):
        return [{"label": "All Sites", "value": "all"}] + [
            {"label": s.site_name, "value": s.site_id} for s in records.sites
        ]

    @app.callback(
        [
            Output("gps-subtitle", "children"),
            Output("gps-suggestions", "children"),
            Output("gps-position-chart", "figure"),
            Output("gps-type-chart", "figure"),
            Output("gps-site-table", "children"),
            Output("gps-position-table", "children"),
        ],
        [
            Input("interval-live", "n_intervals"),
            Input("gps-site-filter", "value"),
        ],
    )
    def update_gps(n_intervals: int, site_filter):
        positions = classify_geofence(records)
        overview = site_overview(records, positions)
        suggestions = generate_suggestions(overview, positions)
        geofence_alert_count = sum(
            1 for a in generate_alerts(records) if a.type == AlertType.GEOFENCE
        )

        within = sum(1 for p in positions if not p.violation)
        subtitle = f"{within} within zone · {geofence_alert_count} violations"

        suggestion_block = suggestion_alerts(suggestions)

        if site_filter not in (None, "all"):
            positions = [p for p in positions if p.site_id == site_filter]

        shown_sites = {p.site_id for p in positions}
        fig_pos = position_figure(positions, [s for s in records.sites if s.site_id in shown_sites])

        breakdown = type_violation_breakdown(positions)
        fig_type = go.Figure()
        if not breakdown.empty:
            fig_type.add_bar(x=breakdown["type"], y=breakdown["count"], name="Pings", marker_color=SAFE_COLOR)
            fig_type.add_bar(x=breakdown["type"], y=breakdown["violations"], name="Violations", marker_color=VIOLATION_COLOR)
        fig_type.update_layout(
            **{**_base_layout(360), "xaxis": {"gridcolor": GRID_CLR}, "yaxis": {"gridcolor": GRID_CLR}},
            barmode="group",
        )

        if overview.empty:
            site_table = empty_state("No sites.")
        else:
            site_table = simple_table(
                ["Site", "Client", "Active Equipment", "Violations", "Radius (m)", "Forecast Demand", "Weather Risk"],
                [
                    [row.site_name, row.client_name, str(row.active_equipment),
                     html.Span(str(row.violations), style={"color": "#da3633" if row.violations else "#2ea44f", "fontWeight": "700"}),
                     f"{row.geofence_radius:.0f}", f"{row.forecasted_demand:.2f}", f"{row.weather_risk:.0%}"]
                    for row in overview.itertuples()
                ],
            )

        if not positions:
            pos_table = empty_state("No tracked equipment on active rentals.")
        else:
            pos_table = simple_table(
                ["Equipment", "Site", "Distance (m)", "Radius (m)", "Coordinates", "Timestamp", "Status"],
                [
                    [p.equipment_code, p.site_name, str(round_half_up(p.distance_m)), f"{p.geofence_radius_m:.0f}",
                     f"{p.latitude:.6f}, {p.longitude:.6f}", p.timestamp.strftime("%Y-%m-%d %H:%M"),
                     html.Span(
                         "Outside Geofence" if p.violation else "Within Geofence",
                         style={"color": VIOLATION_COLOR if p.violation else SAFE_COLOR, "fontWeight": "700"},
                     )]
                    for p in positions
                ],
            )

        return subtitle, suggestion_block, fig_pos, fig_type, site_table, pos_table
