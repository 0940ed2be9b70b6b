"""
fleetview/pages/usage.py
────────────────────────
Equipment utilization page.
"""
from dash import html

from config.fleet import UNDER_UTILIZED_PCT
from fleetview.layout.components.panel import graph, page, panel, panel_row, slot


def layout() -> html.Div:
    return page(
        "Equipment Usage",
        "",
        slot("usage-kpi-banner", className="mb-4"),
        panel_row(
            (7, panel("Average Utilization by Type", graph("usage-type-chart"))),
            (5, panel("Utilization Distribution", graph("usage-distribution-chart"))),
        ),
        panel_row((12, panel(f"Under-utilized Equipment (< {UNDER_UTILIZED_PCT:g}%)", slot("usage-under-utilized")))),
        panel_row((12, panel("Utilization Details", slot("usage-table"))), last=True),
        subtitle_id="usage-subtitle",
    )
