"""
fleetview/layout/main.py
────────────────────────
Root layout: URL router, refresh timer, navbar, page slot and a footer that
describes the loaded snapshot.

The timer drives every view callback so wall-clock alert rules advance while
the page stays open.
"""
from dash import dcc, html

from config.settings import settings
from fleetview.data.records import RecordStore
from fleetview.layout.navbar import create_navbar

PAGE_BG = "#0d1117"
TEXT = "#c9d1d9"
MUTED = "#8b949e"
BORDER = "#30363d"


def _snapshot_footer(records: RecordStore) -> html.Footer:
    parts = [
        f"{len(records.equipment)} equipment",
        f"{len(records.active_rentals())} active rentals",
        f"{len(records.sites)} sites",
        f"{len(records.tracking)} GPS pings",
        f"data: {settings.DATA_DIR}",
    ]
    return html.Footer(
        "Fleet Rental Monitor · " + " · ".join(parts),
        style={
            "textAlign": "center",
            "padding": ".7rem",
            "fontSize": ".72rem",
            "color": MUTED,
            "borderTop": f"1px solid {BORDER}",
            "marginTop": "2rem",
        },
    )


def create_layout(records: RecordStore) -> html.Div:
    return html.Div(
        [
            dcc.Location(id="url", refresh=False),
            dcc.Interval(id="interval-live", interval=settings.UPDATE_INTERVAL_MS, n_intervals=0),
            create_navbar(),
            html.Div(id="page-content", style={"minHeight": "calc(100vh - 60px)"}),
            _snapshot_footer(records),
        ],
        style={"backgroundColor": PAGE_BG, "minHeight": "100vh", "color": TEXT},
    )
