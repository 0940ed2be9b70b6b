"""
fleetview/layout/components/table.py
────────────────────────────────────
Plain HTML table in the dashboard's dark style.
"""
from dash import html

BORDER = "#30363d"
MUTED = "#8b949e"


def simple_table(headers: list[str], rows: list[list]) -> html.Div:
    """Header row plus body rows; cells may be strings or Dash components."""
    return html.Div(
        html.Table(
            [
                html.Thead(
                    html.Tr(
                        [html.Th(h) for h in headers],
                        style={"color": MUTED, "fontSize": ".68rem", "textTransform": "uppercase"},
                    )
                ),
                html.Tbody(
                    [
                        html.Tr(
                            [html.Td(cell, style={"fontSize": ".78rem", "padding": "4px 6px"}) for cell in row],
                            style={"borderBottom": f"1px solid {BORDER}"},
                        )
                        for row in rows
                    ]
                ),
            ],
            style={"width": "100%", "borderCollapse": "collapse", "fontSize": ".82rem"},
        ),
        style={"overflowX": "auto"},
    )
