"""
fleetview/layout/components/kpi_card.py
───────────────────────────────────────
KPI cards, the KPI banner row and the shared empty-state placeholder.
"""
from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from config.fleet import HIGH_UTILIZATION_PCT, UNDER_UTILIZED_PCT

CARD_BG = "#161b22"
BORDER = "#30363d"
MUTED = "#8b949e"

GOOD = "#2ea44f"
WARN = "#e8a020"
BAD = "#da3633"

_LABEL_STYLE = {"fontSize": ".68rem", "color": MUTED, "textTransform": "uppercase", "letterSpacing": ".06em"}
_SUB_STYLE = {"fontSize": ".68rem", "color": MUTED, "marginTop": "2px"}


def utilization_color(pct: float) -> str:
    """Green at or above the high cut-off, amber down to the under-utilized line, red below."""
    if pct >= HIGH_UTILIZATION_PCT:
        return GOOD
    if pct >= UNDER_UTILIZED_PCT:
        return WARN
    return BAD


def kpi_card(
    label: str,
    value: str,
    color: str = "#c9d1d9",
    icon: str = "",
    sub_label: str = "",
) -> html.Div:
    """
    Single fleet metric.

    Args:
        label: Metric name, shown above the value
        value: Pre-formatted value
        color: Value colour, usually from utilization_color() or a severity
        icon: Optional emoji shown on the left
        sub_label: Small secondary line under the value
    """
    body = [
        html.Div(label, style=_LABEL_STYLE),
        html.Div(value, style={"fontSize": "1.4rem", "fontWeight": "700", "color": color, "lineHeight": "1.2"}),
    ]
    if sub_label:
        body.append(html.Div(sub_label, style=_SUB_STYLE))

    children = [html.Div(body)]
    if icon:
        children.insert(0, html.Div(icon, style={"fontSize": "1.6rem", "marginRight": "12px"}))

    return html.Div(
        children,
        style={
            "display": "flex",
            "alignItems": "center",
            "backgroundColor": CARD_BG,
            "border": f"1px solid {BORDER}",
            "borderLeft": f"3px solid {color}",
            "borderRadius": "8px",
            "padding": "12px 14px",
        },
    )


def kpi_row(cards: list[html.Div]) -> dbc.Row:
    """Lay cards out in equal columns, two per row on small screens."""
    width = max(12 // max(len(cards), 1), 3)
    return dbc.Row([dbc.Col(card, xs=6, md=width) for card in cards], className="g-3")


def empty_state(text: str) -> html.Div:
    return html.Div(text, style={"color": MUTED, "padding": "20px", "textAlign": "center"})
