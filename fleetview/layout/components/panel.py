"""
fleetview/layout/components/panel.py
────────────────────────────────────
Page scaffolding shared by every view: header, titled panels, panel rows,
graphs and labelled dropdown filters.
"""
from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

MUTED = "#8b949e"

_LABEL_STYLE = {"fontSize": ".72rem", "color": MUTED, "textTransform": "uppercase"}


def page(title: str, subtitle: str = "", *sections, subtitle_id: str | None = None) -> html.Div:
    """
    Full page body.

    The subtitle is static text, or an empty slot filled by a callback when
    `subtitle_id` is given.
    """
    sub = html.P(id=subtitle_id, className="page-subtitle") if subtitle_id else html.P(subtitle, className="page-subtitle")
    header = html.Div([html.H2(title, className="page-title"), sub], className="page-header")
    return html.Div([header, *sections], style={"padding": "1.5rem"})


def panel(title: str, *body) -> html.Div:
    return html.Div([html.Div(title, className="chart-title"), *body], className="chart-card")


def graph(graph_id: str, toolbar: bool = False) -> dcc.Graph:
    return dcc.Graph(id=graph_id, config={"displayModeBar": toolbar})


def slot(slot_id: str, **kwargs) -> html.Div:
    """Empty container a callback fills with a table or message."""
    return html.Div(id=slot_id, **kwargs)


def panel_row(*cols: tuple[int, html.Div], last: bool = False) -> dbc.Row:
    """Row of (bootstrap width, panel) pairs."""
    return dbc.Row(
        [dbc.Col(content, md=width) for width, content in cols],
        className="g-3" if last else "g-3 mb-3",
    )


def labelled_dropdown(label: str, dropdown_id: str, **kwargs) -> list:
    kwargs.setdefault("clearable", False)
    return [
        html.Label(label, style=_LABEL_STYLE),
        dcc.Dropdown(id=dropdown_id, className="dark-dropdown", style={"fontSize": ".85rem"}, **kwargs),
    ]
