"""
fleetview/layout/navbar.py
──────────────────────────
Top navigation: one link per dashboard view, with a live open-alert counter
on the Alerts link.
"""

import dash_bootstrap_components as dbc
from dash import html

NAV_BG = "#0d1117"
BORDER = "#30363d"
ACCENT = "#e8a020"

# (label, route, link id)
NAV_ITEMS: list[tuple[str, str, str]] = [
    ("Dashboard", "/", "nav-overview"),
    ("Usage", "/usage", "nav-usage"),
    ("Service", "/service", "nav-service"),
    ("GPS", "/gps", "nav-gps"),
    ("Alerts", "/alerts", "nav-alerts"),
    ("Forecasting", "/forecasting", "nav-forecasting"),
]


def _nav_link(label: str, href: str, nav_id: str) -> dbc.NavItem:
    children = [label]
    if href == "/alerts":
        children.append(
            dbc.Badge("0", id="nav-alert-count", color="danger", pill=True, className="ms-1")
        )
    return dbc.NavItem(dbc.NavLink(children, href=href, id=nav_id, active="exact"))


def create_navbar() -> dbc.Navbar:
    brand = dbc.NavbarBrand(
        [
            html.Span("🚜", style={"marginRight": "8px"}),
            html.Span("Fleet Monitor", style={"fontWeight": "700"}),
        ],
        href="/",
        style={"color": ACCENT},
    )
    links = dbc.Collapse(
        dbc.Nav([_nav_link(*item) for item in NAV_ITEMS], className="ms-auto", navbar=True),
        id="navbar-collapse",
        navbar=True,
        is_open=False,
    )
    return dbc.Navbar(
        dbc.Container([brand, dbc.NavbarToggler(id="navbar-toggler", n_clicks=0), links], fluid=True),
        color=NAV_BG,
        dark=True,
        sticky="top",
        style={"borderBottom": f"1px solid {BORDER}"},
    )
