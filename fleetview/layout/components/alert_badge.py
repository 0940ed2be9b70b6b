"""
fleetview/layout/components/alert_badge.py
──────────────────────────────────────────
Severity pill for alert lists and tables.
"""
from __future__ import annotations

from dash import html

from config.alerts import SEVERITY_BG, SEVERITY_COLORS, SEVERITY_LABELS, AlertSeverity


def alert_badge(severity: AlertSeverity | str) -> html.Span:
    """Tinted pill in the severity colour; unknown severities render grey."""
    key = getattr(severity, "value", severity)
    color = SEVERITY_COLORS.get(key, "#8b949e")
    return html.Span(
        SEVERITY_LABELS.get(key, str(key).capitalize()),
        style={
            "color": color,
            "backgroundColor": SEVERITY_BG.get(key, "transparent"),
            "border": f"1px solid {color}",
            "borderRadius": "10px",
            "padding": "1px 8px",
            "fontSize": ".65rem",
            "fontWeight": "700",
            "whiteSpace": "nowrap",
        },
    )
