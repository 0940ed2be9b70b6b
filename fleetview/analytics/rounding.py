"""
fleetview/analytics/rounding.py
───────────────────────────────
Rounding for figures shown to users.

Python's round() and format specs break exact .5 ties toward the even digit.
Dashboard figures break them upward instead (2.5 -> 3, 10.25 -> "10.3"), so
the same reading always renders the same text.

Both helpers work on the exact binary value of the float, so 2.675 (stored as
2.67499...) still rounds down to "2.67".
"""
from __future__ import annotations

from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Nearest integer; ties go toward +inf (-2.5 -> -2, 2.5 -> 3)."""
    rounding = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
    return int(Decimal(value).to_integral_value(rounding=rounding))


def fixed(value: float, digits: int = 1) -> str:
    """Fixed-point text with `digits` decimals; ties go away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
