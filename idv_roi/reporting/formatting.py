"""Display formatting for currency, percentages and plain numbers (en-US)."""

from __future__ import annotations

import math
from decimal import Decimal


def format_currency(amount: float) -> str:
    """Whole US dollars with thousands separators: -$60,000."""
    digits = f"{abs(amount):,.0f}"
    sign = "-" if amount < 0 and digits != "0" else ""
    return f"{sign}${digits}"


def format_percent(value: float) -> str:
    """Percent points with one decimal: 1943.75 -> 1,943.8%."""
    return f"{value:,.1f}%"


def format_months(months: float) -> str:
    return f"{months:.1f} months"


def format_number(value: float) -> str:
    """A user-entered number as typed: 6.0 -> 6, 2.5 -> 2.5, never exponent form."""
    if not math.isfinite(value):
        return str(value)
    if value == int(value):
        return str(int(value))
    return format(Decimal(repr(value)), "f")
