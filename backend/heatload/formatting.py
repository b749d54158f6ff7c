"""Formatting and rounding helpers for heat-load output.

Rounding is half-away-from-zero (``round2(0.585) == 0.59``), not Python's
banker's rounding, so preset tables match the values installers look up by
hand. Number formatting follows German conventions ('1.234,5') because the
exported CSV files are opened in German Excel.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

# Decimal places applied to every kW figure at the output boundary.
OUTPUT_DIGITS = 3


def round_half_away(value: float, digits: int = 2) -> float:
    """Round ``value`` to ``digits`` decimals, ties away from zero.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-digits)
    # repr() gives the shortest string that round-trips, so 0.585 stays 0.585
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def round2(value: float) -> float:
    """Round to two decimals, ties away from zero."""
    return round_half_away(value, 2)


def format_de_number(value: float, digits: int = 1, *, trim: bool = False) -> str:
    """Format a number the way de-DE locales do.

    - Thousands separator '.', decimal separator ','
    - ``trim=True`` drops trailing zeros (like ``maximumFractionDigits``)
    - Non-finite values render as zero
    """
    if not math.isfinite(value):
        value = 0.0
    text = f"{round_half_away(value, digits):,.{digits}f}"
    if trim and "." in text:
        text = text.rstrip("0").rstrip(".")
    return text.replace(",", "\x00").replace(".", ",").replace("\x00", ".")


def format_kw(value: float) -> str:
    """Format a load in kW, e.g. '12,5 kW'."""
    return f"{format_de_number(value, 1)} kW"


def format_u_value(value: float | None) -> str | None:
    """Format a U-value note as 'U=0.30 W/m²K', or None if not finite."""
    if value is None or not math.isfinite(value):
        return None
    return f"U={value:.2f} W/m²K"
