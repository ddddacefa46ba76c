"""Number formatting for emitted path data. No engine imports."""

from __future__ import annotations

# 6 decimals absorbs float noise from matrix products (2.9999999 -> 3).
DEFAULT_PRECISION = 6


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Round to ``precision`` decimals and drop trailing zeros.

    ``3.0 -> "3"``, ``3.5 -> "3.5"``, ``3.123456789 -> "3.123457"``.
    """
    text = f"{round(float(value), precision):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def format_point(x: float, y: float, precision: int = DEFAULT_PRECISION) -> str:
    """Render a coordinate pair as ``"x,y"``."""
    return f"{format_number(x, precision)},{format_number(y, precision)}"
