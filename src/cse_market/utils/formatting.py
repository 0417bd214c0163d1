"""
Display formatting for financial figures.

All two-decimal output rounds half away from zero on the decimal form of
the number (``Decimal(str(x))``), so ``-3.456`` becomes ``"-3.46"`` and
``1.005`` becomes ``"1.01"``.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from cse_market.models import FormattedChange
from cse_market.utils.numbers import safe_float

CURRENCY_CODE = "LKR"

_TWO_PLACES = Decimal("0.01")

# Checked in order, first match wins.
_MAGNITUDES = (
    (1e9, "B"),
    (1e6, "M"),
    (1e3, "K"),
)


def _to_decimal(value: Any) -> Decimal:
    number = safe_float(value, default=0.0)
    if number == 0:
        number = 0.0  # -0.0 renders as "0.00"
    return Decimal(str(number)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def to_fixed(value: Any) -> str:
    """Render a number with exactly two fraction digits."""
    return f"{_to_decimal(value):.2f}"


def format_percentage_change(change: Any) -> FormattedChange:
    """
    Format a percentage change with its color tag.

    Absent or non-numeric input is treated as 0. Zero counts as positive.
    """
    number = safe_float(change, default=0.0)
    is_positive = number >= 0
    return FormattedChange(
        value=to_fixed(number),
        is_positive=is_positive,
        color="positive" if is_positive else "negative",
    )


def format_currency(value: Any) -> str:
    """Format an amount in Sri Lankan rupees, e.g. ``LKR 1,234.56``."""
    amount = _to_decimal(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_CODE} {abs(amount):,.2f}"


def format_large_number(value: Any) -> str:
    """Scale a magnitude to B/M/K, e.g. ``1500`` → ``1.50K``."""
    number = safe_float(value, default=0.0)
    for threshold, suffix in _MAGNITUDES:
        if abs(number) >= threshold:
            return f"{to_fixed(number / threshold)}{suffix}"
    return to_fixed(number)


def format_index(value: float | None) -> str:
    """Format an index level such as the ASPI, or ``N/A`` when absent."""
    if value is None:
        return "N/A"
    return to_fixed(value)
