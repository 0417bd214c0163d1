"""
Numeric coercion helpers.

The remote API is not consistent about types: the same field may arrive as
a number, a numeric string, an empty string or not at all. These helpers
convert such values in one place instead of at every call site.
"""

import math
from typing import Any


def safe_float(val: Any, default: float | None = None) -> float | None:
    """
    Convert a value to float, returning ``default`` when that is not possible.

    Handles:
    - None / empty string / "-" → default
    - NaN / infinity / integers beyond float range → default
    - bool → default (a flag is not a price)
    - numeric strings (with optional thousands separators) → float

    Args:
        val: Value to convert
        default: Value returned when conversion fails

    Returns:
        Converted float or default
    """
    if val is None or isinstance(val, bool):
        return default

    if isinstance(val, str):
        val = val.strip().replace(",", "")
        if val in ("", "-", "--"):
            return default

    try:
        result = float(val)
    except (ValueError, TypeError, OverflowError):
        return default

    if math.isnan(result) or math.isinf(result):
        return default
    return result


def first_float(data: dict[str, Any], *keys: str, default: float | None = None) -> float | None:
    """Return the first value among ``keys`` that converts to a float."""
    for key in keys:
        value = safe_float(data.get(key))
        if value is not None:
            return value
    return default
