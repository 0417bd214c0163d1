"""
Data models for the CSE market widget.
"""

from cse_market.models.market import (
    CacheEntry,
    EndpointKey,
    FormattedChange,
    MarketSummary,
    StockRow,
    normalize_rows,
)

__all__ = [
    "CacheEntry",
    "EndpointKey",
    "FormattedChange",
    "MarketSummary",
    "StockRow",
    "normalize_rows",
]
