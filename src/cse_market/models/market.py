"""
Market data models.

Contains the EndpointKey enum, the cache entry record, and the normalized
StockRow / MarketSummary value objects built from raw API payloads.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from cse_market.utils.numbers import first_float, safe_float


class EndpointKey(Enum):
    """Remote data sets served by the exchange API."""

    MARKET_SUMMARY = "marketSummary"
    TOP_GAINERS = "topGainers"
    TOP_LOSERS = "topLosers"
    MOST_ACTIVE = "mostActive"

    @property
    def path(self) -> str:
        """Remote path relative to the API base URL."""
        return _ENDPOINT_PATHS[self]


# "marketSummery" is the exchange's own spelling.
_ENDPOINT_PATHS = {
    EndpointKey.MARKET_SUMMARY: "/marketSummery",
    EndpointKey.TOP_GAINERS: "/topGainers",
    EndpointKey.TOP_LOSERS: "/topLosers",
    EndpointKey.MOST_ACTIVE: "/mostActive",
}


@dataclass
class CacheEntry:
    """A cached response payload and the clock reading when it was stored."""

    data: Any
    timestamp: float


@dataclass(frozen=True)
class FormattedChange:
    """Display form of a numeric change."""

    value: str
    is_positive: bool
    color: str


@dataclass(frozen=True)
class StockRow:
    """
    Canonical stock row.

    The API has shipped the same fields under different names over time
    (symbol/name, price/lastPrice). from_dict maps every known variant onto
    this one shape; missing fields get defaults so a partial row still renders.
    """

    symbol: str = "N/A"
    price: float = 0.0
    change: float = 0.0
    percentage_change: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StockRow":
        """Normalize a raw API row."""
        if not isinstance(data, dict):
            return cls()

        symbol = data.get("symbol") or data.get("name") or "N/A"
        change = first_float(data, "change", default=0.0)
        return cls(
            symbol=str(symbol),
            price=first_float(data, "price", "lastPrice", default=0.0),
            change=change,
            # a zero change falls through to percentageChange
            percentage_change=change or first_float(data, "percentageChange", default=0.0),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "symbol": self.symbol,
            "price": self.price,
            "change": self.change,
            "percentage_change": self.percentage_change,
        }


@dataclass(frozen=True)
class MarketSummary:
    """Exchange-wide summary figures. ``None`` marks a field the API omitted."""

    aspi: float | None = None
    aspi_change: float | None = None
    turnover: float | None = None
    market_cap: float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MarketSummary":
        """Create from the raw marketSummery payload."""
        if not isinstance(data, dict):
            return cls()
        return cls(
            aspi=safe_float(data.get("ASPI")),
            aspi_change=safe_float(data.get("ASPIChange")),
            turnover=safe_float(data.get("turnover")),
            market_cap=safe_float(data.get("marketCap")),
        )


def normalize_rows(data: Any, limit: int | None = None) -> list[StockRow]:
    """Normalize a raw row sequence, keeping API order and at most ``limit`` rows."""
    if not isinstance(data, list):
        return []
    rows = data if limit is None else data[:limit]
    return [StockRow.from_dict(row) for row in rows]
