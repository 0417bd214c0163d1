"""
Market data view controller.

Refreshes each region of the page independently: a region whose data
cannot be fetched shows an inline error, and the other regions render as
usual.
"""

import asyncio
import logging
from dataclasses import dataclass

from cse_market.data.client import CSEClient
from cse_market.exceptions import handle_errors
from cse_market.models import MarketSummary, StockRow, normalize_rows
from cse_market.scheduler import RefreshTask
from cse_market.ui import render
from cse_market.ui.page import Page

logger = logging.getLogger(__name__)

TABLE_ROW_LIMIT = 5
TICKER_ITEMS_PER_SIDE = 3


@dataclass(frozen=True)
class Region:
    """A page area owned by one update coroutine."""

    name: str
    placeholder: str
    error_message: str


ASPI = Region("ASPI", "aspi-index", "Unable to fetch ASPI data")
GAINERS = Region("gainers", "top-gainers", "Unable to fetch top gainers data")
LOSERS = Region("losers", "top-losers", "Unable to fetch top losers data")
ACTIVE = Region("active", "most-active", "Unable to fetch most active data")
SUMMARY = Region("summary", "market-aspi", "Unable to fetch market summary")


class MarketView:
    """
    Writes CSE market data into a page.

    Responsibilities:
    1. Request each data set from the client
    2. Render tables, figures and the ticker into their placeholders
    3. Keep failures scoped to the region they happen in
    """

    def __init__(self, client: CSEClient, page: Page) -> None:
        self.api = client
        self.page = page

    # ==========================================
    # Index and summary figures
    # ==========================================

    async def update_aspi(self) -> None:
        """Update the ASPI index display."""
        data = await self.api.get_market_summary()
        if data is None:
            self.show_error(ASPI)
            return

        summary = MarketSummary.from_dict(data)
        if summary.aspi is not None:
            self.page.set_text("aspi-index", self.api.format_index(summary.aspi))
        if summary.aspi_change is not None:
            self._set_change("aspi-change", summary.aspi_change)

    async def update_market_summary(self) -> None:
        """Update the market summary dashboard."""
        data = await self.api.get_market_summary()
        if data is None:
            self.show_error(SUMMARY)
            return

        summary = MarketSummary.from_dict(data)
        self.page.set_text("market-aspi", self.api.format_index(summary.aspi))
        if summary.turnover is not None:
            self.page.set_text("market-turnover", self.api.format_large_number(summary.turnover))
        if summary.market_cap is not None:
            self.page.set_text("market-cap", self.api.format_large_number(summary.market_cap))
        if summary.aspi_change is not None:
            self._set_change("market-change", summary.aspi_change)

    def _set_change(self, element_id: str, value: float) -> None:
        change = self.api.format_percentage_change(value)
        self.page.set_text(element_id, f"{change.value}%")
        self.page.set_class(element_id, f"cse-change {change.color}")

    # ==========================================
    # Stock tables
    # ==========================================

    async def update_top_gainers(self) -> None:
        data = await self.api.get_top_gainers()
        self._render_table(GAINERS, data, "Gainers")

    async def update_top_losers(self) -> None:
        data = await self.api.get_top_losers()
        self._render_table(LOSERS, data, "Losers")

    async def update_most_active(self) -> None:
        data = await self.api.get_most_active()
        self._render_table(ACTIVE, data, "Most Active")

    def _render_table(self, region: Region, data: object, title: str) -> None:
        if data is None:
            self.show_error(region)
            return
        rows = normalize_rows(data, limit=TABLE_ROW_LIMIT)
        self.page.set_html(region.placeholder, self.create_stocks_table(rows, title))

    @staticmethod
    def create_stocks_table(stocks: list[StockRow] | None, title: str) -> str:
        return render.create_stocks_table(stocks, title)

    # ==========================================
    # Ticker
    # ==========================================

    async def create_ticker_content(self) -> str:
        """Build the ticker line from the first three gainers and losers."""
        gainers, losers = await asyncio.gather(
            self.api.get_top_gainers(),
            self.api.get_top_losers(),
        )

        items = [render.ticker_item(stock, sign="+") for stock in normalize_rows(gainers, TICKER_ITEMS_PER_SIDE)]
        items += [render.ticker_item(stock) for stock in normalize_rows(losers, TICKER_ITEMS_PER_SIDE)]
        return render.TICKER_SEPARATOR.join(items)

    async def update_ticker(self) -> None:
        if not self.page.has("ticker-content"):
            return

        content = await self.create_ticker_content()
        self.page.set_text("ticker-content", content or render.TICKER_FALLBACK)

    # ==========================================
    # Errors and orchestration
    # ==========================================

    def show_error(self, region: Region) -> None:
        """Replace a region's placeholder with an inline error and log it."""
        self.page.set_html(region.placeholder, render.error_fragment(region.error_message))
        logger.error(f"CSE UI Error [{region.name}]: {region.error_message}")

    @handle_errors("Error initializing CSE data")
    async def initialize(self) -> None:
        """Refresh every region concurrently."""
        updates = {
            ASPI.name: self.update_aspi(),
            GAINERS.name: self.update_top_gainers(),
            LOSERS.name: self.update_top_losers(),
            ACTIVE.name: self.update_most_active(),
            SUMMARY.name: self.update_market_summary(),
            "ticker": self.update_ticker(),
        }
        results = await asyncio.gather(*updates.values(), return_exceptions=True)
        for name, result in zip(updates, results):
            if isinstance(result, Exception):
                logger.error(f"Error updating CSE {name} region: {result}")

    def start_auto_refresh(self, interval_ms: int = 60_000) -> RefreshTask:
        """Re-run initialize() every ``interval_ms`` milliseconds until the returned task is stopped."""
        return RefreshTask(self.initialize, interval_ms / 1000, name="cse-refresh").start()
