"""HTML and text fragments written into page placeholders."""

from collections.abc import Sequence
from html import escape

from cse_market.models import StockRow
from cse_market.utils.formatting import format_currency, format_percentage_change

TICKER_SEPARATOR = " • "
TICKER_FALLBACK = "CSE Market Data • Live Updates • Real-time Trading"


def error_fragment(message: str) -> str:
    return f'<div class="text-center text-danger">{escape(message)}</div>'


def empty_fragment(title: str) -> str:
    return f'<div class="text-center text-muted">No {escape(title.lower())} data available</div>'


def create_stocks_table(stocks: Sequence[StockRow] | None, title: str) -> str:
    """
    Render a Symbol / Price / Change / % Change table.

    Callers pass at most five rows. An empty or missing sequence renders a
    "no data available" notice instead of an empty table.
    """
    if not stocks:
        return empty_fragment(title)

    rows = []
    for stock in stocks:
        change = format_percentage_change(stock.percentage_change)
        rows.append(
            "<tr>"
            f"<td><strong>{escape(stock.symbol)}</strong></td>"
            f"<td>{format_currency(stock.price)}</td>"
            f'<td class="{change.color}">{format_currency(stock.change)}</td>'
            f'<td class="{change.color}">{change.value}%</td>'
            "</tr>"
        )

    return (
        '<div class="card-custom">'
        '<div class="card-header-custom">'
        f'<h5 class="mb-0">Top {escape(title)}</h5>'
        "</div>"
        '<div class="card-body p-0">'
        '<div class="table-responsive">'
        '<table class="table table-hover mb-0">'
        "<thead><tr><th>Symbol</th><th>Price</th><th>Change</th><th>% Change</th></tr></thead>"
        f"<tbody>{''.join(rows)}</tbody>"
        "</table>"
        "</div>"
        "</div>"
        "</div>"
    )


def ticker_item(stock: StockRow, sign: str = "") -> str:
    """One ticker entry, e.g. ``JKH.N0000: LKR 195.50 (+2.10%)``."""
    change = format_percentage_change(stock.percentage_change)
    return f"{stock.symbol}: {format_currency(stock.price)} ({sign}{change.value}%)"
