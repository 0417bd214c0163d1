"""Tests for HTML fragment rendering."""

from bs4 import BeautifulSoup

from cse_market.models import StockRow
from cse_market.ui import render


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


class TestCreateStocksTable:
    def test_empty_sequence_renders_notice(self):
        html = render.create_stocks_table([], "Gainers")

        assert html == '<div class="text-center text-muted">No gainers data available</div>'
        assert "<table" not in html

    def test_none_renders_notice(self):
        assert "No most active data available" in render.create_stocks_table(None, "Most Active")

    def test_columns_and_rows(self):
        rows = [
            StockRow("JKH.N0000", 195.5, 4.5, 2.356),
            StockRow("EXPO.N0000", 1400.0, -7.0, -4.76),
        ]

        soup = _soup(render.create_stocks_table(rows, "Gainers"))

        assert soup.find("h5").get_text() == "Top Gainers"
        assert [th.get_text() for th in soup.find_all("th")] == ["Symbol", "Price", "Change", "% Change"]

        body_rows = soup.find("tbody").find_all("tr")
        assert len(body_rows) == 2

        cells = [td.get_text() for td in body_rows[0].find_all("td")]
        assert cells == ["JKH.N0000", "LKR 195.50", "LKR 4.50", "2.36%"]
        assert body_rows[0].find_all("td")[3]["class"] == ["positive"]

        cells = [td.get_text() for td in body_rows[1].find_all("td")]
        assert cells == ["EXPO.N0000", "LKR 1,400.00", "-LKR 7.00", "-4.76%"]
        assert body_rows[1].find_all("td")[2]["class"] == ["negative"]

    def test_table_classes(self):
        soup = _soup(render.create_stocks_table([StockRow()], "Losers"))

        assert soup.find("div")["class"] == ["card-custom"]
        assert soup.find("table")["class"] == ["table", "table-hover", "mb-0"]

    def test_defaulted_row_still_renders(self):
        soup = _soup(render.create_stocks_table([StockRow()], "Losers"))

        cells = [td.get_text() for td in soup.find("tbody").find_all("td")]
        assert cells == ["N/A", "LKR 0.00", "LKR 0.00", "0.00%"]

    def test_symbol_is_escaped(self):
        html = render.create_stocks_table([StockRow(symbol="<b>X</b>")], "Gainers")
        assert "&lt;b&gt;X&lt;/b&gt;" in html


class TestFragments:
    def test_error_fragment(self):
        assert render.error_fragment("Unable to fetch") == '<div class="text-center text-danger">Unable to fetch</div>'

    def test_ticker_item_with_sign(self):
        assert render.ticker_item(StockRow("JKH.N0000", 195.5, 4.5, 2.356), sign="+") == "JKH.N0000: LKR 195.50 (+2.36%)"

    def test_ticker_item_natural_sign(self):
        assert render.ticker_item(StockRow("EXPO.N0000", 140, -7, -4.76)) == "EXPO.N0000: LKR 140.00 (-4.76%)"
