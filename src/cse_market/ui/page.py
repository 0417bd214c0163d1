"""
Page document wrapper.

The site's pages are static HTML with named placeholder elements. Page
loads such a document with BeautifulSoup and lets the view layer replace
placeholder contents by element id.
"""

import logging
from pathlib import Path

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

DEFAULT_PAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Investera | CSE Market Data</title>
</head>
<body>
  <div class="cse-ticker"><span id="ticker-content">Loading market data...</span></div>
  <section class="cse-index">
    <span id="aspi-index">--</span>
    <span id="aspi-change" class="cse-change">--</span>
  </section>
  <section class="cse-summary">
    <div>ASPI <span id="market-aspi">--</span></div>
    <div>Turnover <span id="market-turnover">--</span></div>
    <div>Market Cap <span id="market-cap">--</span></div>
    <div>Change <span id="market-change" class="cse-change">--</span></div>
  </section>
  <section class="cse-movers">
    <div id="top-gainers"></div>
    <div id="top-losers"></div>
    <div id="most-active"></div>
  </section>
</body>
</html>
"""


class Page:
    """An HTML document whose placeholder elements are addressed by id."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup

    @classmethod
    def from_html(cls, html: str) -> "Page":
        return cls(BeautifulSoup(html, "html.parser"))

    @classmethod
    def from_file(cls, path: str | Path) -> "Page":
        return cls.from_html(Path(path).read_text(encoding="utf-8"))

    @classmethod
    def default(cls) -> "Page":
        """Page shell containing every placeholder the view layer writes to."""
        return cls.from_html(DEFAULT_PAGE_HTML)

    def _element(self, element_id: str) -> Tag | None:
        element = self.soup.find(id=element_id)
        return element if isinstance(element, Tag) else None

    def has(self, element_id: str) -> bool:
        return self._element(element_id) is not None

    def set_text(self, element_id: str, text: str) -> bool:
        """Replace an element's content with plain text. Returns False if the element is missing."""
        element = self._element(element_id)
        if element is None:
            return False
        element.string = text
        return True

    def set_html(self, element_id: str, fragment: str) -> bool:
        """Replace an element's content with an HTML fragment. Returns False if the element is missing."""
        element = self._element(element_id)
        if element is None:
            return False
        element.clear()
        element.append(BeautifulSoup(fragment, "html.parser"))
        return True

    def set_class(self, element_id: str, class_name: str) -> bool:
        element = self._element(element_id)
        if element is None:
            return False
        element["class"] = class_name.split()
        return True

    def get_text(self, element_id: str) -> str | None:
        element = self._element(element_id)
        return element.get_text() if element is not None else None

    def get_html(self, element_id: str) -> str | None:
        element = self._element(element_id)
        return element.decode_contents() if element is not None else None

    def get_class(self, element_id: str) -> str | None:
        element = self._element(element_id)
        if element is None:
            return None
        classes = element.get("class") or []
        if isinstance(classes, str):
            return classes
        return " ".join(classes)

    def render(self) -> str:
        return str(self.soup)

    def save(self, path: str | Path) -> None:
        Path(path).write_text(self.render(), encoding="utf-8")
        logger.debug(f"Page written to {path}")
