"""View layer: page document, fragment rendering and the refresh controller."""

from cse_market.ui.controller import MarketView, Region
from cse_market.ui.page import Page

__all__ = ["MarketView", "Page", "Region"]
