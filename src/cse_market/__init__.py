"""CSE live market data for the Investera site."""

__version__ = "0.1.0"
