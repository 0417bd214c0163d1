"""Data layer: API client and response cache."""

from cse_market.data.cache import ResponseCache
from cse_market.data.client import CSEClient

__all__ = ["CSEClient", "ResponseCache"]
