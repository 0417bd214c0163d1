"""
Colombo Stock Exchange API client.

Fetches the four public market data sets, caches each one briefly and
exposes the display formatting helpers used by the view layer.
"""

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import aiohttp

from cse_market.config import DEFAULT_BASE_URL
from cse_market.data.cache import ResponseCache
from cse_market.exceptions import DataFetchError
from cse_market.infrastructure.http_client import get_aiohttp_session
from cse_market.models import EndpointKey
from cse_market.utils import formatting

if TYPE_CHECKING:
    from cse_market.config import Config

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}


class CSEClient:
    """
    Market data client for the CSE public API (async).

    Each instance owns its cache; create one per page session.
    Failed requests never raise: they are logged and reported as ``None``.
    """

    format_percentage_change = staticmethod(formatting.format_percentage_change)
    format_currency = staticmethod(formatting.format_currency)
    format_large_number = staticmethod(formatting.format_large_number)
    format_index = staticmethod(formatting.format_index)

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        cache_timeout_ms: int = 30_000,
        session: aiohttp.ClientSession | None = None,
        cache: ResponseCache | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Args:
            base_url: API base URL, without trailing slash
            cache_timeout_ms: Per-endpoint cache lifetime in milliseconds
            session: aiohttp session; defaults to the shared application session
            cache: Response cache; created from cache_timeout_ms and clock if omitted
            clock: Time source in seconds, used when the cache is created here
        """
        self.base_url = base_url.rstrip("/")
        self._session = session
        self.cache = cache if cache is not None else ResponseCache(timeout_ms=cache_timeout_ms, clock=clock)

    @classmethod
    def from_config(cls, config: "Config", session: aiohttp.ClientSession | None = None) -> "CSEClient":
        """Create a client from application settings."""
        return cls(
            base_url=config.api.base_url,
            cache_timeout_ms=config.api.cache_timeout_ms,
            session=session,
        )

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is not None:
            return self._session
        return get_aiohttp_session()

    async def fetch(self, endpoint: str, **options: Any) -> Any | None:
        """
        POST to an API endpoint and decode the JSON response.

        Args:
            endpoint: Path relative to the base URL, e.g. '/topGainers'
            **options: Extra aiohttp request arguments; override the defaults

        Returns:
            Decoded JSON, or None on any transport, HTTP or decoding failure
        """
        url = f"{self.base_url}{endpoint}"
        request_kwargs: dict[str, Any] = {"headers": dict(DEFAULT_HEADERS), **options}

        try:
            session = self._get_session()
            async with session.post(url, **request_kwargs) as response:
                if not 200 <= response.status < 300:
                    raise DataFetchError(f"API call failed: {response.status}")
                data = await response.json(content_type=None)
            logger.debug(f"[CSEClient] {endpoint} OK")
            return data
        except Exception as e:
            logger.error(f"Error calling CSE API {endpoint}: {e}")
            return None

    async def _get_cached(self, key: EndpointKey) -> Any | None:
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"[CSEClient] Cache hit for {key.value}")
            return cached

        data = await self.fetch(key.path)
        if data is not None:
            self.cache.set(key, data)
        return data

    async def get_market_summary(self) -> Any | None:
        """Get the market summary payload (ASPI, ASPIChange, turnover, marketCap)."""
        return await self._get_cached(EndpointKey.MARKET_SUMMARY)

    async def get_top_gainers(self) -> Any | None:
        """Get today's top gaining stocks."""
        return await self._get_cached(EndpointKey.TOP_GAINERS)

    async def get_top_losers(self) -> Any | None:
        """Get today's top losing stocks."""
        return await self._get_cached(EndpointKey.TOP_LOSERS)

    async def get_most_active(self) -> Any | None:
        """Get the most actively traded stocks."""
        return await self._get_cached(EndpointKey.MOST_ACTIVE)
