"""
Response cache for the market-data client.

One entry per EndpointKey. Entries expire lazily: a lookup past the timeout
behaves exactly like a cold miss, but the stale entry stays in the store
until the next successful fetch overwrites it.
"""

import logging
import time
from collections.abc import Callable
from typing import Any

from cachetools import Cache

from cse_market.models import CacheEntry, EndpointKey

logger = logging.getLogger(__name__)


class ResponseCache:
    """
    Per-endpoint response cache with a fixed timeout.

    Backed by a cachetools.Cache sized to the endpoint set, so no entry is
    ever evicted for capacity reasons.
    """

    def __init__(
        self,
        timeout_ms: int = 30_000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the cache.

        Args:
            timeout_ms: Entry lifetime in milliseconds (default: 30000)
            clock: Time source in seconds; injectable for tests
        """
        self._entries: Cache = Cache(maxsize=len(EndpointKey))
        self._timeout = timeout_ms / 1000
        self._clock = clock

    @property
    def timeout(self) -> float:
        """Entry lifetime in seconds."""
        return self._timeout

    def get(self, key: EndpointKey) -> Any | None:
        """
        Get a payload if it was stored less than ``timeout`` seconds ago.

        Args:
            key: Endpoint key

        Returns:
            Cached payload, or None if missing or expired
        """
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._clock() - entry.timestamp < self._timeout:
            return entry.data

        logger.debug(f"Cache expired: {key.value}")
        return None

    def set(self, key: EndpointKey, data: Any) -> None:
        """
        Store a payload, replacing any previous entry for the key.

        Args:
            key: Endpoint key
            data: Response payload (must not be None)
        """
        if data is None:
            raise ValueError(f"Refusing to cache an absent result for {key.value}")
        self._entries[key] = CacheEntry(data=data, timestamp=self._clock())

    def entry(self, key: EndpointKey) -> CacheEntry | None:
        """Return the raw entry for a key, expired or not."""
        return self._entries.get(key)

    def clear(self) -> None:
        """Clear all cached entries."""
        self._entries.clear()
        logger.info("Cache cleared")

    def __len__(self) -> int:
        return len(self._entries)
