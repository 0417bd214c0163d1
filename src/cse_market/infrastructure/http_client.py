"""Application-wide aiohttp ClientSession management."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

_session: aiohttp.ClientSession | None = None


def get_aiohttp_session() -> aiohttp.ClientSession:
    """Return the shared aiohttp session (only valid inside aiohttp_session_manager)."""
    if _session is None:
        raise RuntimeError("aiohttp session not initialized. Use aiohttp_session_manager().")
    return _session


@asynccontextmanager
async def aiohttp_session_manager(
    timeout: float = 30.0,
    max_connections: int = 10,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Application-level aiohttp session lifecycle."""
    global _session

    _session = aiohttp.ClientSession(
        timeout=aiohttp.ClientTimeout(total=timeout),
        connector=aiohttp.TCPConnector(limit=max_connections, limit_per_host=max_connections),
    )

    try:
        yield _session
    finally:
        await _session.close()
        _session = None
