"""Infrastructure module - HTTP client session management."""

from cse_market.infrastructure.http_client import (
    aiohttp_session_manager,
    get_aiohttp_session,
)

__all__ = [
    "aiohttp_session_manager",
    "get_aiohttp_session",
]
