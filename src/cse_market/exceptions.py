"""
Exception hierarchy for the CSE market widget.
"""

import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


class CSEMarketException(Exception):
    """Base exception for cse_market."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class DataFetchError(CSEMarketException):
    """Remote API call failed."""

    def __init__(self, message: str = "API call failed", code: str | None = None):
        super().__init__(message, code)


class ConfigurationError(CSEMarketException):
    """Configuration error."""

    def __init__(self, message: str = "Invalid configuration", code: str | None = None):
        super().__init__(message, code)


def handle_errors(error_message: str) -> Callable[[F], F]:
    """
    Error handling decorator for coroutines.

    Logs any exception raised by the wrapped coroutine as
    ``"<error_message>: <error>"`` and returns None instead of raising.

    Example:
        @handle_errors("Error initializing CSE data")
        async def initialize(self) -> None:
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{error_message}: {e}")
                return None

        return wrapper  # type: ignore[return-value]

    return decorator
