"""
Utility modules.

Submodules:
    - formatting: currency / percentage / magnitude display helpers
    - logging_config: logging setup
    - numbers: tolerant numeric coercion
"""

from cse_market.utils.logging_config import get_console, setup_logging

__all__ = [
    "get_console",
    "setup_logging",
]
