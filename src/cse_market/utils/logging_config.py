"""Logging configuration."""

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_console: Console | None = None


def get_console() -> Console:
    """Return the shared Console instance (writes to stderr)."""
    global _console
    if _console is None:
        custom_theme = Theme(
            {
                "logging.level.info": "green",
                "logging.level.warning": "yellow",
                "logging.level.error": "red bold",
                "logging.level.debug": "dim",
                "banner": "bold cyan",
                "banner.dim": "dim cyan",
                "positive": "green",
                "negative": "red",
            }
        )
        _console = Console(theme=custom_theme, stderr=True)
    return _console


def setup_logging(
    debug: bool = False,
    log_dir: str = "./logs",
    level: str = "INFO",
) -> None:
    """Configure the logging system.

    Args:
        debug: Enable debug mode (DEBUG console level plus a debug log file)
        log_dir: Directory for the debug log file
        level: Console level when debug is off
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console_handler = RichHandler(
        console=get_console(),
        show_time=True,
        show_path=debug,
        rich_tracebacks=True,
        tracebacks_show_locals=debug,
        show_level=True,
        omit_repeated_times=True,
        markup=False,
    )
    console_handler.setLevel(logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    if debug:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        debug_log_file = log_path / f"cse_market_debug_{timestamp}.log"

        debug_handler = logging.FileHandler(debug_log_file, encoding="utf-8")
        debug_handler.setLevel(logging.DEBUG)
        debug_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s")
        )
        root_logger.addHandler(debug_handler)
        logging.getLogger(__name__).debug(f"Debug log: {debug_log_file.absolute()}")

    _suppress_noisy_loggers()


def _suppress_noisy_loggers() -> None:
    """Lower the level of chatty third-party loggers."""
    noisy_loggers = [
        "aiohttp",
        "aiohttp.access",
        "aiohttp.client",
        "asyncio",
        "urllib3",
        "urllib3.connectionpool",
    ]

    for name in noisy_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)
