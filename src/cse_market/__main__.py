"""
===================================
CSE live market data - page renderer
===================================

Usage:
    python -m cse_market render                         # fill the built-in page, print to stdout
    python -m cse_market render index.html -o out.html  # fill an existing page
    python -m cse_market watch index.html -o out.html   # keep out.html refreshed
"""

import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path

import click
from rich.markup import escape

from cse_market.config import Config, get_config_safe
from cse_market.data import CSEClient
from cse_market.infrastructure import aiohttp_session_manager
from cse_market.scheduler import RefreshTask
from cse_market.ui import MarketView, Page
from cse_market.utils import get_console, setup_logging

logger = logging.getLogger(__name__)


def _print_banner() -> None:
    console = get_console()
    console.print()
    console.rule("[banner]CSE Market Data[/banner]", style="cyan")
    console.print(f"  Run time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}", style="dim")
    console.print()


def _print_summary(page: Page) -> None:
    console = get_console()
    aspi = escape(page.get_text("aspi-index") or "N/A")
    change = escape(page.get_text("aspi-change") or "N/A")
    console.print(f"ASPI [bold]{aspi}[/bold]  ({change})")
    console.print(f"[dim]{escape(page.get_text('ticker-content') or '')}[/dim]")


def _load_page(page_path: Path | None) -> Page:
    return Page.from_file(page_path) if page_path else Page.default()


def _load_config(debug: bool) -> Config | None:
    config, errors = get_config_safe()
    if config is None:
        console = get_console()
        for error in errors:
            console.print(f"[bold red]{escape(error)}[/bold red]")
        return None

    setup_logging(
        debug=debug or config.debug,
        log_dir=config.logging.log_dir,
        level=config.logging.log_level,
    )
    return config


def _write_output(page: Page, output: Path | None) -> None:
    if output is None:
        click.echo(page.render())
    else:
        page.save(output)
        logger.info(f"Page written to {output}")


async def render_once(config: Config, page: Page) -> Page:
    """Fetch every data set once and fill the page."""
    async with aiohttp_session_manager(
        timeout=config.api.request_timeout,
        max_connections=config.api.max_connections,
    ) as session:
        view = MarketView(CSEClient.from_config(config, session=session), page)
        await view.initialize()
    return page


async def watch(config: Config, page: Page, output: Path, interval_ms: int) -> None:
    """Refresh the page every ``interval_ms`` and rewrite ``output`` after each pass."""
    async with aiohttp_session_manager(
        timeout=config.api.request_timeout,
        max_connections=config.api.max_connections,
    ) as session:
        view = MarketView(CSEClient.from_config(config, session=session), page)

        async def refresh_and_save() -> None:
            await view.initialize()
            page.save(output)
            _print_summary(page)

        task = RefreshTask(refresh_and_save, interval_ms / 1000, run_immediately=True, name="cse-watch")
        async with task:
            await asyncio.Event().wait()


@click.group()
def cli() -> None:
    """Fill CSE market data placeholders in the site's HTML pages."""


@cli.command()
@click.argument("page_path", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), help="Output file (default: stdout)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def render(page_path: Path | None, output: Path | None, debug: bool) -> None:
    """Fetch market data once and write the filled page."""
    config = _load_config(debug)
    if config is None:
        sys.exit(1)

    _print_banner()
    page = asyncio.run(render_once(config, _load_page(page_path)))
    _print_summary(page)
    _write_output(page, output)


@cli.command(name="watch")
@click.argument("page_path", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(dir_okay=False, path_type=Path), help="Output file")
@click.option("--interval", type=click.IntRange(min=1000), default=None, help="Refresh interval in ms")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def watch_command(page_path: Path | None, output: Path, interval: int | None, debug: bool) -> None:
    """Keep the filled page refreshed on disk until interrupted."""
    config = _load_config(debug)
    if config is None:
        sys.exit(1)

    _print_banner()
    interval_ms = interval or config.refresh.refresh_interval_ms
    try:
        asyncio.run(watch(config, _load_page(page_path), output, interval_ms))
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")


def main() -> None:
    """Program entry point."""
    cli()


if __name__ == "__main__":
    main()
