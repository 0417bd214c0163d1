"""
Periodic refresh scheduling.

RefreshTask re-runs a coroutine function on a fixed period until it is
stopped. Each run is started as its own task and is not awaited by the
timer, so a run that takes longer than the interval overlaps the next one.
Stopping the timer does not cancel runs already in flight.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)

Job = Callable[[], Awaitable[Any]]
Sleep = Callable[[float], Awaitable[Any]]


class RefreshTask:
    """
    Cancellable fixed-period timer.

    Usage:
        task = RefreshTask(view.initialize, interval=60.0).start()
        ...
        await task.stop()
    """

    def __init__(
        self,
        job: Job,
        interval: float,
        *,
        sleep: Sleep = asyncio.sleep,
        run_immediately: bool = False,
        name: str = "refresh",
    ) -> None:
        """
        Args:
            job: Coroutine function to run each period
            interval: Period in seconds
            sleep: Awaitable sleep function; injectable so tests can drive time
            run_immediately: Start one run before the first wait
            name: Name used in log messages and task names
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._job = job
        self.interval = interval
        self._sleep = sleep
        self._run_immediately = run_immediately
        self.name = name
        self.run_count = 0
        self._timer: asyncio.Task | None = None
        self._in_flight: set[asyncio.Task] = set()

    @property
    def running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    @property
    def in_flight(self) -> int:
        """Number of runs started but not yet finished."""
        return len(self._in_flight)

    def start(self) -> "RefreshTask":
        """Start the timer on the running event loop. Starting twice is a no-op."""
        if self.running:
            return self
        self._timer = asyncio.get_running_loop().create_task(self._run_timer(), name=f"{self.name}-timer")
        logger.info(f"[{self.name}] Auto-refresh every {self.interval:g}s")
        return self

    async def stop(self) -> None:
        """Cancel the timer. Runs already in flight are left to finish."""
        if self._timer is None:
            return
        self._timer.cancel()
        await asyncio.gather(self._timer, return_exceptions=True)
        self._timer = None

    async def wait_in_flight(self) -> None:
        """Wait until every started run has finished."""
        while self._in_flight:
            await asyncio.gather(*list(self._in_flight), return_exceptions=True)

    async def _run_timer(self) -> None:
        if self._run_immediately:
            self._spawn()

        while True:
            try:
                await self._sleep(self.interval)
            except asyncio.CancelledError:
                logger.info(f"[{self.name}] Auto-refresh cancelled")
                break
            self._spawn()

    def _spawn(self) -> None:
        self.run_count += 1
        run = asyncio.get_running_loop().create_task(self._run_job(self.run_count), name=f"{self.name}-{self.run_count}")
        self._in_flight.add(run)
        run.add_done_callback(self._in_flight.discard)

    async def _run_job(self, run_number: int) -> None:
        logger.debug(f"[{self.name}] Run {run_number} started")
        try:
            await self._job()
        except Exception as e:
            logger.error(f"[{self.name}] Run {run_number} failed: {e}")

    async def __aenter__(self) -> "RefreshTask":
        return self.start()

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()
