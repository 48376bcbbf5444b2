"""
Cancellable periodic timers for chart auto-refresh.

Each timer is an explicit handle owning an asyncio task and a cancellation
token. The owner creates the handle when auto-update is enabled and stops it
when the setting changes or the view is closed; a stopped handle never fires
again.
"""

import asyncio
import inspect
from typing import Awaitable, Callable, Optional, Union

import structlog

logger = structlog.get_logger(__name__)

TickCallback = Callable[[], Union[None, Awaitable[None]]]


class CancellationToken:
    """One-shot cancellation flag that sleepers can wait on."""

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def sleep(self, seconds: float) -> bool:
        """Sleep up to ``seconds``; True if cancelled before the time elapsed."""
        try:
            await asyncio.wait_for(self._event.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            return False
        return True


class PeriodicTask:
    """Invokes ``callback`` every ``interval_seconds`` until stopped."""

    def __init__(self, name: str, interval_seconds: float, callback: TickCallback):
        self.name = name
        self.interval_seconds = interval_seconds
        self.callback = callback
        self.token = CancellationToken()
        self.ticks = 0
        self.errors = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> "PeriodicTask":
        """Schedule the timer on the running event loop."""
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._run(), name=self.name)
            logger.debug("Timer started", timer=self.name, interval_seconds=self.interval_seconds)
        return self

    async def _run(self) -> None:
        while not await self.token.sleep(self.interval_seconds):
            self.ticks += 1
            try:
                result = self.callback()
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                self.errors += 1
                logger.error(
                    "Unexpected error in timer callback",
                    timer=self.name,
                    error=str(e),
                    error_type=type(e).__name__,
                )

    async def stop(self) -> None:
        """Cancel the timer and wait for its task to finish."""
        self.token.cancel()
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error("Timer ended with error", timer=self.name, error=str(e),
                         error_type=type(e).__name__)
        logger.debug("Timer stopped", timer=self.name, ticks=self.ticks)


class RefreshScheduler:
    """
    Owns the fetch timer and the countdown timer of one view.

    The two timers are independent: the countdown is not synchronized with
    when a fetch actually completes.
    """

    def __init__(self, update_interval_seconds: float = 30.0, countdown_interval_seconds: float = 1.0):
        self.update_interval_seconds = update_interval_seconds
        self.countdown_interval_seconds = countdown_interval_seconds
        self.update_task: Optional[PeriodicTask] = None
        self.countdown_task: Optional[PeriodicTask] = None

    @property
    def running(self) -> bool:
        return any(task is not None and task.running for task in (self.update_task, self.countdown_task))

    async def start(self, on_update: TickCallback, on_countdown: TickCallback) -> None:
        """(Re)start both timers, cancelling any running ones first."""
        await self.stop()
        self.update_task = PeriodicTask("refresh.update", self.update_interval_seconds, on_update).start()
        self.countdown_task = PeriodicTask("refresh.countdown", self.countdown_interval_seconds, on_countdown).start()

    async def stop(self) -> None:
        """Cancel both timers."""
        for task in (self.update_task, self.countdown_task):
            if task is not None:
                await task.stop()
        self.update_task = None
        self.countdown_task = None
