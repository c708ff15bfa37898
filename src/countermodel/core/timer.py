"""
CounterModel Timer

A cancellable repeating asyncio task that waits for an interval and then
fires a callback, indefinitely, until stopped.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, Set

from .errors import TimerUnavailableError

logger = logging.getLogger(__name__)

SleepFunction = Callable[[float], Awaitable[None]]


class RepeatingTimer:
    """
    Single repeating background task.

    The interval is read from `interval` before every wait, so a change takes
    effect on the next cycle. Every start and stop bumps a generation token;
    a task that wakes up holding a stale token exits without firing.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        interval: Callable[[], float],
        sleep: SleepFunction = asyncio.sleep,
        name: str = "repeating-timer",
    ):
        """
        Initialize the timer.

        Args:
            callback: Function to call after each wait
            interval: Returns the next wait in seconds
            sleep: Coroutine function used for waiting (injectable for tests)
            name: Name given to the asyncio task
        """
        self._callback = callback
        self._interval = interval
        self._sleep = sleep
        self._name = name
        self._task: Optional[asyncio.Task] = None
        self._generation = 0
        self._retired: Set[asyncio.Task] = set()

    @property
    def running(self) -> bool:
        """Whether a timer task is currently alive."""
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the timer, cancelling any task that is already running."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise TimerUnavailableError(
                f"{self._name}: cannot start without a running event loop"
            ) from e

        self.stop()
        self._generation += 1
        self._task = loop.create_task(self._run(self._generation), name=self._name)
        logger.debug(f"{self._name}: started (generation {self._generation})")

    def stop(self) -> None:
        """Stop the timer task if one is running."""
        self._generation += 1
        if self._task:
            task = self._task
            self._task = None
            if not task.done():
                task.cancel()
                self._retired.add(task)
                task.add_done_callback(self._retired.discard)
            logger.debug(f"{self._name}: stopped")

    def restart(self) -> None:
        """Discard the current wait and start a fresh cycle."""
        self.start()

    async def wait_stopped(self) -> None:
        """Wait until every cancelled task has actually finished."""
        if self._retired:
            await asyncio.gather(*list(self._retired), return_exceptions=True)

    async def _run(self, generation: int) -> None:
        """Internal loop that fires the callback after each interval."""
        while generation == self._generation:
            await self._sleep(self._interval())
            if generation != self._generation:
                break
            try:
                self._callback()
            except Exception:
                logger.exception(f"{self._name}: error in timer callback")
