"""
Counter Store

Owns the counter snapshot, the auto-increment timer and the subscribers
that render it. The presentation layer holds a reference to one store and
calls its actions; it never mutates state directly.
"""

import asyncio
import logging
import math
from typing import AsyncIterator, Callable, Optional, Set

from ..core.errors import StoreClosedError
from ..core.state import CounterState
from ..core.timer import RepeatingTimer, SleepFunction
from .bus import SnapshotBus
from .configuration import CounterConfig

logger = logging.getLogger(__name__)

# Sentinel pushed to observer queues when the store closes
_CLOSED = object()


class CounterStore:
    """
    State holder for a single counter screen.

    Auto-increment states:
        Idle --toggle--> Running --toggle/reset--> Idle
        Running --update_interval--> Running (timer restarted)

    While Running exactly one timer task exists; while Idle there is none.
    Snapshots are published only when they differ from the previous one.
    """

    def __init__(
        self,
        initial: Optional[CounterState] = None,
        *,
        config: Optional[CounterConfig] = None,
        sleep: SleepFunction = asyncio.sleep,
    ):
        """
        Initialize the store.

        Args:
            initial: Starting snapshot; auto-increment always starts off
            config: Counter defaults (interval) used when `initial` is None
            sleep: Coroutine function the timer waits with
        """
        self.config = config or CounterConfig()
        if initial is None:
            initial = CounterState(auto_increment_interval_ms=self.config.default_interval_ms)
        self._state = initial.evolve(is_auto_incrementing=False)
        self._bus: SnapshotBus[CounterState] = SnapshotBus()
        self._observers: Set[asyncio.Queue] = set()
        self._timer = RepeatingTimer(
            self._auto_increment,
            lambda: self._state.auto_increment_interval_ms / 1000,
            sleep=sleep,
            name="auto-increment",
        )
        self._closed = False

    @property
    def state(self) -> CounterState:
        """Current snapshot."""
        return self._state

    @property
    def timer_active(self) -> bool:
        """Whether an auto-increment task is currently alive."""
        return self._timer.running

    @property
    def closed(self) -> bool:
        return self._closed

    # --- Actions ---

    def increment(self) -> None:
        self._ensure_open()
        self._update(count=self._state.count + 1)

    def decrement(self) -> None:
        self._ensure_open()
        self._update(count=self._state.count - 1)

    def reset(self) -> None:
        """Stop auto-increment and zero the count."""
        self._ensure_open()
        if self._state.is_auto_incrementing:
            self._timer.stop()
        self._update(count=0, is_auto_incrementing=False)

    def toggle_auto_increment(self) -> None:
        """Start the timer when Idle, stop it when Running."""
        self._ensure_open()
        if self._state.is_auto_incrementing:
            self._timer.stop()
            self._update(is_auto_incrementing=False)
        else:
            # Start first so a failed start leaves the flag untouched
            self._timer.start()
            self._update(is_auto_incrementing=True)

    def open_settings(self) -> None:
        self._ensure_open()
        self._update(show_settings=True)

    def close_settings(self) -> None:
        self._ensure_open()
        self._update(show_settings=False)

    def update_interval(self, seconds) -> None:
        """
        Set the auto-increment interval.

        Non-positive values are ignored. A running timer is restarted so the
        new interval applies from now; the elapsed part of the current wait
        is discarded.
        """
        self._ensure_open()
        interval = seconds * 1000
        # NaN fails the comparison; infinity cannot become a millisecond count
        if not (0 < interval < math.inf) or int(interval) <= 0:
            logger.debug(f"Ignoring invalid interval: {seconds!r}s")
            return

        self._update(auto_increment_interval_ms=int(interval))
        if self._state.is_auto_incrementing:
            self._timer.restart()

    # --- Observation ---

    def subscribe(self, callback: Callable[[CounterState], None]) -> Callable[[], None]:
        """
        Receive the current snapshot now and every later change.

        Returns:
            Function that removes the subscription
        """
        self._ensure_open()
        self._bus.subscribe(callback)
        # A snapshot still queued on the bus reaches the new callback when it drains
        if not self._bus.is_pending(self._state):
            callback(self._state)

        def unsubscribe() -> None:
            self._bus.unsubscribe(callback)

        return unsubscribe

    async def observe(self) -> AsyncIterator[CounterState]:
        """Yield the current snapshot, then each change, until the store closes."""
        queue: asyncio.Queue = asyncio.Queue()
        unsubscribe = self.subscribe(queue.put_nowait)
        self._observers.add(queue)
        try:
            while True:
                snapshot = await queue.get()
                if snapshot is _CLOSED:
                    return
                yield snapshot
        finally:
            unsubscribe()
            self._observers.discard(queue)

    # --- Lifecycle ---

    def close(self) -> None:
        """Cancel the timer and release all subscribers."""
        if self._closed:
            return
        self._closed = True
        self._timer.stop()
        for queue in list(self._observers):
            queue.put_nowait(_CLOSED)
        self._bus.clear_subscribers()
        logger.info(f"Counter store closed at count {self._state.count}")

    async def aclose(self) -> None:
        """Close the store and wait for the timer task to finish."""
        self.close()
        await self._timer.wait_stopped()

    async def __aenter__(self) -> "CounterStore":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    # --- Internals ---

    def _ensure_open(self) -> None:
        if self._closed:
            raise StoreClosedError("Counter store is closed")

    def _auto_increment(self) -> None:
        self.increment()
        logger.debug(f"Auto-incremented to {self._state.count}")

    def _update(self, **changes) -> None:
        new_state = self._state.evolve(**changes)
        if new_state == self._state:
            return
        self._state = new_state
        self._bus.publish(new_state)

    def __repr__(self) -> str:
        return f"CounterStore({self._state!r}, closed={self._closed})"
