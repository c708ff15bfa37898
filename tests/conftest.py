"""
Pytest configuration and fixtures for CounterModel tests.
"""

import asyncio
import heapq
import itertools

import pytest


class FakeClock:
    """
    Simulated time for timer tests.

    `sleep` is handed to the store in place of `asyncio.sleep`; sleepers only
    wake when the test calls `advance`.
    """

    def __init__(self):
        self.now = 0.0
        self.requested = []
        self._sleepers = []
        self._seq = itertools.count()

    async def sleep(self, seconds: float) -> None:
        self.requested.append(seconds)
        future = asyncio.get_running_loop().create_future()
        heapq.heappush(self._sleepers, (self.now + seconds, next(self._seq), future))
        await future

    @property
    def pending(self) -> int:
        """Number of sleepers still waiting (cancelled ones excluded)."""
        return sum(1 for _, _, future in self._sleepers if not future.done())

    async def settle(self) -> None:
        """Let woken tasks run until they block again."""
        for _ in range(10):
            await asyncio.sleep(0)

    def release_next(self) -> None:
        """Wake the earliest live sleeper without running the loop."""
        while self._sleepers:
            deadline, _, future = heapq.heappop(self._sleepers)
            if not future.done():
                self.now = deadline
                future.set_result(None)
                return

    async def advance(self, seconds: float) -> None:
        target = self.now + seconds
        await self.settle()
        while self._sleepers and self._sleepers[0][0] <= target:
            deadline, _, future = heapq.heappop(self._sleepers)
            self.now = deadline
            if not future.done():
                future.set_result(None)
            await self.settle()
        self.now = target


@pytest.fixture
def clock():
    return FakeClock()
