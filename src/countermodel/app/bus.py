"""
Snapshot Bus

In-process publish/subscribe for state snapshots. Delivery is synchronous
and ordered: every subscriber sees every published snapshot, in publish
order, even when a subscriber publishes again from inside its callback.
"""

import logging
from collections import deque
from typing import Callable, Deque, Generic, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Handler = Callable[[T], None]


class SnapshotBus(Generic[T]):
    """
    Simple in-process bus for a single owner.

    Handlers are plain callables. A handler that raises is logged and the
    remaining handlers still receive the snapshot.
    """

    def __init__(self):
        """Initialize the bus."""
        self._subscribers: List[Handler] = []
        self._pending: Deque[T] = deque()
        self._delivering = False

    def subscribe(self, handler: Handler) -> None:
        """
        Subscribe a handler to receive all subsequent snapshots.

        Args:
            handler: Function that accepts a snapshot
        """
        self._subscribers.append(handler)

    def unsubscribe(self, handler: Handler) -> None:
        """
        Unsubscribe a handler from receiving snapshots.

        Args:
            handler: Handler function to remove
        """
        if handler in self._subscribers:
            self._subscribers.remove(handler)

    def publish(self, snapshot: T) -> None:
        """
        Publish a snapshot to all subscribers.

        Args:
            snapshot: The new state snapshot
        """
        self._pending.append(snapshot)
        if self._delivering:
            # The outer publish call drains the queue in order
            return

        self._delivering = True
        try:
            while self._pending:
                self._deliver(self._pending.popleft())
        finally:
            self._delivering = False

    def is_pending(self, snapshot: T) -> bool:
        """Whether `snapshot` is queued and not yet delivered to anyone."""
        return any(queued is snapshot for queued in self._pending)

    def _deliver(self, snapshot: T) -> None:
        for handler in list(self._subscribers):
            try:
                handler(snapshot)
            except Exception:
                logger.exception(f"Snapshot handler {handler!r} raised")

    def clear_subscribers(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    @property
    def subscriber_count(self) -> int:
        """Get the number of active subscribers."""
        return len(self._subscribers)
