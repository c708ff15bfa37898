"""
Counter State

Immutable snapshot of everything the counter screen renders.
A new snapshot replaces the old one on every change.
"""

from typing import ClassVar

from pydantic import ConfigDict, Field

from .signals import SignalModel

DEFAULT_INTERVAL_MS = 3000


class CounterState(SignalModel):
    """Snapshot of the counter, the auto-increment flag and the settings dialog."""

    model_config = ConfigDict(frozen=True)

    signal_namespace: ClassVar[str] = "counter"

    count: int = 0
    is_auto_incrementing: bool = False
    auto_increment_interval_ms: int = Field(default=DEFAULT_INTERVAL_MS, gt=0)
    show_settings: bool = False

    @property
    def interval_seconds(self) -> int:
        """Interval as whole seconds, the unit the settings slider works in."""
        return self.auto_increment_interval_ms // 1000

    def evolve(self, **changes) -> "CounterState":
        """Return a copy with `changes` applied."""
        return self.model_copy(update=changes)
