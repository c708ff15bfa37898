"""
CounterModel Core Module

Domain layer: the counter snapshot, its signal references and the
repeating timer. No web framework dependencies.
"""

from .errors import (
    CounterModelError,
    StoreClosedError,
    TimerUnavailableError,
    IntervalOutOfRangeError,
)
from .signals import SignalDescriptor, SignalModel
from .state import CounterState, DEFAULT_INTERVAL_MS
from .timer import RepeatingTimer

__all__ = [
    "CounterModelError",
    "StoreClosedError",
    "TimerUnavailableError",
    "IntervalOutOfRangeError",
    "SignalDescriptor",
    "SignalModel",
    "CounterState",
    "DEFAULT_INTERVAL_MS",
    "RepeatingTimer",
]
