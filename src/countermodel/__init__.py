"""
CounterModel - Reactive counter with a timer-driven auto-increment mode

A single CounterStore owns the counter snapshot and the auto-increment timer.
A FastHTML + Datastar page renders it and calls its actions.
"""

from .core import (
    CounterState,
    CounterModelError,
    StoreClosedError,
    TimerUnavailableError,
    IntervalOutOfRangeError,
    RepeatingTimer,
)
from .app import (
    CounterStore,
    SnapshotBus,
    ApplicationConfig,
    CounterConfig,
    Environment,
)
from .app.configurator import create_app, configure_logging

__all__ = [
    # Core
    'CounterState',
    'RepeatingTimer',
    'CounterModelError',
    'StoreClosedError',
    'TimerUnavailableError',
    'IntervalOutOfRangeError',

    # Application service layer
    'CounterStore',
    'SnapshotBus',
    'ApplicationConfig',
    'CounterConfig',
    'Environment',

    # Web
    'create_app',
    'configure_logging',
]
