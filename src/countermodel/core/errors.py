"""
CounterModel Errors

Exceptions for the abnormal conditions around the counter store.
Normal store operations never raise.
"""


class CounterModelError(Exception):
    """Base exception for CounterModel errors"""
    pass


class StoreClosedError(CounterModelError):
    """Raised when an action is invoked on a store that has been closed"""
    pass


class TimerUnavailableError(CounterModelError):
    """Raised when the auto-increment timer is started without a running event loop"""
    pass


class IntervalOutOfRangeError(CounterModelError):
    """Raised when a requested interval falls outside the settings slider range"""

    def __init__(self, seconds, minimum: int, maximum: int):
        self.seconds = seconds
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Interval must be between {minimum} and {maximum} seconds, got {seconds!r}"
        )
