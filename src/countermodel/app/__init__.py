"""
Application Service Layer

- store: CounterStore, the state holder the presentation layer talks to
- bus: in-process snapshot publish/subscribe
- configuration: dataclass-based application configuration

The web configurator lives in `countermodel.app.configurator` and is
imported on demand since it pulls in the web stack.
"""

from .bus import SnapshotBus
from .configuration import (
    ApplicationConfig,
    CounterConfig,
    Environment,
    LoggingConfig,
    UIConfig,
    WebConfig,
)
from .store import CounterStore

__all__ = [
    "SnapshotBus",
    "ApplicationConfig",
    "CounterConfig",
    "Environment",
    "LoggingConfig",
    "UIConfig",
    "WebConfig",
    "CounterStore",
]
