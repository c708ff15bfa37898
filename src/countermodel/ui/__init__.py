from .screens import (
    CounterPage,
    CounterScreen,
    SettingsDialog,
    StatusLine,
    datastar_script,
    slider_signals,
    SLIDER_SIGNAL,
)
from . import actions

__all__ = [
    "CounterPage",
    "CounterScreen",
    "SettingsDialog",
    "StatusLine",
    "datastar_script",
    "slider_signals",
    "SLIDER_SIGNAL",
    "actions",
]
