"""
Counter Screen Components

Server-rendered counter page. Values are bound to the `counter` Datastar
signals, so SSE signal patches from the store update the page in place.
"""

from datastar_py import attribute_generator as data
from fasthtml.common import *
from monsterui.all import *

from ..app.configuration import UIConfig
from ..core.state import CounterState
from . import actions

datastar_script = Script(src="https://cdn.jsdelivr.net/gh/starfederation/datastar@1.0.0-RC.6/bundles/datastar.js", type="module")

# Client-only signal holding the slider position while the dialog is open
SLIDER_SIGNAL = "slider_seconds"


def ds(*attrs) -> dict:
    """Merge datastar-py attributes into one attribute dict for an FT component."""
    merged = {}
    for attr in attrs:
        merged.update(attr)
    return merged


def slider_signals(state: CounterState) -> dict:
    """Counter signals plus the slider seeded from the current interval."""
    return {**state.signals, SLIDER_SIGNAL: state.interval_seconds}


def on_click(name: str, **kwargs):
    return data.on("click", actions.datastar_action(name, **kwargs))


def StatusLine():
    """Auto mode ON/OFF, highlighted while running."""
    running = CounterState.Sis_auto_incrementing
    return P(
        ds(data.class_({"text-green-600": running}),
           data.text(f"'Auto mode: ' + ({running} ? 'ON' : 'OFF')")),
        cls=TextPresets.muted_sm,
    )


def CounterScreen(state: CounterState, config: UIConfig):
    """Title, status, count and the action buttons."""
    return Card(
        DivCentered(
            H1(config.title, cls=TextT.extrabold),
            StatusLine(),
            Span(str(state.count), ds(data.text(CounterState.Scount)),
                 id="count", cls="text-7xl font-bold text-green-600"),
            DivCentered(
                Button("-1", ds(on_click(actions.DECREMENT)), cls=ButtonT.primary),
                Button("+1", ds(on_click(actions.INCREMENT)), cls=ButtonT.primary),
                cls="flex-row gap-4",
            ),
            DivCentered(
                Button("Reset", ds(on_click(actions.RESET)), cls=ButtonT.secondary),
                Button("Stop Auto" if state.is_auto_incrementing else "Start Auto",
                       ds(data.text(f"{CounterState.Sis_auto_incrementing} ? 'Stop Auto' : 'Start Auto'"),
                          on_click(actions.TOGGLE)),
                       cls=ButtonT.primary),
                cls="flex-row gap-4",
            ),
            Button("Settings", ds(on_click(actions.OPEN_SETTINGS)), cls=ButtonT.ghost),
            cls="space-y-6 p-6",
        ),
        id="counter-screen",
    )


def SettingsDialog(state: CounterState, config: UIConfig):
    """Interval slider; Save applies it and closes, Cancel just closes."""
    slider = f"${SLIDER_SIGNAL}"
    return Div(
        Card(
            H3("Settings"),
            P(ds(data.text(f"'interval: ' + {slider} + ' seconds'")), cls=TextPresets.muted_sm),
            Input(ds(data.bind(SLIDER_SIGNAL)), type="range", name=SLIDER_SIGNAL,
                  min=config.slider_min_seconds, max=config.slider_max_seconds, step=1,
                  value=state.interval_seconds),
            DivCentered(
                Button("Cancel", ds(on_click(actions.CLOSE_SETTINGS)), cls=ButtonT.secondary),
                Button("Save",
                       ds(on_click(actions.SAVE_SETTINGS, expression=f"'?seconds=' + {slider}")),
                       cls=ButtonT.primary),
                cls="flex-row gap-4",
            ),
            cls="p-6",
        ),
        ds(data.show(CounterState.Sshow_settings)),
        id="settings-dialog",
        role="dialog",
    )


def CounterPage(state: CounterState, config: UIConfig):
    """Full page body: signals, the live stream hook, screen and dialog."""
    return Main(
        Div(ds(data.signals(slider_signals(state)),
               data.init(actions.datastar_action(actions.LIVE, method="get"))),
            id=CounterState.signal_namespace),
        CounterScreen(state, config),
        SettingsDialog(state, config),
        cls="container mx-auto p-8 max-w-md",
    )
