"""
FastHTML Web Adapter

Registers the counter page and one route per store action on a FastHTML
router. Action routes answer with a Datastar `patch-signals` event carrying
the new snapshot; `/counter/live` streams every snapshot as it happens.
"""

import logging
from typing import AsyncIterator, Callable, Optional

from datastar_py import SSE_HEADERS
from datastar_py import ServerSentEventGenerator as SSE
from fasthtml.common import Title
from starlette.requests import Request
from starlette.responses import PlainTextResponse, StreamingResponse

from ..app.configuration import ApplicationConfig
from ..app.store import CounterStore
from ..core.errors import IntervalOutOfRangeError, StoreClosedError
from ..core.state import CounterState
from ..ui import CounterPage, slider_signals
from ..ui import actions

logger = logging.getLogger(__name__)


def parse_interval_seconds(raw, minimum: int, maximum: int) -> int:
    """Validate a slider value from the query string."""
    try:
        seconds = int(raw)
    except (TypeError, ValueError):
        raise IntervalOutOfRangeError(raw, minimum, maximum)
    if not minimum <= seconds <= maximum:
        raise IntervalOutOfRangeError(seconds, minimum, maximum)
    return seconds


def signals_response(store: CounterStore, signals: Optional[Callable[[CounterState], dict]] = None) -> StreamingResponse:
    """Single-event SSE response with the store's current snapshot."""
    payload = signals(store.state) if signals else store.state.signals

    async def stream():
        yield SSE.patch_signals(payload)

    return StreamingResponse(stream(), media_type="text/event-stream", headers=SSE_HEADERS)


async def snapshot_events(store: CounterStore) -> AsyncIterator[str]:
    """SSE events for the current snapshot and every later one."""
    async for snapshot in store.observe():
        yield SSE.patch_signals(snapshot.signals)


def _action_handler(store: CounterStore, name: str, action: Callable[[Request], None], signals=None):
    async def handler(request: Request):
        try:
            action(request)
        except IntervalOutOfRangeError as e:
            logger.info(f"Rejected {name}: {e}")
            return PlainTextResponse(str(e), status_code=400)
        except StoreClosedError as e:
            return PlainTextResponse(str(e), status_code=503)
        logger.debug(f"{name} -> {store.state!r}")
        return signals_response(store, signals)

    handler.__name__ = f"counter_{name.replace('/', '_')}"
    return handler


def register_counter_routes(rt, store: CounterStore, config: ApplicationConfig) -> None:
    """
    Register the counter page and action routes.

    Args:
        rt: FastHTML router (`app.route`)
        store: Store the routes act on
        config: Application configuration (title and slider range)
    """
    ui = config.ui

    def read_seconds(request: Request) -> int:
        return parse_interval_seconds(
            request.query_params.get("seconds"), ui.slider_min_seconds, ui.slider_max_seconds
        )

    def save_settings(request: Request) -> None:
        seconds = read_seconds(request)
        store.update_interval(seconds)
        store.close_settings()

    routes = {
        actions.INCREMENT: lambda request: store.increment(),
        actions.DECREMENT: lambda request: store.decrement(),
        actions.RESET: lambda request: store.reset(),
        actions.TOGGLE: lambda request: store.toggle_auto_increment(),
        actions.OPEN_SETTINGS: lambda request: store.open_settings(),
        actions.CLOSE_SETTINGS: lambda request: store.close_settings(),
        actions.INTERVAL: lambda request: store.update_interval(read_seconds(request)),
        actions.SAVE_SETTINGS: save_settings,
    }
    # Opening the dialog re-seeds the slider from the current interval
    patches = {actions.OPEN_SETTINGS: slider_signals}
    for name, action in routes.items():
        handler = _action_handler(store, name, action, patches.get(name))
        rt(actions.action_path(name), methods=["post"])(handler)

    async def counter_live(request: Request):
        if store.closed:
            return PlainTextResponse("Counter store is closed", status_code=503)
        return StreamingResponse(snapshot_events(store), media_type="text/event-stream", headers=SSE_HEADERS)

    rt(actions.action_path(actions.LIVE), methods=["get"])(counter_live)

    def counter_page(request: Request):
        return Title(ui.title), CounterPage(store.state, ui)

    rt("/", methods=["get"])(counter_page)
