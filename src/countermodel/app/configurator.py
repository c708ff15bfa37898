"""
Application Configurator

Builds a FastHTML application bound to one explicitly owned CounterStore.
Handles initialization order: configuration, logging, store, routes, and
store teardown on shutdown.
"""

import logging
import logging.handlers
import secrets
import sys
from typing import Optional

from fasthtml.common import fast_app
from monsterui.all import Theme

from ..adapters.fasthtml import register_counter_routes
from ..ui import datastar_script
from .configuration import ApplicationConfig, LoggingConfig
from .store import CounterStore

logger = logging.getLogger(__name__)


def configure_logging(config: LoggingConfig) -> None:
    """Configure the root logger from a LoggingConfig."""
    level = getattr(logging, config.level.upper(), logging.INFO)
    formatter = logging.Formatter(config.format)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if config.file_path and not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in root_logger.handlers
    ):
        file_handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for handler in root_logger.handlers:
        handler.setLevel(level)


def create_app(
    store: Optional[CounterStore] = None,
    config: Optional[ApplicationConfig] = None,
    setup_logging: bool = True,
):
    """
    Configure a counter application.

    Args:
        store: Store the page is bound to; one is created from `config` if None
        config: Application configuration; development defaults if None
        setup_logging: Whether to configure the root logger

    Returns:
        The FastHTML application. The store is closed on shutdown.

    Example:
        ```python
        store = CounterStore()
        app = create_app(store)
        serve()
        ```
    """
    config = config or ApplicationConfig()
    config.validate()

    if setup_logging:
        configure_logging(config.logging)

    if store is None:
        store = CounterStore(config=config.counter)

    async def lifespan(app):
        logger.info(f"Counter app starting in {config.environment.value} mode")
        yield
        await store.aclose()

    app, rt = fast_app(
        pico=False,
        debug=config.web.debug,
        title=config.ui.title,
        secret_key=config.web.secret_key or secrets.token_hex(32),
        hdrs=(Theme.zinc.headers(), datastar_script),
        lifespan=lifespan,
    )

    register_counter_routes(rt, store, config)
    app.state.counter_store = store

    logger.debug(f"Counter routes registered for {store!r}")
    return app
