import logging
import logging.handlers

import pytest

from countermodel import configure_logging
from countermodel.app.configuration import LoggingConfig


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    levels = {h: h.level for h in handlers}
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler, handler_level in levels.items():
        handler.setLevel(handler_level)
    root.setLevel(level)


def test_configure_logging_sets_level(root_logger):
    configure_logging(LoggingConfig(level="debug"))
    assert root_logger.level == logging.DEBUG


def test_configure_logging_adds_rotating_file_handler(root_logger, tmp_path):
    log_file = tmp_path / "counter.log"
    config = LoggingConfig(level="INFO", file_path=str(log_file), backup_count=2)

    configure_logging(config)
    configure_logging(config)

    file_handlers = [
        h for h in root_logger.handlers
        if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert file_handlers[0].backupCount == 2

    logging.getLogger("countermodel.test").info("hello counter")
    file_handlers[0].flush()
    assert "hello counter" in log_file.read_text()
