import logging
import sys
from pathlib import Path

import pytest

from exfs.infrastructure.monitoring.logger_setup import DEFAULT_LOG_LEVEL, level_from_name, setup_logging


def test_defaults_to_warning_on_stderr(root_logger: logging.Logger):
    setup_logging()

    assert root_logger.level == logging.WARNING
    assert len(root_logger.handlers) == 1
    handler = root_logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr
    assert handler.level == logging.WARNING


def test_replaces_existing_handlers(root_logger: logging.Logger):
    stale = logging.NullHandler()
    root_logger.addHandler(stale)

    setup_logging(log_level=logging.DEBUG)

    assert stale not in root_logger.handlers
    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1


def test_file_handler_writes_formatted_records(root_logger: logging.Logger, tmp_path: Path):
    log_file = tmp_path / "exfs.log"

    setup_logging(log_level=logging.INFO, log_format="%(levelname)s:%(message)s", log_file=str(log_file))
    logging.getLogger("exfs.test").info("scratch file created")
    for handler in root_logger.handlers:
        handler.flush()

    assert len(root_logger.handlers) == 2
    assert "INFO:scratch file created" in log_file.read_text(encoding="utf-8")


def test_unwritable_log_file_keeps_console_logging(root_logger: logging.Logger, tmp_path: Path):
    setup_logging(log_file=str(tmp_path / "missing" / "exfs.log"))

    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], logging.StreamHandler)


@pytest.mark.parametrize("name, expected", [
    ("debug", logging.DEBUG),
    ("INFO", logging.INFO),
    ("Error", logging.ERROR),
    ("critical", logging.CRITICAL),
])
def test_level_from_name(name, expected):
    assert level_from_name(name) == expected


@pytest.mark.parametrize("name", [None, "", "loud", "Level 42"])
def test_level_from_name_falls_back_to_default(name):
    assert level_from_name(name) == DEFAULT_LOG_LEVEL
    assert level_from_name(name, default=logging.INFO) == logging.INFO
