"""Unit tests for logging setup."""

import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from campdesk.config import Settings
from campdesk.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_format() -> None:
    configure_logging(Settings(log_format="json", log_level="warning"))

    root = logging.getLogger()
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
    assert root.level == logging.WARNING


def test_plain_format_with_debug() -> None:
    configure_logging(Settings(log_format="plain", debug=True))

    root = logging.getLogger()
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)
    assert root.level == logging.DEBUG
    assert logging.getLogger("psycopg.pool").level == logging.WARNING
