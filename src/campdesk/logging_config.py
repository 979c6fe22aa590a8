"""Logging setup - JSON lines in deployed environments, plain text otherwise."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from campdesk.config import Settings

PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(filename)s %(lineno)d"


def configure_logging(settings: Settings) -> None:
    """Configure the root logger once from settings."""
    handler = logging.StreamHandler(sys.stderr)
    if settings.log_format == "json":
        handler.setFormatter(JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    root.setLevel(getattr(logging, level, logging.INFO))

    # psycopg_pool logs every connection at INFO
    logging.getLogger("psycopg.pool").setLevel(logging.WARNING)
