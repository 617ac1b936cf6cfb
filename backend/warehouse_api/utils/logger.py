"""Logging configuration."""

import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

from warehouse_api.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return jsonlogger.JsonFormatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    return logging.Formatter(LOG_FORMAT.replace(" ", " - "), datefmt=DATE_FORMAT)


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Send all records to stdout in the configured format.

    uvicorn's access log is silenced; LoggingMiddleware already logs every
    request with its timing and request id.
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(_build_formatter(settings.log_format))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    root.info("Logging configured: level=%s, format=%s", settings.log_level, settings.log_format)
