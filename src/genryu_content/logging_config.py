# -*- coding: utf-8 -*-
"""
Structured JSON logging configuration.

Every record carries the request ID and content locale of the request being
served ("-" outside a request), so CMS fetch failures can be traced back to
the page and language that triggered them.
"""
import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from .config import settings
from .middleware import get_request_id, get_request_locale

# Library loggers kept at WARNING: httpx logs every CMS request at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "MARKDOWN")


class RequestContextFilter(logging.Filter):
    """Add request_id and locale to log records."""

    def filter(self, record):
        record.request_id = get_request_id() or "-"
        record.locale = get_request_locale() or "-"
        return True


class ContentJsonFormatter(JsonFormatter):
    """JSON formatter with level, logger and request context fields."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["request_id"] = getattr(record, "request_id", "-")
        log_record["locale"] = getattr(record, "locale", "-")


def setup_logging(level: str | None = None):
    """Configure structured JSON logging on the root logger."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level or settings.LOG_LEVEL))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        ContentJsonFormatter(
            fmt="%(timestamp)s %(level)s %(name)s %(request_id)s %(locale)s %(message)s",
            rename_fields={"timestamp": "@timestamp", "levelname": "level"},
        )
    )
    handler.addFilter(RequestContextFilter())
    root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger
