# 📄 File: app/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up the logging system that records what happens in the billing service in a
# structured way, so every line written while serving a request can be traced back to it.

# 🧪 Purpose (Technical Summary):
# Implements structured logging with JSON formatting, request-scoped context (request ID)
# carried through a ContextVar, and one-time root logger configuration.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: app.main (startup), app.api.middleware (request correlation)

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Iterator, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from app.shared.config.settings import get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

SERVICE_NAME = 'subscription-billing-api'
TEXT_LOG_FORMAT = '%(timestamp)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'

# Global logging configuration
_logging_configured = False


class ContextFilter(logging.Filter):
    """
    Logging filter that stamps contextual information on every record.

    Adds the current request ID, service name, hostname and a UTC
    timestamp so both JSON and text formatters can render them.
    """

    def __init__(self, name: str = ''):
        super().__init__(name)
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get('') or '-'
        record.service = SERVICE_NAME
        record.hostname = self.hostname
        record.timestamp = datetime.now(timezone.utc).isoformat()
        return True


class JSONFormatter(JsonFormatter):
    """
    JSON formatter for structured logging.

    Outputs logs in JSON format with consistent structure for
    log aggregation and analysis tools.
    """

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = getattr(record, 'timestamp', None) or datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno
        request_id = getattr(record, 'request_id', '-')
        if request_id and request_id != '-':
            log_record['request_id'] = request_id


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == 'json':
        return JSONFormatter(
            '%(message)s',
            static_fields={'service': SERVICE_NAME},
        )
    return logging.Formatter(TEXT_LOG_FORMAT)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Setup application logging configuration.

    Configures the root logger once with a single stdout handler. Later
    calls are no-ops unless ``force`` is set.

    Args:
        log_level: Level name; defaults to ``LOG_LEVEL`` from settings
        log_format: ``json`` or ``text``; defaults to ``LOG_FORMAT`` from settings
        force: Reconfigure even if logging was already set up

    Returns:
        The ``startup`` logger
    """
    global _logging_configured

    if _logging_configured and not force:
        return logging.getLogger('startup')

    settings = get_settings()
    log_level = (log_level or settings.LOG_LEVEL).upper()
    log_format = (log_format or settings.LOG_FORMAT).lower()

    numeric_level = getattr(logging, log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.addFilter(ContextFilter())
    console_handler.setFormatter(_build_formatter(log_format))
    root_logger.addHandler(console_handler)

    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger('startup')


@contextmanager
def log_context(request_id: Optional[str] = None) -> Iterator[str]:
    """
    Context manager binding a request ID to every log record emitted inside it.

    Args:
        request_id: Request identifier; a new UUID is generated when omitted

    Yields:
        The request ID in effect
    """
    if not request_id:
        request_id = str(uuid4())

    token = request_id_var.set(request_id)
    try:
        yield request_id
    finally:
        request_id_var.reset(token)
