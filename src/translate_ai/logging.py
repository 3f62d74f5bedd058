import logging
import os
import sys

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "translate-ai"


class _TranslateAIHandler(logging.StreamHandler):
    """Marker type so repeated setup can recognise its own handler."""


def _build_handler() -> logging.Handler:
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s",
        rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
        static_fields={"service": SERVICE_NAME},
    )
    handler = _TranslateAIHandler(sys.stdout)
    handler.setFormatter(formatter)
    return handler


def _level_from_env() -> int:
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging() -> logging.Logger:
    """
    Sends the service's logs to stdout as one JSON object per line.

    Each record carries ``timestamp``, ``level``, ``logger``, ``message``, the
    ddtrace ``trace_id``/``span_id`` and a static ``service`` field. Uvicorn's
    loggers write through the same handler. The level comes from ``LOG_LEVEL``
    (default ``INFO``).

    Every module calls this at import time; the handler is installed once and
    reused afterwards.

    Returns:
        logging.Logger: The root logger.
    """
    level = _level_from_env()
    root_logger = logging.getLogger()

    handler = next(
        (h for h in root_logger.handlers if isinstance(h, _TranslateAIHandler)),
        None,
    )
    if handler is None:
        handler = _build_handler()
        root_logger.handlers = [handler]
    root_logger.setLevel(level)

    for logger_name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        server_logger = logging.getLogger(logger_name)
        server_logger.setLevel(level)
        server_logger.handlers = [handler]
        server_logger.propagate = False

    return root_logger
