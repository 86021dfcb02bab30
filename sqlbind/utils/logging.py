"""Logging helpers for sqlbind.

Every module logs through :func:`get_logger`, which places the logger under the
``sqlbind`` namespace and stamps each record with the caller's correlation id.
Render and renumbering records carry their statement details (dialect, marker
count, inlining) in ``extra_fields`` so :class:`StructuredFormatter` can emit
them as JSON keys.

The library installs no handlers on import. :func:`configure_logging` is for
applications that want sqlbind's records on their own stream.
"""

from __future__ import annotations

import json
import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, TextIO

if TYPE_CHECKING:
    from collections.abc import Iterator
    from logging import LogRecord

__all__ = (
    "CorrelationIDFilter",
    "StructuredFormatter",
    "configure_logging",
    "correlation_id_var",
    "correlation_scope",
    "get_correlation_id",
    "get_logger",
    "log_with_context",
    "set_correlation_id",
)

ROOT_LOGGER_NAME = "sqlbind"
HANDLER_NAME = "sqlbind.configured"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(correlation_id)s] %(message)s"

correlation_id_var: ContextVar[str | None] = ContextVar("sqlbind_correlation_id", default=None)


def set_correlation_id(correlation_id: str | None) -> None:
    """Tag records logged in the current context with ``correlation_id``, or clear it with None."""
    correlation_id_var.set(correlation_id)


def get_correlation_id() -> str | None:
    return correlation_id_var.get()


@contextmanager
def correlation_scope(correlation_id: str) -> Iterator[str]:
    """Tag every record logged inside the block, e.g. all renders for one request.

    The previous id is restored on exit.
    """
    token = correlation_id_var.set(correlation_id)
    try:
        yield correlation_id
    finally:
        correlation_id_var.reset(token)


class CorrelationIDFilter(logging.Filter):
    """Sets ``record.correlation_id`` (None when no id is active) so formats can reference it."""

    def filter(self, record: LogRecord) -> bool:
        record.correlation_id = get_correlation_id()  # type: ignore[attr-defined]
        return True


class StructuredFormatter(logging.Formatter):
    """One JSON object per record.

    ``extra_fields`` attached by :func:`log_with_context` become top-level keys.
    """

    def format(self, record: LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        correlation_id = getattr(record, "correlation_id", None) or get_correlation_id()
        if correlation_id:
            log_entry["correlation_id"] = correlation_id
        log_entry.update(getattr(record, "extra_fields", {}))
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger in the ``sqlbind`` namespace.

    Args:
        name: Dotted name below ``sqlbind``; the namespace prefix is added when
            missing. None returns the ``sqlbind`` logger itself.

    Returns:
        The logger, with a single :class:`CorrelationIDFilter` attached.
    """
    if name is None or name == ROOT_LOGGER_NAME:
        name = ROOT_LOGGER_NAME
    elif not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(name)
    if not any(isinstance(f, CorrelationIDFilter) for f in logger.filters):
        logger.addFilter(CorrelationIDFilter())
    return logger


def log_with_context(logger: logging.Logger, level: int, message: str, **extra_fields: Any) -> None:
    """Log ``message`` with ``extra_fields`` attached to the record.

    Nothing is built when ``level`` is disabled, which keeps the render path
    free of logging cost in production.
    """
    if not logger.isEnabledFor(level):
        return
    logger.log(level, message, extra={"extra_fields": extra_fields})


def configure_logging(
    level: int | str = logging.INFO, *, structured: bool = True, stream: TextIO | None = None
) -> logging.Handler:
    """Send sqlbind's records to ``stream`` (stderr by default).

    Calling it again replaces the handler installed by the previous call;
    handlers the application attached itself are left alone. Records stop
    propagating to the root logger so they are not written twice.

    Args:
        level: Level for the ``sqlbind`` logger, as a number or a name such as ``"DEBUG"``.
        structured: JSON lines via :class:`StructuredFormatter` when True, plain text otherwise.
        stream: Destination stream.

    Returns:
        The installed handler.
    """
    root_logger = get_logger()
    root_logger.setLevel(level.upper() if isinstance(level, str) else level)
    for handler in [h for h in root_logger.handlers if h.get_name() == HANDLER_NAME]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.addFilter(CorrelationIDFilter())
    handler.setFormatter(StructuredFormatter() if structured else logging.Formatter(TEXT_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False
    return handler
