"""Logging helpers for SQLStencil.

Builders log through children of the ``sqlstencil`` logger and attach the
statement they were working on (kind, table, dialect and, on rejection, the
invalid field names) to each record as ``extra_fields``. Nothing is configured
on import; applications opt in with :func:`configure_logging`.
"""

import logging
from typing import Any, Optional, Union

from sqlstencil._serialization import encode_json

__all__ = (
    "LOGGER_NAME",
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
    "statement_context",
)

LOGGER_NAME = "sqlstencil"

_installed_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger or one of its children.

    Args:
        name: Child name such as ``"builder"``. Names already under ``sqlstencil`` are used as given.

    Returns:
        The logger.
    """
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def statement_context(kind: Any, table: Optional[str], dialect: str, **fields: Any) -> "dict[str, Any]":
    """Build the ``extra`` argument for a log call about one statement."""
    return {"extra_fields": {"kind": str(kind), "table": table, "dialect": dialect, **fields}}


class StructuredFormatter(logging.Formatter):
    """Render each record as a single JSON object.

    Statement context is nested under ``"statement"`` so it never shadows the
    record's own keys.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = getattr(record, "extra_fields", None)
        if context:
            entry["statement"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return encode_json(entry)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    handler: Optional[logging.Handler] = None,
    structured: bool = True,
) -> logging.Logger:
    """Send SQLStencil log records to ``handler``.

    Calling this again swaps out the handler installed by the previous call;
    handlers added by other code are left alone.

    Args:
        level: Level for the ``sqlstencil`` logger, as a number or a name such as ``"debug"``.
        handler: Destination for records. Defaults to a stream handler on stderr.
        structured: Use :class:`StructuredFormatter` when the handler has no formatter of its own.

    Returns:
        The configured ``sqlstencil`` logger.
    """
    global _installed_handler  # noqa: PLW0603

    logger = logging.getLogger(LOGGER_NAME)
    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)

    if handler is None:
        handler = logging.StreamHandler()
    if handler.formatter is None:
        handler.setFormatter(
            StructuredFormatter() if structured else logging.Formatter("%(levelname)s %(name)s: %(message)s")
        )
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    _installed_handler = handler

    logger.debug("SQLStencil logging configured")
    return logger
