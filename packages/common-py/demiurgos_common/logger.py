"""
demiurgos Logger

Thin structured wrapper around the standard ``logging`` module.

Log calls accept keyword context which is appended to the message
(``key=value`` pairs) or emitted as fields when JSON output is enabled:

    logger = get_logger(__name__)
    logger.info("Installing generator", name="rest-api", version="1.0.0")

``configure_logging`` is called once by the CLI; library code only ever calls
``get_logger``.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .constants import DEFAULT_LOG_LEVEL, LOG_LEVELS

_ROOT_LOGGER_NAME = "demiurgos"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class JsonFormatter(logging.Formatter):
    """Render records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = getattr(record, "context", None)
        if context:
            payload.update(context)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class TextFormatter(logging.Formatter):
    """Human readable format with trailing key=value context."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)-7s %(name)s: %(message)s", "%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = getattr(record, "context", None)
        if context:
            line += " " + " ".join(f"{k}={v}" for k, v in context.items())
        return line


class DemiurgosLogger:
    """
    Logger facade accepting structured keyword context.

    Examples:
        >>> logger = DemiurgosLogger("demiurgos.store")
        >>> logger.debug("Copying file", source="a.txt")
    """

    def __init__(self, name: str):
        if name != _ROOT_LOGGER_NAME and not name.startswith(_ROOT_LOGGER_NAME + "."):
            name = f"{_ROOT_LOGGER_NAME}.{name}"
        self.name = name
        self._logger = logging.getLogger(name)

    def _log(self, level: int, message: str, exc_info: Any = None, **context: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(level, message, exc_info=exc_info, extra={"context": context})

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, **context)

    def error(self, message: str, exc_info: Any = None, **context: Any) -> None:
        self._log(logging.ERROR, message, exc_info=exc_info, **context)

    def exception(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, exc_info=True, **context)


def get_logger(name: str) -> DemiurgosLogger:
    """Get a demiurgos logger for a module or component name."""
    return DemiurgosLogger(name)


def configure_logging(
    level: str = DEFAULT_LOG_LEVEL,
    json_format: bool = False,
    stream: Optional[Any] = None,
) -> None:
    """
    Configure the ``demiurgos`` logger hierarchy.

    Args:
        level: One of LOG_LEVELS
        json_format: Emit JSON lines instead of text
        stream: Output stream (defaults to stderr)

    Raises:
        ValueError: If the level is not recognised
    """
    normalized = level.lower()
    if normalized not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: '{level}'. Valid levels: {', '.join(LOG_LEVELS)}")

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter() if json_format else TextFormatter())
    root.addHandler(handler)
    root.setLevel(_LEVELS[normalized])
    root.propagate = False


__all__ = [
    "DemiurgosLogger",
    "JsonFormatter",
    "TextFormatter",
    "get_logger",
    "configure_logging",
]
