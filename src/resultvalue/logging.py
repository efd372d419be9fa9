"""Logging setup for resultvalue.

All loggers live under the ``resultvalue`` namespace. The library never
configures handlers on import; call ``configure_logging`` once at startup
to see its debug output.

Example:
    >>> from resultvalue.logging import configure_logging
    >>> configure_logging(level="DEBUG", format="json")
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

import orjson

from .settings import get_settings

ROOT_LOGGER = "resultvalue"

# Attributes every LogRecord has; anything else was passed via `extra=`
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


def get_logger(name: str) -> logging.Logger:
    """Logger under the package namespace, e.g. get_logger("interop") -> resultvalue.interop."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


class JsonFormatter(logging.Formatter):
    """JSON Lines output for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
            **{k: v for k, v in vars(record).items() if k not in _RESERVED},
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(entry, option=orjson.OPT_NON_STR_KEYS, default=repr).decode()


_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_LEVELS = {name: getattr(logging, name) for name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")}


def configure_logging(
    level: str | None = None,
    format: str | None = None,  # noqa: A002 - shadows builtin but matches stdlib
    *,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Install one handler on the resultvalue logger. Defaults come from settings.

    Without an explicit level, RESULTVALUE_DEBUG=true selects DEBUG, otherwise
    the configured log level is used. Calling again replaces the handler
    installed by the previous call.
    """
    settings = get_settings()
    level = (level or ("DEBUG" if settings.debug else settings.logging.level)).upper()
    format = format or settings.logging.format
    if level not in _LEVELS:
        raise ValueError(f"Unknown level: {level}. Use one of {', '.join(_LEVELS)}")
    match format:
        case "text": formatter: logging.Formatter = logging.Formatter(_TEXT_FORMAT)
        case "json": formatter = JsonFormatter()
        case _: raise ValueError(f"Unknown format: {format}. Use 'text' or 'json'")

    root = logging.getLogger(ROOT_LOGGER)
    for old in [h for h in root.handlers if getattr(h, "_resultvalue", False)]:
        root.removeHandler(old)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    handler._resultvalue = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(_LEVELS[level])
    return handler
