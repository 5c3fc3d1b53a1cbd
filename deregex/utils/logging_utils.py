"""Opt-in logging setup for applications using deregex.

deregex only emits ``debug`` and ``TRACE`` records through module loggers
below ``deregex``; nothing is configured on import. Hosts that want to see
them call :func:`configure_logging`, which attaches a handler to the package
logger alone.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Mapping

from rich.logging import RichHandler

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

_LEVELS: Mapping[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE_LEVEL,
}

# LogRecord attributes that are not user-supplied ``extra`` fields.
_RESERVED = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Formatter that outputs JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "line": record.lineno,
        }

        # Fields passed through ``extra=`` land on the record itself
        for key, value in vars(record).items():
            if key not in _RESERVED:
                data[key] = value

        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)

        return json.dumps(data, default=str)


_PACKAGE_LOGGER = "deregex"


def _make_handler(log_format: str) -> logging.Handler:
    if log_format == "json":
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JSONFormatter())
        return handler
    if log_format == "human":
        return RichHandler(
            markup=False,
            show_path=False,
            keywords=["Pattern", "Field bound", "Deserialized"],
        )
    raise ValueError(f"Unknown log format {log_format!r}, expected 'human' or 'json'")


def configure_logging(
    level: str = "info",
    log_format: str = "human",
    *,
    propagate: bool = False,
) -> logging.Handler:
    """Route deregex's own records to stderr.

    Only the ``deregex`` logger is touched; the root logger and other
    libraries keep the host application's configuration. Calling this again
    replaces the handler installed by the previous call.

    Args:
        level: Logging level (trace, debug, info, warning, error, critical)
        log_format: "human" (Rich) or "json"
        propagate: Also pass records on to the root logger's handlers

    Returns:
        The installed handler
    """
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if getattr(handler, "_deregex_owned", False):
            package_logger.removeHandler(handler)
            handler.close()

    handler = _make_handler(log_format)
    handler._deregex_owned = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    package_logger.setLevel(_LEVELS.get(level.lower(), logging.INFO))
    package_logger.propagate = propagate
    return handler


__all__ = [
    "configure_logging",
    "TRACE_LEVEL",
    "JSONFormatter",
]
