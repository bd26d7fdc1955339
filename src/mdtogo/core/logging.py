"""Logging helpers for the mdtogo command."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

__all__ = [
    "JsonLogFormatter",
    "configure_logger",
]


# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JsonLogFormatter(logging.Formatter):
    """Emit log records as one JSON object per line.

    Values passed through ``extra`` are nested under an ``extra`` key.
    """

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extras = {
            key: _jsonable(value)
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES
        }
        if extras:
            payload["extra"] = extras
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def configure_logger(
    name: str,
    *,
    level: str = "INFO",
    verbose: bool = False,
    log_file: Optional[Path] = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """Configure the namespaced logger used by a generation run.

    ``log_file`` attaches a rotating JSON handler at ``level``; ``verbose``
    mirrors every record to stderr. Calling again replaces the handlers
    installed by a previous call instead of stacking new ones.
    """

    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(logging.DEBUG)

    _remove_managed_handlers(logger)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(_coerce_level(level))
        file_handler.setFormatter(JsonLogFormatter())
        _attach(logger, file_handler)

    if verbose:
        console = logging.StreamHandler(stream=sys.stderr)
        console.setLevel(logging.DEBUG)
        console.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        _attach(logger, console)

    if log_file is None and not verbose:
        _attach(logger, logging.NullHandler())

    return logger


def _attach(logger: logging.Logger, handler: logging.Handler) -> None:
    handler._mdtogo_managed = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


def _remove_managed_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, "_mdtogo_managed", False):
            logger.removeHandler(handler)
            handler.close()


def _coerce_level(level: str) -> int:
    numeric = logging.getLevelName(level.upper())
    if isinstance(numeric, int):
        return numeric
    return logging.INFO


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return str(value)
