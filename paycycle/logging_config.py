"""Structured JSON logging for paycycle.

Every record under the "paycycle" logger becomes one JSON line carrying the
event name, the fields passed through ``extra=`` and whichever of project_id
and batch_id are bound by LogContext.bind.
"""

from __future__ import annotations

import json
import logging
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, date, datetime
from decimal import Decimal
from enum import Enum
from typing import IO, Any

_ROOT = "paycycle"

_CONTEXT: dict[str, ContextVar[str | None]] = {
    "project_id": ContextVar("paycycle_project_id", default=None),
    "batch_id": ContextVar("paycycle_batch_id", default=None),
}

# attributes every LogRecord has; anything else came in through extra=
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message", "taskName",
}


class LogContext:
    """Fields stamped on every record logged inside a bind() block."""

    @staticmethod
    def current() -> dict[str, str]:
        return {
            name: value for name, var in _CONTEXT.items()
            if (value := var.get()) is not None
        }

    @staticmethod
    @contextmanager
    def bind(**fields: str | None) -> Iterator[None]:
        unknown = set(fields) - set(_CONTEXT)
        if unknown:
            raise TypeError(f"unknown log context fields: {sorted(unknown)}")
        tokens = [
            (_CONTEXT[name], _CONTEXT[name].set(value))
            for name, value in fields.items() if value is not None
        ]
        try:
            yield
        finally:
            for var, token in reversed(tokens):
                var.reset(token)


def _json_default(obj: object) -> Any:
    if isinstance(obj, (date, datetime)):
        return obj.isoformat()
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, Enum):
        return obj.value
    return str(obj)


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **LogContext.current(),
        }
        for key, val in vars(record).items():
            if key not in _RECORD_ATTRS:
                payload.setdefault(key, val)
        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            payload["exc_type"] = type(exc).__name__
            payload["exc_message"] = str(exc)
            payload["traceback"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=_json_default)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{_ROOT}.{name}")


_configured = False
_lock = threading.Lock()


def configure_logging(
    *,
    level: int = logging.INFO,
    stream: IO[str] | None = None,
    handler: logging.Handler | None = None,
) -> None:
    """Attach one JSON handler to the paycycle logger. Later calls are no-ops."""
    global _configured
    with _lock:
        if _configured:
            return
        _configured = True
        if handler is None:
            handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        root = logging.getLogger(_ROOT)
        root.setLevel(level)
        root.propagate = False
        root.addHandler(handler)


def reset_logging() -> None:
    """Undo configure_logging. Tests only."""
    global _configured
    with _lock:
        _configured = False
        root = logging.getLogger(_ROOT)
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        root.propagate = True
