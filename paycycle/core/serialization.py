"""Canonical serialization and content hashing.

canonical_bytes(obj) -> Result[bytes, str]: deterministic JSON bytes.
content_hash(obj) -> Result[str, str]: SHA-256 hex of canonical bytes.
"""

from __future__ import annotations

import dataclasses
import hashlib
import json
from datetime import UTC, date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from paycycle.core.result import Err, Ok
from paycycle.core.types import UtcDatetime


def _to_serializable(obj: object) -> Any:  # noqa: PLR0911
    """Recursively convert a domain object to a JSON-compatible value."""
    if obj is None:
        return None
    # bool before int (bool is subclass of int)
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, (int, str)):
        return obj
    if isinstance(obj, Decimal):
        # all zeros map to "0" so 0, 0.00 and -0 hash alike
        if obj == 0:
            return "0"
        return str(obj.normalize())
    if isinstance(obj, UtcDatetime):
        return obj.value.isoformat()
    if isinstance(obj, datetime):
        if obj.tzinfo is None:
            msg = "Cannot serialize naive datetime, use UtcDatetime"
            raise TypeError(msg)
        return obj.astimezone(UTC).isoformat()
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, (tuple, list)):
        return [_to_serializable(x) for x in obj]
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {str(k): _to_serializable(v) for k, v in sorted(obj.items())}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        result: dict[str, Any] = {"_type": type(obj).__name__}
        for name in sorted(f.name for f in dataclasses.fields(obj)):
            result[name] = _to_serializable(getattr(obj, name))
        return result
    msg = f"Cannot serialize {type(obj).__name__}"
    raise TypeError(msg)


def canonical_bytes(obj: object) -> Ok[bytes] | Err[str]:
    """Convert a domain value to canonical JSON bytes. Never raises."""
    try:
        serializable = _to_serializable(obj)
    except TypeError as e:
        return Err(f"Unsupported type in canonical serialization: {e}")
    return Ok(
        json.dumps(serializable, sort_keys=True, separators=(",", ":")).encode("utf-8")
    )


def content_hash(obj: object) -> Ok[str] | Err[str]:
    """SHA-256 hex digest of canonical_bytes(obj)."""
    match canonical_bytes(obj):
        case Err() as e:
            return e
        case Ok(b):
            return Ok(hashlib.sha256(b).hexdigest())
