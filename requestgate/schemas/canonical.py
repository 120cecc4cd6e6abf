"""
Schemas & Canonicalization
File: canonical.py

Purpose: Deterministic, cycle-safe serialization used to derive request
fingerprints.

Outputs MUST be deterministic across runs and MUST NOT raise: values that
cannot be represented structurally degrade to a string form instead.
"""

import dataclasses
import json
import math
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel

# Canonical JSON separators - no whitespace
CANONICAL_JSON_SEPARATORS: tuple[str, str] = (",", ":")

# Substituted for any container revisited on the current traversal path
CIRCULAR_MARKER = "[Circular]"

# Substituted when a leaf cannot even be converted with str()
UNSERIALIZABLE_MARKER = "[Unserializable]"

# Largest integer a double can hold exactly; larger ones are emitted as text
MAX_SAFE_INTEGER = 2**53 - 1


def ensure_utc(dt: datetime) -> datetime:
    """
    Ensure a datetime is timezone-aware and in UTC.

    Naive datetimes are treated as UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_datetime_canonical(dt: datetime) -> str:
    """
    Format a datetime as ISO-8601 with Z suffix for UTC.

    Args:
        dt: A datetime object.

    Returns:
        ISO-8601 formatted string with Z suffix (e.g., "2026-01-27T21:35:00Z").
    """
    utc_dt = ensure_utc(dt)
    if utc_dt.microsecond == 0:
        return utc_dt.strftime("%Y-%m-%dT%H:%M:%SZ")
    return utc_dt.strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return UNSERIALIZABLE_MARKER


def canonicalize_value(value: Any, _on_path: Optional[set[int]] = None) -> Any:
    """
    Recursively canonicalize a value for deterministic JSON serialization.

    Containers (dicts, lists, tuples, sets, dataclass instances) are tracked
    by identity while they are being traversed. Re-entering one that is
    already on the current path yields ``CIRCULAR_MARKER``; the same object
    reached through two sibling branches is serialized in full both times.

    Args:
        value: Any Python value to canonicalize.

    Returns:
        A JSON-serializable canonical representation.
    """
    if _on_path is None:
        _on_path = set()

    if value is None or isinstance(value, str):
        return value

    if isinstance(value, bool):
        # Must check bool before int since bool is subclass of int
        return value

    if isinstance(value, int):
        if abs(value) > MAX_SAFE_INTEGER:
            return str(value)
        return value

    if isinstance(value, float):
        if not math.isfinite(value):
            return str(value)
        return value

    if isinstance(value, datetime):
        return format_datetime_canonical(value)

    if isinstance(value, Enum):
        return canonicalize_value(value.value, _on_path)

    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()

    if isinstance(value, BaseModel):
        try:
            dumped = value.model_dump(mode="python", by_alias=True, exclude_none=True)
        except Exception:
            return _safe_str(value)
        return canonicalize_value(dumped, _on_path)

    if not isinstance(value, (dict, list, tuple, set, frozenset)) and not (
        dataclasses.is_dataclass(value) and not isinstance(value, type)
    ):
        return _safe_str(value)

    marker = id(value)
    if marker in _on_path:
        return CIRCULAR_MARKER
    _on_path.add(marker)
    try:
        if isinstance(value, dict):
            # None values are dropped so {"a": 1} and {"a": 1, "b": None} match
            return {
                _safe_str(k): canonicalize_value(v, _on_path)
                for k, v in value.items()
                if v is not None
            }

        if isinstance(value, (list, tuple)):
            return [canonicalize_value(item, _on_path) for item in value]

        if isinstance(value, (set, frozenset)):
            items = [canonicalize_value(item, _on_path) for item in value]
            return sorted(items, key=_dumps)

        fields = {
            f.name: getattr(value, f.name, None)
            for f in dataclasses.fields(value)
        }
        return {
            k: canonicalize_value(v, _on_path)
            for k, v in fields.items()
            if v is not None
        }
    finally:
        _on_path.discard(marker)


def _dumps(canonicalized: Any) -> str:
    return json.dumps(
        canonicalized,
        sort_keys=True,
        separators=CANONICAL_JSON_SEPARATORS,
        ensure_ascii=False,
    )


def dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Returns:
        A canonical JSON string with:
            - Sorted keys
            - No extra whitespace
            - None-valued dict entries excluded
            - Integers beyond 2**53 - 1 as decimal strings
            - Datetimes as ISO-8601 with Z suffix
            - Enums as their values
            - Self-references replaced by "[Circular]"

    Example:
        >>> data = {"b": 2, "a": 1}
        >>> data["self"] = data
        >>> dumps_canonical(data)
        '{"a":1,"b":2,"self":"[Circular]"}'
    """
    try:
        return _dumps(canonicalize_value(obj))
    except Exception:
        return _safe_str(obj)


def canonical_equals(obj1: Any, obj2: Any) -> bool:
    """Check if two objects have identical canonical representations."""
    return dumps_canonical(obj1) == dumps_canonical(obj2)
