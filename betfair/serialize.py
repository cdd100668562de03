"""Wire (JSON) serialization for request and response dataclasses."""

from __future__ import annotations

from dataclasses import field, fields, is_dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

WIRE_KEY = "wire"


def wire(name: str, **kwargs: Any) -> Any:
    """Declare a dataclass field together with its JSON key."""
    return field(metadata={WIRE_KEY: name}, **kwargs)


def is_empty(value: Any) -> bool:
    """True for values omitted from the wire: None, "" and empty collections.

    ``False`` and ``0`` are real values and are kept. Nested objects are kept
    even when all of their own fields are empty (they serialize as ``{}``).
    """
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)) and not isinstance(value, Enum):
        return len(value) == 0
    return False


def to_wire(obj: Any) -> Any:
    """Recursively convert dataclasses to JSON-ready dicts keyed by wire names.

    Handles:
    - Enum members (to their literal)
    - datetime (to the API's millisecond UTC format)
    - Lists, tuples and dicts
    - Dataclasses, dropping empty fields
    """
    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, datetime):
        return format_timestamp(obj)

    if isinstance(obj, (list, tuple)):
        return [to_wire(item) for item in obj]

    if isinstance(obj, dict):
        return {str(k): to_wire(v) for k, v in obj.items()}

    if is_dataclass(obj) and not isinstance(obj, type):
        out: dict[str, Any] = {}
        for f in fields(obj):
            value = getattr(obj, f.name)
            if is_empty(value):
                continue
            out[f.metadata.get(WIRE_KEY, f.name)] = to_wire(value)
        return out

    return obj


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an API timestamp such as ``2014-07-08T15:00:00.000Z``."""
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def format_timestamp(value: datetime) -> str:
    """Format a datetime the way the API does (UTC, millisecond precision)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}Z"
