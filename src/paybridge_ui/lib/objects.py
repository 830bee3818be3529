"""
Object utilities for hashing and JSON serialization.

Used to derive stable cache keys and to embed checkout option payloads in
the JavaScript snippets sent to the browser.
"""

import hashlib
import json
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


class HashResult:
    """Wrapper around a sha256 digest that provides hexdigest()."""

    def __init__(self, data: bytes) -> None:
        self._hash = hashlib.sha256(data)

    def hexdigest(self) -> str:
        """Return the hexadecimal digest of the hash."""
        return self._hash.hexdigest()


def hash(obj: Any) -> HashResult:
    """
    Create a stable hash of an object or list of objects.

    Objects are serialized to JSON with sorted keys before hashing to
    ensure consistent results across processes.

    Args:
        obj: Any JSON-serializable object or list of objects.

    Returns:
        HashResult instance with hexdigest() method.
    """
    json_str = json.dumps(obj, sort_keys=True, default=str)
    return HashResult(json_str.encode("utf-8"))


def to_json(obj: Any, indent: int | None = None) -> str:
    """
    Serialize an object to a JSON string.

    Handles dataclasses, enums, decimals and datetimes.

    Args:
        obj: Object to serialize.
        indent: Optional indentation for pretty printing.

    Returns:
        JSON string representation.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    return json.dumps(obj, default=_default_serializer, indent=indent)


def _default_serializer(obj: Any) -> Any:
    """Default serializer for types json does not handle natively."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Decimal):
        return float(obj)
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    return str(obj)
