"""
Object utilities for cache keys and JSON serialization.

Cache keys are built from JSON with sorted keys so the same request
parameters hash identically across processes.
"""

import hashlib
import json
from dataclasses import asdict, is_dataclass
from datetime import date
from typing import Any


def cache_key(*parts: Any) -> str:
    """
    Create a stable hex digest for the given parts.

    Args:
        *parts: JSON-serializable values (dicts, lists, strings, dataclasses).

    Returns:
        SHA-256 hex digest of the canonical JSON form.
    """
    json_str = json.dumps(list(parts), sort_keys=True, default=_default_serializer)
    return hashlib.sha256(json_str.encode("utf-8")).hexdigest()


def to_json(obj: Any, indent: int | None = None) -> str:
    """
    Serialize an object to JSON string.

    Dataclasses are converted to dictionaries and dates to ISO strings.

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
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, date):
        return obj.isoformat()
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    return str(obj)
