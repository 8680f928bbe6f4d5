"""Fast JSON encoding for configs pushed across the host boundary."""

from typing import Any
import json

import msgspec
import orjson

from .errors import SerializationError


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent, etc.)

    Returns:
        JSON string

    Raises:
        SerializationError: If no encoder accepts the object
    """
    indent = kwargs.get("indent", 0)

    # orjson for compact output (fastest)
    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except TypeError:
            # Falls through for integers outside 64-bit range and the like
            pass

    # msgspec as second compact encoder
    if indent == 0:
        try:
            return msgspec.json.Encoder().encode(obj).decode("utf-8")
        except (TypeError, ValueError):
            pass

    # stdlib for pretty-printed output or as last resort
    try:
        return json.dumps(obj, indent=indent if indent > 0 else None)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Value is not JSON serializable: {e}", e) from e


def loads(data: str | bytes) -> Any:
    """Decode JSON produced by safe_json_dumps."""
    try:
        return orjson.loads(data)
    except orjson.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}", e) from e


def validate_json_depth(obj: Any, max_depth: int = 32, current_depth: int = 0) -> None:
    """
    Validate nesting depth of a config before it is pushed.

    Args:
        obj: Object to validate
        max_depth: Maximum allowed nesting depth
        current_depth: Current depth (internal)

    Raises:
        SerializationError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise SerializationError(f"Config nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_json_depth(item, max_depth, current_depth + 1)
