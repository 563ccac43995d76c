"""
Fast JSON Utilities
===================

Thin wrappers over orjson (Rust-based, fastest) that keep a ``str`` API.
Key order is preserved on output so serialized schemas and arguments read
exactly as the caller wrote them.
"""

from typing import Any

import orjson

JSONDecodeError = orjson.JSONDecodeError


def dumps(obj: Any, *, indent: bool = False, sort_keys: bool = False) -> str:
    """
    Serialize object to a compact JSON string.

    Args:
        obj: Object to serialize
        indent: Pretty-print with 2-space indentation
        sort_keys: Sort object keys

    Returns:
        JSON string
    """
    option = 0
    if indent:
        option |= orjson.OPT_INDENT_2
    if sort_keys:
        option |= orjson.OPT_SORT_KEYS
    return orjson.dumps(obj, option=option).decode("utf-8")


def loads(s: str | bytes) -> Any:
    """
    Deserialize a JSON string or bytes.

    Raises:
        JSONDecodeError: If the input is not valid JSON
    """
    return orjson.loads(s)


def loads_object(s: str | None) -> dict[str, Any]:
    """
    Parse a function-call argument string into an object.

    Empty or missing input is an empty object. Anything that does not
    decode to a JSON object raises ``ValueError``.

    orjson reads integers wider than 64 bits as floats, so such values lose
    precision; callers needing exact big ids should send them as strings.
    """
    if not s:
        return {}
    value = orjson.loads(s)
    if not isinstance(value, dict):
        raise ValueError(f"expected a JSON object, got {type(value).__name__}")
    return value
