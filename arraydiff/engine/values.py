"""
Value typing and equality for parsed list elements.

Parsed lists hold JSON-like values: numbers, booleans and strings, plus
whatever nested arrays/objects or nulls a JSON array literal carried.
Python's own equality is too loose for membership tests (``True == 1``),
so comparisons go through ``membership_key``, which tags each value with
its kind before hashing.

Kinds:
    - number: int or float (bool excluded)
    - boolean: True / False
    - string: str
    - null: None
    - array: list or tuple
    - object: dict
"""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any, Hashable

# Integral floats below this magnitude display without a fraction
MAX_PLAIN_INTEGRAL = 1e21

# Decimal exponents in this open range display in positional notation
PLAIN_EXPONENT_RANGE = (-7, 21)

# Maximum nesting of arrays/objects accepted in a list
MAX_NESTING_DEPTH = 100


def value_kind(value: Any) -> str:
    """Return the kind name of a parsed value.

    Args:
        value: A parsed list element.

    Returns:
        One of "number", "boolean", "string", "null", "array", "object".

    Raises:
        TypeError: If the value is not JSON-like.

    Examples:
        >>> value_kind(True)
        'boolean'
        >>> value_kind(1.5)
        'number'
    """
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if value is None:
        return "null"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    raise TypeError(f"Unsupported list element type: {type(value).__name__}")


def nesting_depth(value: Any) -> int:
    """Return how many array/object levels a value nests, without recursion.

    Examples:
        >>> nesting_depth(1)
        0
        >>> nesting_depth([1, [2, {"a": []}]])
        4
    """
    depth = 0
    level = [value]
    while True:
        containers = [item for item in level if isinstance(item, (list, tuple, dict))]
        if not containers:
            return depth
        depth += 1
        level = []
        for container in containers:
            level.extend(container.values() if isinstance(container, dict) else container)


def membership_key(value: Any, depth: int = 0) -> Hashable:
    """Build a hashable key with strict typed equality.

    Two values share a key only when they have the same kind and the same
    value: ``1`` and ``1.0`` match, ``1`` and ``"1"`` or ``True`` do not.
    Arrays and objects are keyed structurally.

    Args:
        value: A parsed list element.
        depth: Current nesting depth (used to stop runaway recursion).

    Returns:
        A hashable key suitable for set membership.

    Raises:
        ValueError: If the value nests deeper than MAX_NESTING_DEPTH.
    """
    if depth >= MAX_NESTING_DEPTH:
        raise ValueError(f"Value nested deeper than {MAX_NESTING_DEPTH} levels")

    kind = value_kind(value)
    if kind == "array":
        return (kind, tuple(membership_key(item, depth + 1) for item in value))
    if kind == "object":
        return (
            kind,
            tuple(sorted((str(k), membership_key(v, depth + 1)) for k, v in value.items())),
        )
    return (kind, value)


def values_equal(left: Any, right: Any) -> bool:
    """Return True if two values are equal under strict typed equality."""
    return membership_key(left) == membership_key(right)


def _format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < MAX_PLAIN_INTEGRAL:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    low, high = PLAIN_EXPONENT_RANGE
    if low < int(exponent) < high:
        return format(Decimal(text), "f")
    # repr pads the exponent ("1e-07"); drop the padding ("1e-7")
    return f"{mantissa}e{int(exponent):+d}"


def to_json_value(value: Any) -> Any:
    """Return a copy of a value that strict JSON encoders accept.

    Non-finite floats (possible from literals like ``1e999``) become their
    display strings.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return _format_number(value)
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    if isinstance(value, dict):
        return {key: to_json_value(item) for key, item in value.items()}
    return value


def format_value(value: Any) -> str:
    """Format a value for display in the notation users type.

    Examples:
        >>> format_value(2.0)
        '2'
        >>> format_value(1e-07)
        '1e-7'
        >>> format_value(False)
        'false'
        >>> format_value("hello")
        'hello'
    """
    kind = value_kind(value)
    if kind == "boolean":
        return "true" if value else "false"
    if kind == "null":
        return "null"
    if kind == "number":
        return _format_number(value)
    if kind == "string":
        return value
    return json.dumps(
        to_json_value(value), separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )
