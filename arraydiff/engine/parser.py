"""
Parser for free-form list input.

Turns one raw text block into an ordered list of typed values. Two
notations are accepted, tried in order:

    - a JSON array literal: ``[1, "two", true]``
    - comma-separated values: ``1, two, true``

Comma-separated tokens are classified one by one as a number, a boolean
or a string. Input that decodes as JSON but is not an array is rejected.
"""

from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from arraydiff.engine.values import MAX_NESTING_DEPTH, nesting_depth

logger = logging.getLogger(__name__)

# Decimal number literal: optional sign, digits with optional fraction, optional exponent
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

BOOLEAN_TOKENS: dict[str, bool] = {"true": True, "false": False}

TOO_DEEP_MESSAGE = f"Input must not nest arrays or objects deeper than {MAX_NESTING_DEPTH} levels"


class ParseErrorKind(Enum):
    """Reasons a text block cannot be parsed into a list."""

    NOT_AN_ARRAY = "Input must be a valid JSON array"
    INVALID_FORMAT = (
        "Invalid input format. Please enter a valid JSON array or comma-separated values."
    )


class ParseError(ValueError):
    """Raised when input is neither a JSON array nor comma-separated values."""

    def __init__(self, kind: ParseErrorKind, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message or kind.value)


@dataclass(frozen=True)
class ParseOutcome:
    """Result of parsing one text block: either values or an error kind."""

    values: list[Any] = field(default_factory=list)
    error: ParseErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def exception(self) -> ParseError | None:
        """Return the ParseError for a failed outcome, or None."""
        if self.error is None:
            return None
        return ParseError(self.error, self.message)

    def unwrap(self) -> list[Any]:
        """Return the parsed values, raising ParseError on failure."""
        error = self.exception()
        if error is not None:
            raise error
        return list(self.values)


def _reject_constant(name: str) -> Any:
    # NaN/Infinity are not valid JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def _decode_json(text: str) -> ParseOutcome | None:
    """Try the JSON array notation.

    Returns:
        A ParseOutcome if the text is valid JSON, or None if it is not and
        the comma-separated notation should be tried instead.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except RecursionError:
        logger.debug("JSON input nests too deeply to decode")
        return ParseOutcome(error=ParseErrorKind.INVALID_FORMAT, message=TOO_DEEP_MESSAGE)
    except ValueError:
        return None

    if isinstance(data, list):
        if nesting_depth(data) > MAX_NESTING_DEPTH:
            return ParseOutcome(error=ParseErrorKind.INVALID_FORMAT, message=TOO_DEEP_MESSAGE)
        return ParseOutcome(values=data)

    logger.debug("JSON input is a %s, not an array", type(data).__name__)
    return ParseOutcome(error=ParseErrorKind.NOT_AN_ARRAY)


def classify_token(token: str) -> int | float | bool | str:
    """Convert one comma-separated token into a typed value.

    The token is trimmed first. Decimal numbers become int (no fraction or
    exponent) or float; "true"/"false" in any case become booleans; anything
    else, including an empty token, stays a string.

    Examples:
        >>> classify_token(" 42 ")
        42
        >>> classify_token("1e3")
        1000.0
        >>> classify_token("TRUE")
        True
        >>> classify_token("hello")
        'hello'
    """
    trimmed = token.strip()

    if trimmed and DECIMAL_PATTERN.fullmatch(trimmed):
        number = float(trimmed)
        if math.isfinite(number):
            if any(marker in trimmed for marker in ".eE"):
                return number
            return int(trimmed)

    lowered = trimmed.lower()
    if lowered in BOOLEAN_TOKENS:
        return BOOLEAN_TOKENS[lowered]

    return trimmed


def split_values(text: str) -> list[int | float | bool | str]:
    """Parse comma-separated values, classifying each token."""
    return [classify_token(token) for token in text.split(",")]


def try_parse(raw: Any) -> ParseOutcome:
    """Parse raw text into a list of values without raising.

    Args:
        raw: The text typed by the user.

    Returns:
        ParseOutcome with the values, or with the error kind when the input
        is a JSON non-array or not text at all.
    """
    if not isinstance(raw, str):
        return ParseOutcome(error=ParseErrorKind.INVALID_FORMAT)

    text = raw.strip()
    if not text:
        return ParseOutcome()

    outcome = _decode_json(text)
    if outcome is not None:
        return outcome

    logger.debug("Input is not JSON, falling back to comma-separated values")
    return ParseOutcome(values=split_values(raw))


def parse(raw: Any) -> list[Any]:
    """Parse raw text into a list of values.

    Args:
        raw: The text typed by the user.

    Returns:
        The parsed values in input order, duplicates kept.

    Raises:
        ParseError: If the input is a JSON value other than an array, or is
            not text.

    Examples:
        >>> parse("[1, 2, 3]")
        [1, 2, 3]
        >>> parse("1, 2, true, hello")
        [1, 2, True, 'hello']
        >>> parse("   ")
        []
    """
    return try_parse(raw).unwrap()
