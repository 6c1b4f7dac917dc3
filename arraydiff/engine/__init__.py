"""
Parsing and comparison engine.

This module turns free-form text into typed value lists and derives the
pairwise set relations between any number of such lists.

Usage:
    from arraydiff.engine import NamedSequence, compare, parse

    left = NamedSequence("X", parse("[1, 2, 3]"))
    right = NamedSequence("Y", parse("2, 3, 4"))
    for result in compare([left, right]):
        print(result.intersection)  # [2, 3]
"""

from arraydiff.engine.comparator import (
    DEFAULT_NAME_PREFIX,
    NamedSequence,
    PairResult,
    compare,
    compare_pair,
    default_name,
)
from arraydiff.engine.parser import (
    ParseError,
    ParseErrorKind,
    ParseOutcome,
    classify_token,
    parse,
    split_values,
    try_parse,
)
from arraydiff.engine.values import (
    MAX_NESTING_DEPTH,
    format_value,
    membership_key,
    nesting_depth,
    to_json_value,
    value_kind,
    values_equal,
)

__all__ = [
    # Parsing
    "parse",
    "try_parse",
    "classify_token",
    "split_values",
    "ParseError",
    "ParseErrorKind",
    "ParseOutcome",
    # Comparison
    "compare",
    "compare_pair",
    "default_name",
    "DEFAULT_NAME_PREFIX",
    "NamedSequence",
    "PairResult",
    # Values
    "MAX_NESTING_DEPTH",
    "format_value",
    "membership_key",
    "nesting_depth",
    "to_json_value",
    "value_kind",
    "values_equal",
]
