"""Tests for the list parser in arraydiff/engine/parser.py."""

from __future__ import annotations

import json

import pytest

from arraydiff.engine import (
    MAX_NESTING_DEPTH,
    NamedSequence,
    ParseError,
    ParseErrorKind,
    ParseOutcome,
    classify_token,
    compare_pair,
    parse,
    split_values,
    try_parse,
)


class TestParseEmpty:
    """Tests for blank input."""

    @pytest.mark.parametrize("raw", ["", "   ", "\n\t  \n"])
    def test_blank_input_is_empty_list(self, raw):
        """Blank input should parse to an empty list, not an error."""
        assert parse(raw) == []

    def test_blank_input_outcome_is_ok(self):
        """try_parse on blank input should succeed."""
        outcome = try_parse("  ")
        assert outcome.ok
        assert outcome.values == []


class TestParseJSON:
    """Tests for the JSON array notation."""

    def test_number_array(self):
        """A JSON array of numbers keeps its order."""
        assert parse("[3, 1, 2]") == [3, 1, 2]

    def test_mixed_scalar_array(self):
        """Numbers, booleans and strings keep their JSON types."""
        result = parse('[1, 2.5, true, "x"]')
        assert result == [1, 2.5, True, "x"]
        assert result[2] is True
        assert isinstance(result[3], str)

    def test_duplicates_preserved(self):
        """Duplicates in the array should be kept."""
        assert parse("[1, 1, 1]") == [1, 1, 1]

    def test_string_with_comma(self):
        """Commas inside JSON strings do not split values."""
        assert parse('["a, b", "c"]') == ["a, b", "c"]

    def test_nested_values_pass_through(self):
        """Nested arrays, objects and null are passed through unchanged."""
        assert parse('[null, [1, 2], {"k": "v"}]') == [None, [1, 2], {"k": "v"}]

    def test_surrounding_whitespace(self):
        """Whitespace around the literal is ignored."""
        assert parse("   [1, 2]\n") == [1, 2]

    def test_empty_array(self):
        """An empty JSON array parses to an empty list."""
        assert parse("[]") == []

    @pytest.mark.parametrize("raw", ["42", '"text"', '{"a": 1}', "true", "null"])
    def test_non_array_json_rejected(self, raw):
        """Valid JSON that is not an array is an error."""
        with pytest.raises(ParseError) as exc_info:
            parse(raw)
        assert exc_info.value.kind is ParseErrorKind.NOT_AN_ARRAY
        assert str(exc_info.value) == "Input must be a valid JSON array"

    def test_nan_literal_falls_back(self):
        """NaN is not valid JSON, so the comma notation applies."""
        assert parse("[NaN]") == ["[NaN]"]

    def test_unterminated_array_falls_back(self):
        """A broken array literal is split on commas instead."""
        assert parse("[1, 2") == ["[1", 2]


class TestParseCommaSeparated:
    """Tests for the comma-separated notation."""

    def test_mixed_tokens(self):
        """Numbers, booleans and strings are classified per token."""
        result = parse("1, 2, true, hello")
        assert result == [1, 2, True, "hello"]
        assert type(result[0]) is int
        assert result[2] is True

    def test_single_word(self):
        """A single bare word is a one-element list."""
        assert parse("hello") == ["hello"]

    def test_case_preserved_for_strings(self):
        """String tokens are trimmed but keep their case."""
        assert parse(" Hello ,  WORLD ") == ["Hello", "WORLD"]

    def test_booleans_case_insensitive(self):
        """Booleans are recognized in any case."""
        assert parse("TRUE, False, tRuE") == [True, False, True]

    def test_decimal_numbers(self):
        """Decimal notation variants are parsed as numbers."""
        assert parse("1.5, -2, 3e2, .5, +7, 007") == [1.5, -2, 300.0, 0.5, 7, 7]

    def test_empty_tokens_are_empty_strings(self):
        """Empty tokens are not numbers; they stay as empty strings."""
        assert parse("1,,2") == [1, "", 2]
        assert parse(",") == ["", ""]

    @pytest.mark.parametrize("token", ["Infinity", "NaN", "0x10", "1_000", "1e999", "1.2.3"])
    def test_non_decimal_tokens_are_strings(self, token):
        """Tokens outside finite decimal notation stay strings."""
        assert parse(f"a, {token}") == ["a", token]

    def test_duplicates_preserved(self):
        """Duplicate tokens are kept in order."""
        assert parse("x, y, x") == ["x", "y", "x"]

    def test_split_values_directly(self):
        """split_values classifies tokens without trying JSON."""
        assert split_values("[1], 2") == ["[1]", 2]


class TestClassifyToken:
    """Tests for classify_token()."""

    def test_integer(self):
        assert classify_token(" 42 ") == 42

    def test_float_type(self):
        """A token with a fraction is a float even if integral."""
        value = classify_token("1.0")
        assert isinstance(value, float)
        assert value == 1

    def test_exponent(self):
        assert classify_token("1e3") == 1000.0

    def test_boolean(self):
        assert classify_token("false") is False

    def test_whitespace_only(self):
        """An all-whitespace token is an empty string, not zero."""
        assert classify_token("   ") == ""


class TestParseErrors:
    """Tests for error reporting."""

    def test_non_string_input(self):
        """Input that is not text is an invalid format error."""
        with pytest.raises(ParseError) as exc_info:
            parse(None)
        assert exc_info.value.kind is ParseErrorKind.INVALID_FORMAT
        assert "comma-separated values" in str(exc_info.value)

    def test_parse_error_is_value_error(self):
        """ParseError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse("42")

    def test_try_parse_returns_error_kind(self):
        """try_parse reports failures without raising."""
        outcome = try_parse("42")
        assert not outcome.ok
        assert outcome.error is ParseErrorKind.NOT_AN_ARRAY
        assert outcome.values == []

    def test_unwrap_raises(self):
        """Unwrapping a failed outcome raises ParseError."""
        with pytest.raises(ParseError):
            ParseOutcome(error=ParseErrorKind.INVALID_FORMAT).unwrap()


class TestParseProperties:
    """Idempotence and round-trip properties."""

    @pytest.mark.parametrize("raw", ["[1, 2, 3]", "a, b, 1, true", "", "x"])
    def test_idempotent(self, raw):
        """Parsing the same text twice gives equal results."""
        assert parse(raw) == parse(raw)

    def test_json_round_trip(self):
        """A dumped scalar array parses back to the same elements."""
        values = [1, 2.5, True, False, "x", "with, comma", ""]
        assert parse(json.dumps(values)) == values

    def test_result_is_fresh_list(self):
        """Each call returns a new list."""
        first = parse("[1]")
        first.append(2)
        assert parse("[1]") == [1]


class TestParseNesting:
    """Tests for deeply nested JSON input."""

    def test_very_deep_array_is_parse_error(self):
        """An array too deep for the JSON decoder is an invalid format error."""
        raw = "[" * 3000 + "]" * 3000
        with pytest.raises(ParseError) as exc_info:
            parse(raw)
        assert exc_info.value.kind is ParseErrorKind.INVALID_FORMAT
        assert "nest" in str(exc_info.value)

    def test_deep_array_over_limit(self):
        """Arrays nested past MAX_NESTING_DEPTH are rejected."""
        depth = MAX_NESTING_DEPTH + 1
        outcome = try_parse("[" * depth + "]" * depth)
        assert not outcome.ok
        assert outcome.error is ParseErrorKind.INVALID_FORMAT
        assert outcome.exception().kind is ParseErrorKind.INVALID_FORMAT

    def test_deep_array_at_limit(self):
        """Arrays nested up to MAX_NESTING_DEPTH parse and compare."""
        raw = "[" * MAX_NESTING_DEPTH + "]" * MAX_NESTING_DEPTH
        values = parse(raw)
        assert len(values) == 1
        result = compare_pair(NamedSequence("L", values), NamedSequence("R", values))
        assert result.intersection == values
