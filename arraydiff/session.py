"""
Comparison session: the editable set of lists behind the CLI and TUI.

A session holds the raw text and label of every list the user is editing.
Evaluating it parses every field and, only if all of them parse, compares
them. A single bad field withholds the whole comparison.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

from arraydiff.engine import (
    DEFAULT_NAME_PREFIX,
    NamedSequence,
    PairResult,
    ParseError,
    compare,
    default_name,
    try_parse,
)

logger = logging.getLogger(__name__)

# Number of empty lists a new session starts with
INITIAL_FIELD_COUNT = 2

NO_RESULTS_MESSAGE = "Please add at least two arrays to compare"

DEFAULT_NAME_PATTERN = re.compile(rf"{re.escape(DEFAULT_NAME_PREFIX)} [0-9]+")


@dataclass
class ListField:
    """One editable list: its label and the raw text typed for it."""

    name: str
    text: str = ""

    @property
    def has_default_name(self) -> bool:
        return DEFAULT_NAME_PATTERN.fullmatch(self.name) is not None


@dataclass(frozen=True)
class SessionResult:
    """Outcome of evaluating a session.

    Attributes:
        results: Pair results, empty when any field failed to parse.
        errors: Parse errors keyed by zero-based field index.
    """

    results: list[PairResult] = field(default_factory=list)
    errors: dict[int, ParseError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str | None:
        """Placeholder text when there is nothing to show."""
        if self.ok and not self.results:
            return NO_RESULTS_MESSAGE
        return None


class ComparisonSession:
    """Ordered collection of editable lists.

    Usage:
        session = ComparisonSession()
        session.set_text(0, "[1, 2, 3]")
        session.set_text(1, "2, 3, 4")
        outcome = session.evaluate()
        print(outcome.results[0].intersection)  # [2, 3]
    """

    def __init__(self, fields: Iterable[ListField] | None = None) -> None:
        if fields is None:
            self._fields = [ListField(default_name(i)) for i in range(INITIAL_FIELD_COUNT)]
        else:
            self._fields = list(fields)

    @classmethod
    def from_texts(
        cls, texts: Iterable[str], names: Iterable[str | None] | None = None
    ) -> "ComparisonSession":
        """Build a session from raw texts and optional labels.

        Labels apply in order; missing or blank labels get the default name.
        """
        name_list = list(names or [])
        fields = []
        for i, text in enumerate(texts):
            name = name_list[i] if i < len(name_list) else None
            fields.append(ListField(name or default_name(i), text))
        return cls(fields)

    @property
    def fields(self) -> list[ListField]:
        return list(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._fields):
            raise IndexError(f"List index {index} out of range (0-{len(self._fields) - 1})")

    def add_field(self, text: str = "", name: str | None = None) -> int:
        """Append a list and return its index."""
        index = len(self._fields)
        self._fields.append(ListField(name or default_name(index), text))
        return index

    def remove_field(self, index: int) -> ListField:
        """Remove a list, renumbering the default-named lists after it."""
        self._check_index(index)
        removed = self._fields.pop(index)
        for position, list_field in enumerate(self._fields):
            if list_field.has_default_name:
                list_field.name = default_name(position)
        return removed

    def rename_field(self, index: int, name: str) -> None:
        self._check_index(index)
        self._fields[index].name = name

    def set_text(self, index: int, text: str) -> None:
        self._check_index(index)
        self._fields[index].text = text

    def label(self, index: int) -> str:
        """Return the display label of a list, falling back to the default."""
        self._check_index(index)
        return self._fields[index].name.strip() or default_name(index)

    def validate(self) -> dict[int, ParseError]:
        """Parse every list and return the errors keyed by index."""
        errors: dict[int, ParseError] = {}
        for index, list_field in enumerate(self._fields):
            outcome = try_parse(list_field.text)
            if not outcome.ok:
                errors[index] = outcome.exception()
        return errors

    def evaluate(self) -> SessionResult:
        """Parse all lists and compare them if every one is valid."""
        sequences: list[NamedSequence] = []
        errors: dict[int, ParseError] = {}

        for index, list_field in enumerate(self._fields):
            outcome = try_parse(list_field.text)
            if outcome.ok:
                sequences.append(NamedSequence(self.label(index), list(outcome.values)))
            else:
                errors[index] = outcome.exception()

        if errors:
            logger.debug("Withholding comparison: %d invalid list(s)", len(errors))
            return SessionResult(errors=errors)

        return SessionResult(results=compare(sequences))
