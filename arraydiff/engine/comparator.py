"""
Pairwise comparison of named value lists.

For every pair of lists (in input order) this computes which values are
shared and which appear on one side only. Membership uses strict typed
equality from ``arraydiff.engine.values``.

Pair order:
    (0, 1), (0, 2), ..., (0, n-1), (1, 2), ..., (n-2, n-1)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import combinations
from typing import Any, Hashable, Sequence

from arraydiff.engine.values import membership_key

logger = logging.getLogger(__name__)

DEFAULT_NAME_PREFIX = "Array"


def default_name(position: int) -> str:
    """Return the default label for the list at a zero-based position."""
    return f"{DEFAULT_NAME_PREFIX} {position + 1}"


@dataclass(frozen=True)
class NamedSequence:
    """A parsed list plus its display label."""

    name: str
    values: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class PairResult:
    """Set relations between two lists, left before right in input order.

    Attributes:
        left_name: Label of the left list.
        right_name: Label of the right list.
        only_in_left: Left elements whose value is absent from the right list.
        only_in_right: Right elements whose value is absent from the left list.
        intersection: Left elements whose value is present in the right list.
    """

    left_name: str
    right_name: str
    only_in_left: list[Any]
    only_in_right: list[Any]
    intersection: list[Any]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "left": self.left_name,
            "right": self.right_name,
            "intersection": list(self.intersection),
            "only_in_left": list(self.only_in_left),
            "only_in_right": list(self.only_in_right),
        }


def _membership_set(values: Sequence[Any]) -> set[Hashable]:
    return {membership_key(value) for value in values}


def compare_pair(left: NamedSequence, right: NamedSequence) -> PairResult:
    """Compare two lists.

    Each left element lands in exactly one of ``only_in_left`` or
    ``intersection``, once per occurrence. Only the left list's occurrences
    populate ``intersection``.

    Args:
        left: The list appearing first in input order.
        right: The list appearing second.

    Returns:
        The PairResult for the two lists.

    Examples:
        >>> r = compare_pair(NamedSequence("A", [1, 1, 2]), NamedSequence("B", [1, 3]))
        >>> r.only_in_left, r.only_in_right, r.intersection
        ([2], [3], [1, 1])
    """
    left_keys = _membership_set(left.values)
    right_keys = _membership_set(right.values)

    only_in_left: list[Any] = []
    intersection: list[Any] = []
    for value in left.values:
        if membership_key(value) in right_keys:
            intersection.append(value)
        else:
            only_in_left.append(value)

    only_in_right = [value for value in right.values if membership_key(value) not in left_keys]

    return PairResult(
        left_name=left.name,
        right_name=right.name,
        only_in_left=only_in_left,
        only_in_right=only_in_right,
        intersection=intersection,
    )


def compare(sequences: Sequence[NamedSequence]) -> list[PairResult]:
    """Compare every pair of lists.

    Args:
        sequences: Named lists in display order.

    Returns:
        One PairResult per pair (i, j) with i < j, in lexicographic order.
        Empty when fewer than two lists are given.
    """
    if len(sequences) < 2:
        return []

    results = [compare_pair(left, right) for left, right in combinations(sequences, 2)]
    logger.debug("Compared %d lists into %d pairs", len(sequences), len(results))
    return results
