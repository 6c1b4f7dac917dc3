"""
Rendering of comparison results for the terminal.

Text output lists every pair as three labeled sections (common elements,
only in the left list, only in the right list). Empty sections show an
explicit placeholder so that "nothing" is visible.
"""

from __future__ import annotations

import json
from typing import Any, Sequence

from arraydiff.engine import PairResult, format_value, to_json_value, value_kind
from arraydiff.session import NO_RESULTS_MESSAGE

NONE_PLACEHOLDER = "None"

RESULTS_HEADER = "Comparison Results"


def section_titles(result: PairResult) -> list[tuple[str, list[Any]]]:
    """Return (title, values) for each section of a pair, in display order."""
    return [
        ("Common Elements", result.intersection),
        (f"Only in {result.left_name}", result.only_in_left),
        (f"Only in {result.right_name}", result.only_in_right),
    ]


def render_values(values: Sequence[Any], indent: str = "  ") -> list[str]:
    """Render values one per line, or the placeholder if there are none."""
    if not values:
        return [f"{indent}{NONE_PLACEHOLDER}"]
    return [f"{indent}- {format_value(value)}" for value in values]


def render_pair(result: PairResult) -> str:
    """Render a single pair result as text."""
    heading = f"Comparing {result.left_name} and {result.right_name}"
    lines = [heading, "-" * len(heading)]
    for title, values in section_titles(result):
        lines.append(f"{title}:")
        lines.extend(render_values(values))
    return "\n".join(lines)


def render_text(results: Sequence[PairResult]) -> str:
    """Render all pair results as a text report.

    Examples:
        >>> render_text([])
        'Please add at least two arrays to compare'
    """
    if not results:
        return NO_RESULTS_MESSAGE

    blocks = [f"{RESULTS_HEADER}\n{'=' * len(RESULTS_HEADER)}"]
    blocks.extend(render_pair(result) for result in results)
    return "\n\n".join(blocks)


def render_json(results: Sequence[PairResult]) -> str:
    """Render all pair results as a JSON document."""
    document: dict[str, Any] = {"pairs": [result.to_dict() for result in results]}
    if not results:
        document["message"] = NO_RESULTS_MESSAGE
    return json.dumps(to_json_value(document), indent=2, ensure_ascii=False, allow_nan=False)


def render_values_json(values: Sequence[Any]) -> str:
    """Render parsed values as a strict JSON array."""
    return json.dumps(to_json_value(list(values)), indent=2, ensure_ascii=False, allow_nan=False)


def summarize(result: PairResult) -> dict[str, int]:
    """Count the elements in each section of a pair."""
    return {
        "intersection": len(result.intersection),
        "only_in_left": len(result.only_in_left),
        "only_in_right": len(result.only_in_right),
    }


def describe_values(values: Sequence[Any]) -> list[dict[str, str]]:
    """Describe each parsed value with its kind, for the parse command."""
    return [{"value": format_value(value), "kind": value_kind(value)} for value in values]
