"""
Results Panel widget for displaying pairwise comparison output.
"""

from __future__ import annotations

from typing import Sequence

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from arraydiff.engine import PairResult
from arraydiff.report import render_text


class ResultsPanel(VerticalScroll):
    """Scrollable view of the latest comparison report."""

    DEFAULT_CSS = """
    ResultsPanel {
        height: 1fr;
        border: solid $secondary;
        padding: 0 1;
    }

    ResultsPanel.withheld {
        border: solid $warning;
    }
    """

    def __init__(self, *, id: str | None = None, classes: str | None = None) -> None:
        super().__init__(id=id, classes=classes)
        self.rendered_text: str = ""

    def compose(self) -> ComposeResult:
        yield Static("", id="results-body", markup=False)

    def _show(self, text: str) -> None:
        self.rendered_text = text
        self.query_one("#results-body", Static).update(text)

    def show_results(self, results: Sequence[PairResult]) -> None:
        """Render pair results (or the "add arrays" message when empty)."""
        self.remove_class("withheld")
        self._show(render_text(results))

    def show_withheld(self, invalid_labels: Sequence[str]) -> None:
        """Explain that comparison is paused until every list parses."""
        self.add_class("withheld")
        self._show(
            "Fix the highlighted lists to see the comparison: " + ", ".join(invalid_labels)
        )
