"""TUI widgets for the ArrayDiff terminal UI."""

from arraydiff.tui.widgets.list_editor import ListEditor
from arraydiff.tui.widgets.results_panel import ResultsPanel

__all__ = ["ListEditor", "ResultsPanel"]
