"""
Main Textual application for ArrayDiff.

Shows one editor per list side by side, with the pairwise comparison
report underneath. Every edit re-evaluates the lists; while any list
fails to parse, the comparison is withheld and the bad lists are
highlighted.

Usage:
    python -m arraydiff.tui.app "[1, 2, 3]" "2, 3, 4" -n X -n Y
"""

import argparse
from typing import Sequence

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Header, TextArea

from arraydiff.session import ComparisonSession
from arraydiff.tui.widgets import ListEditor, ResultsPanel


class ArrayDiffApp(App):
    """A Textual app for comparing lists pairwise."""

    TITLE = "ArrayDiff"

    CSS = """
    Screen {
        background: $surface;
        layout: vertical;
    }

    Header {
        dock: top;
    }

    Footer {
        dock: bottom;
    }

    #editors {
        height: 2fr;
    }

    #results {
        height: 3fr;
    }
    """

    BINDINGS = [
        Binding("ctrl+n", "add_list", "Add List", priority=True),
        Binding("ctrl+r", "remove_list", "Remove List", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        texts: Sequence[str] | None = None,
        names: Sequence[str] | None = None,
    ) -> None:
        """Initialize the app with optional starting lists.

        Args:
            texts: Raw text for each starting list. Two empty lists if None/empty.
            names: Labels for the starting lists, in order.
        """
        super().__init__()
        if texts:
            self.session = ComparisonSession.from_texts(texts, names)
        else:
            self.session = ComparisonSession()

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="editors"):
            for list_field in self.session.fields:
                yield ListEditor(list_field.name, list_field.text)
        yield ResultsPanel(id="results")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_comparison()

    @property
    def editors(self) -> list[ListEditor]:
        return list(self.query(ListEditor))

    def _focused_editor(self) -> ListEditor | None:
        node = self.focused
        while node is not None and not isinstance(node, ListEditor):
            node = node.parent
        return node

    def on_list_editor_changed(self, message: ListEditor.Changed) -> None:
        """Copy an edited list into the session and re-evaluate."""
        editors = self.editors
        if message.editor not in editors:
            return
        index = editors.index(message.editor)
        self.session.rename_field(index, message.editor.name_value)
        self.session.set_text(index, message.editor.text)
        self.refresh_comparison()

    @work(exclusive=True, group="comparison")
    async def refresh_comparison(self) -> None:
        """Evaluate the session and update error marks and the report.

        Runs as an exclusive worker so a newer request replaces an older one.
        """
        outcome = self.session.evaluate()

        for index, editor in enumerate(self.editors):
            error = outcome.errors.get(index)
            editor.set_error(str(error) if error is not None else None)

        panel = self.query_one(ResultsPanel)
        if outcome.ok:
            panel.show_results(outcome.results)
        else:
            panel.show_withheld([self.session.label(i) for i in sorted(outcome.errors)])

    async def action_add_list(self) -> None:
        """Append an empty list and focus it."""
        index = self.session.add_field()
        editor = ListEditor(self.session.label(index))
        await self.query_one("#editors", Horizontal).mount(editor)
        editor.query_one(TextArea).focus()
        self.refresh_comparison()

    async def action_remove_list(self) -> None:
        """Remove the list that currently has focus."""
        editor = self._focused_editor()
        if editor is None:
            self.notify("Focus a list to remove it", severity="warning")
            return

        self.session.remove_field(self.editors.index(editor))
        await editor.remove()

        # Default names were renumbered by the session
        for remaining, list_field in zip(self.editors, self.session.fields):
            if remaining.name_value != list_field.name:
                remaining.name_value = list_field.name

        self.refresh_comparison()


def main() -> None:
    """Parse arguments and run the application."""
    parser = argparse.ArgumentParser(
        description="Compare lists pairwise in a terminal UI. "
        "Lists may be JSON arrays or comma-separated values."
    )
    parser.add_argument("lists", nargs="*", help="Initial list texts")
    parser.add_argument(
        "-n",
        "--name",
        dest="names",
        action="append",
        help="Label for the next list, in order (repeatable)",
    )
    args = parser.parse_args()

    app = ArrayDiffApp(texts=args.lists, names=args.names)
    app.run()


if __name__ == "__main__":
    main()
