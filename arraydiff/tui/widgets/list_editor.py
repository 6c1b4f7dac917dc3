"""
List Editor widget: one editable list in the terminal UI.

Holds a name input, a text area for the list values and an error line.
Any edit posts a ListEditor.Changed message so the app can re-evaluate.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Input, Static, TextArea


class ListEditor(Vertical):
    """Editable name and values for a single list."""

    DEFAULT_CSS = """
    ListEditor {
        width: 1fr;
        height: 100%;
        border: solid $primary;
        padding: 0 1;
    }

    ListEditor.invalid {
        border: solid $error;
    }

    ListEditor .list-name {
        height: 3;
    }

    ListEditor TextArea {
        height: 1fr;
    }

    ListEditor .list-error {
        height: auto;
        color: $error;
        display: none;
    }

    ListEditor.invalid .list-error {
        display: block;
    }
    """

    class Changed(Message):
        """Message posted when the name or values of a list change."""

        def __init__(self, editor: "ListEditor") -> None:
            self.editor = editor
            super().__init__()

    def __init__(
        self,
        name_value: str,
        text: str = "",
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the editor.

        Args:
            name_value: Initial list label.
            text: Initial list text.
            id: The widget ID.
            classes: CSS classes for the widget.
        """
        super().__init__(id=id, classes=classes)
        self._initial_name = name_value
        self._initial_text = text
        self._error = ""

    def compose(self) -> ComposeResult:
        yield Input(value=self._initial_name, placeholder="List name", classes="list-name")
        yield TextArea(self._initial_text, classes="list-values")
        yield Static("", classes="list-error", markup=False)

    @property
    def name_value(self) -> str:
        return self.query_one(Input).value

    @name_value.setter
    def name_value(self, value: str) -> None:
        self.query_one(Input).value = value

    @property
    def text(self) -> str:
        return self.query_one(TextArea).text

    @property
    def error(self) -> str | None:
        return self._error if self.has_class("invalid") else None

    def set_error(self, message: str | None) -> None:
        """Show a parse error, or clear it when message is None."""
        self._error = message or ""
        self.query_one(".list-error", Static).update(self._error)
        self.set_class(message is not None, "invalid")

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.Changed(self))

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        event.stop()
        self.post_message(self.Changed(self))
