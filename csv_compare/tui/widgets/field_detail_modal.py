"""Modal screen for displaying both values of a compared field."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import ScrollableContainer, Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, Static

from csv_compare.diff_engine import ComparisonEntry, format_value
from csv_compare.rendering import render_diff_span, render_status


class FieldDetailModal(ModalScreen[None]):
    """A modal screen that displays the full content of one comparison entry."""

    BINDINGS = [
        Binding("escape", "close", "Close"),
        Binding("enter", "close", "Close"),
        Binding("q", "quit", "Quit App"),
    ]

    CSS = """
    FieldDetailModal {
        align: center middle;
    }

    FieldDetailModal > Vertical {
        width: 80%;
        height: 80%;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    FieldDetailModal .modal-header {
        dock: top;
        height: auto;
        padding: 1 2;
        background: $primary;
        color: $text;
        text-align: center;
        text-style: bold;
    }

    FieldDetailModal .value-label {
        height: auto;
        padding: 1 0 0 0;
        color: $secondary;
        text-style: bold;
    }

    FieldDetailModal .content-container {
        height: 1fr;
        padding: 1 2;
        background: $surface-darken-2;
    }

    FieldDetailModal .field-content {
        width: 100%;
        height: auto;
    }

    FieldDetailModal .close-hint {
        dock: bottom;
        height: auto;
        padding: 1 2;
        text-align: center;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        entry: ComparisonEntry,
        file1_label: str = "File 1",
        file2_label: str = "File 2",
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the field detail modal.

        Args:
            entry: The comparison entry to display.
            file1_label: Heading for the first value.
            file2_label: Heading for the second value.
            name: Optional name for the widget.
            id: Optional ID for the widget.
            classes: Optional CSS classes.
        """
        super().__init__(name=name, id=id, classes=classes)
        self.entry = entry
        self.file1_label = file1_label
        self.file2_label = file2_label

    def compose(self) -> ComposeResult:
        """Compose the modal layout."""
        entry = self.entry
        with Vertical():
            yield Label(f"Field: {entry.field}", classes="modal-header")
            with ScrollableContainer(classes="content-container"):
                yield Static(render_status(entry.status), classes="field-content")
                yield Label(self.file1_label, classes="value-label")
                yield Static(
                    str(format_value(entry.value1)) or "(empty)",
                    classes="field-content",
                    markup=False,
                    id="value1-content",
                )
                yield Label(self.file2_label, classes="value-label")
                yield Static(
                    str(format_value(entry.value2)) or "(empty)",
                    classes="field-content",
                    markup=False,
                    id="value2-content",
                )
                span = entry.diff_span()
                if span is not None and span.has_highlight:
                    yield Label("Changed", classes="value-label")
                    yield Static(render_diff_span(span), classes="field-content")
            yield Static("Press Escape or Enter to close", classes="close-hint")

    def action_close(self) -> None:
        """Close the modal."""
        self.dismiss()

    def action_quit(self) -> None:
        """Quit the application."""
        self.app.exit()
