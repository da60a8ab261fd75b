"""
Comparison Screen for the field-by-field result table.

Shows one row per field with both values and the PASS/FAIL status. The
changed part of each failing value is highlighted. Rows can be filtered by
field name and rows empty on both sides can be hidden.
"""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Checkbox, DataTable, Footer, Header, Input, Static

from csv_compare.diff_engine import ComparisonEntry, filter_entries, get_comparison_summary
from csv_compare.rendering import render_diff_span, render_status
from csv_compare.tui.mixins import VimNavigationMixin
from csv_compare.tui.widgets import FieldDetailModal

# Maximum characters shown in a table cell; the modal shows the rest
MAX_CELL_WIDTH = 60


def _single_line(value: str) -> str:
    return value.replace("\r\n", " ").replace("\n", " ")


def truncate(text: str, max_len: int) -> str:
    """Truncate text to max_len characters, adding ellipsis if needed."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 1] + "…"


class ComparisonScreen(VimNavigationMixin, Screen):
    """Result table with search and hide-empty filters."""

    AUTO_FOCUS = "#comparison-table"

    CSS = """
    ComparisonScreen {
        layout: vertical;
    }

    #toolbar {
        height: auto;
        padding: 0 1;
    }

    #search-input {
        width: 1fr;
    }

    #hide-empty {
        width: auto;
    }

    #comparison-table {
        height: 1fr;
        border: solid $primary;
    }

    #summary {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    BINDINGS = VimNavigationMixin.VIM_BINDINGS + [
        Binding("slash", "focus_search", "Search"),
        Binding("h", "toggle_hide_empty", "Hide Empty"),
        Binding("escape", "focus_table", "Table", show=False),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        entries: list[ComparisonEntry],
        file1_label: str = "File 1",
        file2_label: str = "File 2",
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the ComparisonScreen.

        Args:
            entries: Result of compare() for the two records.
            file1_label: Column heading for the first file.
            file2_label: Column heading for the second file.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self._entries = list(entries)
        self._by_field = {entry.field: entry for entry in self._entries}
        self._file1_label = file1_label
        self._file2_label = file2_label
        self._search = ""
        self._hide_empty = False

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield Header()
        with Horizontal(id="toolbar"):
            yield Input(placeholder="Search fields...", id="search-input")
            yield Checkbox("Hide empty", id="hide-empty")
        yield DataTable(id="comparison-table", cursor_type="row", zebra_stripes=True)
        yield Static("", id="summary")
        yield Footer()

    def on_mount(self) -> None:
        """Set up columns and populate the table."""
        table = self.query_one("#comparison-table", DataTable)
        table.add_column("Field", key="field")
        table.add_column(self._file1_label, key="file1")
        table.add_column(self._file2_label, key="file2")
        table.add_column("Status", key="status", width=6)

        self._refresh_table()
        table.focus()

    @property
    def visible_entries(self) -> list[ComparisonEntry]:
        """Entries that pass the current filters."""
        return filter_entries(self._entries, search=self._search, hide_empty=self._hide_empty)

    def _value2_cell(self, entry: ComparisonEntry) -> Text:
        span = entry.diff_span()
        if span is None:
            return Text(truncate(_single_line(entry.value2), MAX_CELL_WIDTH))
        text = render_diff_span(span)
        text.truncate(MAX_CELL_WIDTH, overflow="ellipsis")
        return text

    def _refresh_table(self) -> None:
        """Repopulate the table from the filtered entries."""
        table = self.query_one("#comparison-table", DataTable)
        table.clear()

        visible = self.visible_entries
        for entry in visible:
            table.add_row(
                entry.field,
                Text(truncate(_single_line(entry.value1), MAX_CELL_WIDTH)),
                self._value2_cell(entry),
                render_status(entry.status),
                key=entry.field,
            )

        summary = get_comparison_summary(self._entries)
        self.query_one("#summary", Static).update(
            f"Showing {len(visible)} of {summary.total} fields | "
            f"{summary.passed} passed, {summary.failed} failed"
        )

    def on_input_changed(self, event: Input.Changed) -> None:
        """Filter rows as the search text changes."""
        self._search = event.value
        self._refresh_table()

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        """Toggle hiding of rows that are empty on both sides."""
        self._hide_empty = event.value
        self._refresh_table()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Open the detail modal for the selected field."""
        entry = self._by_field.get(event.row_key.value)
        if entry is None:
            return
        self.app.push_screen(
            FieldDetailModal(
                entry,
                file1_label=self._file1_label,
                file2_label=self._file2_label,
            )
        )

    def action_focus_search(self) -> None:
        self.query_one("#search-input", Input).focus()

    def action_focus_table(self) -> None:
        self.query_one("#comparison-table", DataTable).focus()

    def action_toggle_hide_empty(self) -> None:
        """Flip the hide-empty checkbox; its Changed message refreshes the table."""
        checkbox = self.query_one("#hide-empty", Checkbox)
        checkbox.value = not checkbox.value

    def action_quit(self) -> None:
        """Quit the application."""
        self.app.exit()

    @property
    def entries(self) -> list[ComparisonEntry]:
        """All comparison entries, unfiltered."""
        return self._entries

    @property
    def search(self) -> str:
        return self._search

    @property
    def hide_empty(self) -> bool:
        return self._hide_empty
