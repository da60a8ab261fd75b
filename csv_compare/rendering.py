"""
Rendering helpers that turn comparison results into styled output.

Shared by the command line report and the TUI. The engine itself never
produces styled text; everything visual lives here.
"""

from __future__ import annotations

from rich.text import Text

from csv_compare.diff_engine import ComparisonEntry, DiffSpan, Status, format_value

# Style applied to the changed part of a differing value
HIGHLIGHT_STYLE = "bold black on yellow"

STATUS_STYLES: dict[Status, str] = {
    Status.PASS: "bold green",
    Status.FAIL: "bold red",
}


def render_diff_span(span: DiffSpan) -> Text:
    """Render a DiffSpan as rich Text with the changed region highlighted.

    Examples:
        >>> text = render_diff_span(diff_highlight("abcXdef", "abcYdef"))
        >>> text.plain
        'abcYdef'
    """
    text = Text(span.common_start)
    if span.highlighted:
        text.append(span.highlighted, style=HIGHLIGHT_STYLE)
    text.append(span.suffix)
    return text


def render_value2(entry: ComparisonEntry) -> Text:
    """Render the second value of an entry.

    FAIL entries show the diff highlight on the raw value; PASS entries
    show the value through format_value.
    """
    span = entry.diff_span()
    if span is not None:
        return render_diff_span(span)
    return Text(str(format_value(entry.value2)))


def render_status(status: Status) -> Text:
    return Text(status.value, style=STATUS_STYLES[status])


def escape_markdown_cell(value: str) -> str:
    return value.replace("|", "\\|").replace("\r\n", "<br>").replace("\n", "<br>")


def markdown_diff_cell(entry: ComparisonEntry) -> str:
    """Render the second value for a Markdown table, bolding the change."""
    span = entry.diff_span()
    if span is None or not span.has_highlight:
        return escape_markdown_cell(entry.value2)
    return (
        escape_markdown_cell(span.common_start)
        + f"**{escape_markdown_cell(span.highlighted)}**"
        + escape_markdown_cell(span.suffix)
    )
