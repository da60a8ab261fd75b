"""Tests for styled output helpers in csv_compare/rendering.py."""

from __future__ import annotations

from rich.text import Text

from csv_compare.diff_engine import ComparisonEntry, Status, diff_highlight
from csv_compare.rendering import (
    HIGHLIGHT_STYLE,
    escape_markdown_cell,
    markdown_diff_cell,
    render_diff_span,
    render_status,
    render_value2,
)


def _styled_parts(text: Text) -> list[str]:
    return [text.plain[span.start : span.end] for span in text.spans if span.style == HIGHLIGHT_STYLE]


class TestRenderDiffSpan:
    """Tests for render_diff_span()."""

    def test_highlights_changed_region(self):
        text = render_diff_span(diff_highlight("abcXdef", "abcYdef"))
        assert text.plain == "abcYdef"
        assert _styled_parts(text) == ["Y"]

    def test_no_highlight_for_passthrough(self):
        text = render_diff_span(diff_highlight("", "world"))
        assert text.plain == "world"
        assert _styled_parts(text) == []

    def test_no_highlight_for_pure_deletion(self):
        text = render_diff_span(diff_highlight("abcd", "abc"))
        assert text.plain == "abc"
        assert _styled_parts(text) == []


class TestRenderValue2:
    """Tests for render_value2()."""

    def test_fail_entry_highlighted(self):
        entry = ComparisonEntry("name", "Alice", "Alicia", Status.FAIL)
        text = render_value2(entry)
        assert _styled_parts(text) == ["ia"]

    def test_pass_entry_formatted(self):
        entry = ComparisonEntry("payload", '{"a":1}', '{"a":1}', Status.PASS)
        assert render_value2(entry).plain == '{\n  "a": 1\n}'

    def test_status_text(self):
        assert render_status(Status.PASS).plain == "PASS"
        assert render_status(Status.FAIL).plain == "FAIL"


class TestMarkdownDiffCell:
    """Tests for markdown_diff_cell()."""

    def test_bold_change(self):
        entry = ComparisonEntry("name", "Alice", "Alicia", Status.FAIL)
        assert markdown_diff_cell(entry) == "Alic**ia**"

    def test_pipes_escaped(self):
        entry = ComparisonEntry("x", "a|b", "a|b", Status.PASS)
        assert markdown_diff_cell(entry) == "a\\|b"

    def test_crlf_becomes_line_break(self):
        assert escape_markdown_cell("a\r\nb\nc|d") == "a<br>b<br>c\\|d"

    def test_no_highlight_plain(self):
        entry = ComparisonEntry("x", "", "NYC", Status.FAIL)
        assert markdown_diff_cell(entry) == "NYC"
