"""
Record diff engine for comparing two flat records field by field.

This module aligns two records by field name and reports per-field equality,
plus a minimal prefix/suffix diff for values that differ.

Statuses:
    - PASS: Both values are identical strings
    - FAIL: Values differ (a field missing from one record counts as "")

The engine produces plain data only. Turning a DiffSpan into styled output is
left to the CLI report and the TUI.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Sequence


class Status(str, Enum):
    """Per-field equality outcome."""

    PASS = "PASS"
    FAIL = "FAIL"


@dataclass(frozen=True)
class DiffSpan:
    """Decomposition of value2 into common start, changed middle and suffix.

    Attributes:
        prefix_len: Length of the common start.
        common_start: Unstyled leading part of value2.
        highlighted: The changed part of value2 (may be empty).
        suffix: Unstyled trailing part of value2.
    """

    prefix_len: int
    common_start: str
    highlighted: str
    suffix: str

    @property
    def has_highlight(self) -> bool:
        """Check if the span has a visible changed region."""
        return bool(self.highlighted)

    @property
    def text(self) -> str:
        """Reassemble the full value2."""
        return self.common_start + self.highlighted + self.suffix

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ComparisonEntry:
    """Comparison result for a single field."""

    field: str
    value1: str
    value2: str
    status: Status

    @property
    def passed(self) -> bool:
        return self.status is Status.PASS

    @property
    def is_empty(self) -> bool:
        """Check if both values are empty."""
        return not self.value1 and not self.value2

    def diff_span(self) -> DiffSpan | None:
        """Return the highlight span for a FAIL entry, None for PASS."""
        if self.passed:
            return None
        return diff_highlight(self.value1, self.value2)

    def to_dict(self) -> dict[str, Any]:
        span = self.diff_span()
        return {
            "field": self.field,
            "file1": self.value1,
            "file2": self.value2,
            "status": self.status.value,
            "diff": span.to_dict() if span is not None else None,
        }


@dataclass(frozen=True)
class ComparisonSummary:
    """Counts of compared fields by status."""

    total: int
    passed: int
    failed: int

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def _field_value(record: Mapping[str, Any], field: str) -> str:
    value = record.get(field)
    return "" if value is None else value


def compare(
    record1: Mapping[str, Any],
    record2: Mapping[str, Any],
) -> list[ComparisonEntry]:
    """
    Compare two records field by field.

    Fields are taken from the union of both key sets in first-seen order:
    every key of record1, then the keys only present in record2.

    Args:
        record1: The first record (field name to string value).
        record2: The second record.

    Returns:
        One ComparisonEntry per field, in a deterministic order.

    Examples:
        >>> entries = compare({"name": "Alice"}, {"name": "Alicia", "city": "NYC"})
        >>> [(e.field, e.status.value) for e in entries]
        [('name', 'FAIL'), ('city', 'FAIL')]
    """
    fields = dict.fromkeys(list(record1) + list(record2))

    entries = []
    for field in fields:
        value1 = _field_value(record1, field)
        value2 = _field_value(record2, field)
        status = Status.PASS if value1 == value2 else Status.FAIL
        entries.append(ComparisonEntry(field, value1, value2, status))
    return entries


def diff_highlight(value1: str, value2: str) -> DiffSpan:
    """
    Locate the part of value2 that differs from value1.

    The common prefix is found first. The common suffix is then scanned from
    the end of both strings and stops at the prefix boundary, so the two
    never overlap.

    Args:
        value1: The reference value.
        value2: The value to highlight.

    Returns:
        A DiffSpan over value2. If either value is empty or both are equal,
        the whole of value2 is returned as common start with nothing
        highlighted. A pure deletion (value2 fully covered by prefix and
        suffix) also yields an empty highlighted region.

    Examples:
        >>> span = diff_highlight("abcXdef", "abcYdef")
        >>> span.common_start, span.highlighted, span.suffix
        ('abc', 'Y', 'def')
    """
    if not value1 or not value2 or value1 == value2:
        return DiffSpan(len(value2), value2, "", "")

    start = 0
    limit = min(len(value1), len(value2))
    while start < limit and value1[start] == value2[start]:
        start += 1

    end1 = len(value1) - 1
    end2 = len(value2) - 1
    while end1 > start and end2 > start and value1[end1] == value2[end2]:
        end1 -= 1
        end2 -= 1

    return DiffSpan(
        prefix_len=start,
        common_start=value2[:start],
        highlighted=value2[start : end2 + 1],
        suffix=value2[end2 + 1 :],
    )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def format_value(value: Any) -> Any:
    """
    Pretty-print a value if it parses as JSON, otherwise return it unchanged.

    Used for display only; comparison always uses the raw value.

    Args:
        value: The raw field value.

    Returns:
        An indented JSON string, or the original value.

    Examples:
        >>> print(format_value('{"a":1}'))
        {
          "a": 1
        }
        >>> format_value("plain text")
        'plain text'
    """
    try:
        parsed = json.loads(value, parse_constant=_reject_constant)
    except (TypeError, ValueError):
        return value
    return json.dumps(parsed, indent=2, ensure_ascii=False)


def filter_entries(
    entries: Iterable[ComparisonEntry],
    search: str = "",
    hide_empty: bool = False,
) -> list[ComparisonEntry]:
    """
    Filter comparison entries for display.

    Args:
        entries: Entries returned by compare().
        search: Case-insensitive substring the field name must contain.
        hide_empty: Drop entries where both values are empty.

    Returns:
        The matching entries in their original order.
    """
    needle = search.lower()
    result = []
    for entry in entries:
        if hide_empty and entry.is_empty:
            continue
        if needle and needle not in entry.field.lower():
            continue
        result.append(entry)
    return result


def get_comparison_summary(entries: Sequence[ComparisonEntry]) -> ComparisonSummary:
    """
    Count entries by status.

    Examples:
        >>> summary = get_comparison_summary(entries)
        >>> print(summary)  # ComparisonSummary(total=3, passed=1, failed=2)
    """
    passed = sum(1 for entry in entries if entry.passed)
    return ComparisonSummary(total=len(entries), passed=passed, failed=len(entries) - passed)


class RecordDiffEngine:
    """Stateless facade over the comparison functions.

    Holds no state between calls, so a single instance can be shared.
    """

    def compare(
        self,
        record1: Mapping[str, Any],
        record2: Mapping[str, Any],
    ) -> list[ComparisonEntry]:
        """Compare two records field by field."""
        return compare(record1, record2)

    def diff_highlight(self, value1: str, value2: str) -> DiffSpan:
        """Locate the changed region of value2."""
        return diff_highlight(value1, value2)

    def format_value(self, value: Any) -> Any:
        """Pretty-print JSON values for display."""
        return format_value(value)

    def summarize(self, entries: Sequence[ComparisonEntry]) -> ComparisonSummary:
        """Count entries by status."""
        return get_comparison_summary(entries)
