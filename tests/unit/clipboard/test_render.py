"""Tests for clipboard rendering helpers."""

import pytest

from copypath.clipboard.render import (
    format_entry,
    format_entry_summary,
    format_status,
    render_entries,
)
from copypath.clipboard.types import CopiedEntry


class TestRenderEntries:
    """Tests for render_entries."""

    def test_empty_renders_empty_string(self) -> None:
        assert render_entries([]) == ""

    def test_single_entry_has_no_separator(self) -> None:
        """One entry renders exactly as path, blank line, text."""
        entry = CopiedEntry("a.py:3", "a.py", "x = 1")
        assert render_entries([entry]) == "a.py:3\n\nx = 1"
        assert render_entries([entry]) == format_entry(entry)

    def test_entries_joined_with_rule(self) -> None:
        entries = [
            CopiedEntry("a.py", "a.py", "A"),
            CopiedEntry("b.py", "b.py", "B"),
        ]
        assert render_entries(entries) == "a.py\n\nA\n\n---\n\nb.py\n\nB"


class TestFormatStatus:
    """Tests for format_status."""

    def test_zero(self) -> None:
        assert format_status(0) == "No files copied"

    def test_one(self) -> None:
        assert format_status(1) == "1 file copied"

    @pytest.mark.parametrize("count", [2, 3, 10, 250])
    def test_many(self, count: int) -> None:
        assert format_status(count) == f"{count} files copied"


class TestFormatEntrySummary:
    """Tests for format_entry_summary."""

    def test_singular_line(self) -> None:
        assert format_entry_summary(CopiedEntry("a.py", "a.py", "x")) == "a.py (1 line)"

    def test_plural_lines(self) -> None:
        entry = CopiedEntry("a.py:1-2", "a.py", "x\ny\n")
        assert format_entry_summary(entry) == "a.py:1-2 (2 lines)"
