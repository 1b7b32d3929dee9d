"""Clipboard-specific rendering: entry text, status line and listings."""
from __future__ import annotations

from collections.abc import Iterable

from copypath.clipboard.types import CopiedEntry
from copypath.core.render import format_file, render_files
from copypath.core.utils import plural


def format_entry(entry: CopiedEntry) -> str:
    """Format a single entry under its display path (line marker included)."""
    return format_file(entry.display_path, entry.text)


def render_entries(entries: Iterable[CopiedEntry]) -> str:
    """Join entries into one block. No entries renders as the empty string."""
    return render_files((entry.display_path, entry.text) for entry in entries)


def format_status(count: int) -> str:
    """Describe how many files are on the clipboard."""
    if count == 0:
        return "No files copied"
    return f"{plural(count, 'file')} copied"


def format_entry_summary(entry: CopiedEntry) -> str:
    """One-line summary for clipboard listings: path and line count."""
    return f"{entry.display_path} ({plural(entry.line_count, 'line')})"
