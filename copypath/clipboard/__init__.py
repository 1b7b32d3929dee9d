"""Clipboard system for copypath."""
from copypath.clipboard.manager import ClipboardAggregator
from copypath.clipboard.render import (
    format_entry,
    format_entry_summary,
    format_status,
    render_entries,
)
from copypath.clipboard.types import CopiedEntry, LineSelection

__all__ = [
    "ClipboardAggregator",
    "CopiedEntry",
    "LineSelection",
    "format_entry",
    "format_entry_summary",
    "format_status",
    "render_entries",
]
