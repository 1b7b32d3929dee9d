"""Clipboard system types and dataclasses."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LineSelection:
    """A line range captured from the editor, with its extracted text.

    Lines are 1-based and inclusive. ``end_line >= start_line`` is expected
    but not enforced.
    """

    start_line: int
    end_line: int
    text: str

    def format_path(self, path: str) -> str:
        """Suffix ``path`` with the line marker (``path:5`` or ``path:5-9``)."""
        if self.start_line == self.end_line:
            return f"{path}:{self.start_line}"
        return f"{path}:{self.start_line}-{self.end_line}"


@dataclass(frozen=True)
class CopiedEntry:
    """One file's captured text on the clipboard."""

    display_path: str  # Shown to the user, may carry a line marker
    source_key: str  # Unmodified file path, deduplication key
    text: str

    @classmethod
    def from_content(
        cls,
        path: str,
        full_text: str,
        selection: LineSelection | None = None,
    ) -> CopiedEntry:
        """Create entry from file content, preferring the selection if given."""
        if selection is None:
            return cls(display_path=path, source_key=path, text=full_text)
        return cls(
            display_path=selection.format_path(path),
            source_key=path,
            text=selection.text,
        )

    @property
    def line_count(self) -> int:
        return self.text.count("\n") + (
            1 if self.text and not self.text.endswith("\n") else 0
        )
