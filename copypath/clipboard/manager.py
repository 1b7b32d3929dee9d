"""ClipboardAggregator - ordered, per-file clipboard with a combined rendering."""
from __future__ import annotations

from collections.abc import Iterable

from copypath.clipboard.render import format_status, render_entries
from copypath.clipboard.types import CopiedEntry, LineSelection
from copypath.core.errors import NothingReadableError
from copypath.core.files import FileReader, FilesystemReader


class ClipboardAggregator:
    """Holds the files the user has copied, at most one entry per source file.

    Copying a file that is already on the clipboard replaces its entry and
    moves it to the end, so the clipboard reflects the current state of
    each flagged file rather than a history.
    """

    def __init__(self, reader: FileReader | None = None) -> None:
        """Initialize clipboard aggregator.

        Args:
            reader: Source of file text for ``copy_many`` (defaults to the
                local filesystem)
        """
        self._reader: FileReader = reader or FilesystemReader()
        self._entries: list[CopiedEntry] = []

    def _put(self, entry: CopiedEntry) -> None:
        """Replace any entry with the same source key, then append."""
        self._entries = [e for e in self._entries if e.source_key != entry.source_key]
        self._entries.append(entry)

    # --- Core Operations ---

    def copy_with_content(
        self,
        path: str,
        full_text: str,
        selection: LineSelection | None = None,
    ) -> str:
        """Copy a file's text, or a selection of it, to the clipboard.

        Args:
            path: File path, used as the deduplication key
            full_text: Entire file text
            selection: Optional line range whose text overrides ``full_text``

        Returns:
            Combined rendering of every entry on the clipboard
        """
        self._put(CopiedEntry.from_content(path, full_text, selection))
        return self.render()

    def copy_many(self, paths: Iterable[str]) -> str:
        """Read and copy several files, skipping the ones that can't be read.

        Returns:
            Combined rendering of every entry on the clipboard, including
            entries from earlier copies

        Raises:
            NothingReadableError: If none of the paths could be read. The
                clipboard is left unchanged.
        """
        copied = []
        for path in paths:
            text = self._reader(path)
            if text is None:
                continue
            copied.append(CopiedEntry.from_content(path, text))

        if not copied:
            raise NothingReadableError("No files could be read successfully")

        for entry in copied:
            self._put(entry)
        return self.render()

    def clear(self) -> None:
        """Remove every entry. Safe to call on an empty clipboard."""
        self._entries.clear()

    def remove(self, source_key: str) -> bool:
        """Remove the entry for ``source_key``. Returns True if removed."""
        remaining = [e for e in self._entries if e.source_key != source_key]
        removed = len(remaining) != len(self._entries)
        self._entries = remaining
        return removed

    # --- Queries ---

    def contains(self, source_key: str) -> bool:
        return any(e.source_key == source_key for e in self._entries)

    def get(self, source_key: str) -> CopiedEntry | None:
        for entry in self._entries:
            if entry.source_key == source_key:
                return entry
        return None

    def count(self) -> int:
        return len(self._entries)

    def has_entries(self) -> bool:
        return bool(self._entries)

    def list(self) -> tuple[CopiedEntry, ...]:
        """Entries in render order (read-only snapshot)."""
        return tuple(self._entries)

    def status_text(self) -> str:
        return format_status(len(self._entries))

    def render(self) -> str:
        return render_entries(self._entries)
