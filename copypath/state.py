"""Process-lifetime state owned by one extension instance."""

from __future__ import annotations

from dataclasses import dataclass, field

from copypath.clipboard.manager import ClipboardAggregator
from copypath.config.schema import Config
from copypath.core.files import FileReader, FilesystemReader
from copypath.folders.registry import FolderRegistry


@dataclass
class ExtensionState:
    """Owns the clipboard and the folder registry.

    Built explicitly and handed to the command layer; nothing here is
    persisted.
    """

    clipboard: ClipboardAggregator = field(default_factory=ClipboardAggregator)
    folders: FolderRegistry = field(default_factory=FolderRegistry)

    @classmethod
    def from_config(cls, config: Config, reader: FileReader | None = None) -> ExtensionState:
        """Create state whose file reads and name limits follow ``config``."""
        reader = reader or FilesystemReader(
            encoding=config.clipboard.encoding,
            max_bytes=config.clipboard.max_file_bytes,
        )
        return cls(
            clipboard=ClipboardAggregator(reader=reader),
            folders=FolderRegistry(
                reader=reader,
                max_name_length=config.folders.max_name_length,
            ),
        )

    def status_text(self) -> str:
        return (
            f"Clipboard: {self.clipboard.status_text()} | "
            f"Folders: {self.folders.count()} | "
            f"Total folder files: {self.folders.total_file_count()}"
        )
