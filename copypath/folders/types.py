"""Folder dataclass."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Folder:
    """A named, user-managed group of file references."""

    id: str
    name: str
    files: list[str] = field(default_factory=list)  # Ordered, no duplicates
    color: str | None = None

    def add_file(self, path: str) -> bool:
        """Append ``path`` unless already present. Returns True if added."""
        if path in self.files:
            return False
        self.files.append(path)
        return True

    def remove_file(self, path: str) -> bool:
        """Remove ``path``. Returns True if it was present."""
        if path not in self.files:
            return False
        self.files.remove(path)
        return True

    def has_file(self, path: str) -> bool:
        return path in self.files

    @property
    def file_count(self) -> int:
        return len(self.files)
