"""FolderRegistry - create, rename and delete folders and manage their files."""
from __future__ import annotations

from collections.abc import Iterable

from copypath.core.constants import INVALID_FOLDER_NAME_CHARS, MAX_FOLDER_NAME_LENGTH
from copypath.core.errors import (
    ConflictError,
    NotFoundError,
    NothingReadableError,
    OperationError,
    ValidationError,
)
from copypath.core.files import FileReader, FilesystemReader
from copypath.core.identifiers import FolderIdGenerator
from copypath.core.render import render_files
from copypath.folders.types import Folder


class FolderRegistry:
    """Ordered collection of folders, in creation order.

    Mutations return a human-readable success message and raise an
    ``OperationError`` subclass when they cannot be applied. A failed
    mutation leaves the registry unchanged.
    """

    def __init__(
        self,
        reader: FileReader | None = None,
        id_generator: FolderIdGenerator | None = None,
        max_name_length: int = MAX_FOLDER_NAME_LENGTH,
    ) -> None:
        """Initialize folder registry.

        Args:
            reader: Source of file text for ``copy_folder_contents``
            id_generator: Folder id source (override for testing)
            max_name_length: Longest name ``validate_name`` accepts
        """
        self._reader: FileReader = reader or FilesystemReader()
        self._ids = id_generator or FolderIdGenerator()
        self._max_name_length = max_name_length
        self._folders: list[Folder] = []

    def _require(self, folder_id: str) -> Folder:
        folder = self.get(folder_id)
        if folder is None:
            raise NotFoundError("Folder not found")
        return folder

    def _check_available(self, name: str, exclude_id: str | None = None) -> None:
        """Reject empty names and names another folder already uses."""
        if not name.strip():
            raise ValidationError("Folder name cannot be empty")

        existing = self.find_by_name(name)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError("Folder with this name already exists")

    # --- Validation ---

    def validate_name(self, name: str, exclude_id: str | None = None) -> None:
        """Check that ``name`` is a well-formed folder name before using it.

        Stricter than what ``create`` and ``rename`` enforce, for callers
        such as a naming dialog that want to steer users away from long
        names and path-like characters.

        Args:
            name: Proposed folder name
            exclude_id: Folder being renamed; its own name is not a collision

        Raises:
            ValidationError: If the name is empty, too long, or contains
                any of ``/ \\ : * ? " < > |``
            ConflictError: If another folder already uses the name
        """
        if not name.strip():
            raise ValidationError("Folder name cannot be empty")

        if len(name) > self._max_name_length:
            raise ValidationError(
                f"Folder name is too long (max {self._max_name_length} characters)"
            )

        if any(c in INVALID_FOLDER_NAME_CHARS for c in name):
            raise ValidationError("Folder name contains invalid characters")

        existing = self.find_by_name(name)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError("Folder with this name already exists")

    def is_valid_name(self, name: str, exclude_id: str | None = None) -> bool:
        """Check a folder name without raising."""
        try:
            self.validate_name(name, exclude_id)
            return True
        except OperationError:
            return False

    # --- Folder CRUD ---

    def create(self, name: str, initial_paths: Iterable[str] = ()) -> str:
        """Create a folder, optionally seeded with files.

        Only empty and already-used names are rejected; see
        ``validate_name`` for the stricter pre-check.

        Duplicate paths in ``initial_paths`` are skipped.
        """
        self._check_available(name)

        folder = Folder(id=self._ids.next_id(), name=name)
        for path in initial_paths:
            folder.add_file(path)

        self._folders.append(folder)
        return f"Folder '{name}' created successfully"

    def delete(self, folder_id: str) -> str:
        folder = self._require(folder_id)
        self._folders.remove(folder)
        return f"Folder '{folder.name}' deleted successfully"

    def rename(self, folder_id: str, new_name: str) -> str:
        self._check_available(new_name, exclude_id=folder_id)
        folder = self._require(folder_id)

        old_name = folder.name
        folder.name = new_name
        return f"Folder renamed from '{old_name}' to '{new_name}'"

    def set_color(self, folder_id: str, color: str | None = None) -> str:
        """Set the folder's display color, or clear it when ``color`` is None."""
        folder = self._require(folder_id)
        folder.color = color
        if color is not None:
            return f"Color '{color}' set for folder '{folder.name}'"
        return f"Color removed from folder '{folder.name}'"

    # --- Membership ---

    def add_file(self, folder_id: str, path: str) -> str:
        folder = self._require(folder_id)
        if not folder.add_file(path):
            raise ConflictError("File already exists in folder")
        return f"File '{path}' added to folder '{folder.name}'"

    def remove_file(self, folder_id: str, path: str) -> str:
        folder = self._require(folder_id)
        if not folder.remove_file(path):
            raise NotFoundError("File not found in folder")
        return f"File '{path}' removed from folder '{folder.name}'"

    # --- Content ---

    def copy_folder_contents(self, folder_id: str) -> str:
        """Render the text of every readable file in the folder.

        Unreadable files are skipped. The result is independent of the
        clipboard aggregator's entries.

        Raises:
            NotFoundError: If the folder doesn't exist
            NothingReadableError: If none of the folder's files could be read
        """
        folder = self._require(folder_id)

        copied: list[tuple[str, str]] = []
        for path in folder.files:
            text = self._reader(path)
            if text is not None:
                copied.append((path, text))

        if not copied:
            raise NothingReadableError("No readable files found in folder")

        return render_files(copied)

    # --- Queries ---

    def get(self, folder_id: str) -> Folder | None:
        for folder in self._folders:
            if folder.id == folder_id:
                return folder
        return None

    def find_by_name(self, name: str) -> Folder | None:
        for folder in self._folders:
            if folder.name == name:
                return folder
        return None

    def list(self) -> tuple[Folder, ...]:
        """Folders in creation order."""
        return tuple(self._folders)

    def count(self) -> int:
        return len(self._folders)

    def total_file_count(self) -> int:
        return sum(folder.file_count for folder in self._folders)

    def folders_containing(self, path: str) -> list[Folder]:
        """Folders whose file list includes ``path``, in registry order."""
        return [folder for folder in self._folders if folder.has_file(path)]
