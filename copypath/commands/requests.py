"""Typed command requests parsed from a command name and string arguments.

Each command the host can send has one request class. ``parse_request``
is the only place that deals with positional string arguments; everything
after it works with typed fields.

Example:
    request = parse_request("add_file_to_folder", ["folder_1_1", "src/main.py"])
    # AddFileToFolder(folder_id="folder_1_1", path="src/main.py")
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from copypath.clipboard.types import LineSelection
from copypath.core.errors import ValidationError


@dataclass(frozen=True)
class CopyPathWithContent:
    path: str
    content: str
    selection: LineSelection | None = None


@dataclass(frozen=True)
class CopyFiles:
    paths: tuple[str, ...]


@dataclass(frozen=True)
class RemoveFromClipboard:
    path: str


@dataclass(frozen=True)
class ClearClipboard:
    pass


@dataclass(frozen=True)
class ListClipboard:
    pass


@dataclass(frozen=True)
class CreateFolder:
    name: str
    files: tuple[str, ...] = ()


@dataclass(frozen=True)
class DeleteFolder:
    folder_id: str


@dataclass(frozen=True)
class RenameFolder:
    folder_id: str
    new_name: str


@dataclass(frozen=True)
class AddFileToFolder:
    folder_id: str
    path: str


@dataclass(frozen=True)
class RemoveFileFromFolder:
    folder_id: str
    path: str


@dataclass(frozen=True)
class SetFolderColor:
    folder_id: str
    color: str | None = None


@dataclass(frozen=True)
class CopyFolderContents:
    folder_id: str


@dataclass(frozen=True)
class ListFolders:
    pass


@dataclass(frozen=True)
class Status:
    pass


Request = (
    CopyPathWithContent
    | CopyFiles
    | RemoveFromClipboard
    | ClearClipboard
    | ListClipboard
    | CreateFolder
    | DeleteFolder
    | RenameFolder
    | AddFileToFolder
    | RemoveFileFromFolder
    | SetFolderColor
    | CopyFolderContents
    | ListFolders
    | Status
)


def _parse_line(value: str, label: str) -> int:
    """Parse a non-negative line number."""
    if not (value.isascii() and value.isdigit()):
        raise ValidationError(f"Invalid {label} line")
    return int(value)


def _require(args: Sequence[str], count: int, message: str) -> None:
    if len(args) < count:
        raise ValidationError(message)


def _parse_copy_path_with_content(args: Sequence[str]) -> CopyPathWithContent:
    _require(args, 2, "Missing arguments: file_path and content required")
    path, content = args[0], args[1]

    selection = None
    if len(args) >= 4:
        start_line = _parse_line(args[2], "start")
        end_line = _parse_line(args[3], "end")
        # Without explicit selected text the whole content stands in
        selected_text = args[4] if len(args) >= 5 else content
        selection = LineSelection(start_line, end_line, selected_text)

    return CopyPathWithContent(path=path, content=content, selection=selection)


def _parse_copy_files(args: Sequence[str]) -> CopyFiles:
    _require(args, 1, "Missing arguments: at least one file_path required")
    return CopyFiles(paths=tuple(args))


def _parse_remove_from_clipboard(args: Sequence[str]) -> RemoveFromClipboard:
    _require(args, 1, "Missing argument: file_path required")
    return RemoveFromClipboard(path=args[0])


def _parse_create_folder(args: Sequence[str]) -> CreateFolder:
    _require(args, 1, "Missing argument: folder name required")
    return CreateFolder(name=args[0], files=tuple(args[1:]))


def _parse_delete_folder(args: Sequence[str]) -> DeleteFolder:
    _require(args, 1, "Missing argument: folder_id required")
    return DeleteFolder(folder_id=args[0])


def _parse_rename_folder(args: Sequence[str]) -> RenameFolder:
    _require(args, 2, "Missing arguments: folder_id and new_name required")
    return RenameFolder(folder_id=args[0], new_name=args[1])


def _parse_add_file_to_folder(args: Sequence[str]) -> AddFileToFolder:
    _require(args, 2, "Missing arguments: folder_id and file_path required")
    return AddFileToFolder(folder_id=args[0], path=args[1])


def _parse_remove_file_from_folder(args: Sequence[str]) -> RemoveFileFromFolder:
    _require(args, 2, "Missing arguments: folder_id and file_path required")
    return RemoveFileFromFolder(folder_id=args[0], path=args[1])


def _parse_set_folder_color(args: Sequence[str]) -> SetFolderColor:
    _require(args, 1, "Missing argument: folder_id required")
    # An omitted or blank color clears it
    color = args[1] if len(args) >= 2 and args[1].strip() else None
    return SetFolderColor(folder_id=args[0], color=color)


def _parse_copy_folder_contents(args: Sequence[str]) -> CopyFolderContents:
    _require(args, 1, "Missing argument: folder_id required")
    return CopyFolderContents(folder_id=args[0])


_PARSERS: dict[str, Callable[[Sequence[str]], Request]] = {
    "copy_path_with_content": _parse_copy_path_with_content,
    "copy_files": _parse_copy_files,
    "remove_from_clipboard": _parse_remove_from_clipboard,
    "clear_clipboard": lambda args: ClearClipboard(),
    "list_clipboard": lambda args: ListClipboard(),
    "create_folder": _parse_create_folder,
    "delete_folder": _parse_delete_folder,
    "rename_folder": _parse_rename_folder,
    "add_file_to_folder": _parse_add_file_to_folder,
    "remove_file_from_folder": _parse_remove_file_from_folder,
    "set_folder_color": _parse_set_folder_color,
    "copy_folder_contents": _parse_copy_folder_contents,
    "list_folders": lambda args: ListFolders(),
    "status": lambda args: Status(),
}

COMMAND_NAMES: tuple[str, ...] = tuple(_PARSERS)


def parse_request(command: str, args: Sequence[str]) -> Request:
    """Turn a command name and its string arguments into a typed request.

    Extra trailing arguments are ignored.

    Raises:
        ValidationError: For unknown commands, missing arguments or
            malformed line numbers.
    """
    parser = _PARSERS.get(command)
    if parser is None:
        raise ValidationError(f"Unknown command: {command}")
    return parser(args)
