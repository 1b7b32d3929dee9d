"""Tests for command request parsing."""

import pytest

from copypath.clipboard.types import LineSelection
from copypath.commands.requests import (
    COMMAND_NAMES,
    AddFileToFolder,
    ClearClipboard,
    CopyFiles,
    CopyFolderContents,
    CopyPathWithContent,
    CreateFolder,
    DeleteFolder,
    ListClipboard,
    ListFolders,
    RemoveFileFromFolder,
    RemoveFromClipboard,
    RenameFolder,
    SetFolderColor,
    Status,
    parse_request,
)
from copypath.core.errors import ErrorKind, ValidationError


class TestParseCopyPathWithContent:
    """Tests for copy_path_with_content argument handling."""

    def test_path_and_content(self) -> None:
        assert parse_request("copy_path_with_content", ["a.py", "text"]) == (
            CopyPathWithContent(path="a.py", content="text")
        )

    def test_three_args_ignores_lone_start_line(self) -> None:
        """A start line without an end line is not a selection."""
        request = parse_request("copy_path_with_content", ["a.py", "text", "3"])
        assert request == CopyPathWithContent(path="a.py", content="text")

    def test_lines_without_selected_text_use_content(self) -> None:
        request = parse_request("copy_path_with_content", ["a.py", "text", "3", "7"])
        assert request.selection == LineSelection(3, 7, "text")

    def test_lines_with_selected_text(self) -> None:
        request = parse_request(
            "copy_path_with_content", ["a.py", "text", "3", "7", "selected"]
        )
        assert request.selection == LineSelection(3, 7, "selected")

    def test_missing_arguments(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_request("copy_path_with_content", ["a.py"])

        assert exc_info.value.kind == ErrorKind.VALIDATION
        assert exc_info.value.message == "Missing arguments: file_path and content required"

    @pytest.mark.parametrize("bad", ["x", "-1", "1.5", "", " 3"])
    def test_invalid_start_line(self, bad: str) -> None:
        with pytest.raises(ValidationError, match="Invalid start line"):
            parse_request("copy_path_with_content", ["a.py", "t", bad, "4"])

    def test_invalid_end_line(self) -> None:
        with pytest.raises(ValidationError, match="Invalid end line"):
            parse_request("copy_path_with_content", ["a.py", "t", "4", "end"])


class TestParseOtherCommands:
    """Tests for the remaining commands."""

    @pytest.mark.parametrize(
        "command,args,expected",
        [
            ("copy_files", ["a.py", "b.py"], CopyFiles(paths=("a.py", "b.py"))),
            ("remove_from_clipboard", ["a.py"], RemoveFromClipboard(path="a.py")),
            ("clear_clipboard", [], ClearClipboard()),
            ("list_clipboard", [], ListClipboard()),
            ("create_folder", ["Docs"], CreateFolder(name="Docs")),
            (
                "create_folder",
                ["Docs", "a.md", "b.md"],
                CreateFolder(name="Docs", files=("a.md", "b.md")),
            ),
            ("delete_folder", ["f1"], DeleteFolder(folder_id="f1")),
            ("rename_folder", ["f1", "New"], RenameFolder(folder_id="f1", new_name="New")),
            ("add_file_to_folder", ["f1", "a.py"], AddFileToFolder(folder_id="f1", path="a.py")),
            (
                "remove_file_from_folder",
                ["f1", "a.py"],
                RemoveFileFromFolder(folder_id="f1", path="a.py"),
            ),
            ("set_folder_color", ["f1", "red"], SetFolderColor(folder_id="f1", color="red")),
            ("set_folder_color", ["f1"], SetFolderColor(folder_id="f1")),
            ("set_folder_color", ["f1", " "], SetFolderColor(folder_id="f1")),
            ("copy_folder_contents", ["f1"], CopyFolderContents(folder_id="f1")),
            ("list_folders", [], ListFolders()),
            ("status", ["ignored"], Status()),
        ],
    )
    def test_parses(self, command: str, args: list[str], expected: object) -> None:
        assert parse_request(command, args) == expected

    @pytest.mark.parametrize(
        "command,args,message",
        [
            ("copy_files", [], "Missing arguments: at least one file_path required"),
            ("remove_from_clipboard", [], "Missing argument: file_path required"),
            ("create_folder", [], "Missing argument: folder name required"),
            ("delete_folder", [], "Missing argument: folder_id required"),
            ("rename_folder", ["f1"], "Missing arguments: folder_id and new_name required"),
            ("add_file_to_folder", ["f1"], "Missing arguments: folder_id and file_path required"),
            (
                "remove_file_from_folder",
                ["f1"],
                "Missing arguments: folder_id and file_path required",
            ),
            ("set_folder_color", [], "Missing argument: folder_id required"),
            ("copy_folder_contents", [], "Missing argument: folder_id required"),
        ],
    )
    def test_missing_arguments(self, command: str, args: list[str], message: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_request(command, args)
        assert exc_info.value.message == message

    def test_unknown_command(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_request("paste", [])
        assert exc_info.value.message == "Unknown command: paste"

    def test_command_names(self) -> None:
        assert "copy_path_with_content" in COMMAND_NAMES
        assert "status" in COMMAND_NAMES
        assert len(COMMAND_NAMES) == 14
