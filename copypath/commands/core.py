"""Command implementations for copypath.

Each ``cmd_*`` function performs one clipboard or folder operation and
returns a CommandOutput instead of printing. Operation errors become
``CommandOutput.error``; anything else propagates.

Example:
    from copypath.commands import CommandContext, dispatch, parse_request

    ctx = CommandContext(state=ExtensionState())
    output = dispatch(ctx, parse_request("status", []))
    print(output.message)
"""

from __future__ import annotations

from typing import assert_never

from copypath.clipboard.render import format_entry_summary
from copypath.clipboard.types import LineSelection
from copypath.commands.protocol import CommandContext, CommandOutput
from copypath.commands.requests import (
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
    Request,
    SetFolderColor,
    Status,
)
from copypath.core.errors import OperationError


def _copied(ctx: CommandContext, content: str) -> CommandOutput:
    count = ctx.state.clipboard.count()
    return CommandOutput.success(
        message=f"Copied {count} files to clipboard",
        data={"content": content, "file_count": count},
    )


def cmd_copy_path_with_content(
    ctx: CommandContext,
    path: str,
    content: str,
    selection: LineSelection | None = None,
) -> CommandOutput:
    """Copy one file's text (or a selection of it) onto the clipboard.

    Returns:
        CommandOutput whose data carries the combined clipboard text.
    """
    combined = ctx.state.clipboard.copy_with_content(path, content, selection)
    return _copied(ctx, combined)


def cmd_copy_files(ctx: CommandContext, paths: tuple[str, ...]) -> CommandOutput:
    """Read files from disk and copy them onto the clipboard."""
    try:
        combined = ctx.state.clipboard.copy_many(paths)
    except OperationError as e:
        return CommandOutput.error(e.message)
    return _copied(ctx, combined)


def cmd_remove_from_clipboard(ctx: CommandContext, path: str) -> CommandOutput:
    if not ctx.state.clipboard.remove(path):
        return CommandOutput.error(f"File not on clipboard: {path}")
    return CommandOutput.success(message=f"Removed '{path}' from clipboard")


def cmd_clear_clipboard(ctx: CommandContext) -> CommandOutput:
    ctx.state.clipboard.clear()
    return CommandOutput.success(message="Clipboard cleared")


def cmd_list_clipboard(ctx: CommandContext) -> CommandOutput:
    """List clipboard entries in paste order."""
    clipboard = ctx.state.clipboard
    entries = clipboard.list()
    lines = [clipboard.status_text()]
    lines.extend(f"  {format_entry_summary(entry)}" for entry in entries)
    return CommandOutput.success(
        message="\n".join(lines),
        data={"entries": [entry.display_path for entry in entries]},
    )


def cmd_create_folder(
    ctx: CommandContext,
    name: str,
    files: tuple[str, ...] = (),
) -> CommandOutput:
    try:
        message = ctx.state.folders.create(name, files)
    except OperationError as e:
        return CommandOutput.error(e.message)
    folder = ctx.state.folders.find_by_name(name)
    return CommandOutput.success(
        message=message,
        data={"folder_id": folder.id if folder else None},
    )


def cmd_delete_folder(ctx: CommandContext, folder_id: str) -> CommandOutput:
    try:
        return CommandOutput.success(message=ctx.state.folders.delete(folder_id))
    except OperationError as e:
        return CommandOutput.error(e.message)


def cmd_rename_folder(ctx: CommandContext, folder_id: str, new_name: str) -> CommandOutput:
    try:
        return CommandOutput.success(message=ctx.state.folders.rename(folder_id, new_name))
    except OperationError as e:
        return CommandOutput.error(e.message)


def cmd_add_file_to_folder(ctx: CommandContext, folder_id: str, path: str) -> CommandOutput:
    try:
        return CommandOutput.success(message=ctx.state.folders.add_file(folder_id, path))
    except OperationError as e:
        return CommandOutput.error(e.message)


def cmd_remove_file_from_folder(
    ctx: CommandContext, folder_id: str, path: str
) -> CommandOutput:
    try:
        return CommandOutput.success(message=ctx.state.folders.remove_file(folder_id, path))
    except OperationError as e:
        return CommandOutput.error(e.message)


def cmd_set_folder_color(
    ctx: CommandContext, folder_id: str, color: str | None = None
) -> CommandOutput:
    try:
        return CommandOutput.success(message=ctx.state.folders.set_color(folder_id, color))
    except OperationError as e:
        return CommandOutput.error(e.message)


def cmd_copy_folder_contents(ctx: CommandContext, folder_id: str) -> CommandOutput:
    """Render a folder's readable files. Does not touch the clipboard entries."""
    try:
        combined = ctx.state.folders.copy_folder_contents(folder_id)
    except OperationError as e:
        return CommandOutput.error(e.message)
    return CommandOutput.success(
        message="Copied folder contents to clipboard",
        data={"content": combined},
    )


def cmd_list_folders(ctx: CommandContext) -> CommandOutput:
    """List folders as ``"{id}: {name} ({n} files)"`` lines."""
    folders = ctx.state.folders.list()
    lines = [f"{f.id}: {f.name} ({f.file_count} files)" for f in folders]
    return CommandOutput.success(
        message="\n".join(lines),
        data={
            "folders": [
                {"id": f.id, "name": f.name, "files": list(f.files), "color": f.color}
                for f in folders
            ]
        },
    )


def cmd_status(ctx: CommandContext) -> CommandOutput:
    return CommandOutput.success(message=ctx.state.status_text())


def dispatch(ctx: CommandContext, request: Request) -> CommandOutput:
    """Run the command matching ``request``."""
    match request:
        case CopyPathWithContent(path=path, content=content, selection=selection):
            return cmd_copy_path_with_content(ctx, path, content, selection)
        case CopyFiles(paths=paths):
            return cmd_copy_files(ctx, paths)
        case RemoveFromClipboard(path=path):
            return cmd_remove_from_clipboard(ctx, path)
        case ClearClipboard():
            return cmd_clear_clipboard(ctx)
        case ListClipboard():
            return cmd_list_clipboard(ctx)
        case CreateFolder(name=name, files=files):
            return cmd_create_folder(ctx, name, files)
        case DeleteFolder(folder_id=folder_id):
            return cmd_delete_folder(ctx, folder_id)
        case RenameFolder(folder_id=folder_id, new_name=new_name):
            return cmd_rename_folder(ctx, folder_id, new_name)
        case AddFileToFolder(folder_id=folder_id, path=path):
            return cmd_add_file_to_folder(ctx, folder_id, path)
        case RemoveFileFromFolder(folder_id=folder_id, path=path):
            return cmd_remove_file_from_folder(ctx, folder_id, path)
        case SetFolderColor(folder_id=folder_id, color=color):
            return cmd_set_folder_color(ctx, folder_id, color)
        case CopyFolderContents(folder_id=folder_id):
            return cmd_copy_folder_contents(ctx, folder_id)
        case ListFolders():
            return cmd_list_folders(ctx)
        case Status():
            return cmd_status(ctx)
        case _:
            assert_never(request)
