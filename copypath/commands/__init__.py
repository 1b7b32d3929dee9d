"""Command infrastructure for copypath.

Architecture:
    - protocol.py: Types for command system (CommandResult, CommandOutput, CommandContext)
    - requests.py: Typed request per command and the string-argument parser
    - core.py: Command implementations and the request dispatcher

Example:
    from copypath.commands import CommandContext, CommandResult, dispatch, parse_request

    ctx = CommandContext(state=state)
    output = dispatch(ctx, parse_request("list_folders", []))
    if output.result == CommandResult.SUCCESS:
        print(output.message)
"""

from copypath.commands.core import (
    cmd_add_file_to_folder,
    cmd_clear_clipboard,
    cmd_copy_files,
    cmd_copy_folder_contents,
    cmd_copy_path_with_content,
    cmd_create_folder,
    cmd_delete_folder,
    cmd_list_clipboard,
    cmd_list_folders,
    cmd_remove_file_from_folder,
    cmd_remove_from_clipboard,
    cmd_rename_folder,
    cmd_set_folder_color,
    cmd_status,
    dispatch,
)
from copypath.commands.protocol import (
    CommandContext,
    CommandOutput,
    CommandResult,
)
from copypath.commands.requests import COMMAND_NAMES, Request, parse_request

__all__ = [
    # Protocol types
    "CommandContext",
    "CommandOutput",
    "CommandResult",
    # Requests
    "COMMAND_NAMES",
    "Request",
    "parse_request",
    # Commands
    "cmd_add_file_to_folder",
    "cmd_clear_clipboard",
    "cmd_copy_files",
    "cmd_copy_folder_contents",
    "cmd_copy_path_with_content",
    "cmd_create_folder",
    "cmd_delete_folder",
    "cmd_list_clipboard",
    "cmd_list_folders",
    "cmd_remove_file_from_folder",
    "cmd_remove_from_clipboard",
    "cmd_rename_folder",
    "cmd_set_folder_color",
    "cmd_status",
    "dispatch",
]
