"""Host-facing façade: command name + string arguments in, text out."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from copypath.commands.core import dispatch
from copypath.commands.protocol import CommandContext, CommandOutput
from copypath.commands.requests import parse_request
from copypath.config.schema import Config
from copypath.core.errors import OperationError
from copypath.core.files import FileReader
from copypath.state import ExtensionState

logger = logging.getLogger(__name__)


class Extension:
    """One plugin instance and the state it owns for the session.

    Example:
        ext = Extension()
        ext.handle_command("create_folder", ["Docs", "README.md"])
        # "Folder 'Docs' created successfully"
        ext.handle_command("delete_folder", ["nope"])
        # "Error: Folder not found"
    """

    def __init__(self, state: ExtensionState | None = None) -> None:
        self.state = state or ExtensionState()
        self._ctx = CommandContext(state=self.state)

    @classmethod
    def from_config(cls, config: Config, reader: FileReader | None = None) -> Extension:
        return cls(ExtensionState.from_config(config, reader))

    def run(self, command: str, args: Sequence[str]) -> CommandOutput:
        """Parse and execute a command, returning structured output."""
        try:
            request = parse_request(command, args)
        except OperationError as e:
            output = CommandOutput.error(e.message)
        else:
            output = dispatch(self._ctx, request)

        if not output.ok:
            logger.warning("Command %s failed: %s", command, output.message)
        else:
            logger.debug("Command %s succeeded", command)
        return output

    def handle_command(self, command: str, args: Sequence[str]) -> str:
        """Execute a command and render the result as display text.

        Failures are prefixed with ``"Error: "``.
        """
        output = self.run(command, args)
        message = output.message or ""
        return message if output.ok else f"Error: {message}"
