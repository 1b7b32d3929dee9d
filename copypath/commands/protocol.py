"""Types for the command system.

Commands return structured output rather than printing directly. The
caller (host façade, CLI or shell) decides how to present it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from copypath.state import ExtensionState


class CommandResult(Enum):
    """Result status of a command execution.

    Attributes:
        SUCCESS: Command completed successfully.
        ERROR: Command failed with an error.
    """

    SUCCESS = auto()
    ERROR = auto()


@dataclass
class CommandOutput:
    """Output from a command execution.

    Attributes:
        result: The result status of the command.
        message: Human-readable message (for display).
        data: Structured data, e.g. ``{"content": ...}`` for copy commands.
    """

    result: CommandResult
    message: str | None = None
    data: dict[str, Any] | None = None

    @classmethod
    def success(
        cls,
        message: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> CommandOutput:
        """Create a successful output."""
        return cls(result=CommandResult.SUCCESS, message=message, data=data)

    @classmethod
    def error(cls, message: str) -> CommandOutput:
        """Create an error output.

        Args:
            message: Error message describing what went wrong.
        """
        return cls(result=CommandResult.ERROR, message=message)

    @property
    def ok(self) -> bool:
        return self.result == CommandResult.SUCCESS

    @property
    def content(self) -> str | None:
        """Combined clipboard text produced by a copy command, if any."""
        if self.data is None:
            return None
        return self.data.get("content")


@dataclass
class CommandContext:
    """Context for command execution.

    Attributes:
        state: The clipboard and folder state commands operate on.
    """

    state: ExtensionState
