"""Rich-based output utilities for the copypath CLI."""

from rich.console import Console
from rich.markup import escape

from copypath.commands.protocol import CommandOutput

# Shared console instance
console = Console(highlight=False)


def print_error(message: str) -> None:
    """Print an error message in red.

    Args:
        message: The error message to display.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_output(output: CommandOutput, show_content: bool = False) -> None:
    """Print a command's result; optionally the copied text after it."""
    if not output.ok:
        print_error(output.message or "Command failed")
        return

    if output.message:
        console.print(output.message, markup=False)
    if show_content and output.content:
        console.rule(style="dim")
        console.print(output.content, markup=False)
