"""Interactive shell: one Extension shared across every entered command."""

from __future__ import annotations

import shlex

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter

from copypath.cli.output import console, print_error, print_output
from copypath.commands.requests import COMMAND_NAMES
from copypath.extension import Extension

QUIT_WORDS = frozenset({"quit", "exit", "q"})


def execute_line(ext: Extension, line: str, show_content: bool = False) -> bool:
    """Run one shell line. Returns False when the user asked to quit.

    The line is split like a POSIX shell, so quote arguments containing
    spaces: ``create_folder "My Docs" README.md``.
    """
    try:
        words = shlex.split(line)
    except ValueError as e:
        print_error(f"Could not parse input: {e}")
        return True

    if not words:
        return True
    if words[0] in QUIT_WORDS:
        return False

    print_output(ext.run(words[0], words[1:]), show_content=show_content)
    return True


def run_shell(ext: Extension, show_content: bool = False) -> None:
    """Read commands until quit or EOF."""
    prompt_session: PromptSession[str] = PromptSession(
        completer=WordCompleter([*COMMAND_NAMES, *sorted(QUIT_WORDS)], sentence=True),
    )

    console.print("copypath shell. Commands: " + ", ".join(COMMAND_NAMES), style="dim")
    console.print("Type quit to exit.", style="dim")

    while True:
        try:
            line = prompt_session.prompt("> ")
        except KeyboardInterrupt:
            console.print("Use quit to exit.", style="dim")
            continue
        except EOFError:
            break

        if not execute_line(ext, line, show_content=show_content):
            break
