"""Paste-ready text for a sequence of files.

Each file renders as its path, a blank line, then its text. Files are
joined with a ``---`` rule surrounded by blank lines. The clipboard and the
folder copy both render through here so pasted output looks identical
either way.
"""
from __future__ import annotations

from collections.abc import Iterable

from copypath.core.constants import ENTRY_SEPARATOR


def format_file(path: str, text: str) -> str:
    """Format one file as ``"{path}\\n\\n{text}"``."""
    return f"{path}\n\n{text}"


def render_files(files: Iterable[tuple[str, str]]) -> str:
    """Join ``(path, text)`` pairs into one block. No files renders as ``""``."""
    return ENTRY_SEPARATOR.join(format_file(path, text) for path, text in files)
