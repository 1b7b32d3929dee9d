"""Shared text helpers for copypath."""


def plural(count: int, noun: str) -> str:
    """Return ``"1 file"`` / ``"3 files"`` style counts."""
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"
