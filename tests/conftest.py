"""Shared pytest fixtures and configuration for pytest."""

from pathlib import Path

import pytest


class FakeReader:
    """In-memory FileReader: paths missing from ``files`` are unreadable."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files = dict(files or {})
        self.calls: list[str] = []

    def __call__(self, path: str) -> str | None:
        self.calls.append(path)
        return self.files.get(path)


@pytest.fixture
def reader() -> FakeReader:
    """Reader preloaded with three small source files."""
    return FakeReader(
        {
            "src/a.py": "print('a')\n",
            "src/b.py": "print('b')\n",
            "README.md": "# Title\n",
        }
    )


@pytest.fixture
def project_files(tmp_path: Path) -> dict[str, Path]:
    """Real files on disk for tests that go through FilesystemReader."""
    files = {
        "one": tmp_path / "one.txt",
        "two": tmp_path / "two.txt",
    }
    files["one"].write_text("first file\n", encoding="utf-8")
    files["two"].write_text("second file\n", encoding="utf-8")
    return files
