"""Folder collections of file references."""
from copypath.folders.registry import FolderRegistry
from copypath.folders.types import Folder

__all__ = [
    "Folder",
    "FolderRegistry",
]
