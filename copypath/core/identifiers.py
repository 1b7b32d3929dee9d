"""Folder identifier generation.

Ids look like ``folder_1718000000000_3``: the creation time in epoch
milliseconds plus a per-generator sequence number. The sequence number
keeps ids distinct when several folders are created within the same
millisecond.

Usage:
    from copypath.core.identifiers import FolderIdGenerator

    ids = FolderIdGenerator()
    folder_id = ids.next_id()
"""

from __future__ import annotations

import itertools
import time
from collections.abc import Callable

FOLDER_ID_PREFIX = "folder_"


class FolderIdGenerator:
    """Produces folder ids that never repeat within one generator."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        """Initialize the generator.

        Args:
            clock: Returns the current time in seconds (override for testing).
        """
        self._clock = clock
        self._sequence = itertools.count(1)

    def next_id(self) -> str:
        timestamp_ms = int(self._clock() * 1000)
        return f"{FOLDER_ID_PREFIX}{timestamp_ms}_{next(self._sequence)}"
