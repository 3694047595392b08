"""
Output file naming.
"""

from __future__ import annotations

import os
import time
from typing import Optional


def timestamp_ms() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


class FileNamer:
    """
    Builds `<directory>/<prefix>_<epoch_ms>.<ext>` paths.

    Stamps handed out by one namer are strictly increasing, so two captures
    inside the same millisecond still get distinct files.
    """

    def __init__(self, directory: str = ".") -> None:
        self.directory = directory
        self._last_ms: Optional[int] = None

    def next_timestamp(self) -> int:
        now = timestamp_ms()
        if self._last_ms is not None and now <= self._last_ms:
            now = self._last_ms + 1
        self._last_ms = now
        return now

    def path(self, prefix: str, extension: str) -> str:
        if self.directory and not os.path.exists(self.directory):
            os.makedirs(self.directory)
        filename = f"{prefix}_{self.next_timestamp()}.{extension}"
        return os.path.join(self.directory, filename)
