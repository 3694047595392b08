from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from camera.base import Camera
from capture.naming import FileNamer
from models.config import Config


@dataclass
class RuntimeContext:
    """Holds the enumerated cameras and config; avoids global singletons."""

    config: Config
    cameras: List[Camera]
    namer: FileNamer = field(default_factory=FileNamer)

    @property
    def camera_count(self) -> int:
        return len(self.cameras)

    def camera_at(self, number: int) -> Camera:
        """Camera by its 1-based menu number."""
        if not 1 <= number <= len(self.cameras):
            raise IndexError(f"Camera number {number} out of range 1-{len(self.cameras)}")
        return self.cameras[number - 1]
