"""
CameraInfo model for per-device capability metadata.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class CameraInfo:
    """
    Snapshot of the properties an open camera reports.

    Values come straight from the capture backend. Properties the backend does
    not support keep whatever placeholder it returns (usually 0 or -1).

    Attributes:
        width: Frame width in pixels.
        height: Frame height in pixels.
        fps: Reported frame rate.
        backend: Capture API name (e.g. "DSHOW", "V4L2").
        auto_exposure: Auto exposure setting.
        brightness: Brightness setting.
        contrast: Contrast setting.
        saturation: Saturation setting.
        fourcc: Pixel format as a 4-character string.
        has_microphone: Whether an associated audio input is exposed.
    """
    width: int
    height: int
    fps: float
    backend: str
    auto_exposure: float
    brightness: float
    contrast: float
    saturation: float
    fourcc: str
    has_microphone: bool

    @property
    def resolution(self) -> tuple[int, int]:
        """Return (width, height)."""
        return (self.width, self.height)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "fps": self.fps,
            "backend": self.backend,
            "auto_exposure": self.auto_exposure,
            "brightness": self.brightness,
            "contrast": self.contrast,
            "saturation": self.saturation,
            "fourcc": self.fourcc,
            "has_microphone": self.has_microphone,
        }
