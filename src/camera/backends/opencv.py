"""
OpenCV camera backend.

Opens local camera devices by index through an explicit capture API
(DirectShow, Media Foundation, V4L2, AVFoundation, ...).
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Tuple

import cv2
import numpy as np

from camera.base import Camera

# Map friendly names to OpenCV API backends
BACKENDS = {
    "any": cv2.CAP_ANY,  # let OpenCV decide
    "dshow": cv2.CAP_DSHOW,  # DirectShow, Windows
    "msmf": cv2.CAP_MSMF,  # Windows Media Foundation
    "v4l2": cv2.CAP_V4L2,
    "avfoundation": cv2.CAP_AVFOUNDATION,
    "gstreamer": cv2.CAP_GSTREAMER,
}


def platform_backend(platform: Optional[str] = None) -> str:
    """Name of the native camera API for a platform (defaults to this one)."""
    platform = platform or sys.platform
    if platform == "win32":
        return "dshow"
    if platform == "darwin":
        return "avfoundation"
    return "v4l2"


def resolve_backend(name: str) -> int:
    """
    Translate a backend name into an OpenCV API preference.

    "auto" picks the platform camera API rather than OpenCV's own default.

    Raises:
        ValueError: If the name is unknown.
    """
    if name == "auto":
        name = platform_backend()
    try:
        return BACKENDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown camera backend '{name}' (expected auto or one of: {', '.join(BACKENDS)})"
        ) from None


class OpenCVCamera(Camera):
    """
    One local camera opened through cv2.VideoCapture.

    The rest of the project should treat this as an abstract camera with:
    - read() -> (ok, frame_bgr)
    - get(prop_id) -> float
    - release()

    Opening never raises; check is_opened() afterwards.
    """

    def __init__(self, index: int = 0, backend: str = "auto") -> None:
        self.index = index
        self.backend = backend
        self._cap: Optional[cv2.VideoCapture] = cv2.VideoCapture(index, resolve_backend(backend))

        if self._cap.isOpened():
            logging.info(f"Camera opened (index={index}, backend={self.backend_name()})")
        else:
            logging.debug(f"Camera index {index} did not open (backend={backend})")

    def read(self) -> Tuple[bool, Optional[np.ndarray]]:
        if self._cap is None:
            return False, None
        return self._cap.read()

    def get(self, prop_id: int) -> float:
        if self._cap is None:
            return 0.0
        return self._cap.get(prop_id)

    def backend_name(self) -> str:
        if self._cap is None:
            return ""
        try:
            return self._cap.getBackendName()
        except cv2.error:
            # Raised when the capture never opened
            return ""

    def is_opened(self) -> bool:
        return self._cap is not None and self._cap.isOpened()

    def release(self) -> None:
        if self._cap is not None:
            self._cap.release()
            self._cap = None
            logging.info(f"Camera released (index={self.index})")
