"""
Camera enumeration.

This is the single entrypoint the rest of the project should use to open cameras.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from models.config import CameraConfig

from .base import Camera
from .backends.opencv import OpenCVCamera

CameraOpener = Callable[[int, str], Camera]


def enumerate_cameras(
    camera_cfg: CameraConfig,
    opener: Optional[CameraOpener] = None,
) -> List[Camera]:
    """
    Open cameras at sequential indices until one fails to open.

    Probing starts at index 0 with the configured backend. The first index that
    does not open ends enumeration; it is treated as "no more devices", so a
    camera sitting behind a gap in the index range is never reached.

    Args:
        camera_cfg: Backend selection and optional device cap.
        opener: Factory called as opener(index, backend). Defaults to OpenCVCamera.

    Returns:
        Open cameras in index order. May be empty; the caller decides whether
        that is fatal.
    """
    opener = opener or OpenCVCamera
    cameras: List[Camera] = []

    index = 0
    while camera_cfg.max_devices is None or index < camera_cfg.max_devices:
        cam = opener(index, camera_cfg.backend)
        if not cam.is_opened():
            cam.release()
            break
        cameras.append(cam)
        index += 1

    logging.info(f"Enumerated {len(cameras)} camera(s) (backend={camera_cfg.backend})")
    return cameras


def release_cameras(cameras: Iterable[Camera]) -> None:
    for cam in cameras:
        cam.release()
