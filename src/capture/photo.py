"""
Photo capture sessions.

- take_photo: live preview, space saves a photo, 'q' quits.
- take_hidden_photo: one frame, no window.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import cv2
import numpy as np

from camera.base import Camera, is_empty_frame
from models.config import PhotoConfig

from .keys import is_capture_key, is_quit_key, poll_key
from .naming import FileNamer


def _write_image(path: str, frame: np.ndarray) -> bool:
    try:
        return bool(cv2.imwrite(path, frame))
    except cv2.error as e:
        logging.debug(f"imwrite raised for {path}: {e}")
        return False


def take_photo(
    camera: Camera,
    config: Optional[PhotoConfig] = None,
    namer: Optional[FileNamer] = None,
) -> List[str]:
    """
    Show a live preview and save the current frame on every space press.

    Returns:
        Paths of the photos written during the session, in capture order.
    """
    config = config or PhotoConfig()
    namer = namer or FileNamer()
    saved: List[str] = []

    cv2.namedWindow(config.window_title, cv2.WINDOW_AUTOSIZE)
    print("Press 'space' for photo or 'q' to exit")

    try:
        while True:
            ok, frame = camera.read()
            if is_empty_frame(ok, frame):
                logging.info("Camera stopped delivering frames, ending photo session")
                break

            cv2.imshow(config.window_title, frame)
            key = poll_key(config.key_delay_ms)

            if is_capture_key(key):
                path = namer.path("photo", config.extension)
                if not _write_image(path, frame):
                    logging.error(f"Failed to write photo {path}")
                    print(f"Error: Could not save photo {path}")
                    continue
                saved.append(path)
                print(f"Photo saved as: {path}")
            elif is_quit_key(key):
                break
    finally:
        cv2.destroyAllWindows()

    logging.info(f"Photo session finished: {len(saved)} photo(s)")
    return saved


def take_hidden_photo(
    camera: Camera,
    config: Optional[PhotoConfig] = None,
    namer: Optional[FileNamer] = None,
) -> Optional[str]:
    """
    Grab a single frame and save it without opening any window.

    Returns:
        Path of the saved photo, or None if the camera returned no frame.
    """
    config = config or PhotoConfig()
    namer = namer or FileNamer()

    ok, frame = camera.read()
    if is_empty_frame(ok, frame):
        logging.info("Hidden photo skipped: no frame available")
        return None

    path = namer.path("hidden_photo", config.extension)
    if not _write_image(path, frame):
        logging.error(f"Failed to write hidden photo {path}")
        print(f"Error: Could not save photo {path}")
        return None
    print(f"Hidden photo saved as: {path}")
    return path
