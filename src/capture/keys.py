"""
Keyboard polling for preview windows.
"""

from __future__ import annotations

import cv2

QUIT_KEYS = (ord("q"), ord("Q"))
CAPTURE_KEY = ord(" ")


def poll_key(delay_ms: int = 1) -> int:
    """Wait up to delay_ms for a key on the focused window; 255 if none."""
    return cv2.waitKey(delay_ms) & 0xFF


def is_quit_key(key: int) -> bool:
    return key in QUIT_KEYS


def is_capture_key(key: int) -> bool:
    return key == CAPTURE_KEY
