"""
Video recording session.

Streams frames from a camera into a preview window and a video file until the
user presses 'q' or the camera stops delivering frames.
"""

from __future__ import annotations

import logging
from typing import Optional

import cv2
import numpy as np

from camera.base import Camera, is_empty_frame
from models.config import RecordConfig

from .keys import is_quit_key, poll_key
from .naming import FileNamer


def open_writer(path: str, config: RecordConfig, size: tuple[int, int]) -> cv2.VideoWriter:
    fourcc = cv2.VideoWriter_fourcc(*config.fourcc)
    return cv2.VideoWriter(path, fourcc, config.fps, size)


def record_video(
    camera: Camera,
    config: Optional[RecordConfig] = None,
    namer: Optional[FileNamer] = None,
) -> Optional[str]:
    """
    Record video from camera until 'q' is pressed or a frame read fails.

    The file resolution is the camera's width x height at session start. When
    the camera does not report a usable size (0 or -1), the first frame sets it.
    A frame of any other size ends the session like a failed read.

    Returns:
        Path of the saved video, or None if nothing could be recorded.
    """
    config = config or RecordConfig()
    namer = namer or FileNamer()

    width = int(camera.get(cv2.CAP_PROP_FRAME_WIDTH))
    height = int(camera.get(cv2.CAP_PROP_FRAME_HEIGHT))

    pending: Optional[np.ndarray] = None
    if width <= 0 or height <= 0:
        ok, frame = camera.read()
        if is_empty_frame(ok, frame):
            logging.info("Camera delivered no frames, recording skipped")
            return None
        height, width = frame.shape[:2]
        pending = frame
        logging.info(f"Camera reported no frame size, using first frame ({width}x{height})")

    path = namer.path("video", config.extension)
    writer = open_writer(path, config, (width, height))
    if not writer.isOpened():
        logging.error(f"Failed to open video writer for {path} ({config.fourcc}, {width}x{height})")
        print(f"Error: Could not open video file {path}")
        writer.release()
        return None

    logging.info(f"Recording started: {path} ({config.fourcc}, {width}x{height} @ {config.fps} fps)")
    cv2.namedWindow(config.window_title, cv2.WINDOW_AUTOSIZE)
    print("Video recording started. Press 'q' to stop.")

    frames_written = 0
    try:
        while True:
            if pending is not None:
                ok, frame = True, pending
                pending = None
            else:
                ok, frame = camera.read()
            if is_empty_frame(ok, frame):
                logging.info("Camera stopped delivering frames, ending recording")
                break
            if frame.shape[:2] != (height, width):
                logging.warning(
                    f"Frame size {frame.shape[1]}x{frame.shape[0]} does not match "
                    f"recording size {width}x{height}, ending recording"
                )
                break

            writer.write(frame)
            frames_written += 1
            cv2.imshow(config.window_title, frame)

            if is_quit_key(poll_key(config.key_delay_ms)):
                break
    finally:
        writer.release()
        cv2.destroyAllWindows()

    logging.info(f"Recording finished: {frames_written} frames written to {path}")
    print(f"Video saved as: {path}")
    return path
