"""
Camera information reporting.
"""

from __future__ import annotations

import cv2

from models.camera_info import CameraInfo

from .base import Camera


def decode_fourcc(code: float) -> str:
    """
    Render a FOURCC code as its 4-character string.

    OpenCV reports the code as a float; the least-significant byte is the
    first character, so 0x47504A4D decodes to "MJPG".
    """
    value = int(code) & 0xFFFFFFFF
    return "".join(chr((value >> (8 * i)) & 0xFF) for i in range(4))


def query_camera_info(camera: Camera) -> CameraInfo:
    """Read the reportable properties of an open camera."""
    return CameraInfo(
        width=int(camera.get(cv2.CAP_PROP_FRAME_WIDTH)),
        height=int(camera.get(cv2.CAP_PROP_FRAME_HEIGHT)),
        fps=float(camera.get(cv2.CAP_PROP_FPS)),
        backend=camera.backend_name(),
        auto_exposure=camera.get(cv2.CAP_PROP_AUTO_EXPOSURE),
        brightness=camera.get(cv2.CAP_PROP_BRIGHTNESS),
        contrast=camera.get(cv2.CAP_PROP_CONTRAST),
        saturation=camera.get(cv2.CAP_PROP_SATURATION),
        fourcc=decode_fourcc(camera.get(cv2.CAP_PROP_FOURCC)),
        has_microphone=camera.get(cv2.CAP_PROP_AUDIO_BASE_INDEX) >= 0,
    )


def format_camera_info(info: CameraInfo) -> str:
    lines = [
        "",
        "=== Camera Information ===",
        f"Resolution: {info.width}x{info.height}",
        f"FPS: {info.fps}",
        f"Backend: {info.backend}",
        f"Auto Exposure: {info.auto_exposure}",
        f"Brightness: {info.brightness}",
        f"Contrast: {info.contrast}",
        f"Saturation: {info.saturation}",
        f"FOURCC: {info.fourcc}",
        f"Built-in Microphone: {'Yes' if info.has_microphone else 'No'}",
        "=========================",
        "",
    ]
    return "\n".join(lines)


def report(camera: Camera) -> None:
    """Print the capability block for one camera."""
    print(format_camera_info(query_camera_info(camera)))
