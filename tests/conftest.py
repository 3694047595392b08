"""
Pytest configuration and shared fixtures.
"""

import os
import sys

import numpy as np
import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import cv2  # noqa: E402

from camera.base import Camera  # noqa: E402


class FakeCamera(Camera):
    """Camera that replays a fixed list of frames, then reports read failure."""

    def __init__(self, frames=None, props=None, backend="FAKE", opened=True):
        self._frames = list(frames or [])
        self.props = props or {}
        self._backend = backend
        self._opened = opened
        self.reads = 0
        self.released = False

    def read(self):
        self.reads += 1
        if not self._frames:
            return False, None
        return True, self._frames.pop(0)

    def get(self, prop_id):
        return self.props.get(prop_id, 0.0)

    def backend_name(self):
        return self._backend

    def is_opened(self):
        return self._opened and not self.released

    def release(self):
        self.released = True


def solid_frames(count, width=64, height=48, step=40):
    """Uniform BGR frames with distinct gray levels."""
    return [np.full((height, width, 3), (i * step) % 256, dtype=np.uint8) for i in range(count)]


@pytest.fixture
def make_camera():
    def _make(frames=None, width=64, height=48, **kwargs):
        props = {
            cv2.CAP_PROP_FRAME_WIDTH: float(width),
            cv2.CAP_PROP_FRAME_HEIGHT: float(height),
        }
        props.update(kwargs.pop("props", {}))
        return FakeCamera(frames=frames, props=props, **kwargs)
    return _make


@pytest.fixture
def temp_config_dir(tmp_path):
    """Create a temporary config directory with default.yaml."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    default_yaml = config_dir / "default.yaml"
    default_yaml.write_text(f"""
camera:
  backend: "auto"

record:
  fps: 30
  fourcc: "MJPG"

photo:
  hide_console: true

output:
  directory: "{(tmp_path / 'captures').as_posix()}"

log_path: "{(tmp_path / 'logs' / 'test.log').as_posix()}"
log_level: "INFO"
""")

    return config_dir


@pytest.fixture
def valid_config():
    """Return a valid configuration dictionary."""
    return {
        "camera": {
            "backend": "v4l2",
            "max_devices": 4,
        },
        "record": {
            "fps": 30,
            "fourcc": "MJPG",
            "extension": "avi",
            "key_delay_ms": 1,
        },
        "photo": {
            "extension": "jpg",
            "key_delay_ms": 1,
            "hide_console": True,
        },
        "output": {
            "directory": "captures",
        },
        "log_path": "logs/test.log",
        "log_level": "INFO",
    }
