"""
Typed models for the camera deck application.

Use the `from_dict` adapters to convert from raw YAML dictionaries.
"""

from .camera_info import CameraInfo
from .config import (
    Config,
    CameraConfig,
    RecordConfig,
    PhotoConfig,
    OutputConfig,
)

__all__ = [
    # Camera
    "CameraInfo",
    # Config
    "Config",
    "CameraConfig",
    "RecordConfig",
    "PhotoConfig",
    "OutputConfig",
]
