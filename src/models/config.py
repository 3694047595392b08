"""
Typed configuration models matching the YAML config structure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class CameraConfig:
    """Camera enumeration configuration."""
    backend: str = "auto"
    max_devices: Optional[int] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "CameraConfig":
        """Adapter: Create from config dictionary."""
        return cls(
            backend=d.get("backend", "auto"),
            max_devices=d.get("max_devices"),
        )

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"backend": self.backend}
        if self.max_devices is not None:
            d["max_devices"] = self.max_devices
        return d


@dataclass
class RecordConfig:
    """Video recording configuration."""
    fps: float = 30.0
    fourcc: str = "MJPG"
    extension: str = "avi"
    window_title: str = "Video Recording"
    key_delay_ms: int = 1

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "RecordConfig":
        return cls(
            fps=d.get("fps", 30.0),
            fourcc=d.get("fourcc", "MJPG"),
            extension=d.get("extension", "avi"),
            window_title=d.get("window_title", "Video Recording"),
            key_delay_ms=d.get("key_delay_ms", 1),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fps": self.fps,
            "fourcc": self.fourcc,
            "extension": self.extension,
            "window_title": self.window_title,
            "key_delay_ms": self.key_delay_ms,
        }


@dataclass
class PhotoConfig:
    """Photo capture configuration (visible and hidden)."""
    extension: str = "jpg"
    window_title: str = "Camera"
    key_delay_ms: int = 1
    hide_console: bool = True

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PhotoConfig":
        return cls(
            extension=d.get("extension", "jpg"),
            window_title=d.get("window_title", "Camera"),
            key_delay_ms=d.get("key_delay_ms", 1),
            hide_console=d.get("hide_console", True),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "extension": self.extension,
            "window_title": self.window_title,
            "key_delay_ms": self.key_delay_ms,
            "hide_console": self.hide_console,
        }


@dataclass
class OutputConfig:
    """Where captured files are written."""
    directory: str = "."

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "OutputConfig":
        return cls(directory=d.get("directory", "."))

    def to_dict(self) -> Dict[str, Any]:
        return {"directory": self.directory}


@dataclass
class Config:
    """
    Complete application configuration.

    This is a typed representation of the YAML config structure.
    """
    camera: CameraConfig = field(default_factory=CameraConfig)
    record: RecordConfig = field(default_factory=RecordConfig)
    photo: PhotoConfig = field(default_factory=PhotoConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_path: str = "logs/camdeck.log"
    log_level: str = "INFO"
    log_to_console: bool = False

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Config":
        """Adapter: Create Config from raw dictionary (e.g., from load_config)."""
        return cls(
            camera=CameraConfig.from_dict(d.get("camera", {}) or {}),
            record=RecordConfig.from_dict(d.get("record", {}) or {}),
            photo=PhotoConfig.from_dict(d.get("photo", {}) or {}),
            output=OutputConfig.from_dict(d.get("output", {}) or {}),
            log_path=d.get("log_path", "logs/camdeck.log"),
            log_level=d.get("log_level", "INFO"),
            log_to_console=d.get("log_to_console", False),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to dictionary (for saving or logging)."""
        return {
            "camera": self.camera.to_dict(),
            "record": self.record.to_dict(),
            "photo": self.photo.to_dict(),
            "output": self.output.to_dict(),
            "log_path": self.log_path,
            "log_level": self.log_level,
            "log_to_console": self.log_to_console,
        }


VALID_LOG_LEVELS: List[str] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
