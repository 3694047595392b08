"""
Camera deck: record video, take photos and inspect local cameras.

Enumerates the attached cameras, prints their capabilities, then runs an
interactive menu until the user chooses 0.

Usage:
    python src/main.py --config config/config.yaml

Arguments:
    --config: Path to configuration file
    --backend: Camera API override (auto, any, dshow, msmf, v4l2, avfoundation, gstreamer)
    --output-dir: Directory for videos and photos
    --list-cameras: Print camera information and exit
"""

import os
import sys
import argparse
import logging
import yaml
from typing import Dict, Any, List, Optional, Tuple

from camera.backends.opencv import BACKENDS
from camera.camera import enumerate_cameras, release_cameras
from camera.info import report
from capture.naming import FileNamer
from models.config import Config, VALID_LOG_LEVELS
from ops.logging import setup_logging
from runtime.context import RuntimeContext
from runtime.menu import MenuController

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_NO_CAMERA = -1


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into base and return base."""
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            _deep_merge(base[k], v)
        elif v is None and isinstance(base.get(k), dict):
            # Empty section header: keep the lower layer's values
            continue
        else:
            base[k] = v
    return base


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration with layering:
    - `config/default.yaml` (checked in)
    - `config/config.yaml` (local overrides)
    - plus any explicitly provided `--config` path (treated as overrides)
    """
    try:
        base_path = os.path.join(os.path.dirname(config_path), "default.yaml")
        base_cfg: Dict[str, Any] = {}
        if os.path.exists(base_path):
            with open(base_path, "r") as f:
                base_cfg = yaml.safe_load(f) or {}

        local_overrides_path = os.path.join(os.path.dirname(config_path), "config.yaml")
        local_cfg: Dict[str, Any] = {}
        if os.path.exists(local_overrides_path):
            with open(local_overrides_path, "r") as f:
                local_cfg = yaml.safe_load(f) or {}

        merged = _deep_merge(base_cfg, local_cfg)

        # Finally apply explicit config_path if it's not the local override file itself
        if os.path.exists(config_path) and os.path.abspath(config_path) != os.path.abspath(local_overrides_path):
            with open(config_path, "r") as f:
                explicit_cfg = yaml.safe_load(f) or {}
            merged = _deep_merge(merged, explicit_cfg)

        return merged
    except (OSError, yaml.YAMLError) as e:
        logging.error(f"Failed to load configuration: {e}")
        sys.exit(EXIT_CONFIG_ERROR)


def _section(config: Dict[str, Any], name: str) -> Any:
    """Return a config section, turning an empty YAML section (None) into {}."""
    if config.get(name) is None:
        config[name] = {}
    return config[name]


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_config(config: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """
    Validate configuration values.

    Every section is optional; missing values fall back to the model defaults.

    Args:
        config: Configuration dictionary

    Returns:
        Tuple of (is_valid, error_message)
    """
    for section in ('camera', 'record', 'photo', 'output'):
        if not isinstance(_section(config, section), dict):
            return False, f"{section} must be a mapping"

    # Validate camera settings
    camera = config.get('camera', {})
    backend = camera.get('backend', 'auto')
    if backend != 'auto' and backend not in BACKENDS:
        return False, f"camera.backend must be one of: auto, {', '.join(BACKENDS)}"
    max_devices = camera.get('max_devices')
    if max_devices is not None and not _is_positive_int(max_devices):
        return False, "camera.max_devices must be a positive integer"

    # Validate recording settings
    record = config.get('record', {})
    fps = record.get('fps', 30)
    if not isinstance(fps, (int, float)) or isinstance(fps, bool) or fps <= 0:
        return False, "record.fps must be a positive number"
    fourcc = record.get('fourcc', 'MJPG')
    if not isinstance(fourcc, str) or len(fourcc) != 4:
        return False, "record.fourcc must be a 4-character code"

    # A zero delay would make waitKey block until a key arrives
    for section in ('record', 'photo'):
        delay = config.get(section, {}).get('key_delay_ms', 1)
        if not _is_positive_int(delay):
            return False, f"{section}.key_delay_ms must be a positive integer"

    output = config.get('output', {})
    if not isinstance(output.get('directory', '.'), str):
        return False, "output.directory must be a string"

    # Validate log settings
    if config.get('log_level', 'INFO') not in VALID_LOG_LEVELS:
        return False, f"log_level must be one of: {', '.join(VALID_LOG_LEVELS)}"

    return True, None


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Camera deck - record video and take photos from local cameras')
    parser.add_argument('--config', type=str, default='config/config.yaml',
                        help='Path to configuration file')
    parser.add_argument('--backend', type=str, default=None,
                        help='Camera API override (auto, ' + ', '.join(BACKENDS) + ')')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory for videos and photos')
    parser.add_argument('--list-cameras', action='store_true',
                        help='Print camera information and exit')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main application function. Returns the process exit code."""
    args = parse_args(argv)

    # Load configuration
    config_dict = load_config(args.config)

    # Command-line overrides
    if args.backend:
        _section(config_dict, 'camera')['backend'] = args.backend
    if args.output_dir:
        _section(config_dict, 'output')['directory'] = args.output_dir

    # Validate configuration
    is_valid, error_msg = validate_config(config_dict)
    if not is_valid:
        logging.error(f"Configuration validation failed: {error_msg}")
        print(f"Error: {error_msg}")
        return EXIT_CONFIG_ERROR

    config = Config.from_dict(config_dict)

    # Setup logging
    setup_logging(config.log_path, config.log_level, console=config.log_to_console)
    logging.info("Starting camera deck")

    cameras = enumerate_cameras(config.camera)
    if not cameras:
        logging.error("No camera could be opened")
        print("Error: Could not open camera")
        return EXIT_NO_CAMERA

    try:
        for cam in cameras:
            report(cam)

        if not args.list_cameras:
            ctx = RuntimeContext(config=config, cameras=cameras, namer=FileNamer(config.output.directory))
            MenuController(ctx).run()
    except KeyboardInterrupt:
        logging.info("Interrupted by user")
    finally:
        release_cameras(cameras)
        logging.info("Camera deck stopped")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
