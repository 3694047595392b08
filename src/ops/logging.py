"""
Logging setup.
"""

from __future__ import annotations

import logging
import os


def setup_logging(log_path: str, log_level: str, console: bool = False) -> None:
    """
    Log to a file, and to stderr when console is set.

    The console stays quiet by default so log lines do not interleave with
    the interactive menu.
    """
    log_dir = os.path.dirname(log_path)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir)

    handlers: list[logging.Handler] = [logging.FileHandler(log_path)]
    if console:
        handlers.append(logging.StreamHandler())

    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )
