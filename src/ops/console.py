"""
Console window visibility.

Hiding the console only makes sense on Windows, where the program runs in its
own console window. Elsewhere these calls are no-ops.
"""

from __future__ import annotations

import logging
import sys

SW_HIDE = 0
SW_SHOW = 5


def _set_console_visibility(cmd_show: int) -> bool:
    if sys.platform != "win32":
        return False

    import ctypes
    hwnd = ctypes.windll.kernel32.GetConsoleWindow()
    if not hwnd:
        logging.debug("No console window attached")
        return False
    ctypes.windll.user32.ShowWindow(hwnd, cmd_show)
    return True


def hide_console_window() -> bool:
    """
    Hide the console window.

    Returns:
        True if a console window was hidden, False if there was nothing to hide.
    """
    return _set_console_visibility(SW_HIDE)


def show_console_window() -> bool:
    """Show the console window again after hide_console_window()."""
    return _set_console_visibility(SW_SHOW)
