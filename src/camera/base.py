"""
Camera interfaces.

A camera is an open device handle. Properties are queried lazily through
`get()` using OpenCV property ids, so alternative backends only need to map
the ids they understand.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np


class Camera:
    def read(self) -> Tuple[bool, Optional[np.ndarray]]:
        raise NotImplementedError

    def get(self, prop_id: int) -> float:
        raise NotImplementedError

    def backend_name(self) -> str:
        raise NotImplementedError

    def is_opened(self) -> bool:
        raise NotImplementedError

    def release(self) -> None:
        raise NotImplementedError


def is_empty_frame(ok: bool, frame: Optional[np.ndarray]) -> bool:
    """True when a read produced nothing usable (disconnect or read failure)."""
    return not ok or frame is None or frame.size == 0
