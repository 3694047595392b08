"""
Capture sessions: video recording, interactive photos and hidden photos.
"""

from .photo import take_hidden_photo, take_photo
from .recorder import record_video

__all__ = ["record_video", "take_photo", "take_hidden_photo"]
