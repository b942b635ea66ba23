"""
Input handling: translation of touch swipes and key presses into moves on a game session.
"""

from .gesture import GestureSession, TouchPoint, handle_touch_move, handle_touch_start, swipe_directions
from .keyboard import key_handler

__all__ = [
    "GestureSession",
    "TouchPoint",
    "handle_touch_start",
    "handle_touch_move",
    "swipe_directions",
    "key_handler",
]
