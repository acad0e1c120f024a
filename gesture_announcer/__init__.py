"""
Hand Gesture Announcer

Reads webcam frames, detects hand landmarks using MediaPipe, classifies them
into named gestures and announces each gesture change on screen and by voice.
"""

__version__ = "0.1.0"

from .types import Landmark, Frame, GestureLabel, GestureEvent, DebouncerState, AnnouncerProto, OverlayProto
from .config import load_config, Cfg
from .gestures import GestureClassifier, GestureDebouncer, GestureProcessor, classify
from .announcer_mock import MockAnnouncer

__all__ = [
    "Landmark",
    "Frame",
    "GestureLabel",
    "GestureEvent",
    "DebouncerState",
    "AnnouncerProto",
    "OverlayProto",
    "load_config",
    "Cfg",
    "GestureClassifier",
    "GestureDebouncer",
    "GestureProcessor",
    "classify",
    "MockAnnouncer",
]
