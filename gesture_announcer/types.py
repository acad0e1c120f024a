"""
Type definitions for the hand gesture announcer.
"""
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Protocol, Sequence, runtime_checkable


class Landmark(NamedTuple):
    """Normalized hand joint position. x, y in [0..1], origin top-left, y grows downward."""
    x: float
    y: float
    z: float = 0.0


# 21 landmarks in MediaPipe hand topology order (0 = wrist)
Frame = Sequence[Landmark]


class GestureLabel(Enum):
    """
    Recognized gestures.

    Definition order is classification priority: when a frame matches more
    than one shape, the label defined first wins.
    """
    PEACE = "Peace"
    THUMBS_UP = "ThumbsUp"
    POINTING = "Pointing"
    FLAT_PALM = "FlatPalm"
    FIST = "Fist"
    OK = "OK"
    CALL_ME = "CallMe"
    ROCK_ON = "RockOn"
    NO = "No"

    @property
    def display(self) -> str:
        """Text shown on the overlay and spoken by the announcer."""
        return _DISPLAY_TEXT[self]


_DISPLAY_TEXT = {
    GestureLabel.PEACE: "Peace",
    GestureLabel.THUMBS_UP: "Good",
    GestureLabel.POINTING: "Select",
    GestureLabel.FLAT_PALM: "Hello",
    GestureLabel.FIST: "Grab",
    GestureLabel.OK: "OK",
    GestureLabel.CALL_ME: "Call Me",
    GestureLabel.ROCK_ON: "Rock On",
    GestureLabel.NO: "No",
}


@dataclass(frozen=True)
class GestureEvent:
    """A gesture change worth announcing."""
    label: GestureLabel
    timestamp: float  # seconds


@dataclass
class DebouncerState:
    """Last announced gesture of one input stream."""
    last_emitted_label: Optional[GestureLabel] = None
    last_emitted_at: Optional[float] = None


@runtime_checkable
class AnnouncerProto(Protocol):
    """Speech sink. A new announcement cancels the one in flight."""

    async def announce(self, text: str) -> None:
        """Start speaking text, replacing anything currently being spoken."""
        ...

    async def close(self) -> None:
        """Stop any in-flight announcement and release resources."""
        ...


@runtime_checkable
class OverlayProto(Protocol):
    """Display sink for gesture events."""

    def show(self, event: GestureEvent) -> None:
        """Annotate the display with the event's label."""
        ...
