"""
Geometric predicates over hand landmark frames.

Every predicate compares landmarks of the same frame with each other (vertical
order or distance), never against absolute positions, so results do not depend
on where the hand sits in the image or how large it appears.
"""
import math
from typing import Dict, Optional, Tuple

import numpy as np

from .types import Frame, Landmark


NUM_LANDMARKS = 21

# Hand topology indices (MediaPipe order)
WRIST = 0
THUMB_CMC, THUMB_MCP, THUMB_IP, THUMB_TIP = 1, 2, 3, 4
INDEX_MCP, INDEX_PIP, INDEX_DIP, INDEX_TIP = 5, 6, 7, 8
MIDDLE_MCP, MIDDLE_PIP, MIDDLE_DIP, MIDDLE_TIP = 9, 10, 11, 12
RING_MCP, RING_PIP, RING_DIP, RING_TIP = 13, 14, 15, 16
PINKY_MCP, PINKY_PIP, PINKY_DIP, PINKY_TIP = 17, 18, 19, 20

# finger -> (mid joint, tip). The thumb has no PIP; its IP joint plays that role.
FINGER_JOINTS: Dict[str, Tuple[int, int]] = {
    "thumb": (THUMB_IP, THUMB_TIP),
    "index": (INDEX_PIP, INDEX_TIP),
    "middle": (MIDDLE_PIP, MIDDLE_TIP),
    "ring": (RING_PIP, RING_TIP),
    "pinky": (PINKY_PIP, PINKY_TIP),
}

FINGERS = ("thumb", "index", "middle", "ring", "pinky")

# Max thumb tip to index tip distance for the OK pinch
OK_MAX_DISTANCE = 0.05


def is_valid_frame(frame: Optional[Frame]) -> bool:
    """True if frame holds exactly one landmark per topology index."""
    return frame is not None and len(frame) == NUM_LANDMARKS


def is_finger_extended(frame: Frame, finger: str) -> bool:
    """
    Check if a finger points up (tip above its mid joint).

    Args:
        frame: 21 hand landmarks
        finger: One of FINGERS

    Returns:
        True if tip y < mid joint y (inverted y-axis)
    """
    mid, tip = FINGER_JOINTS[finger]
    return frame[tip].y < frame[mid].y


def is_finger_curled(frame: Frame, finger: str) -> bool:
    """Check if a finger is folded (tip below its mid joint)."""
    mid, tip = FINGER_JOINTS[finger]
    return frame[tip].y > frame[mid].y


def landmark_distance(a: Landmark, b: Landmark) -> float:
    """Euclidean distance between two landmarks in the image plane."""
    return float(np.hypot(a.x - b.x, a.y - b.y))


def fingers_extended(frame: Frame) -> int:
    """
    Count the number of extended fingers.

    Args:
        frame: 21 hand landmarks

    Returns:
        Number of extended fingers (0-5)
    """
    return sum(1 for finger in FINGERS if is_finger_extended(frame, finger))


def palm_center(frame: Frame) -> Tuple[float, float]:
    """
    Calculate the center of the palm.

    Args:
        frame: 21 hand landmarks

    Returns:
        (x, y) coordinates of palm center in [0..1] range
    """
    palm_indices = [WRIST, INDEX_MCP, MIDDLE_MCP, RING_MCP, PINKY_MCP]

    x_sum = sum(frame[i].x for i in palm_indices)
    y_sum = sum(frame[i].y for i in palm_indices)

    return (x_sum / len(palm_indices), y_sum / len(palm_indices))


def _matches(frame: Frame, extended=(), curled=()) -> bool:
    return (all(is_finger_extended(frame, f) for f in extended) and
            all(is_finger_curled(frame, f) for f in curled))


def is_flat_palm(frame: Frame) -> bool:
    """All four fingers extended; thumb ignored."""
    return _matches(frame, extended=("index", "middle", "ring", "pinky"))


def is_fist(frame: Frame) -> bool:
    """All four fingers curled; thumb ignored."""
    return _matches(frame, curled=("index", "middle", "ring", "pinky"))


def is_victory(frame: Frame) -> bool:
    """Index and middle up, ring and pinky folded."""
    return _matches(frame, extended=("index", "middle"), curled=("ring", "pinky"))


def is_thumbs_up(frame: Frame) -> bool:
    return _matches(frame, extended=("thumb",), curled=("index", "middle", "ring", "pinky"))


def is_pointing(frame: Frame) -> bool:
    return _matches(frame, extended=("index",), curled=("middle", "ring", "pinky"))


def is_ok(frame: Frame, max_distance: float = OK_MAX_DISTANCE) -> bool:
    """
    Check for the OK sign: thumb and index tips touching, other three fingers up.

    Args:
        frame: 21 hand landmarks
        max_distance: Largest thumb-index tip distance still counted as touching

    Returns:
        True if the pinch is closed and middle, ring, pinky are extended
    """
    pinch = landmark_distance(frame[THUMB_TIP], frame[INDEX_TIP])
    return pinch < max_distance and _matches(frame, extended=("middle", "ring", "pinky"))


def is_call_me(frame: Frame) -> bool:
    """Thumb and pinky out, the rest folded."""
    return _matches(frame, extended=("thumb", "pinky"), curled=("index", "middle", "ring"))


def is_rock_on(frame: Frame) -> bool:
    """Index and pinky up, middle, ring and thumb folded."""
    return _matches(frame, extended=("index", "pinky"), curled=("thumb", "middle", "ring"))


def wrist_rotation(frame: Frame) -> float:
    """
    Angle of the wrist to middle-finger-base vector.

    Returns:
        Degrees in (-180, 180]; an upright hand is about -90
    """
    wrist = frame[WRIST]
    middle_base = frame[MIDDLE_MCP]
    return math.degrees(math.atan2(middle_base.y - wrist.y, middle_base.x - wrist.x))
