"""
Synthetic hand landmark frames for tests.
"""
import math
from typing import Dict, List

from gesture_announcer.types import Landmark

# Column of each digit in the image
FINGER_X = {"index": 0.40, "middle": 0.50, "ring": 0.60, "pinky": 0.70}
MIDDLE_BASE = (0.50, 0.70)
WRIST_DISTANCE = 0.20


def make_frame(thumb: bool = False, index: bool = False, middle: bool = False,
               ring: bool = False, pinky: bool = False, rotation_deg: float = 0.0) -> List[Landmark]:
    """
    Build a 21-landmark frame with each digit extended (True) or curled (False).

    The wrist is placed so that the wrist to middle-base angle equals rotation_deg.
    """
    theta = math.radians(rotation_deg)
    wrist = Landmark(MIDDLE_BASE[0] - WRIST_DISTANCE * math.cos(theta),
                     MIDDLE_BASE[1] - WRIST_DISTANCE * math.sin(theta))

    points = [wrist]

    # Thumb: CMC, MCP, IP, TIP
    points += [
        Landmark(0.35, 0.80),
        Landmark(0.32, 0.72),
        Landmark(0.30, 0.62),
        Landmark(0.28, 0.55) if thumb else Landmark(0.33, 0.68),
    ]

    # Other fingers: MCP, PIP, DIP, TIP
    for name, extended in (("index", index), ("middle", middle), ("ring", ring), ("pinky", pinky)):
        x = FINGER_X[name]
        points += [
            Landmark(x, 0.70),
            Landmark(x, 0.60),
            Landmark(x, 0.55 if extended else 0.65),
            Landmark(x, 0.50 if extended else 0.68),
        ]

    return points


def with_points(frame: List[Landmark], overrides: Dict[int, Landmark]) -> List[Landmark]:
    """Copy of frame with some landmarks replaced."""
    frame = list(frame)
    for i, lm in overrides.items():
        frame[i] = lm
    return frame


# Matches no finger shape; only wrist rotation can classify it
UNMATCHED = dict(thumb=False, index=False, middle=True, ring=False, pinky=False)
