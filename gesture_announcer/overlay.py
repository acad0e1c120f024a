"""
On-screen annotation of hand landmarks and announced gestures.
"""
from typing import Optional

import cv2
import numpy as np

from .landmarks import fingers_extended, palm_center
from .types import Frame, GestureEvent

GREEN = (0, 255, 0)
RED = (0, 0, 255)
WHITE = (255, 255, 255)


class OverlayRenderer:
    """Draws the latest gesture event and the tracked hand onto camera images."""

    def __init__(self, show_landmarks: bool = True):
        self.show_landmarks = show_landmarks
        self.last_event: Optional[GestureEvent] = None

    def show(self, event: GestureEvent) -> None:
        """Make event the label painted on subsequent images."""
        self.last_event = event

    def draw(self, image: np.ndarray, frame: Optional[Frame]) -> np.ndarray:
        """
        Annotate an image in place.

        Args:
            image: BGR camera image
            frame: Hand landmarks for this image (None if no hand detected)

        Returns:
            The annotated image
        """
        height, width = image.shape[:2]

        if frame is None:
            cv2.putText(image, "No hand detected", (20, 40), cv2.FONT_HERSHEY_SIMPLEX, 0.7, RED, 2)
        else:
            if self.show_landmarks:
                self._draw_landmarks(image, frame)

            palm_x, palm_y = palm_center(frame)
            cv2.circle(image, (int(palm_x * width), int(palm_y * height)), 8, RED, -1)
            cv2.putText(image, f"Hand: {fingers_extended(frame)} fingers", (20, 40),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.7, WHITE, 2)

        if self.last_event is not None:
            cv2.putText(image, self.last_event.label.display, (width - 250, 60),
                        cv2.FONT_HERSHEY_SIMPLEX, 1.2, GREEN, 3)

        cv2.putText(image, "Press 'q' to quit", (10, height - 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, WHITE, 1)
        return image

    @staticmethod
    def _draw_landmarks(image: np.ndarray, frame: Frame) -> None:
        height, width = image.shape[:2]

        # Convert normalized coordinates to pixel coordinates and draw
        for i, lm in enumerate(frame):
            px = int(lm.x * width)
            py = int(lm.y * height)
            cv2.circle(image, (px, py), 3, GREEN, -1)
            cv2.putText(image, str(i), (px + 5, py - 5), cv2.FONT_HERSHEY_SIMPLEX, 0.3, WHITE, 1)
