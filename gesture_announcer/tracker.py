"""
Hand landmark capture using OpenCV and MediaPipe Hands.
"""
import logging
import time
from typing import Iterator, List, Optional, Tuple

import cv2
import mediapipe as mp
import numpy as np

from .config import Cfg
from .types import Frame, Landmark

logger = logging.getLogger(__name__)


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, max_num_hands: int = 1, model_complexity: int = 1,
                 min_detection_conf: float = 0.7, min_tracking_conf: float = 0.7):
        """
        Initialize the hands tracker.

        Args:
            max_num_hands: Maximum number of hands to detect
            model_complexity: Landmark model complexity (0 or 1)
            min_detection_conf: Minimum confidence for hand detection
            min_tracking_conf: Minimum confidence for hand tracking
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            model_complexity=model_complexity,
            min_detection_confidence=min_detection_conf,
            min_tracking_confidence=min_tracking_conf
        )

    @classmethod
    def from_config(cls, cfg: Cfg) -> "HandsTracker":
        return cls(
            max_num_hands=cfg.mediapipe.max_num_hands,
            model_complexity=cfg.mediapipe.model_complexity,
            min_detection_conf=cfg.mediapipe.min_detection_confidence,
            min_tracking_conf=cfg.mediapipe.min_tracking_confidence
        )

    def process(self, frame_bgr: np.ndarray) -> Optional[Frame]:
        """
        Process an image and return hand landmarks.

        Args:
            frame_bgr: Input image in BGR format

        Returns:
            21 landmarks of the first detected hand, or None if no hand detected
        """
        # Convert BGR to RGB for MediaPipe
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)

        results = self.hands.process(frame_rgb)

        if results.multi_hand_landmarks:
            hand_landmarks = results.multi_hand_landmarks[0]
            landmarks: List[Landmark] = [
                Landmark(lm.x, lm.y, lm.z) for lm in hand_landmarks.landmark
            ]
            return landmarks

        return None

    def close(self) -> None:
        self.hands.close()


class CameraFrameSource:
    """
    Camera capture as a lazy stream of hand observations.

    Iterating yields (image, frame or None, timestamp) for every captured image
    until the camera stops delivering. The stream cannot be restarted.
    """

    def __init__(self, cfg: Cfg, tracker: HandsTracker):
        self.cfg = cfg
        self.tracker = tracker

        self.cap = cv2.VideoCapture(cfg.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, cfg.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, cfg.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, cfg.camera.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {cfg.camera.index}")

    def __iter__(self) -> Iterator[Tuple[np.ndarray, Optional[Frame], float]]:
        while self.cap.isOpened():
            ret, image = self.cap.read()
            if not ret:
                logger.warning("Failed to read frame from camera %d", self.cfg.camera.index)
                break

            if self.cfg.display.mirror:
                image = cv2.flip(image, 1)

            frame = self.tracker.process(image)
            yield image, frame, time.time()

    def release(self) -> None:
        """Release the camera and the landmark model."""
        if self.cap.isOpened():
            self.cap.release()
        self.tracker.close()
