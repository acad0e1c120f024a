"""
Gesture recognition classes that turn hand landmark frames into gesture events.
"""
import logging
from functools import partial
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .config import Cfg
from .landmarks import (
    OK_MAX_DISTANCE,
    is_call_me,
    is_fist,
    is_flat_palm,
    is_ok,
    is_pointing,
    is_rock_on,
    is_thumbs_up,
    is_valid_frame,
    is_victory,
    wrist_rotation,
)
from .types import DebouncerState, Frame, GestureEvent, GestureLabel

logger = logging.getLogger(__name__)

Predicate = Callable[[Frame], bool]

ROTATION_THRESHOLD_DEG = 30.0


def default_predicates(ok_max_distance: float = OK_MAX_DISTANCE) -> Dict[GestureLabel, Predicate]:
    """Finger-shape predicate for every label except NO, which has no shape."""
    return {
        GestureLabel.PEACE: is_victory,
        GestureLabel.THUMBS_UP: is_thumbs_up,
        GestureLabel.POINTING: is_pointing,
        GestureLabel.FLAT_PALM: is_flat_palm,
        GestureLabel.FIST: is_fist,
        GestureLabel.OK: partial(is_ok, max_distance=ok_max_distance),
        GestureLabel.CALL_ME: is_call_me,
        GestureLabel.ROCK_ON: is_rock_on,
    }


class GestureClassifier:
    """
    Maps a single frame to at most one gesture label.

    Predicates are tried in GestureLabel definition order and the first match
    wins, so a frame that fits several shapes always resolves the same way.
    If no shape matches, a tilted wrist is read as a "No" wave.

    The classifier keeps no state between frames and can be shared freely.
    """

    def __init__(self, ok_max_distance: float = OK_MAX_DISTANCE,
                 rotation_threshold_deg: float = ROTATION_THRESHOLD_DEG,
                 predicates: Optional[Mapping[GestureLabel, Predicate]] = None):
        """
        Initialize the classifier.

        Args:
            ok_max_distance: Thumb-index tip distance below which OK can match
            rotation_threshold_deg: |wrist rotation| above which an unmatched frame is NO
            predicates: Per-label predicate overrides (defaults for the rest)
        """
        self.rotation_threshold_deg = rotation_threshold_deg

        table = default_predicates(ok_max_distance)
        if predicates is not None:
            table.update(predicates)

        self.priority: List[Tuple[GestureLabel, Predicate]] = [
            (label, table[label]) for label in GestureLabel if label in table
        ]

    @classmethod
    def from_config(cls, cfg: Cfg) -> "GestureClassifier":
        return cls(
            ok_max_distance=cfg.classifier.ok_max_distance,
            rotation_threshold_deg=cfg.classifier.rotation_threshold_deg,
        )

    def classify(self, frame: Optional[Frame]) -> Optional[GestureLabel]:
        """
        Classify one frame.

        Args:
            frame: 21 hand landmarks (None if no hand detected)

        Returns:
            The highest-priority matching label, NO for a rotated hand with no
            finger match, or None
        """
        if not is_valid_frame(frame):
            return None

        for label, predicate in self.priority:
            if predicate(frame):
                return label

        if abs(wrist_rotation(frame)) > self.rotation_threshold_deg:
            return GestureLabel.NO

        return None


_default_classifier = GestureClassifier()


def classify(frame: Optional[Frame]) -> Optional[GestureLabel]:
    """Classify a frame with the default thresholds."""
    return _default_classifier.classify(frame)


class GestureDebouncer:
    """
    Turns a per-frame label stream into gesture change events.

    States:
    - Idle (no last label): any label emits and starts holding it
    - Holding(current): a different label emits immediately, the same label is
      suppressed, and None returns to Idle silently

    With cooldown_ms set, a label held longer than the cooldown since its last
    emission is announced again. Without it, only changes are announced.

    One debouncer serves one input stream and must only be updated from the
    loop that drives that stream.
    """

    def __init__(self, cooldown_ms: Optional[float] = None):
        """
        Initialize the debouncer.

        Args:
            cooldown_ms: Re-announce interval for a held gesture (None disables)
        """
        self.cooldown_ms = cooldown_ms
        self.state = DebouncerState()

    @property
    def is_idle(self) -> bool:
        return self.state.last_emitted_label is None

    def reset(self) -> None:
        """Drop back to Idle, forgetting the last emission."""
        self.state = DebouncerState()

    def update(self, label: Optional[GestureLabel], t_now: float) -> Optional[GestureEvent]:
        """
        Feed the classification of one frame.

        Args:
            label: Classified gesture (None if no gesture this frame)
            t_now: Current timestamp in seconds

        Returns:
            GestureEvent if the label should be announced, None otherwise
        """
        if label is None:
            # Losing the gesture is silent
            self.state.last_emitted_label = None
            return None

        current = self.state.last_emitted_label
        if current is not None and label == current and not self._cooldown_expired(t_now):
            return None

        self.state.last_emitted_label = label
        self.state.last_emitted_at = t_now
        logger.debug("Gesture event: %s at %.3f (previous: %s)", label.name, t_now,
                     current.name if current else None)
        return GestureEvent(label=label, timestamp=t_now)

    def _cooldown_expired(self, t_now: float) -> bool:
        if self.cooldown_ms is None or self.state.last_emitted_at is None:
            return False
        elapsed_ms = (t_now - self.state.last_emitted_at) * 1000
        return elapsed_ms > self.cooldown_ms


class GestureProcessor:
    """
    Main gesture processor for one hand stream: classification plus debouncing.
    """

    def __init__(self, cfg: Cfg):
        """Initialize gesture processor with configuration."""
        self.cfg = cfg
        self.classifier = GestureClassifier.from_config(cfg)
        self.debouncer = GestureDebouncer(cooldown_ms=cfg.debounce.cooldown_ms)

    def process_frame(self, frame: Optional[Frame],
                      t_now: float) -> Tuple[Optional[GestureLabel], Optional[GestureEvent]]:
        """
        Process a frame and return its label and any resulting event.

        Args:
            frame: Hand landmarks (None if no hand detected)
            t_now: Current timestamp in seconds

        Returns:
            Tuple of (label, event)
        """
        label = self.classifier.classify(frame)
        event = self.debouncer.update(label, t_now)
        return label, event

    def process_stream(self, stream: Iterable[Tuple[Optional[Frame], float]]) -> Iterator[GestureEvent]:
        """
        Lazily turn (frame, timestamp) pairs into gesture events.

        The stream is consumed once, one frame at a time.
        """
        for frame, t_now in stream:
            _, event = self.process_frame(frame, t_now)
            if event is not None:
                yield event
