"""
Test cases for the geometric hand predicates.
"""
import unittest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gesture_announcer.landmarks import (
    INDEX_PIP, INDEX_TIP, THUMB_TIP,
    fingers_extended, is_call_me, is_finger_curled, is_finger_extended, is_fist,
    is_flat_palm, is_ok, is_pointing, is_rock_on, is_thumbs_up, is_valid_frame,
    is_victory, landmark_distance, palm_center, wrist_rotation,
)
from gesture_announcer.types import Landmark
from tests.synthetic import make_frame, with_points, UNMATCHED


ALL_PREDICATES = [is_flat_palm, is_fist, is_victory, is_thumbs_up, is_pointing, is_ok, is_call_me, is_rock_on]


class TestFingerState(unittest.TestCase):
    """Test extended/curled primitives."""

    def test_extended_and_curled(self):
        frame = make_frame(thumb=True, index=True, middle=False, ring=True, pinky=False)

        self.assertTrue(is_finger_extended(frame, "thumb"))
        self.assertTrue(is_finger_extended(frame, "index"))
        self.assertTrue(is_finger_curled(frame, "middle"))
        self.assertTrue(is_finger_extended(frame, "ring"))
        self.assertTrue(is_finger_curled(frame, "pinky"))

    def test_level_tip_is_neither(self):
        """A tip level with its mid joint is neither extended nor curled."""
        frame = with_points(make_frame(index=True), {INDEX_TIP: Landmark(0.40, 0.60)})

        self.assertFalse(is_finger_extended(frame, "index"))
        self.assertFalse(is_finger_curled(frame, "index"))

    def test_fingers_extended_count(self):
        self.assertEqual(fingers_extended(make_frame()), 0)
        self.assertEqual(fingers_extended(make_frame(True, True, True, True, True)), 5)
        self.assertEqual(fingers_extended(make_frame(index=True, middle=True)), 2)

    def test_translation_invariance(self):
        """Shifting the whole hand does not change finger state."""
        frame = make_frame(index=True, middle=True)
        shifted = [Landmark(lm.x - 0.2, lm.y - 0.3, lm.z) for lm in frame]

        self.assertTrue(is_victory(frame))
        self.assertTrue(is_victory(shifted))


class TestShapePredicates(unittest.TestCase):
    """Test each finger-shape predicate."""

    def test_flat_palm(self):
        self.assertTrue(is_flat_palm(make_frame(index=True, middle=True, ring=True, pinky=True)))
        self.assertTrue(is_flat_palm(make_frame(True, True, True, True, True)))
        self.assertFalse(is_flat_palm(make_frame(index=True, middle=True, ring=True)))

    def test_fist(self):
        self.assertTrue(is_fist(make_frame()))
        self.assertTrue(is_fist(make_frame(thumb=True)))
        self.assertFalse(is_fist(make_frame(pinky=True)))

    def test_victory(self):
        self.assertTrue(is_victory(make_frame(index=True, middle=True)))
        self.assertFalse(is_victory(make_frame(index=True, middle=True, ring=True)))

    def test_thumbs_up(self):
        self.assertTrue(is_thumbs_up(make_frame(thumb=True)))
        self.assertFalse(is_thumbs_up(make_frame()))
        self.assertFalse(is_thumbs_up(make_frame(thumb=True, index=True)))

    def test_pointing(self):
        self.assertTrue(is_pointing(make_frame(index=True)))
        self.assertTrue(is_pointing(make_frame(thumb=True, index=True)))
        self.assertFalse(is_pointing(make_frame(index=True, middle=True)))

    def test_call_me(self):
        self.assertTrue(is_call_me(make_frame(thumb=True, pinky=True)))
        self.assertFalse(is_call_me(make_frame(pinky=True)))

    def test_rock_on(self):
        self.assertTrue(is_rock_on(make_frame(index=True, pinky=True)))
        self.assertFalse(is_rock_on(make_frame(thumb=True, index=True, pinky=True)))

    def test_unmatched_shape(self):
        frame = make_frame(**UNMATCHED)
        for predicate in ALL_PREDICATES:
            self.assertFalse(predicate(frame), predicate.__name__)


class TestOkPredicate(unittest.TestCase):
    """Test the OK pinch distance threshold."""

    def _ok_frame(self, index_tip_x: float):
        base = make_frame(thumb=True, middle=True, ring=True, pinky=True)
        return with_points(base, {
            THUMB_TIP: Landmark(0.50, 0.50, 0.0),
            INDEX_TIP: Landmark(index_tip_x, 0.50, 0.0),
            INDEX_PIP: Landmark(index_tip_x, 0.45, 0.0),
        })

    def test_close_pinch(self):
        frame = self._ok_frame(0.52)
        self.assertAlmostEqual(landmark_distance(frame[THUMB_TIP], frame[INDEX_TIP]), 0.02)
        self.assertTrue(is_ok(frame))

    def test_open_pinch(self):
        frame = self._ok_frame(0.60)
        self.assertAlmostEqual(landmark_distance(frame[THUMB_TIP], frame[INDEX_TIP]), 0.10)
        self.assertFalse(is_ok(frame))

    def test_custom_threshold(self):
        self.assertTrue(is_ok(self._ok_frame(0.60), max_distance=0.2))

    def test_requires_three_fingers_up(self):
        frame = with_points(self._ok_frame(0.52), {20: Landmark(0.70, 0.68)})
        self.assertFalse(is_ok(frame))


class TestGeometry(unittest.TestCase):
    """Test rotation, palm center and frame validity."""

    def test_wrist_rotation(self):
        self.assertAlmostEqual(wrist_rotation(make_frame(rotation_deg=0.0)), 0.0)
        self.assertAlmostEqual(wrist_rotation(make_frame(rotation_deg=45.0)), 45.0)
        self.assertAlmostEqual(wrist_rotation(make_frame(rotation_deg=-30.0)), -30.0)

    def test_upright_hand_rotation(self):
        """Wrist straight below the middle base reads as -90 degrees."""
        frame = with_points(make_frame(), {0: Landmark(0.50, 0.90)})
        self.assertAlmostEqual(wrist_rotation(frame), -90.0)

    def test_palm_center(self):
        frame = [Landmark(0.5, 0.5)] * 21
        self.assertEqual(palm_center(frame), (0.5, 0.5))

    def test_frame_validity(self):
        self.assertTrue(is_valid_frame(make_frame()))
        self.assertFalse(is_valid_frame(make_frame()[:20]))
        self.assertFalse(is_valid_frame([]))
        self.assertFalse(is_valid_frame(None))


if __name__ == '__main__':
    unittest.main()
