"""
Test cases for configuration loading and validation.
"""
import unittest
import copy
import sys
import tempfile
from pathlib import Path

import yaml

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gesture_announcer.config import load_config, Cfg

DEFAULT_CONFIG = Path(__file__).parent.parent / "gesture_announcer" / "config.default.yaml"


class TestLoadConfig(unittest.TestCase):
    """Test YAML configuration loading."""

    def setUp(self):
        with open(DEFAULT_CONFIG, 'r') as f:
            self.data = yaml.safe_load(f)
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def write(self, data) -> str:
        path = Path(self.tmpdir.name) / "config.yaml"
        with open(path, 'w') as f:
            yaml.safe_dump(data, f)
        return str(path)

    def test_default_config(self):
        cfg = load_config()

        self.assertIsInstance(cfg, Cfg)
        self.assertEqual(cfg.mediapipe.max_num_hands, 1)
        self.assertEqual(cfg.mediapipe.model_complexity, 1)
        self.assertEqual(cfg.mediapipe.min_detection_confidence, 0.7)
        self.assertEqual(cfg.mediapipe.min_tracking_confidence, 0.7)
        self.assertEqual(cfg.classifier.ok_max_distance, 0.05)
        self.assertEqual(cfg.classifier.rotation_threshold_deg, 30.0)
        self.assertIsNone(cfg.debounce.cooldown_ms)
        self.assertEqual(cfg.speech.api_key_env, "ELEVEN_LABS_API_KEY")

    def test_default_config_ships_with_package(self):
        """The default file sits next to config.py so installed copies find it."""
        import gesture_announcer.config as config_module

        packaged = Path(config_module.__file__).parent / "config.default.yaml"
        self.assertTrue(packaged.exists())
        self.assertEqual(load_config(), load_config(str(packaged)))

    def test_cooldown_override(self):
        data = copy.deepcopy(self.data)
        data['debounce']['cooldown_ms'] = 1000

        cfg = load_config(self.write(data))
        self.assertEqual(cfg.debounce.cooldown_ms, 1000)

    def test_missing_debounce_section(self):
        data = copy.deepcopy(self.data)
        del data['debounce']

        cfg = load_config(self.write(data))
        self.assertIsNone(cfg.debounce.cooldown_ms)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(str(Path(self.tmpdir.name) / "nope.yaml"))

    def test_missing_section(self):
        data = copy.deepcopy(self.data)
        del data['classifier']

        with self.assertRaises(KeyError):
            load_config(self.write(data))

    def test_invalid_values(self):
        cases = [
            ('debounce', 'cooldown_ms', -5),
            ('mediapipe', 'max_num_hands', 0),
            ('mediapipe', 'model_complexity', 2),
            ('mediapipe', 'min_detection_confidence', 1.5),
            ('classifier', 'ok_max_distance', 0.0),
            ('classifier', 'rotation_threshold_deg', 200.0),
        ]
        for section, key, value in cases:
            with self.subTest(setting=f"{section}.{key}"):
                data = copy.deepcopy(self.data)
                data[section][key] = value
                with self.assertRaises(ValueError):
                    load_config(self.write(data))


if __name__ == '__main__':
    unittest.main()
