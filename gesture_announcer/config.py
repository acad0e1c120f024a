"""
Configuration management for the hand gesture announcer.
"""
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int
    width: int
    height: int
    fps: int


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int
    model_complexity: int
    min_detection_confidence: float
    min_tracking_confidence: float


@dataclass
class ClassifierConfig:
    """Gesture classification thresholds."""
    ok_max_distance: float
    rotation_threshold_deg: float


@dataclass
class DebounceConfig:
    """Gesture event debouncing. cooldown_ms None = announce on label change only."""
    cooldown_ms: Optional[float]


@dataclass
class SpeechConfig:
    """Text-to-speech announcement settings."""
    enabled: bool
    api_key_env: str
    voice_id: str
    model_id: str
    output_format: str


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool
    mirror: bool
    window_name: str


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig
    mediapipe: MediaPipeConfig
    classifier: ClassifierConfig
    debounce: DebounceConfig
    speech: SpeechConfig
    display: DisplayConfig


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses config.default.yaml

    Returns:
        Configuration object with all settings
    """
    if path is None:
        # Default config ships inside the package
        path = Path(__file__).parent / "config.default.yaml"

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    cfg = _dict_to_config(data)
    validate_config(cfg)
    return cfg


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    camera_data = data['camera']
    camera = CameraConfig(
        index=camera_data['index'],
        width=camera_data['width'],
        height=camera_data['height'],
        fps=camera_data['fps']
    )

    mp_data = data['mediapipe']
    mediapipe = MediaPipeConfig(
        max_num_hands=mp_data['max_num_hands'],
        model_complexity=mp_data['model_complexity'],
        min_detection_confidence=mp_data['min_detection_confidence'],
        min_tracking_confidence=mp_data['min_tracking_confidence']
    )

    classifier_data = data['classifier']
    classifier = ClassifierConfig(
        ok_max_distance=classifier_data['ok_max_distance'],
        rotation_threshold_deg=classifier_data['rotation_threshold_deg']
    )

    # An absent or null cooldown keeps the edge-triggered policy
    debounce_data = data.get('debounce') or {}
    debounce = DebounceConfig(cooldown_ms=debounce_data.get('cooldown_ms'))

    speech_data = data['speech']
    speech = SpeechConfig(
        enabled=speech_data['enabled'],
        api_key_env=speech_data['api_key_env'],
        voice_id=speech_data['voice_id'],
        model_id=speech_data['model_id'],
        output_format=speech_data['output_format']
    )

    display_data = data['display']
    display = DisplayConfig(
        show_landmarks=display_data['show_landmarks'],
        mirror=display_data['mirror'],
        window_name=display_data['window_name']
    )

    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        classifier=classifier,
        debounce=debounce,
        speech=speech,
        display=display
    )


def validate_config(cfg: Cfg) -> None:
    """
    Reject values the tracker or gesture engine cannot work with.

    Raises:
        ValueError: If a setting is out of range
    """
    mp_cfg = cfg.mediapipe
    if mp_cfg.max_num_hands < 1:
        raise ValueError(f"mediapipe.max_num_hands must be >= 1, got {mp_cfg.max_num_hands}")
    if mp_cfg.model_complexity not in (0, 1):
        raise ValueError(f"mediapipe.model_complexity must be 0 or 1, got {mp_cfg.model_complexity}")
    for name in ("min_detection_confidence", "min_tracking_confidence"):
        value = getattr(mp_cfg, name)
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"mediapipe.{name} must be in [0, 1], got {value}")

    if cfg.classifier.ok_max_distance <= 0:
        raise ValueError(f"classifier.ok_max_distance must be > 0, got {cfg.classifier.ok_max_distance}")
    if not 0 <= cfg.classifier.rotation_threshold_deg <= 180:
        raise ValueError(
            f"classifier.rotation_threshold_deg must be in [0, 180], got {cfg.classifier.rotation_threshold_deg}"
        )

    cooldown = cfg.debounce.cooldown_ms
    if cooldown is not None and cooldown < 0:
        raise ValueError(f"debounce.cooldown_ms must be >= 0 or null, got {cooldown}")
