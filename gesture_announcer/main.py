"""
Main application for hand gesture announcements.
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import cv2
from dotenv import load_dotenv

from .announcer_mock import MockAnnouncer
from .config import load_config
from .gestures import GestureProcessor
from .overlay import OverlayRenderer
from .speech import ElevenLabsAnnouncer
from .tracker import CameraFrameSource, HandsTracker
from .types import AnnouncerProto, GestureEvent

logger = logging.getLogger(__name__)


class GestureAnnouncerApp:
    """Main application class: camera in, overlay and speech out."""

    def __init__(self, config_path: Optional[str] = None, mock_speech: bool = False):
        """Initialize the application with configuration."""
        self.config = load_config(config_path)
        self.processor = GestureProcessor(self.config)
        self.overlay = OverlayRenderer(show_landmarks=self.config.display.show_landmarks)
        self.announcer = self._make_announcer(mock_speech)

        tracker = HandsTracker.from_config(self.config)
        self.source = CameraFrameSource(self.config, tracker)

    def _make_announcer(self, mock_speech: bool) -> AnnouncerProto:
        if mock_speech or not self.config.speech.enabled:
            return MockAnnouncer()
        try:
            announcer = ElevenLabsAnnouncer(self.config.speech)
            print("🔊 Using Eleven Labs speech announcer")
            return announcer
        except ValueError as e:
            print(f"⚠️  {e}, using mock announcer")
            return MockAnnouncer()

    async def on_event(self, event: GestureEvent) -> None:
        """Deliver a gesture event to the overlay and the announcer."""
        logger.info("Gesture detected: %s", event.label.display)
        self.overlay.show(event)
        await self.announcer.announce(event.label.display)

    async def run(self):
        """Run the main application loop."""
        print(f"Starting {self.config.display.window_name}")
        print("🎯 Gestures: Peace, Good, Select, Hello, Grab, OK, Call Me, Rock On, No")
        print("Press 'q' to quit")

        try:
            for image, frame, t_now in self.source:
                _, event = self.processor.process_frame(frame, t_now)
                if event is not None:
                    await self.on_event(event)

                self.overlay.draw(image, frame)
                cv2.imshow(self.config.display.window_name, image)

                # Let announcement tasks make progress between frames
                await asyncio.sleep(0)

                if cv2.waitKey(1) & 0xFF == ord('q'):
                    break
        finally:
            await self.announcer.close()
            self.source.release()
            cv2.destroyAllWindows()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments (sys.argv if argv is None)."""
    ap = argparse.ArgumentParser(description="Announce hand gestures seen by the webcam")
    ap.add_argument("-c", "--config", default=None,
                    help="path to YAML config (defaults to the bundled config.default.yaml)")
    ap.add_argument("--mock-speech", action="store_true",
                    help="print announcements instead of speaking them")
    return ap.parse_args(argv)


async def main():
    """Entry point for the application."""
    logging.basicConfig(level=logging.INFO)
    load_dotenv()

    args = parse_args()

    try:
        app = GestureAnnouncerApp(config_path=args.config, mock_speech=args.mock_speech)
        await app.run()
    except KeyboardInterrupt:
        print("\nApplication interrupted by user")
    except (RuntimeError, FileNotFoundError, ValueError) as e:
        print(f"❌ Error: {e}")
        sys.exit(1)


def run():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
