"""
Mock announcer implementation for testing gesture announcements.
"""
import asyncio
from typing import List

from .speech import SpeechAnnouncer


class MockAnnouncer(SpeechAnnouncer):
    """Mock announcer that prints announcements instead of speaking them."""

    def __init__(self, speak_duration_s: float = 0.0):
        """
        Initialize the mock announcer.

        Args:
            speak_duration_s: How long each fake announcement takes
        """
        super().__init__()
        self.speak_duration_s = speak_duration_s
        self.started: List[str] = []
        self.completed: List[str] = []

    async def speak(self, text: str) -> None:
        """Print the announcement instead of speaking it."""
        self.started.append(text)
        print(f"[MockAnnouncer] Say: {text} (call #{len(self.started)})")
        await asyncio.sleep(self.speak_duration_s)
        self.completed.append(text)

    def reset_counters(self) -> None:
        """Reset recorded announcements for testing."""
        self.started.clear()
        self.completed.clear()
