"""
Spoken gesture announcements using Eleven Labs text-to-speech.
"""
import abc
import asyncio
import logging
import os
from typing import Optional

from elevenlabs.client import ElevenLabs

from .config import SpeechConfig

logger = logging.getLogger(__name__)


class SpeechAnnouncer(abc.ABC):
    """
    Base announcer with announce-latest-wins behaviour.

    Each announcement runs as its own asyncio task. Starting a new one cancels
    the task in flight first, so announcements are never queued behind each
    other. Subclasses implement speak().
    """

    def __init__(self):
        self._current: Optional[asyncio.Task] = None

    @property
    def is_speaking(self) -> bool:
        return self._current is not None and not self._current.done()

    @abc.abstractmethod
    async def speak(self, text: str) -> None:
        """Speak text to completion; cancelled when a newer announcement starts."""

    async def announce(self, text: str) -> None:
        """Cancel whatever is being spoken and start speaking text."""
        await self._cancel_current()
        self._current = asyncio.create_task(self._run(text))

    async def wait(self) -> None:
        """Wait for the in-flight announcement (if any) to finish."""
        if self._current is not None:
            await asyncio.wait([self._current])

    async def close(self) -> None:
        await self._cancel_current()

    async def _cancel_current(self) -> None:
        task, self._current = self._current, None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait([task])

    async def _run(self, text: str) -> None:
        try:
            await self.speak(text)
        except asyncio.CancelledError:
            logger.debug("Announcement cancelled: %s", text)
            raise
        except Exception as e:
            # A failed announcement must not take the frame loop down with it
            logger.warning("TTS failed (continuing without audio): %s", e)


class ElevenLabsAnnouncer(SpeechAnnouncer):
    """Speaks announcements through Eleven Labs TTS and ffplay."""

    def __init__(self, cfg: SpeechConfig, client: Optional[ElevenLabs] = None):
        """
        Initialize the announcer.

        Args:
            cfg: Voice, model and output format settings
            client: Eleven Labs client (built from the API key in the environment if None)
        """
        super().__init__()
        self.cfg = cfg

        if client is None:
            api_key = os.getenv(cfg.api_key_env)
            if not api_key:
                raise ValueError(f"{cfg.api_key_env} not found in environment variables")
            client = ElevenLabs(api_key=api_key)
        self.client = client

    async def speak(self, text: str) -> None:
        audio_bytes = await asyncio.to_thread(self.synthesize, text)
        logger.info("Speaking %r (%d bytes)", text, len(audio_bytes))
        await self.play(audio_bytes)

    def synthesize(self, text: str) -> bytes:
        """Generate MP3 audio for text (blocking)."""
        audio_generator = self.client.text_to_speech.convert(
            text=text,
            voice_id=self.cfg.voice_id,
            model_id=self.cfg.model_id,
            output_format=self.cfg.output_format,
        )
        return b"".join(audio_generator)

    async def play(self, audio_bytes: bytes) -> None:
        """
        Play MP3 bytes with ffplay; the player is killed if playback is cancelled.

        Same ffplay invocation as elevenlabs.play, which blocks and cannot be interrupted.
        """
        proc = await asyncio.create_subprocess_exec(
            "ffplay", "-autoexit", "-nodisp", "-loglevel", "quiet", "-",
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
        try:
            await proc.communicate(audio_bytes)
        except asyncio.CancelledError:
            proc.kill()
            await proc.wait()
            raise
