"""Stub voiceover provider for testing."""

import asyncio
from uuid import uuid4

from video_producer.adapters.voiceover.base import (
    VoiceoverProvider,
    VoiceoverRequest,
    VoiceoverResult,
)
from video_producer.logging import get_logger

logger = get_logger(__name__)

WORDS_PER_MINUTE = 150


class StubVoiceoverProvider(VoiceoverProvider):
    """Stub provider that simulates voiceover generation without external calls."""

    def __init__(self, latency_ms: int = 50) -> None:
        self.latency_ms = latency_ms

    @property
    def name(self) -> str:
        return "stub"

    async def generate(self, request: VoiceoverRequest) -> VoiceoverResult:
        """Simulate voiceover generation with a delay."""
        await asyncio.sleep(self.latency_ms / 1000)

        # Estimate duration (rough: ~150 words per minute)
        word_count = len(request.text.split())
        estimated_duration = round((word_count / WORDS_PER_MINUTE) * 60, 1)

        logger.info(
            "stub_voiceover_generated",
            text_length=len(request.text),
            duration=estimated_duration,
        )

        return VoiceoverResult(
            success=True,
            audio_url=f"https://stub.local/audio/voiceover_{uuid4().hex[:8]}.mp3",
            duration_seconds=estimated_duration,
            metadata={"provider": self.name, "voice": request.voice_id or request.voice},
        )
