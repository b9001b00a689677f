"""Stub music provider for testing."""

import asyncio
from uuid import uuid4

from video_producer.adapters.music.base import MusicProvider, MusicRequest, MusicResult


class StubMusicProvider(MusicProvider):
    """Returns a placeholder track URL."""

    def __init__(self, latency_ms: int = 50) -> None:
        self.latency_ms = latency_ms

    @property
    def name(self) -> str:
        return "stub"

    async def generate(self, request: MusicRequest) -> MusicResult:
        await asyncio.sleep(self.latency_ms / 1000)
        return MusicResult(
            success=True,
            audio_url=f"https://stub.local/audio/music_{uuid4().hex[:8]}.mp3",
            duration_seconds=request.duration_ms / 1000,
            metadata={"provider": self.name, "prompt": request.prompt[:100]},
        )
