"""Stub video generation provider for testing."""

import asyncio
from uuid import uuid4

from video_producer.adapters.video_gen.base import (
    VideoGenProvider,
    VideoGenRequest,
    VideoGenResult,
)
from video_producer.logging import get_logger

logger = get_logger(__name__)


class StubVideoGenProvider(VideoGenProvider):
    """Stub provider that simulates video generation without external calls."""

    def __init__(self, latency_ms: int = 50) -> None:
        self.latency_ms = latency_ms

    @property
    def name(self) -> str:
        return "stub"

    async def generate(self, request: VideoGenRequest) -> VideoGenResult:
        await asyncio.sleep(self.latency_ms / 1000)

        clip_id = uuid4().hex[:8]
        logger.info("stub_video_generated", section=request.section, clip_id=clip_id)

        return VideoGenResult(
            success=True,
            video_url=f"https://stub.local/video/{request.section}_{clip_id}.mp4",
            width=1920,
            height=1080,
            duration_seconds=float(request.duration_seconds),
            source="runway",
            metadata={"provider": self.name, "clip_id": clip_id},
        )
