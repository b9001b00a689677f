"""Stub image generation provider for testing."""

import asyncio
from uuid import uuid4

from video_producer.adapters.image_gen.base import (
    ImageGenProvider,
    ImageGenRequest,
    ImageGenResult,
)
from video_producer.logging import get_logger

logger = get_logger(__name__)


class StubImageGenProvider(ImageGenProvider):
    """Stub provider that returns placeholder images.

    Simulates image generation without making API calls.
    """

    def __init__(self, latency_ms: int = 50, source: str = "stability_ai") -> None:
        """Initialize the stub provider.

        Args:
            latency_ms: Simulated latency in milliseconds
            source: Source name reported for every image
        """
        self.latency_ms = latency_ms
        self.source = source

    @property
    def name(self) -> str:
        return "stub"

    async def generate(self, request: ImageGenRequest) -> ImageGenResult:
        await asyncio.sleep(self.latency_ms / 1000)

        image_id = uuid4().hex[:8]
        prompt_short = request.prompt[:30].replace(" ", "+") if request.prompt else "image"

        logger.info("stub_image_generated", section=request.section, image_id=image_id)

        return ImageGenResult(
            success=True,
            image_url=f"https://placehold.co/1920x1080/1a1a1a/ffffff?text={prompt_short}",
            width=1920,
            height=1080,
            source=self.source,
            metadata={"provider": self.name, "image_id": image_id, "is_placeholder": True},
        )
