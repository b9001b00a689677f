"""Video generation provider backed by the producer API."""

import httpx

from video_producer.adapters.http import ProducerAPIClient, describe_error
from video_producer.adapters.video_gen.base import (
    VideoGenProvider,
    VideoGenRequest,
    VideoGenResult,
)
from video_producer.logging import get_logger

logger = get_logger(__name__)

DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080


class HttpVideoGenProvider(VideoGenProvider):
    """Calls ``/generate-video``. May return AI clips or stock B-roll."""

    def __init__(self, client: ProducerAPIClient | None = None) -> None:
        self.client = client or ProducerAPIClient()

    @property
    def name(self) -> str:
        return "producer_api"

    async def generate(self, request: VideoGenRequest) -> VideoGenResult:
        payload = {
            "section": request.section,
            "productName": request.prompt,  # backend reads the prompt from productName
            "sceneContent": request.scene_content,
            "style": request.style,
            "duration": request.duration_seconds,
        }

        logger.info(
            "video_generation_started",
            section=request.section,
            duration=request.duration_seconds,
        )

        try:
            data = await self.client.post_json("/generate-video", payload)
        except (httpx.HTTPError, ValueError) as e:
            error_msg = describe_error(e)
            logger.error("video_generation_failed", section=request.section, error=error_msg)
            return VideoGenResult(success=False, error_message=error_msg)

        url = data.get("url")
        if not url:
            return VideoGenResult(success=False, error_message="No video URL in response")

        duration = data.get("duration")
        return VideoGenResult(
            success=True,
            video_url=url,
            width=data.get("width") or DEFAULT_WIDTH,
            height=data.get("height") or DEFAULT_HEIGHT,
            duration_seconds=float(duration) if duration is not None else None,
            source=data.get("source") or "pexels",
            metadata={"provider": self.name, "section": request.section},
        )

    async def health_check(self) -> bool:
        return await self.client.health_check()
