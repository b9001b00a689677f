"""Image generation provider backed by the producer API."""

import httpx

from video_producer.adapters.http import ProducerAPIClient, describe_error
from video_producer.adapters.image_gen.base import (
    ImageGenProvider,
    ImageGenRequest,
    ImageGenResult,
)
from video_producer.logging import get_logger

logger = get_logger(__name__)


class HttpImageGenProvider(ImageGenProvider):
    """Calls ``/generate-image``. The backend picks the actual image source."""

    def __init__(self, client: ProducerAPIClient | None = None) -> None:
        self.client = client or ProducerAPIClient()

    @property
    def name(self) -> str:
        return "producer_api"

    async def generate(self, request: ImageGenRequest) -> ImageGenResult:
        payload = {
            "section": request.section,
            "productName": request.prompt,  # backend reads the prompt from productName
            "sceneContent": request.scene_content,
            "style": request.style,
            "sceneIndex": request.scene_index,
            "variation": request.variation,
        }

        try:
            data = await self.client.post_json("/generate-image", payload)
        except (httpx.HTTPError, ValueError) as e:
            error_msg = describe_error(e)
            logger.error("image_generation_failed", section=request.section, error=error_msg)
            return ImageGenResult(success=False, error_message=error_msg)

        url = data.get("url")
        if not url:
            return ImageGenResult(success=False, error_message="No image URL in response")

        return ImageGenResult(
            success=True,
            image_url=url,
            width=data.get("width"),
            height=data.get("height"),
            source=data.get("source") or "pexels",
            metadata={"provider": self.name, "section": request.section},
        )

    async def health_check(self) -> bool:
        return await self.client.health_check()
