"""Music provider backed by the producer API."""

import httpx

from video_producer.adapters.http import ProducerAPIClient, describe_error
from video_producer.adapters.music.base import MusicProvider, MusicRequest, MusicResult
from video_producer.logging import get_logger

logger = get_logger(__name__)


class HttpMusicProvider(MusicProvider):
    """Calls ``/generate-music``."""

    def __init__(self, client: ProducerAPIClient | None = None) -> None:
        self.client = client or ProducerAPIClient()

    @property
    def name(self) -> str:
        return "producer_api"

    async def generate(self, request: MusicRequest) -> MusicResult:
        logger.info("music_generation_started", duration_ms=request.duration_ms)

        try:
            data = await self.client.post_json(
                "/generate-music",
                {
                    "prompt": request.prompt,
                    "durationMs": request.duration_ms,
                    "forceInstrumental": request.force_instrumental,
                },
            )
        except (httpx.HTTPError, ValueError) as e:
            error_msg = describe_error(e)
            logger.error("music_generation_failed", error=error_msg)
            return MusicResult(success=False, error_message=error_msg)

        url = data.get("url")
        if not url:
            return MusicResult(success=False, error_message="No music URL in response")

        duration = data.get("duration")
        return MusicResult(
            success=True,
            audio_url=url,
            duration_seconds=float(duration) if duration is not None else None,
            metadata={"provider": self.name},
        )

    async def health_check(self) -> bool:
        return await self.client.health_check()
