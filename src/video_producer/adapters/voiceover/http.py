"""Voiceover provider backed by the producer API."""

import httpx

from video_producer.adapters.http import ProducerAPIClient, describe_error
from video_producer.adapters.voiceover.base import (
    VoiceoverProvider,
    VoiceoverRequest,
    VoiceoverResult,
)
from video_producer.logging import get_logger

logger = get_logger(__name__)


class HttpVoiceoverProvider(VoiceoverProvider):
    """Calls ``/voiceover`` (stock voice name) or ``/voiceover-with-id``."""

    def __init__(self, client: ProducerAPIClient | None = None) -> None:
        self.client = client or ProducerAPIClient()

    @property
    def name(self) -> str:
        return "producer_api"

    async def generate(self, request: VoiceoverRequest) -> VoiceoverResult:
        if request.voice_id:
            path = "/voiceover-with-id"
            payload = {"script": request.text, "voiceId": request.voice_id}
        else:
            path = "/voiceover"
            payload = {"script": request.text, "voice": request.voice}

        logger.info(
            "voiceover_generation_started",
            text_length=len(request.text),
            voice=request.voice_id or request.voice,
        )

        try:
            data = await self.client.post_json(path, payload)
        except (httpx.HTTPError, ValueError) as e:
            error_msg = describe_error(e)
            logger.error("voiceover_generation_failed", error=error_msg)
            return VoiceoverResult(success=False, error_message=error_msg)

        url = data.get("url")
        if not url:
            return VoiceoverResult(success=False, error_message="No audio URL in response")

        duration = data.get("duration")
        logger.info("voiceover_generation_completed", duration=duration)

        return VoiceoverResult(
            success=True,
            audio_url=url,
            duration_seconds=float(duration) if duration is not None else None,
            metadata={"provider": self.name, "voice": request.voice_id or request.voice},
        )

    async def health_check(self) -> bool:
        return await self.client.health_check()
