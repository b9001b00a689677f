"""Assembly provider backed by the producer API."""

from pathlib import Path

import httpx

from video_producer.adapters.assembler.base import (
    AssemblerProvider,
    AssemblyRequest,
    AssemblyResult,
    DownloadResult,
)
from video_producer.adapters.http import ProducerAPIClient, describe_error
from video_producer.logging import get_logger

logger = get_logger(__name__)


class HttpAssemblerProvider(AssemblerProvider):
    """Calls ``/assemble`` and streams ``/download/{productionId}``."""

    def __init__(self, client: ProducerAPIClient | None = None) -> None:
        self.client = client or ProducerAPIClient()

    @property
    def name(self) -> str:
        return "producer_api"

    async def assemble(self, request: AssemblyRequest) -> AssemblyResult:
        logger.info(
            "assembly_started",
            production_id=request.production_id,
            asset_count=len(request.assets),
            has_voiceover=request.voiceover_url is not None,
            has_music=request.music_url is not None,
        )

        try:
            data = await self.client.post_json("/assemble", request.to_payload())
        except (httpx.HTTPError, ValueError) as e:
            error_msg = describe_error(e)
            logger.error("assembly_failed", production_id=request.production_id, error=error_msg)
            return AssemblyResult(success=False, error_message=error_msg)

        output_url = data.get("downloadUrl") or data.get("videoUrl")
        preview_html = data.get("previewHtml")
        if not output_url and not preview_html:
            return AssemblyResult(success=False, error_message="No video or preview in response")

        logger.info(
            "assembly_completed",
            production_id=request.production_id,
            has_video=output_url is not None,
        )
        return AssemblyResult(
            success=True,
            output_url=output_url,
            preview_html=preview_html,
            metadata={"provider": self.name},
        )

    async def download(self, production_id: str, destination: Path) -> DownloadResult:
        try:
            size = await self.client.download(f"/download/{production_id}", destination)
        except (httpx.HTTPError, OSError) as e:
            error_msg = describe_error(e)
            logger.error("download_failed", production_id=production_id, error=error_msg)
            destination.unlink(missing_ok=True)
            return DownloadResult(success=False, error_message=error_msg)

        logger.info("download_completed", production_id=production_id, size=size)
        return DownloadResult(success=True, output_path=destination, file_size_bytes=size)

    async def health_check(self) -> bool:
        return await self.client.health_check()
