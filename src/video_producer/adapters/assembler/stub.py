"""Stub assembly provider for testing."""

import asyncio
from pathlib import Path

from video_producer.adapters.assembler.base import (
    AssemblerProvider,
    AssemblyRequest,
    AssemblyResult,
    DownloadResult,
)
from video_producer.logging import get_logger

logger = get_logger(__name__)


class StubAssemblerProvider(AssemblerProvider):
    """Pretends to compose the video and writes a marker file on download."""

    def __init__(self, latency_ms: int = 50) -> None:
        self.latency_ms = latency_ms

    @property
    def name(self) -> str:
        return "stub"

    async def assemble(self, request: AssemblyRequest) -> AssemblyResult:
        await asyncio.sleep(self.latency_ms / 1000)
        logger.info(
            "stub_assembly_completed",
            production_id=request.production_id,
            timings=len(request.scene_timings),
        )
        return AssemblyResult(
            success=True,
            output_url=f"https://stub.local/video/{request.production_id}.mp4",
            metadata={"provider": self.name},
        )

    async def download(self, production_id: str, destination: Path) -> DownloadResult:
        destination.parent.mkdir(parents=True, exist_ok=True)
        data = b"STUB_VIDEO_DATA_" + production_id.encode()
        destination.write_bytes(data)
        return DownloadResult(success=True, output_path=destination, file_size_bytes=len(data))
