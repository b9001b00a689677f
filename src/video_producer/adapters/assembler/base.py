"""Base interface for final video assembly providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from video_producer.domain.models import ProductionAsset, SceneTiming, WatermarkConfig


@dataclass
class AssemblyRequest:
    """Everything needed to compose the final video."""

    production_id: str
    title: str
    duration_seconds: int
    assets: list[ProductionAsset]
    voiceover_url: str | None = None
    music_url: str | None = None
    watermark: WatermarkConfig | None = None
    scene_timings: list[SceneTiming] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "productionId": self.production_id,
            "title": self.title,
            "duration": self.duration_seconds,
            "assets": [asset.to_dict() for asset in self.assets],
            "voiceoverUrl": self.voiceover_url,
            "sceneTimings": [timing.to_payload() for timing in self.scene_timings],
        }
        if self.music_url:
            payload["musicUrl"] = self.music_url
        if self.watermark:
            payload["watermark"] = self.watermark.to_payload()
        return payload


@dataclass
class AssemblyResult:
    """Result from assembly.

    A successful result carries either a downloadable URL or, when the backend
    only renders a preview, an HTML document.
    """

    success: bool
    output_url: str | None = None
    preview_html: str | None = None
    error_message: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class DownloadResult:
    """Result from downloading a finished video."""

    success: bool
    output_path: Path | None = None
    file_size_bytes: int | None = None
    error_message: str | None = None


class AssemblerProvider(ABC):
    """Abstract base class for assembly providers.

    Implementations:
    - HttpAssemblerProvider: Producer backend ``/assemble`` and ``/download``
    - StubAssemblerProvider: Returns mock data for testing
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name identifier."""
        ...

    @abstractmethod
    async def assemble(self, request: AssemblyRequest) -> AssemblyResult:
        """Compose assets, audio and watermark into a final video."""
        ...

    @abstractmethod
    async def download(self, production_id: str, destination: Path) -> DownloadResult:
        """Download the assembled video of a production to ``destination``."""
        ...

    async def health_check(self) -> bool:
        return True
