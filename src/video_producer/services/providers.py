"""Provider selection from settings."""

from dataclasses import dataclass
from typing import Any

from video_producer.adapters.assembler import (
    AssemblerProvider,
    HttpAssemblerProvider,
    StubAssemblerProvider,
)
from video_producer.adapters.evaluator import (
    EvaluatorProvider,
    HttpEvaluatorProvider,
    StubEvaluatorProvider,
)
from video_producer.adapters.http import ProducerAPIClient
from video_producer.adapters.image_gen import (
    HttpImageGenProvider,
    ImageGenProvider,
    StubImageGenProvider,
)
from video_producer.adapters.music import HttpMusicProvider, MusicProvider, StubMusicProvider
from video_producer.adapters.script import HttpScriptProvider, ScriptProvider, StubScriptProvider
from video_producer.adapters.video_gen import (
    HttpVideoGenProvider,
    StubVideoGenProvider,
    VideoGenProvider,
)
from video_producer.adapters.voiceover import (
    HttpVoiceoverProvider,
    StubVoiceoverProvider,
    VoiceoverProvider,
)
from video_producer.config import settings
from video_producer.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ProducerProviders:
    """The collaborators a production run talks to."""

    script: ScriptProvider
    voiceover: VoiceoverProvider
    music: MusicProvider
    image_gen: ImageGenProvider
    video_gen: VideoGenProvider
    evaluator: EvaluatorProvider
    assembler: AssemblerProvider

    @classmethod
    def http(cls, client: ProducerAPIClient | None = None) -> "ProducerProviders":
        """HTTP providers sharing one client configuration."""
        client = client or ProducerAPIClient()
        return cls(
            script=HttpScriptProvider(client),
            voiceover=HttpVoiceoverProvider(client),
            music=HttpMusicProvider(client),
            image_gen=HttpImageGenProvider(client),
            video_gen=HttpVideoGenProvider(client),
            evaluator=HttpEvaluatorProvider(client),
            assembler=HttpAssemblerProvider(client),
        )

    @classmethod
    def stub(cls, latency_ms: int = 50) -> "ProducerProviders":
        return cls(
            script=StubScriptProvider(latency_ms),
            voiceover=StubVoiceoverProvider(latency_ms),
            music=StubMusicProvider(latency_ms),
            image_gen=StubImageGenProvider(latency_ms),
            video_gen=StubVideoGenProvider(latency_ms),
            evaluator=StubEvaluatorProvider(latency_ms=latency_ms),
            assembler=StubAssemblerProvider(latency_ms),
        )

    def all(self) -> dict[str, Any]:
        return {
            "script": self.script,
            "voiceover": self.voiceover,
            "music": self.music,
            "image_gen": self.image_gen,
            "video_gen": self.video_gen,
            "evaluator": self.evaluator,
            "assembler": self.assembler,
        }


def get_providers(provider_name: str | None = None) -> ProducerProviders:
    """Get the configured providers."""
    provider_name = (provider_name or settings.producer_provider).lower()

    if provider_name == "http":
        return ProducerProviders.http()
    if provider_name == "stub":
        return ProducerProviders.stub()

    logger.warning(f"Unknown producer_provider '{provider_name}', using stub")
    return ProducerProviders.stub()
