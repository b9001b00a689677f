"""Base interface for voiceover generation providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class VoiceoverRequest:
    """Request for voiceover generation."""

    text: str
    voice: str | None = None  # Stock voice name, e.g. "Rachel"
    voice_id: str | None = None  # Provider voice id, takes precedence over voice


@dataclass
class VoiceoverResult:
    """Result from voiceover generation."""

    success: bool
    audio_url: str | None = None
    duration_seconds: float | None = None
    error_message: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class VoiceoverProvider(ABC):
    """Abstract base class for voiceover generation providers.

    Implementations:
    - HttpVoiceoverProvider: Producer backend voiceover endpoints
    - StubVoiceoverProvider: Returns mock data for testing
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name identifier."""
        ...

    @abstractmethod
    async def generate(self, request: VoiceoverRequest) -> VoiceoverResult:
        """Generate voiceover audio from text.

        Args:
            request: Voiceover request with text and voice selection

        Returns:
            VoiceoverResult with the audio URL or error information
        """
        ...

    async def health_check(self) -> bool:
        """Check if the provider is available and healthy."""
        return True
