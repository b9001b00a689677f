"""Base interface for background music providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class MusicRequest:
    """Request for a background music track."""

    prompt: str
    duration_ms: int
    force_instrumental: bool = True


@dataclass
class MusicResult:
    """Result from music generation."""

    success: bool
    audio_url: str | None = None
    duration_seconds: float | None = None
    error_message: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class MusicProvider(ABC):
    """Abstract base class for music generation providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name identifier."""
        ...

    @abstractmethod
    async def generate(self, request: MusicRequest) -> MusicResult:
        """Generate a music track matching the prompt."""
        ...

    async def health_check(self) -> bool:
        return True
