"""Base interface for video clip generation providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class VideoGenRequest:
    """Request for one scene video clip."""

    section: str  # e.g. "scene_1_video"
    prompt: str
    scene_content: str = ""
    style: str | None = None
    duration_seconds: int = 5


@dataclass
class VideoGenResult:
    """Result from video generation."""

    success: bool
    video_url: str | None = None
    width: int | None = None
    height: int | None = None
    duration_seconds: float | None = None
    source: str | None = None
    error_message: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class VideoGenProvider(ABC):
    """Abstract base class for video generation providers.

    Implementations:
    - HttpVideoGenProvider: Producer backend ``/generate-video``
    - StubVideoGenProvider: Returns mock data for testing
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name identifier."""
        ...

    @abstractmethod
    async def generate(self, request: VideoGenRequest) -> VideoGenResult:
        """Generate a video clip from the given request."""
        ...

    async def health_check(self) -> bool:
        return True
