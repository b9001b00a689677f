"""Base interface for image generation providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

# Sources that synthesize images rather than pick them from a stock library
AI_IMAGE_SOURCES = frozenset({"stability_ai", "huggingface", "fal"})


@dataclass
class ImageGenRequest:
    """Request for one scene image."""

    section: str  # e.g. "scene_1_img0"
    prompt: str
    scene_content: str = ""
    style: str | None = None
    scene_index: int = 1
    variation: int = 0  # 0 = as written, 1 = close-up, 2 = wide


@dataclass
class ImageGenResult:
    """Result from image generation."""

    success: bool
    image_url: str | None = None
    width: int | None = None
    height: int | None = None
    source: str | None = None
    error_message: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def is_ai_generated(self) -> bool:
        return self.source in AI_IMAGE_SOURCES


class ImageGenProvider(ABC):
    """Abstract base class for image generation providers.

    Implementations:
    - HttpImageGenProvider: Producer backend ``/generate-image``
    - StubImageGenProvider: Returns placeholder images for testing
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name identifier."""
        ...

    @abstractmethod
    async def generate(self, request: ImageGenRequest) -> ImageGenResult:
        """Generate an image from the given request.

        Args:
            request: Image generation request with prompt and scene context

        Returns:
            ImageGenResult with image URL or error information
        """
        ...

    async def health_check(self) -> bool:
        return True
