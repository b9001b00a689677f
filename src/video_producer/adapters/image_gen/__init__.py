"""Image generation adapters."""

from video_producer.adapters.image_gen.base import (
    AI_IMAGE_SOURCES,
    ImageGenProvider,
    ImageGenRequest,
    ImageGenResult,
)
from video_producer.adapters.image_gen.http import HttpImageGenProvider
from video_producer.adapters.image_gen.stub import StubImageGenProvider

__all__ = [
    "AI_IMAGE_SOURCES",
    "HttpImageGenProvider",
    "ImageGenProvider",
    "ImageGenRequest",
    "ImageGenResult",
    "StubImageGenProvider",
]
