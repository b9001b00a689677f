"""Video clip generation adapters."""

from video_producer.adapters.video_gen.base import (
    VideoGenProvider,
    VideoGenRequest,
    VideoGenResult,
)
from video_producer.adapters.video_gen.http import HttpVideoGenProvider
from video_producer.adapters.video_gen.stub import StubVideoGenProvider

__all__ = [
    "HttpVideoGenProvider",
    "StubVideoGenProvider",
    "VideoGenProvider",
    "VideoGenRequest",
    "VideoGenResult",
]
