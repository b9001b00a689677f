"""Background music adapters."""

from video_producer.adapters.music.base import MusicProvider, MusicRequest, MusicResult
from video_producer.adapters.music.http import HttpMusicProvider
from video_producer.adapters.music.stub import StubMusicProvider

__all__ = [
    "HttpMusicProvider",
    "MusicProvider",
    "MusicRequest",
    "MusicResult",
    "StubMusicProvider",
]
