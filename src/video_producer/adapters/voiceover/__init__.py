"""Voiceover generation adapters."""

from video_producer.adapters.voiceover.base import (
    VoiceoverProvider,
    VoiceoverRequest,
    VoiceoverResult,
)
from video_producer.adapters.voiceover.http import HttpVoiceoverProvider
from video_producer.adapters.voiceover.stub import StubVoiceoverProvider

__all__ = [
    "HttpVoiceoverProvider",
    "StubVoiceoverProvider",
    "VoiceoverProvider",
    "VoiceoverRequest",
    "VoiceoverResult",
]
