"""Adapters for the external generation services."""

from video_producer.adapters.assembler.base import AssemblerProvider
from video_producer.adapters.evaluator.base import EvaluatorProvider
from video_producer.adapters.image_gen.base import ImageGenProvider
from video_producer.adapters.music.base import MusicProvider
from video_producer.adapters.script.base import ScriptProvider
from video_producer.adapters.video_gen.base import VideoGenProvider
from video_producer.adapters.voiceover.base import VoiceoverProvider

__all__ = [
    "AssemblerProvider",
    "EvaluatorProvider",
    "ImageGenProvider",
    "MusicProvider",
    "ScriptProvider",
    "VideoGenProvider",
    "VoiceoverProvider",
]
