"""Voice and music presets."""

from video_producer.presets.voices import (
    MUSIC_PROMPTS,
    VOICE_PRESETS,
    VoicePreset,
    get_music_prompt,
    get_voice,
)

__all__ = [
    "MUSIC_PROMPTS",
    "VOICE_PRESETS",
    "VoicePreset",
    "get_music_prompt",
    "get_voice",
]
