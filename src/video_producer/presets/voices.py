"""Voice and music presets for the generation endpoints.

Voice names are the provider's stock voices; the voiceover endpoint resolves
them to voice ids.
"""

from dataclasses import dataclass

from video_producer.domain.enums import MusicMood, VoiceGender, VoiceStyle


@dataclass(frozen=True)
class VoicePreset:
    """A pair of stock voices for one delivery style."""

    style: VoiceStyle
    female: str
    male: str
    description: str

    def voice_for(self, gender: VoiceGender) -> str:
        return self.female if gender == VoiceGender.FEMALE else self.male


VOICE_PRESETS: dict[VoiceStyle, VoicePreset] = {
    VoiceStyle.PROFESSIONAL: VoicePreset(
        style=VoiceStyle.PROFESSIONAL,
        female="Rachel",
        male="Adam",
        description="Clear, measured narration",
    ),
    VoiceStyle.WARM: VoicePreset(
        style=VoiceStyle.WARM,
        female="Sarah",
        male="Bill",
        description="Friendly and approachable",
    ),
    VoiceStyle.ENERGETIC: VoicePreset(
        style=VoiceStyle.ENERGETIC,
        female="Emily",
        male="Josh",
        description="Upbeat, fast-paced delivery",
    ),
    VoiceStyle.CALM: VoicePreset(
        style=VoiceStyle.CALM,
        female="Charlotte",
        male="Daniel",
        description="Soft and relaxed",
    ),
    VoiceStyle.AUTHORITATIVE: VoicePreset(
        style=VoiceStyle.AUTHORITATIVE,
        female="Nicole",
        male="Clyde",
        description="Confident, commanding tone",
    ),
}

MUSIC_PROMPTS: dict[MusicMood, str] = {
    MusicMood.UPLIFTING: "uplifting motivational background music, bright piano and light percussion",
    MusicMood.CALM: "calm ambient background music, soft pads, gentle and relaxing",
    MusicMood.DRAMATIC: "dramatic cinematic background music, strings and deep percussion",
    MusicMood.INSPIRING: "inspiring corporate background music, building energy, hopeful",
}


def get_voice(style: VoiceStyle, gender: VoiceGender) -> str:
    """Resolve the stock voice name for a style and gender."""
    return VOICE_PRESETS[style].voice_for(gender)


def get_music_prompt(mood: MusicMood) -> str | None:
    """Prompt for the music endpoint, or None when music is disabled."""
    return MUSIC_PROMPTS.get(mood)
