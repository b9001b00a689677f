"""Domain enumerations."""

from enum import StrEnum


class ProductionStatus(StrEnum):
    """Status of a production run."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (
            ProductionStatus.COMPLETED,
            ProductionStatus.FAILED,
            ProductionStatus.CANCELLED,
        )


class PhaseId(StrEnum):
    """The five fixed production phases, in execution order."""

    ANALYZE = "analyze"
    GENERATE = "generate"
    EVALUATE = "evaluate"
    ITERATE = "iterate"
    ASSEMBLE = "assemble"


class PhaseStatus(StrEnum):
    """Status of a single phase."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    SKIPPED = "skipped"
    FAILED = "failed"


class AssetType(StrEnum):
    """Kinds of visual asset produced per scene."""

    IMAGE = "image"  # Stock or library image
    AI_IMAGE = "ai_image"  # Generated by a diffusion model
    VIDEO = "video"


class AssetStatus(StrEnum):
    """Review status of an asset."""

    PENDING = "pending"
    APPROVED = "approved"


class LogType(StrEnum):
    """Types of entries in a production's audit trail."""

    DECISION = "decision"
    GENERATION = "generation"
    EVALUATION = "evaluation"
    SUCCESS = "success"
    ERROR = "error"
    FALLBACK = "fallback"
    WARNING = "warning"
    INFO = "info"


class PlanState(StrEnum):
    """Approval state of a visual plan."""

    NONE = "none"
    GENERATED = "generated"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"


class ProducerMode(StrEnum):
    """How the production brief was supplied."""

    SCRIPT = "script"  # User-written script, optional visual directions
    PRODUCT = "product"  # Product brief analyzed by the backend


class VoiceStyle(StrEnum):
    """Voiceover delivery styles."""

    PROFESSIONAL = "professional"
    WARM = "warm"
    ENERGETIC = "energetic"
    CALM = "calm"
    AUTHORITATIVE = "authoritative"


class VoiceGender(StrEnum):
    """Voiceover voice gender."""

    FEMALE = "female"
    MALE = "male"


class MusicMood(StrEnum):
    """Background music moods. NONE disables music generation."""

    UPLIFTING = "uplifting"
    CALM = "calm"
    DRAMATIC = "dramatic"
    INSPIRING = "inspiring"
    NONE = "none"


class Platform(StrEnum):
    """Target platforms for the finished video."""

    YOUTUBE = "youtube"
    TIKTOK = "tiktok"
    INSTAGRAM = "instagram"
    FACEBOOK = "facebook"
    TWITTER = "twitter"


class WatermarkPosition(StrEnum):
    """Corner placement of a watermark."""

    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"
