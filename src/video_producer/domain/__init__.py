"""Domain models and business logic."""

from video_producer.domain.enums import (
    AssetStatus,
    AssetType,
    LogType,
    MusicMood,
    PhaseId,
    PhaseStatus,
    PlanState,
    Platform,
    ProducerMode,
    ProductionStatus,
    VoiceGender,
    VoiceStyle,
    WatermarkPosition,
)
from video_producer.domain.errors import (
    AnalysisError,
    PlanNotApprovedError,
    PlanTransitionError,
    ProducerError,
    ProductionCancelledError,
    ProductionInProgressError,
    UnknownPhaseError,
)
from video_producer.domain.models import (
    AssetEvaluation,
    AssetMetadata,
    ProductBrief,
    ProductionAsset,
    ProductionBrief,
    ProductionLog,
    ProductionPhase,
    Scene,
    SceneTiming,
    VideoProduction,
    VisualAlternative,
    VisualPlan,
    VisualSection,
    WatermarkConfig,
)
from video_producer.domain.visual_plan import VisualPlanReview

__all__ = [
    "AnalysisError",
    "AssetEvaluation",
    "AssetMetadata",
    "AssetStatus",
    "AssetType",
    "LogType",
    "MusicMood",
    "PhaseId",
    "PhaseStatus",
    "PlanNotApprovedError",
    "PlanState",
    "PlanTransitionError",
    "Platform",
    "ProducerError",
    "ProducerMode",
    "ProductBrief",
    "ProductionAsset",
    "ProductionBrief",
    "ProductionCancelledError",
    "ProductionInProgressError",
    "ProductionLog",
    "ProductionPhase",
    "ProductionStatus",
    "Scene",
    "SceneTiming",
    "UnknownPhaseError",
    "VideoProduction",
    "VisualAlternative",
    "VisualPlan",
    "VisualPlanReview",
    "VisualSection",
    "VoiceGender",
    "VoiceStyle",
    "WatermarkConfig",
    "WatermarkPosition",
]
