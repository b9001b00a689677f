"""Domain models - immutable snapshots of a production run.

Every model here is a frozen dataclass. State changes go through the pure
functions in ``video_producer.domain.state`` which return new snapshots.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from video_producer.domain.enums import (
    AssetStatus,
    AssetType,
    LogType,
    MusicMood,
    PhaseId,
    PhaseStatus,
    Platform,
    ProducerMode,
    ProductionStatus,
    VoiceGender,
    VoiceStyle,
    WatermarkPosition,
)

# (id, display name, description) in execution order
PHASE_DEFINITIONS: tuple[tuple[PhaseId, str, str], ...] = (
    (PhaseId.ANALYZE, "Analyze", "Script breakdown & scene planning"),
    (PhaseId.GENERATE, "Generate", "Create images, videos & audio"),
    (PhaseId.EVALUATE, "Evaluate", "AI quality assessment"),
    (PhaseId.ITERATE, "Iterate", "Regenerate failed assets"),
    (PhaseId.ASSEMBLE, "Assemble", "Final video composition"),
)


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class WatermarkConfig:
    """Watermark overlay applied during assembly."""

    text: str | None = None
    image_url: str | None = None
    position: WatermarkPosition = WatermarkPosition.BOTTOM_RIGHT
    opacity: float = 0.7

    def to_payload(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "imageUrl": self.image_url,
            "position": str(self.position),
            "opacity": self.opacity,
        }


@dataclass(frozen=True)
class ProductBrief:
    """Product description used in product mode."""

    product_name: str
    product_description: str
    target_audience: str = "General audience"
    key_benefits: tuple[str, ...] = ()
    call_to_action: str = ""

    def to_payload(self) -> dict[str, Any]:
        return {
            "productName": self.product_name,
            "productDescription": self.product_description,
            "targetAudience": self.target_audience,
            "keyBenefits": list(self.key_benefits),
            "callToAction": self.call_to_action,
        }


@dataclass(frozen=True)
class ProductionBrief:
    """Everything the producer needs to run a production."""

    title: str
    script: str
    visual_directions: str = ""
    voice_style: VoiceStyle = VoiceStyle.PROFESSIONAL
    voice_gender: VoiceGender = VoiceGender.FEMALE
    voice_id: str | None = None  # Explicit provider voice, overrides style/gender
    music_mood: MusicMood = MusicMood.UPLIFTING
    video_duration: int = 60
    platform: Platform = Platform.YOUTUBE
    style: str = "professional"
    watermark: WatermarkConfig | None = None
    product: ProductBrief | None = None

    @property
    def mode(self) -> ProducerMode:
        return ProducerMode.PRODUCT if self.product else ProducerMode.SCRIPT

    @classmethod
    def from_product(
        cls,
        product: ProductBrief,
        video_duration: int = 60,
        platform: Platform = Platform.YOUTUBE,
        style: str = "professional",
        **kwargs: Any,
    ) -> "ProductionBrief":
        """Build a product-mode brief. The script is filled in by analysis."""
        return cls(
            title=product.product_name,
            script=product.product_description,
            video_duration=video_duration,
            platform=platform,
            style=style,
            product=product,
            **kwargs,
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialize for collaborator endpoints (camelCase keys)."""
        payload: dict[str, Any] = {
            "title": self.title,
            "script": self.script,
            "visualDirections": self.visual_directions,
            "voiceStyle": str(self.voice_style),
            "voiceGender": str(self.voice_gender),
            "musicMood": str(self.music_mood),
            "videoDuration": self.video_duration,
            "platform": str(self.platform),
            "style": self.style,
        }
        if self.product:
            payload.update(self.product.to_payload())
        return payload


@dataclass(frozen=True)
class Scene:
    """A segment of the script paired with one visual direction."""

    number: int  # 1-based
    text: str
    visual_direction: str

    @property
    def preview(self) -> str:
        return (self.text or self.visual_direction)[:50]


@dataclass(frozen=True)
class VisualAlternative:
    """One suggested visual direction for a section."""

    id: str
    visual_direction: str
    shot_type: str = ""
    mood: str = ""
    motion_notes: str = ""
    custom: bool = False  # Written by the user rather than suggested


@dataclass(frozen=True)
class VisualSection:
    """A script section with its candidate visuals and the chosen one."""

    id: str
    name: str
    script_content: str
    alternatives: tuple[VisualAlternative, ...]
    selected_id: str
    asset_type: str = ""
    search_keywords: tuple[str, ...] = ()

    @property
    def selected(self) -> VisualAlternative:
        for alternative in self.alternatives:
            if alternative.id == self.selected_id:
                return alternative
        raise KeyError(f"Section {self.id} has no alternative {self.selected_id}")

    @property
    def visual_direction(self) -> str:
        return self.selected.visual_direction

    @classmethod
    def from_payload(cls, data: dict[str, Any], index: int) -> "VisualSection":
        section_id = str(data.get("id") or f"section_{index + 1}")
        raw_alternatives = data.get("alternatives") or [data]
        alternatives = tuple(
            VisualAlternative(
                id=str(alt.get("id") or f"{section_id}_alt{i + 1}"),
                visual_direction=alt.get("visualDirection", ""),
                shot_type=alt.get("shotType", ""),
                mood=alt.get("mood", ""),
                motion_notes=alt.get("motionNotes", ""),
            )
            for i, alt in enumerate(raw_alternatives)
        )
        return cls(
            id=section_id,
            name=data.get("name") or f"Scene {index + 1}",
            script_content=data.get("scriptContent", ""),
            alternatives=alternatives,
            selected_id=alternatives[0].id,
            asset_type=data.get("assetType", ""),
            search_keywords=tuple(data.get("searchKeywords") or ()),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "script_content": self.script_content,
            "selected_id": self.selected_id,
            "visual_direction": self.visual_direction,
            "alternatives": [
                {
                    "id": alt.id,
                    "visual_direction": alt.visual_direction,
                    "shot_type": alt.shot_type,
                    "mood": alt.mood,
                    "motion_notes": alt.motion_notes,
                    "custom": alt.custom,
                }
                for alt in self.alternatives
            ],
            "asset_type": self.asset_type,
            "search_keywords": list(self.search_keywords),
        }


@dataclass(frozen=True)
class VisualPlan:
    """AI-suggested mapping of script sections to visual directions."""

    sections: tuple[VisualSection, ...]
    overall_style: str = ""
    color_palette: tuple[str, ...] = ()
    director_notes: str = ""

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "VisualPlan":
        """Parse a ``visualPlan`` object returned by the suggestion endpoint."""
        return cls(
            sections=tuple(
                VisualSection.from_payload(section, i)
                for i, section in enumerate(data.get("sections") or [])
            ),
            overall_style=data.get("overallStyle", ""),
            color_palette=tuple(data.get("colorPalette") or ()),
            director_notes=data.get("directorNotes", ""),
        )

    def section(self, section_id: str) -> VisualSection:
        for section in self.sections:
            if section.id == section_id:
                return section
        raise KeyError(f"Unknown section: {section_id}")

    def selections(self) -> dict[str, str]:
        """Map of section id to selected alternative id."""
        return {section.id: section.selected_id for section in self.sections}

    def combined_directions(self) -> str:
        return "\n".join(section.visual_direction for section in self.sections)

    def to_scenes(self) -> list[Scene]:
        return [
            Scene(number=i + 1, text=section.script_content, visual_direction=section.visual_direction)
            for i, section in enumerate(self.sections)
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "sections": [section.to_dict() for section in self.sections],
            "overall_style": self.overall_style,
            "color_palette": list(self.color_palette),
            "director_notes": self.director_notes,
        }


@dataclass(frozen=True)
class AssetMetadata:
    """Descriptive metadata for a generated asset."""

    width: int | None = None
    height: int | None = None
    duration: float | None = None
    prompt: str | None = None
    scene_text: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "duration": self.duration,
            "prompt": self.prompt,
            "sceneText": self.scene_text,
        }


@dataclass(frozen=True)
class ProductionAsset:
    """A generated image or video clip attached to a scene."""

    id: str
    type: AssetType
    section: str  # e.g. "scene_2_img1" or "scene_2_video"
    scene: int
    url: str
    source: str
    metadata: AssetMetadata = field(default_factory=AssetMetadata)
    status: AssetStatus = AssetStatus.APPROVED
    regeneration_count: int = 0
    quality_score: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": str(self.type),
            "section": self.section,
            "scene": self.scene,
            "url": self.url,
            "source": self.source,
            "metadata": self.metadata.to_dict(),
            "status": str(self.status),
            "regenerationCount": self.regeneration_count,
            "qualityScore": self.quality_score,
        }


@dataclass(frozen=True)
class ProductionPhase:
    """One of the five fixed stages of a production."""

    id: PhaseId
    name: str
    description: str
    status: PhaseStatus = PhaseStatus.PENDING
    progress: int = 0
    started_at: datetime | None = None
    completed_at: datetime | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "status": str(self.status),
            "progress": self.progress,
            "started_at": _iso(self.started_at),
            "completed_at": _iso(self.completed_at),
            "error": self.error,
        }


@dataclass(frozen=True)
class ProductionLog:
    """Append-only audit trail entry."""

    id: str
    timestamp: datetime
    type: LogType
    message: str
    phase: PhaseId
    asset_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "type": str(self.type),
            "message": self.message,
            "phase": str(self.phase),
            "asset_id": self.asset_id,
        }


@dataclass(frozen=True)
class AssetEvaluation:
    """Score returned by the evaluation endpoint for one section."""

    section: str
    score: int
    relevance: int | None = None
    technical_quality: int | None = None

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "AssetEvaluation":
        return cls(
            section=str(data.get("section", "")),
            score=int(data.get("score", 0)),
            relevance=data.get("relevance"),
            technical_quality=data.get("technicalQuality"),
        )


@dataclass(frozen=True)
class SceneTiming:
    """Placement of one asset on the final timeline."""

    asset_id: str
    section: str
    start: float
    duration: float

    def to_payload(self) -> dict[str, Any]:
        return {
            "assetId": self.asset_id,
            "section": self.section,
            "start": self.start,
            "duration": self.duration,
        }


@dataclass(frozen=True)
class VideoProduction:
    """Snapshot of a production run."""

    id: str
    title: str
    status: ProductionStatus
    phases: tuple[ProductionPhase, ...]
    created_at: datetime
    updated_at: datetime
    logs: tuple[ProductionLog, ...] = ()
    assets: tuple[ProductionAsset, ...] = ()
    voiceover_url: str | None = None
    voiceover_duration: float | None = None
    music_url: str | None = None
    output_url: str | None = None
    preview_html: str | None = None
    overall_score: int | None = None
    completed_at: datetime | None = None

    def phase(self, phase_id: PhaseId) -> ProductionPhase:
        for phase in self.phases:
            if phase.id == phase_id:
                return phase
        raise KeyError(phase_id)

    @property
    def current_phase(self) -> ProductionPhase | None:
        """The phase currently in progress, if any."""
        for phase in self.phases:
            if phase.status == PhaseStatus.IN_PROGRESS:
                return phase
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "status": str(self.status),
            "phases": [phase.to_dict() for phase in self.phases],
            "logs": [log.to_dict() for log in self.logs],
            "assets": [asset.to_dict() for asset in self.assets],
            "voiceover_url": self.voiceover_url,
            "voiceover_duration": self.voiceover_duration,
            "music_url": self.music_url,
            "output_url": self.output_url,
            "has_preview": self.preview_html is not None,
            "overall_score": self.overall_score,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
            "completed_at": _iso(self.completed_at),
        }
