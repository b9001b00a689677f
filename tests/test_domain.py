"""Tests for domain models."""

from video_producer.domain import (
    AssetType,
    MusicMood,
    PhaseId,
    ProducerMode,
    ProductBrief,
    ProductionAsset,
    ProductionBrief,
    ProductionStatus,
    VisualPlan,
    VoiceGender,
    VoiceStyle,
    WatermarkConfig,
)
from video_producer.domain.state import create_production
from video_producer.presets import get_music_prompt, get_voice


def test_production_status_terminal() -> None:
    assert ProductionStatus.COMPLETED.is_terminal
    assert ProductionStatus.FAILED.is_terminal
    assert ProductionStatus.CANCELLED.is_terminal
    assert not ProductionStatus.PENDING.is_terminal
    assert not ProductionStatus.IN_PROGRESS.is_terminal


def test_brief_mode() -> None:
    script_brief = ProductionBrief(title="T", script="S")
    product_brief = ProductionBrief.from_product(
        ProductBrief(product_name="Lamp", product_description="A desk lamp"),
        video_duration=30,
    )

    assert script_brief.mode == ProducerMode.SCRIPT
    assert product_brief.mode == ProducerMode.PRODUCT
    assert product_brief.title == "Lamp"
    assert product_brief.video_duration == 30


def test_brief_payload_uses_camel_case() -> None:
    brief = ProductionBrief.from_product(
        ProductBrief(product_name="Lamp", product_description="A desk lamp", key_benefits=("bright",))
    )

    payload = brief.to_payload()

    assert payload["productName"] == "Lamp"
    assert payload["keyBenefits"] == ["bright"]
    assert payload["voiceStyle"] == "professional"
    assert payload["videoDuration"] == 60


def test_watermark_payload() -> None:
    payload = WatermarkConfig(text="ACME").to_payload()

    assert payload == {"text": "ACME", "imageUrl": None, "position": "bottom-right", "opacity": 0.7}


def test_asset_to_dict() -> None:
    asset = ProductionAsset(
        id="asset_1",
        type=AssetType.AI_IMAGE,
        section="scene_1_img0",
        scene=1,
        url="https://cdn.test/a.png",
        source="fal",
    )

    data = asset.to_dict()

    assert data["type"] == "ai_image"
    assert data["status"] == "approved"
    assert data["regenerationCount"] == 0
    assert data["qualityScore"] is None


def test_production_phases_in_order() -> None:
    production = create_production("Demo")

    assert [p.id for p in production.phases] == list(PhaseId)
    assert production.status == ProductionStatus.PENDING
    assert production.id.startswith("prod_")
    assert production.current_phase is None


def test_production_to_dict() -> None:
    data = create_production("Demo").to_dict()

    assert data["status"] == "pending"
    assert len(data["phases"]) == 5
    assert data["has_preview"] is False
    assert data["completed_at"] is None


def test_visual_plan_from_payload() -> None:
    plan = VisualPlan.from_payload(
        {
            "sections": [
                {
                    "id": "intro",
                    "name": "Intro",
                    "scriptContent": "Hello there.",
                    "alternatives": [
                        {"id": "a", "visualDirection": "Sunrise over a city", "shotType": "wide"},
                        {"id": "b", "visualDirection": "Coffee pouring", "shotType": "close-up"},
                    ],
                },
                {"scriptContent": "Goodbye.", "visualDirection": "Sunset"},
            ],
            "overallStyle": "cinematic",
            "colorPalette": ["#000", "#fff"],
        }
    )

    assert len(plan.sections) == 2
    assert plan.selections() == {"intro": "a", "section_2": "section_2_alt1"}
    assert plan.sections[1].visual_direction == "Sunset"
    assert plan.combined_directions() == "Sunrise over a city\nSunset"
    scenes = plan.to_scenes()
    assert [s.number for s in scenes] == [1, 2]
    assert scenes[0].text == "Hello there."


def test_voice_presets() -> None:
    assert get_voice(VoiceStyle.PROFESSIONAL, VoiceGender.FEMALE) == "Rachel"
    assert get_voice(VoiceStyle.PROFESSIONAL, VoiceGender.MALE) == "Adam"
    assert get_voice(VoiceStyle.CALM, VoiceGender.MALE) == "Daniel"


def test_music_prompt_none_disables_music() -> None:
    assert get_music_prompt(MusicMood.NONE) is None
    assert "uplifting" in (get_music_prompt(MusicMood.UPLIFTING) or "")
