"""Stub script provider for testing."""

import asyncio

from video_producer.adapters.script.base import (
    AnalysisResult,
    ScriptProvider,
    ScriptRequest,
    ScriptResult,
    VisualSuggestionRequest,
    VisualSuggestionResult,
)
from video_producer.domain.models import (
    ProductionBrief,
    Scene,
    VisualAlternative,
    VisualPlan,
    VisualSection,
)

PRODUCT_SECTIONS = ("hook", "problem", "solution", "social_proof", "cta")


class StubScriptProvider(ScriptProvider):
    """Produces canned scripts and one section per paragraph."""

    def __init__(self, latency_ms: int = 50) -> None:
        self.latency_ms = latency_ms

    @property
    def name(self) -> str:
        return "stub"

    async def generate_script(self, request: ScriptRequest) -> ScriptResult:
        await asyncio.sleep(self.latency_ms / 1000)
        script = (
            f"Discover {request.topic}.\n\n"
            f"Here is why {request.topic} matters to you.\n\n"
            "Try it today and see the difference."
        )
        return ScriptResult(success=True, script=script)

    async def suggest_visuals(self, request: VisualSuggestionRequest) -> VisualSuggestionResult:
        await asyncio.sleep(self.latency_ms / 1000)
        paragraphs = [p.strip() for p in request.script.split("\n\n") if p.strip()]
        sections = []
        for i, paragraph in enumerate(paragraphs):
            section_id = f"section_{i + 1}"
            alternatives = (
                VisualAlternative(
                    id=f"{section_id}_alt1",
                    visual_direction=f"Close-up illustrating: {paragraph[:40]}",
                    shot_type="close-up",
                ),
                VisualAlternative(
                    id=f"{section_id}_alt2",
                    visual_direction=f"Wide shot establishing: {paragraph[:40]}",
                    shot_type="wide",
                ),
            )
            sections.append(
                VisualSection(
                    id=section_id,
                    name=f"Scene {i + 1}",
                    script_content=paragraph,
                    alternatives=alternatives,
                    selected_id=alternatives[0].id,
                )
            )
        return VisualSuggestionResult(
            success=True,
            visual_plan=VisualPlan(sections=tuple(sections), overall_style=request.style),
        )

    async def analyze(self, brief: ProductionBrief) -> AnalysisResult:
        await asyncio.sleep(self.latency_ms / 1000)
        name = brief.product.product_name if brief.product else brief.title
        scenes = [
            Scene(
                number=i + 1,
                text=f"{section.replace('_', ' ').title()} for {name}.",
                visual_direction=f"{section.upper()}: {name} in a {brief.style} style",
            )
            for i, section in enumerate(PRODUCT_SECTIONS)
        ]
        return AnalysisResult(
            success=True,
            script=" ".join(scene.text for scene in scenes),
            scenes=scenes,
        )
