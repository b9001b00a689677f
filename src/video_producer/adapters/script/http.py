"""Script and planning provider backed by the producer API."""

from typing import Any

import httpx

from video_producer.adapters.http import ProducerAPIClient, describe_error
from video_producer.adapters.script.base import (
    AnalysisResult,
    ScriptProvider,
    ScriptRequest,
    ScriptResult,
    VisualSuggestionRequest,
    VisualSuggestionResult,
)
from video_producer.domain.models import ProductionBrief, Scene, VisualPlan
from video_producer.logging import get_logger

logger = get_logger(__name__)


def _parse_scenes(raw_scenes: list[dict[str, Any]]) -> list[Scene]:
    scenes = []
    for i, raw in enumerate(raw_scenes):
        text = raw.get("scriptText") or raw.get("text") or ""
        direction = raw.get("visualDirection") or f"Scene {i + 1}: {raw.get('section', 'visual')}"
        scenes.append(Scene(number=i + 1, text=text, visual_direction=direction))
    return scenes


class HttpScriptProvider(ScriptProvider):
    """Calls ``/generate-script``, ``/suggest-visuals`` and ``/analyze``."""

    def __init__(self, client: ProducerAPIClient | None = None) -> None:
        self.client = client or ProducerAPIClient()

    @property
    def name(self) -> str:
        return "producer_api"

    async def generate_script(self, request: ScriptRequest) -> ScriptResult:
        logger.info("script_generation_started", topic=request.topic[:50])
        try:
            data = await self.client.post_json(
                "/generate-script",
                {
                    "topic": request.topic,
                    "keywords": request.keywords,
                    "duration": request.duration_seconds,
                    "style": request.style,
                    "targetAudience": request.target_audience,
                },
            )
        except (httpx.HTTPError, ValueError) as e:
            error_msg = describe_error(e)
            logger.error("script_generation_failed", error=error_msg)
            return ScriptResult(success=False, error_message=error_msg)

        script = data.get("script")
        if not script:
            return ScriptResult(success=False, error_message="No script in response")

        plan_data = data.get("visualPlan")
        return ScriptResult(
            success=True,
            script=script,
            visual_plan=VisualPlan.from_payload(plan_data) if plan_data else None,
        )

    async def suggest_visuals(self, request: VisualSuggestionRequest) -> VisualSuggestionResult:
        logger.info("visual_suggestion_started", script_length=len(request.script))
        try:
            data = await self.client.post_json(
                "/suggest-visuals",
                {
                    "script": request.script,
                    "title": request.title,
                    "style": request.style,
                    "platform": request.platform,
                },
            )
        except (httpx.HTTPError, ValueError) as e:
            error_msg = describe_error(e)
            logger.error("visual_suggestion_failed", error=error_msg)
            return VisualSuggestionResult(success=False, error_message=error_msg)

        plan_data = data.get("visualPlan")
        if not plan_data or not plan_data.get("sections"):
            return VisualSuggestionResult(success=False, error_message="No visual plan in response")

        plan = VisualPlan.from_payload(plan_data)
        logger.info("visual_suggestion_completed", sections=len(plan.sections))
        return VisualSuggestionResult(success=True, visual_plan=plan)

    async def analyze(self, brief: ProductionBrief) -> AnalysisResult:
        try:
            data = await self.client.post_json("/analyze", {"brief": brief.to_payload()})
        except (httpx.HTTPError, ValueError) as e:
            error_msg = describe_error(e)
            logger.error("analysis_failed", error=error_msg)
            return AnalysisResult(success=False, error_message=error_msg)

        return AnalysisResult(
            success=True,
            script=data.get("script") or brief.script,
            scenes=_parse_scenes(data.get("scenes") or []),
            metadata={"provider": self.name},
        )

    async def health_check(self) -> bool:
        return await self.client.health_check()
