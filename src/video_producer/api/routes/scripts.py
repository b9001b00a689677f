"""Script generation endpoints."""

from typing import Any

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from video_producer.adapters.script import ScriptRequest
from video_producer.api.deps import ProducerServiceDep
from video_producer.logging import get_logger

router = APIRouter(prefix="/scripts", tags=["Scripts"])
logger = get_logger(__name__)


class GenerateScriptRequest(BaseModel):
    """Request to write a narration script."""

    topic: str = Field(..., min_length=1, max_length=500)
    keywords: str = Field(default="", max_length=500)
    duration_seconds: int = Field(default=60, ge=10, le=600)
    style: str = "professional"
    target_audience: str = "General audience"


class GenerateScriptResponse(BaseModel):
    script: str
    visual_plan: dict[str, Any] | None = None


@router.post(
    "/generate",
    response_model=GenerateScriptResponse,
    summary="Generate script",
    description="Write a narration script for a topic.",
)
async def generate_script(request: GenerateScriptRequest, producer: ProducerServiceDep) -> GenerateScriptResponse:
    result = await producer.generate_script(ScriptRequest(**request.model_dump()))
    if not result.success or not result.script:
        logger.warning("script_generation_failed", topic=request.topic, error=result.error_message)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=result.error_message or "Script generation failed",
        )

    return GenerateScriptResponse(
        script=result.script,
        visual_plan=result.visual_plan.to_dict() if result.visual_plan else None,
    )
