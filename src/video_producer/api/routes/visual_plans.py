"""Visual plan review endpoints."""

from typing import Any

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from video_producer.adapters.script import VisualSuggestionRequest
from video_producer.api.deps import ProducerServiceDep, RegistryDep
from video_producer.domain import Platform, PlanTransitionError, VisualPlan, VisualPlanReview
from video_producer.logging import get_logger

router = APIRouter(prefix="/visual-plans", tags=["Visual Plans"])
logger = get_logger(__name__)


class SuggestVisualsRequest(BaseModel):
    """Request for AI-suggested visuals for a script."""

    script: str = Field(..., min_length=1, max_length=20000)
    title: str = Field(default="", max_length=255)
    style: str = "professional"
    platform: Platform = Platform.YOUTUBE


class UpdateSectionRequest(BaseModel):
    """Select an alternative and/or write a custom visual direction."""

    alternative_id: str | None = None
    visual_direction: str | None = Field(None, min_length=1, max_length=2000)


def _plan_response(plan_id: str, review: VisualPlanReview) -> dict[str, Any]:
    return {"plan_id": plan_id, **review.to_dict()}


async def _suggest(producer: ProducerServiceDep, request: SuggestVisualsRequest) -> VisualPlan:
    result = await producer.suggest_visuals(
        VisualSuggestionRequest(
            script=request.script,
            title=request.title,
            style=request.style,
            platform=str(request.platform),
        )
    )
    if not result.success or result.visual_plan is None:
        logger.warning("visual_suggestions_failed", error=result.error_message)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=result.error_message or "Failed to get AI visual suggestions",
        )
    return result.visual_plan


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Suggest visuals",
    description="Break a script into sections with suggested visuals and open the plan for review.",
)
async def create_visual_plan(
    request: SuggestVisualsRequest,
    producer: ProducerServiceDep,
    registry: RegistryDep,
) -> dict[str, Any]:
    plan = await _suggest(producer, request)
    plan_id, review = registry.add_plan(plan)
    logger.info("visual_plan_created", plan_id=plan_id, sections=len(plan.sections))
    return _plan_response(plan_id, review)


@router.get("/{plan_id}", summary="Get visual plan")
async def get_visual_plan(plan_id: str, registry: RegistryDep) -> dict[str, Any]:
    try:
        return _plan_response(plan_id, registry.get_plan(plan_id))
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Visual plan not found")


@router.put(
    "/{plan_id}/sections/{section_id}",
    summary="Update section",
    description="Select an alternative or write a custom direction. The plan returns to review.",
)
async def update_section(
    plan_id: str,
    section_id: str,
    request: UpdateSectionRequest,
    registry: RegistryDep,
) -> dict[str, Any]:
    if request.alternative_id is None and request.visual_direction is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Provide alternative_id or visual_direction",
        )
    try:
        review = registry.update_section(
            plan_id,
            section_id,
            alternative_id=request.alternative_id,
            visual_direction=request.visual_direction,
        )
    except KeyError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.args[0] if e.args else "Not found")
    except PlanTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return _plan_response(plan_id, review)


@router.post("/{plan_id}/approve", summary="Approve visual plan")
async def approve_visual_plan(plan_id: str, registry: RegistryDep) -> dict[str, Any]:
    try:
        review = registry.approve_plan(plan_id)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Visual plan not found")
    except PlanTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    logger.info("visual_plan_approved", plan_id=plan_id)
    return _plan_response(plan_id, review)


@router.post(
    "/{plan_id}/regenerate",
    summary="Regenerate visual plan",
    description="Ask for fresh suggestions. All edits to the current plan are discarded.",
)
async def regenerate_visual_plan(
    plan_id: str,
    request: SuggestVisualsRequest,
    producer: ProducerServiceDep,
    registry: RegistryDep,
) -> dict[str, Any]:
    try:
        registry.get_plan(plan_id)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Visual plan not found")

    plan = await _suggest(producer, request)
    review = registry.replace_plan(plan_id, plan)
    logger.info("visual_plan_regenerated", plan_id=plan_id, sections=len(plan.sections))
    return _plan_response(plan_id, review)
