"""Production endpoints."""

from typing import Any

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse
from pydantic import BaseModel, Field

from video_producer.api.deps import ProducerServiceDep, RegistryDep
from video_producer.config import settings
from video_producer.domain import (
    MusicMood,
    Platform,
    PlanNotApprovedError,
    ProductBrief,
    ProductionBrief,
    VoiceGender,
    VoiceStyle,
    WatermarkConfig,
    WatermarkPosition,
)
from video_producer.logging import get_logger

router = APIRouter(prefix="/productions", tags=["Productions"])
logger = get_logger(__name__)


class WatermarkModel(BaseModel):
    """Watermark overlay for the final video."""

    text: str | None = Field(None, max_length=100)
    image_url: str | None = None
    position: WatermarkPosition = WatermarkPosition.BOTTOM_RIGHT
    opacity: float = Field(default=0.7, ge=0.0, le=1.0)


class ProductModel(BaseModel):
    """Product brief; when present the script is written by analysis."""

    product_name: str = Field(..., min_length=1, max_length=255)
    product_description: str = Field(..., min_length=1, max_length=5000)
    target_audience: str = "General audience"
    key_benefits: list[str] = Field(default_factory=list)
    call_to_action: str = ""


class CreateProductionRequest(BaseModel):
    """Request to start a production."""

    title: str = Field(..., min_length=1, max_length=255)
    script: str = Field(default="", max_length=20000)
    visual_directions: str = Field(default="", max_length=20000)
    voice_style: VoiceStyle = Field(default_factory=lambda: VoiceStyle(settings.default_voice_style))
    voice_gender: VoiceGender = Field(default_factory=lambda: VoiceGender(settings.default_voice_gender))
    voice_id: str | None = None
    music_mood: MusicMood = Field(default_factory=lambda: MusicMood(settings.default_music_mood))
    video_duration: int = Field(default=60, ge=10, le=600)
    platform: Platform = Platform.YOUTUBE
    style: str = "professional"
    watermark: WatermarkModel | None = None
    product: ProductModel | None = None
    plan_id: str | None = Field(None, description="Approved visual plan to produce from")

    def to_brief(self) -> ProductionBrief:
        watermark = WatermarkConfig(**self.watermark.model_dump()) if self.watermark else None
        product = None
        if self.product:
            data = self.product.model_dump()
            data["key_benefits"] = tuple(data["key_benefits"])
            product = ProductBrief(**data)
        return ProductionBrief(
            title=self.title,
            script=self.script or (product.product_description if product else ""),
            visual_directions=self.visual_directions,
            voice_style=self.voice_style,
            voice_gender=self.voice_gender,
            voice_id=self.voice_id,
            music_mood=self.music_mood,
            video_duration=self.video_duration,
            platform=self.platform,
            style=self.style,
            watermark=watermark,
            product=product,
        )


class ProductionAcceptedResponse(BaseModel):
    """Response when a production is started."""

    production_id: str
    status: str
    message: str


@router.post(
    "",
    response_model=ProductionAcceptedResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Start production",
    description="Start a production in the background. Poll its status with GET.",
)
async def create_production(request: CreateProductionRequest, registry: RegistryDep) -> ProductionAcceptedResponse:
    if not request.script.strip() and request.product is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Either a script or a product brief is required",
        )

    try:
        record = registry.start(request.to_brief(), plan_id=request.plan_id)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Visual plan not found: {request.plan_id}",
        )
    except PlanNotApprovedError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    logger.info("production_requested", production_id=record.production.id, title=request.title)
    return ProductionAcceptedResponse(
        production_id=record.production.id,
        status=str(record.production.status),
        message="Production started",
    )


@router.get(
    "/{production_id}",
    summary="Get production",
    description="Latest snapshot of a production: phases, logs and assets.",
)
async def get_production(production_id: str, registry: RegistryDep) -> dict[str, Any]:
    try:
        record = registry.get(production_id)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Production not found")
    return record.production.to_dict()


@router.post(
    "/{production_id}/cancel",
    summary="Cancel production",
    description="Request cancellation. The run stops at its next suspension point.",
)
async def cancel_production(production_id: str, registry: RegistryDep) -> dict[str, Any]:
    try:
        record = registry.cancel(production_id)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Production not found")
    return {
        "production_id": production_id,
        "status": str(record.production.status),
        "cancel_requested": record.token.cancelled,
    }


@router.get(
    "/{production_id}/download",
    summary="Download video",
    description="Download the assembled video, assembling the current assets first if needed.",
)
async def download_production(
    production_id: str,
    registry: RegistryDep,
    producer: ProducerServiceDep,
) -> FileResponse:
    try:
        record = registry.get(production_id)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Production not found")

    if not record.production.status.is_terminal:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Production is still running",
        )

    result = await producer.download(record.production, record.brief)
    if not result.success or result.output_path is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=result.error_message or "Download failed",
        )

    media_type = "text/html" if result.output_path.suffix == ".html" else "video/mp4"
    return FileResponse(result.output_path, media_type=media_type, filename=result.output_path.name)
