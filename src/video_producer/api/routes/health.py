"""Health check endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel

from video_producer import __version__
from video_producer.api.deps import ProducerServiceDep
from video_producer.config import settings

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    provider: str
    components: dict[str, bool] | None = None


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Reports the API version and the health of each generation collaborator.",
)
async def health_check(producer: ProducerServiceDep) -> HealthResponse:
    components = await producer.health_check()
    return HealthResponse(
        status="healthy" if all(components.values()) else "degraded",
        version=__version__,
        provider=settings.producer_provider,
        components=components,
    )


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    description="Simple liveness probe for Kubernetes.",
)
async def liveness_check() -> dict[str, str]:
    """Kubernetes liveness probe - is the process alive?"""
    return {"status": "alive"}
