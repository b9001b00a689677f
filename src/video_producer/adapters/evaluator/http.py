"""Evaluation provider backed by the producer API."""

import httpx

from video_producer.adapters.evaluator.base import (
    EvaluationRequest,
    EvaluationResult,
    EvaluatorProvider,
)
from video_producer.adapters.http import ProducerAPIClient, describe_error
from video_producer.domain.models import AssetEvaluation
from video_producer.logging import get_logger

logger = get_logger(__name__)


class HttpEvaluatorProvider(EvaluatorProvider):
    """Calls ``/evaluate``."""

    def __init__(self, client: ProducerAPIClient | None = None) -> None:
        self.client = client or ProducerAPIClient()

    @property
    def name(self) -> str:
        return "producer_api"

    async def evaluate(self, request: EvaluationRequest) -> EvaluationResult:
        payload = {
            "productionId": request.production_id,
            "brief": request.brief.to_payload(),
            "assets": [asset.to_dict() for asset in request.assets],
        }

        try:
            data = await self.client.post_json("/evaluate", payload)
            evaluations = [AssetEvaluation.from_payload(e) for e in data.get("evaluations") or []]
        except (httpx.HTTPError, ValueError, TypeError) as e:
            error_msg = describe_error(e)
            logger.error(
                "evaluation_failed",
                production_id=request.production_id,
                error=error_msg,
            )
            return EvaluationResult(success=False, error_message=error_msg)

        overall = data.get("overallScore")
        return EvaluationResult(
            success=True,
            overall_score=int(overall) if overall is not None else None,
            evaluations=evaluations,
            metadata={"provider": self.name},
        )

    async def health_check(self) -> bool:
        return await self.client.health_check()
