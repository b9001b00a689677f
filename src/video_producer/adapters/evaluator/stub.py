"""Stub evaluation provider for testing."""

import asyncio
import random

from video_producer.adapters.evaluator.base import (
    EvaluationRequest,
    EvaluationResult,
    EvaluatorProvider,
)
from video_producer.domain.models import AssetEvaluation


class StubEvaluatorProvider(EvaluatorProvider):
    """Scores every asset, either from a fixed list or at random.

    ``scores`` are assigned to assets in order; missing entries fall back to a
    random score between 60 and 95.
    """

    def __init__(self, scores: list[int] | None = None, latency_ms: int = 50) -> None:
        self.scores = scores
        self.latency_ms = latency_ms

    @property
    def name(self) -> str:
        return "stub"

    async def evaluate(self, request: EvaluationRequest) -> EvaluationResult:
        await asyncio.sleep(self.latency_ms / 1000)

        evaluations = []
        for i, asset in enumerate(request.assets):
            if self.scores is not None and i < len(self.scores):
                score = self.scores[i]
            else:
                score = random.randint(60, 95)
            evaluations.append(
                AssetEvaluation(
                    section=asset.section,
                    score=score,
                    relevance=score,
                    technical_quality=score,
                )
            )

        overall = round(sum(e.score for e in evaluations) / len(evaluations)) if evaluations else None
        return EvaluationResult(
            success=True,
            overall_score=overall,
            evaluations=evaluations,
            metadata={"provider": self.name},
        )
