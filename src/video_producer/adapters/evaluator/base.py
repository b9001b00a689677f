"""Base interface for asset quality evaluation providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from video_producer.domain.models import AssetEvaluation, ProductionAsset, ProductionBrief


@dataclass
class EvaluationRequest:
    """Request to score the assets of a production."""

    production_id: str
    brief: ProductionBrief
    assets: list[ProductionAsset] = field(default_factory=list)


@dataclass
class EvaluationResult:
    """Scores for each evaluated section, 0-100."""

    success: bool
    overall_score: int | None = None
    evaluations: list[AssetEvaluation] = field(default_factory=list)
    error_message: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class EvaluatorProvider(ABC):
    """Abstract base class for evaluation providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name identifier."""
        ...

    @abstractmethod
    async def evaluate(self, request: EvaluationRequest) -> EvaluationResult:
        """Score generated assets.

        Args:
            request: Production id, brief and the assets to score

        Returns:
            EvaluationResult with per-section scores or error information
        """
        ...

    async def health_check(self) -> bool:
        return True
