"""Asset quality evaluation adapters."""

from video_producer.adapters.evaluator.base import (
    EvaluationRequest,
    EvaluationResult,
    EvaluatorProvider,
)
from video_producer.adapters.evaluator.http import HttpEvaluatorProvider
from video_producer.adapters.evaluator.stub import StubEvaluatorProvider

__all__ = [
    "EvaluationRequest",
    "EvaluationResult",
    "EvaluatorProvider",
    "HttpEvaluatorProvider",
    "StubEvaluatorProvider",
]
