"""Quality gate: fixed 70/100 threshold and one-shot regeneration."""

import random
from collections.abc import Iterable

from video_producer.domain.models import AssetEvaluation
from video_producer.logging import get_logger
from video_producer.services.cancellation import CancellationToken

logger = get_logger(__name__)

QUALITY_THRESHOLD = 70

# Replacement scores reported after a regeneration
REGENERATED_SCORE_MIN = 75
REGENERATED_SCORE_MAX = 89
REGENERATION_DELAY_SECONDS = 2.0


def needs_regeneration(score: int) -> bool:
    return score < QUALITY_THRESHOLD


def failing_evaluations(evaluations: Iterable[AssetEvaluation]) -> list[AssetEvaluation]:
    """One evaluation per section below the threshold, in first-seen order.

    A section scored more than once keeps its lowest score, so each asset is
    regenerated at most once.
    """
    failing: dict[str, AssetEvaluation] = {}
    for evaluation in evaluations:
        if not needs_regeneration(evaluation.score):
            continue
        current = failing.get(evaluation.section)
        if current is None or evaluation.score < current.score:
            failing[evaluation.section] = evaluation
    return list(failing.values())


class ScriptedRegenerator:
    """Regenerates a failed asset once: a scripted pause, then a new score.

    No second pass is made even when the replacement score would still fail.
    """

    def __init__(self, delay_seconds: float = REGENERATION_DELAY_SECONDS, rng: random.Random | None = None) -> None:
        self.delay_seconds = delay_seconds
        self.rng = rng or random.Random()

    async def regenerate(self, evaluation: AssetEvaluation, token: CancellationToken) -> int:
        """Return the replacement score for ``evaluation``'s asset."""
        await token.sleep(self.delay_seconds)
        score = self.rng.randint(REGENERATED_SCORE_MIN, REGENERATED_SCORE_MAX)
        logger.info(
            "asset_regenerated",
            section=evaluation.section,
            old_score=evaluation.score,
            new_score=score,
        )
        return score
