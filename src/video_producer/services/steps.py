"""Step list for one production run.

The run is described as a lazy sequence of ``Step`` objects. The generator
reads the run context as it goes, so the per-scene steps are only produced
after the analyze step has filled in ``run.scenes``, and the regeneration
steps only after the quality check has filled in ``run.failing``. A generator
is finite and cannot be restarted; every run builds a new one.
"""

from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Protocol

from video_producer.domain.enums import LogType, MusicMood, PhaseId
from video_producer.domain.models import (
    AssetEvaluation,
    ProductionBrief,
    Scene,
    VideoProduction,
)
from video_producer.domain.state import append_log
from video_producer.domain.visual_plan import VisualPlanReview
from video_producer.services.cancellation import CancellationToken

# Scripted pauses between steps, in seconds
ANALYZE_DELAY = 1.5
PLAN_DELAY = 1.0
VOICEOVER_DELAY = 2.0
IMAGE_DELAY = 0.4
VIDEO_DELAY = 0.5
MUSIC_DELAY = 1.0
EVALUATE_DELAY = 2.0
QUALITY_CHECK_DELAY = 1.5
ASSEMBLE_DELAY = 1.5

IMAGE_VARIATIONS = ("", " close-up detail shot", " wide establishing shot")
ASSETS_PER_SCENE = len(IMAGE_VARIATIONS) + 1

ProductionListener = Callable[[VideoProduction], None]


@dataclass
class ProductionRun:
    """Mutable context of one run: the current snapshot plus working data.

    Snapshots themselves are immutable; ``apply`` swaps in the result of a
    transition and hands it to every listener.
    """

    production: VideoProduction
    brief: ProductionBrief
    token: CancellationToken
    plan_review: VisualPlanReview | None = None
    listeners: list[ProductionListener] = field(default_factory=list)
    script: str = ""
    scenes: list[Scene] = field(default_factory=list)
    evaluations: list[AssetEvaluation] = field(default_factory=list)
    failing: list[AssetEvaluation] = field(default_factory=list)
    assets_attempted: int = 0
    regenerated: int = 0

    def apply(self, transition: Callable[..., VideoProduction], *args: Any, **kwargs: Any) -> VideoProduction:
        self.production = transition(self.production, *args, **kwargs)
        for listener in self.listeners:
            listener(self.production)
        return self.production

    def log(self, log_type: LogType, message: str, phase: PhaseId, asset_id: str | None = None) -> None:
        self.apply(append_log, log_type, message, phase, asset_id)

    @property
    def total_assets(self) -> int:
        return len(self.scenes) * ASSETS_PER_SCENE


StepAction = Callable[[ProductionRun], Awaitable[None]]


@dataclass(frozen=True)
class Step:
    """One unit of work: an optional pause, then ``run``."""

    phase: PhaseId
    name: str
    run: StepAction
    delay: float = 0.0


class PipelineActions(Protocol):
    """The operations a step list is built from."""

    async def analyze(self, run: ProductionRun) -> None: ...

    async def describe_plan(self, run: ProductionRun) -> None: ...

    async def generate_voiceover(self, run: ProductionRun) -> None: ...

    async def generate_image(self, run: ProductionRun, scene: Scene, variation: int) -> None: ...

    async def generate_video(self, run: ProductionRun, scene: Scene) -> None: ...

    async def generate_music(self, run: ProductionRun) -> None: ...

    async def evaluate(self, run: ProductionRun) -> None: ...

    async def check_quality(self, run: ProductionRun) -> None: ...

    async def regenerate(self, run: ProductionRun, evaluation: AssetEvaluation) -> None: ...

    async def assemble(self, run: ProductionRun) -> None: ...


def production_steps(run: ProductionRun, actions: PipelineActions) -> Iterator[Step]:
    """Yield the steps of a run in execution order."""
    yield Step(PhaseId.ANALYZE, "analyze", actions.analyze, ANALYZE_DELAY)
    yield Step(PhaseId.ANALYZE, "describe_plan", actions.describe_plan, PLAN_DELAY)

    yield Step(PhaseId.GENERATE, "voiceover", actions.generate_voiceover, VOICEOVER_DELAY)
    for scene in run.scenes:
        for variation in range(len(IMAGE_VARIATIONS)):
            yield Step(
                PhaseId.GENERATE,
                f"scene_{scene.number}_img{variation}",
                partial(actions.generate_image, scene=scene, variation=variation),
                IMAGE_DELAY,
            )
        yield Step(
            PhaseId.GENERATE,
            f"scene_{scene.number}_video",
            partial(actions.generate_video, scene=scene),
            VIDEO_DELAY,
        )
    if run.brief.music_mood != MusicMood.NONE:
        yield Step(PhaseId.GENERATE, "music", actions.generate_music, MUSIC_DELAY)

    yield Step(PhaseId.EVALUATE, "evaluate", actions.evaluate, EVALUATE_DELAY)

    yield Step(PhaseId.ITERATE, "check_quality", actions.check_quality, QUALITY_CHECK_DELAY)
    for evaluation in list(run.failing):
        yield Step(
            PhaseId.ITERATE,
            f"regenerate_{evaluation.section}",
            partial(actions.regenerate, evaluation=evaluation),
        )

    yield Step(PhaseId.ASSEMBLE, "assemble", actions.assemble, ASSEMBLE_DELAY)
