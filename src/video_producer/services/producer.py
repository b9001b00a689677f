"""Production pipeline driver."""

import asyncio
import math
import re
from collections.abc import Awaitable
from pathlib import Path
from typing import TypeVar
from uuid import uuid4

from video_producer.adapters.assembler import AssemblyRequest, DownloadResult
from video_producer.adapters.evaluator import EvaluationRequest
from video_producer.adapters.image_gen import ImageGenRequest
from video_producer.adapters.music import MusicRequest
from video_producer.adapters.script import (
    ScriptRequest,
    ScriptResult,
    VisualSuggestionRequest,
    VisualSuggestionResult,
)
from video_producer.adapters.video_gen import VideoGenRequest
from video_producer.adapters.voiceover import VoiceoverRequest
from video_producer.config import settings
from video_producer.domain.enums import (
    AssetStatus,
    AssetType,
    LogType,
    PhaseId,
    PhaseStatus,
    ProducerMode,
    ProductionStatus,
)
from video_producer.domain.errors import (
    AnalysisError,
    ProductionCancelledError,
    ProductionInProgressError,
)
from video_producer.domain.models import (
    AssetEvaluation,
    AssetMetadata,
    ProductionAsset,
    ProductionBrief,
    Scene,
    VideoProduction,
)
from video_producer.domain.state import (
    add_asset,
    advance_phase,
    complete_phase,
    create_production,
    fail_phase,
    mark_regenerated,
    score_asset,
    set_music,
    set_output,
    set_overall_score,
    set_status,
    set_voiceover,
    skip_phase,
    start_phase,
)
from video_producer.domain.visual_plan import VisualPlanReview, ensure_can_start
from video_producer.logging import get_logger
from video_producer.presets import get_music_prompt, get_voice
from video_producer.services.cancellation import CancellationToken
from video_producer.services.providers import ProducerProviders, get_providers
from video_producer.services.quality_gate import (
    QUALITY_THRESHOLD,
    REGENERATION_DELAY_SECONDS,
    ScriptedRegenerator,
    failing_evaluations,
    needs_regeneration,
)
from video_producer.services.scenes import parse_script_into_scenes
from video_producer.services.steps import (
    IMAGE_VARIATIONS,
    ProductionListener,
    ProductionRun,
    production_steps,
)
from video_producer.services.timing import compute_scene_timings

logger = get_logger(__name__)

T = TypeVar("T")

GENERATE_BASE_PROGRESS = 30
GENERATE_ASSET_PROGRESS = 40


def safe_filename(title: str) -> str:
    """File name for a downloaded video, derived from the title."""
    stem = re.sub(r"[^a-z0-9]", "_", title, flags=re.IGNORECASE).strip("_")
    return f"{stem or 'video'}.mp4"


class ProducerService:
    """Runs productions from brief to assembled video.

    One service instance drives at most one production at a time. Each step
    of the run is awaited in order; every pause and every collaborator call is
    a point where the run's ``CancellationToken`` is honoured.
    """

    def __init__(
        self,
        providers: ProducerProviders | None = None,
        delay_scale: float | None = None,
        regenerator: ScriptedRegenerator | None = None,
    ) -> None:
        """Initialize the producer.

        Args:
            providers: Generation collaborators (defaults to the configured ones)
            delay_scale: Multiplier for scripted pauses (defaults to settings)
            regenerator: Replaces failed assets in the iterate phase
        """
        self.providers = providers or get_providers()
        self.delay_scale = settings.pipeline_delay_scale if delay_scale is None else delay_scale
        self.regenerator = regenerator or ScriptedRegenerator(
            delay_seconds=REGENERATION_DELAY_SECONDS * self.delay_scale
        )
        self._running = False

        logger.info(
            "producer_service_initialized",
            providers={key: provider.name for key, provider in self.providers.all().items()},
            delay_scale=self.delay_scale,
        )

    @property
    def is_running(self) -> bool:
        return self._running

    async def run(
        self,
        brief: ProductionBrief,
        plan_review: VisualPlanReview | None = None,
        token: CancellationToken | None = None,
        on_update: ProductionListener | None = None,
        production_id: str | None = None,
    ) -> VideoProduction:
        """Run one production to a terminal status and return the final snapshot.

        Failures inside the run are recorded on the production (status
        ``failed`` or ``cancelled``) rather than raised.

        Raises:
            ProductionInProgressError: If this service is already running.
            PlanNotApprovedError: If ``plan_review`` holds an unapproved plan.
        """
        if self._running:
            raise ProductionInProgressError("A production is already running")
        ensure_can_start(plan_review)

        run = ProductionRun(
            production=create_production(brief.title, production_id),
            brief=brief,
            token=token or CancellationToken(),
            plan_review=plan_review,
            listeners=[on_update] if on_update else [],
            script=brief.script,
        )
        log = logger.bind(production_id=run.production.id)

        self._running = True
        try:
            run.apply(set_status, ProductionStatus.IN_PROGRESS)
            log.info("production_started", title=brief.title, mode=str(brief.mode))
            await self._drive(run)
            run.log(LogType.SUCCESS, "Video production complete!", PhaseId.ASSEMBLE)
            run.apply(set_status, ProductionStatus.COMPLETED)
            log.info(
                "production_completed",
                assets=len(run.production.assets),
                overall_score=run.production.overall_score,
            )
        except ProductionCancelledError as e:
            log.warning("production_cancelled", reason=str(e))
            self._abort(run, ProductionStatus.CANCELLED, f"Production cancelled: {e}")
        except asyncio.CancelledError:
            log.warning("production_task_cancelled")
            self._abort(run, ProductionStatus.CANCELLED, "Production cancelled")
            raise
        except Exception as e:
            log.exception("production_failed", error=str(e))
            self._abort(run, ProductionStatus.FAILED, f"Production failed: {e}")
        finally:
            self._running = False

        return run.production

    async def _drive(self, run: ProductionRun) -> None:
        current: PhaseId | None = None
        for step in production_steps(run, self):
            if step.phase != current:
                if current is not None:
                    self._finish_phase(run, current)
                current = step.phase
                run.apply(start_phase, current)
                logger.debug("phase_started", production_id=run.production.id, phase=str(current))

            await run.token.sleep(step.delay * self.delay_scale)
            logger.debug("step_started", production_id=run.production.id, step=step.name)
            await step.run(run)

        if current is not None:
            self._finish_phase(run, current)

    def _finish_phase(self, run: ProductionRun, phase_id: PhaseId) -> None:
        if run.production.phase(phase_id).status == PhaseStatus.IN_PROGRESS:
            run.apply(complete_phase, phase_id)

    def _abort(self, run: ProductionRun, status: ProductionStatus, message: str) -> None:
        phase = run.production.current_phase
        if phase is not None:
            run.apply(fail_phase, phase.id, message)
        run.log(LogType.ERROR, message, phase.id if phase else PhaseId.ANALYZE)
        run.apply(set_status, status)

    async def _call(
        self,
        run: ProductionRun,
        awaitable: Awaitable[T],
        failure_message: str,
        phase: PhaseId = PhaseId.GENERATE,
    ) -> T | None:
        """Await a collaborator call, turning unexpected errors into a warning."""
        try:
            return await run.token.guard(awaitable)
        except ProductionCancelledError:
            raise
        except Exception as e:
            logger.warning(
                "collaborator_call_raised",
                production_id=run.production.id,
                phase=str(phase),
                error=str(e),
            )
            run.log(LogType.WARNING, f"{failure_message}: {e}", phase)
            return None

    def _asset_attempted(self, run: ProductionRun) -> None:
        run.assets_attempted += 1
        done = min(run.assets_attempted, run.total_assets)
        progress = GENERATE_BASE_PROGRESS + round(done / run.total_assets * GENERATE_ASSET_PROGRESS)
        run.apply(advance_phase, PhaseId.GENERATE, progress=progress)

    # Analyze

    async def analyze(self, run: ProductionRun) -> None:
        run.log(LogType.DECISION, "Parsing script and visual directions...", PhaseId.ANALYZE)

        plan_scenes = run.plan_review.scenes() if run.plan_review else None
        if plan_scenes:
            scenes = plan_scenes
            run.log(
                LogType.DECISION,
                f"Using approved visual plan with {len(scenes)} sections",
                PhaseId.ANALYZE,
            )
        elif run.brief.mode == ProducerMode.PRODUCT:
            scenes = await self._analyze_product(run)
        else:
            scenes = parse_script_into_scenes(run.brief.script, run.brief.visual_directions)

        run.scenes = scenes
        run.apply(advance_phase, PhaseId.ANALYZE, progress=50)
        run.log(
            LogType.SUCCESS,
            f"Identified {len(scenes)} scenes from script",
            PhaseId.ANALYZE,
        )

    async def _analyze_product(self, run: ProductionRun) -> list[Scene]:
        run.log(
            LogType.DECISION,
            "Analyzing product brief and creating scene manifest...",
            PhaseId.ANALYZE,
        )
        result = await run.token.guard(self.providers.script.analyze(run.brief))
        if not result.success:
            raise AnalysisError(f"Failed to analyze script: {result.error_message}")

        run.script = result.script or run.brief.script
        return result.scenes or parse_script_into_scenes(run.script)

    async def describe_plan(self, run: ProductionRun) -> None:
        brief = run.brief
        voice = brief.voice_id or get_voice(brief.voice_style, brief.voice_gender)
        run.log(
            LogType.DECISION,
            f"Visual style: {brief.style}; voice: {voice} ({brief.voice_style}, {brief.voice_gender}); "
            f"music: {brief.music_mood}",
            PhaseId.ANALYZE,
        )

    # Generate

    async def generate_voiceover(self, run: ProductionRun) -> None:
        brief = run.brief
        voice = get_voice(brief.voice_style, brief.voice_gender)
        run.log(
            LogType.GENERATION,
            f"Generating voiceover ({brief.voice_style}, {brief.voice_gender})...",
            PhaseId.GENERATE,
        )

        request = VoiceoverRequest(text=run.script, voice=voice, voice_id=brief.voice_id)
        result = await self._call(
            run,
            self.providers.voiceover.generate(request),
            "Voiceover generation failed, continuing without audio",
        )
        if result is not None and result.success:
            run.apply(set_voiceover, result.audio_url, result.duration_seconds)
            duration = f"{result.duration_seconds:.1f}s" if result.duration_seconds else "unknown"
            run.log(LogType.SUCCESS, f"Voiceover generated: {duration} duration", PhaseId.GENERATE)
        elif result is not None:
            run.log(
                LogType.WARNING,
                f"Voiceover generation failed, continuing without audio: {result.error_message}",
                PhaseId.GENERATE,
            )

        run.apply(advance_phase, PhaseId.GENERATE, progress=GENERATE_BASE_PROGRESS)

    async def generate_image(self, run: ProductionRun, scene: Scene, variation: int) -> None:
        section = f"scene_{scene.number}_img{variation}"
        suffix = IMAGE_VARIATIONS[variation]
        label = f"Scene {scene.number} image {variation + 1}/{len(IMAGE_VARIATIONS)}"
        run.log(LogType.GENERATION, f'{label}: "{scene.preview}{suffix}"', PhaseId.GENERATE)

        prompt = (scene.visual_direction or run.brief.title) + suffix
        request = ImageGenRequest(
            section=section,
            prompt=prompt,
            scene_content=scene.text,
            style=run.brief.style,
            scene_index=scene.number,
            variation=variation,
        )
        result = await self._call(run, self.providers.image_gen.generate(request), f"{label} failed")

        if result is not None and result.success and result.image_url:
            asset = ProductionAsset(
                id=f"asset_{section}_{uuid4().hex[:8]}",
                type=AssetType.AI_IMAGE if result.is_ai_generated else AssetType.IMAGE,
                section=section,
                scene=scene.number,
                url=result.image_url,
                source=result.source or self.providers.image_gen.name,
                metadata=AssetMetadata(
                    width=result.width,
                    height=result.height,
                    prompt=prompt,
                    scene_text=scene.text[:100],
                ),
                status=AssetStatus.APPROVED,
            )
            run.apply(add_asset, asset)
            run.log(LogType.SUCCESS, f"{label}: {asset.source}", PhaseId.GENERATE, asset.id)
        elif result is not None:
            run.log(LogType.WARNING, f"{label} failed: {result.error_message}", PhaseId.GENERATE)

        self._asset_attempted(run)

    async def generate_video(self, run: ProductionRun, scene: Scene) -> None:
        section = f"scene_{scene.number}_video"
        label = f"Scene {scene.number} video clip"
        run.log(LogType.GENERATION, f'{label}: "{scene.preview}"', PhaseId.GENERATE)

        duration = math.ceil(run.brief.video_duration / len(run.scenes))
        prompt = scene.visual_direction or run.brief.title
        request = VideoGenRequest(
            section=section,
            prompt=prompt,
            scene_content=scene.text,
            style=run.brief.style,
            duration_seconds=duration,
        )
        result = await self._call(run, self.providers.video_gen.generate(request), f"{label} failed")

        if result is not None and result.success and result.video_url:
            asset = ProductionAsset(
                id=f"asset_{section}_{uuid4().hex[:8]}",
                type=AssetType.VIDEO,
                section=section,
                scene=scene.number,
                url=result.video_url,
                source=result.source or self.providers.video_gen.name,
                metadata=AssetMetadata(
                    width=result.width,
                    height=result.height,
                    duration=result.duration_seconds or duration,
                    prompt=prompt,
                    scene_text=scene.text[:100],
                ),
                status=AssetStatus.APPROVED,
            )
            run.apply(add_asset, asset)
            run.log(LogType.SUCCESS, f"{label}: {asset.source}", PhaseId.GENERATE, asset.id)
        elif result is not None:
            run.log(LogType.WARNING, f"{label} failed: {result.error_message}", PhaseId.GENERATE)

        self._asset_attempted(run)

    async def generate_music(self, run: ProductionRun) -> None:
        mood = run.brief.music_mood
        prompt = get_music_prompt(mood)
        if prompt is None:
            return

        run.log(LogType.GENERATION, f"Generating {mood} background music...", PhaseId.GENERATE)
        duration = run.production.voiceover_duration or run.brief.video_duration
        request = MusicRequest(
            prompt=prompt,
            duration_ms=int(duration * 1000),
            force_instrumental=settings.music_force_instrumental,
        )
        result = await self._call(
            run,
            self.providers.music.generate(request),
            "Music generation failed, continuing without music",
        )
        if result is not None and result.success:
            run.apply(set_music, result.audio_url)
            run.log(LogType.SUCCESS, "Background music generated", PhaseId.GENERATE)
        elif result is not None:
            run.log(
                LogType.WARNING,
                f"Music generation failed, continuing without music: {result.error_message}",
                PhaseId.GENERATE,
            )

    # Evaluate

    async def evaluate(self, run: ProductionRun) -> None:
        run.log(LogType.EVALUATION, "AI Director evaluating all generated assets...", PhaseId.EVALUATE)

        request = EvaluationRequest(
            production_id=run.production.id,
            brief=run.brief,
            assets=list(run.production.assets),
        )
        try:
            result = await run.token.guard(self.providers.evaluator.evaluate(request))
        except ProductionCancelledError:
            raise
        except Exception as e:
            logger.warning("evaluation_raised", production_id=run.production.id, error=str(e))
            return

        if not result.success:
            logger.warning(
                "evaluation_skipped",
                production_id=run.production.id,
                error=result.error_message,
            )
            return

        run.evaluations = list(result.evaluations)
        run.apply(set_overall_score, result.overall_score)
        run.apply(advance_phase, PhaseId.EVALUATE, progress=50)
        if result.overall_score is not None:
            run.log(
                LogType.SUCCESS,
                f"Quality evaluation complete: {result.overall_score}/100 average",
                PhaseId.EVALUATE,
            )

        for evaluation in run.evaluations:
            asset = self._asset_for(run, evaluation)
            if asset is not None:
                run.apply(score_asset, asset.id, evaluation.score)
            if needs_regeneration(evaluation.score):
                run.log(
                    LogType.WARNING,
                    f"{evaluation.section}: {evaluation.score}/100, below threshold",
                    PhaseId.EVALUATE,
                    asset.id if asset else None,
                )
            else:
                run.log(
                    LogType.EVALUATION,
                    f"{evaluation.section}: {evaluation.score}/100",
                    PhaseId.EVALUATE,
                    asset.id if asset else None,
                )

    @staticmethod
    def _asset_for(run: ProductionRun, evaluation: AssetEvaluation) -> ProductionAsset | None:
        return next((a for a in run.production.assets if a.section == evaluation.section), None)

    # Iterate

    async def check_quality(self, run: ProductionRun) -> None:
        run.log(
            LogType.DECISION,
            f"Checking if any assets need regeneration (threshold: {QUALITY_THRESHOLD}/100)...",
            PhaseId.ITERATE,
        )
        run.failing = failing_evaluations(run.evaluations)
        if not run.failing:
            run.apply(skip_phase, PhaseId.ITERATE)
            run.log(
                LogType.SUCCESS,
                "All assets passed quality threshold - skipping iteration phase",
                PhaseId.ITERATE,
            )
            return

        run.log(
            LogType.DECISION,
            f"{len(run.failing)} assets below threshold, regenerating...",
            PhaseId.ITERATE,
        )

    async def regenerate(self, run: ProductionRun, evaluation: AssetEvaluation) -> None:
        asset = self._asset_for(run, evaluation)
        run.log(
            LogType.FALLBACK,
            f"Regenerating {evaluation.section} (scored {evaluation.score}/100)...",
            PhaseId.ITERATE,
            asset.id if asset else None,
        )

        score = await self.regenerator.regenerate(evaluation, run.token)
        if asset is not None:
            run.apply(mark_regenerated, asset.id, score)
        run.regenerated += 1
        run.apply(
            advance_phase,
            PhaseId.ITERATE,
            progress=round(run.regenerated / len(run.failing) * 100),
        )
        run.log(
            LogType.SUCCESS,
            f"{evaluation.section} regenerated: {score}/100",
            PhaseId.ITERATE,
            asset.id if asset else None,
        )

    # Assemble

    def _assembly_request(self, production: VideoProduction, brief: ProductionBrief) -> AssemblyRequest:
        return AssemblyRequest(
            production_id=production.id,
            title=brief.title,
            duration_seconds=brief.video_duration,
            assets=list(production.assets),
            voiceover_url=production.voiceover_url,
            music_url=production.music_url,
            watermark=brief.watermark,
            scene_timings=compute_scene_timings(
                production.assets,
                production.voiceover_duration,
                brief.video_duration,
            ),
        )

    async def assemble(self, run: ProductionRun) -> None:
        run.log(LogType.GENERATION, "Assembling final video composition...", PhaseId.ASSEMBLE)
        request = self._assembly_request(run.production, run.brief)
        run.log(
            LogType.GENERATION,
            f"Building scene timing for {len(request.scene_timings)} assets...",
            PhaseId.ASSEMBLE,
        )
        run.apply(advance_phase, PhaseId.ASSEMBLE, progress=40)

        result = await self._call(
            run,
            self.providers.assembler.assemble(request),
            "Video assembly failed, assets available for manual download",
            phase=PhaseId.ASSEMBLE,
        )
        if result is not None and result.success:
            run.apply(set_output, result.output_url, result.preview_html)
            if result.output_url:
                run.log(LogType.SUCCESS, "Video assembled with audio successfully!", PhaseId.ASSEMBLE)
            else:
                run.log(
                    LogType.SUCCESS,
                    "Video preview generated (download for full video)",
                    PhaseId.ASSEMBLE,
                )
        elif result is not None:
            logger.warning(
                "assembly_failed",
                production_id=run.production.id,
                error=result.error_message,
            )
            run.log(
                LogType.WARNING,
                "Video assembly API returned error, assets available for manual download",
                PhaseId.ASSEMBLE,
            )

        run.apply(advance_phase, PhaseId.ASSEMBLE, progress=90)

    # Outside a run

    async def download(
        self,
        production: VideoProduction,
        brief: ProductionBrief,
        destination: Path | None = None,
    ) -> DownloadResult:
        """Save a production's video locally.

        A completed production with an output URL is downloaded directly.
        Otherwise the current assets are sent for assembly first; when that
        yields only a preview, the preview HTML is written instead.
        """
        if destination is None:
            destination = Path(settings.download_dir) / production.id / safe_filename(production.title)

        if production.status == ProductionStatus.COMPLETED and production.output_url:
            return await self.providers.assembler.download(production.id, destination)

        if not production.assets:
            return DownloadResult(success=False, error_message="Production has no assets to assemble")

        result = await self.providers.assembler.assemble(self._assembly_request(production, brief))
        if not result.success:
            return DownloadResult(success=False, error_message=result.error_message)
        if result.output_url:
            return await self.providers.assembler.download(production.id, destination)
        if result.preview_html:
            preview_path = destination.with_suffix(".html")
            preview_path.parent.mkdir(parents=True, exist_ok=True)
            preview_path.write_text(result.preview_html, encoding="utf-8")
            return DownloadResult(
                success=True,
                output_path=preview_path,
                file_size_bytes=preview_path.stat().st_size,
            )
        return DownloadResult(success=False, error_message="Assembly returned no output")

    async def generate_script(self, request: ScriptRequest) -> ScriptResult:
        logger.info("script_generation_requested", topic=request.topic)
        return await self.providers.script.generate_script(request)

    async def suggest_visuals(self, request: VisualSuggestionRequest) -> VisualSuggestionResult:
        logger.info("visual_suggestions_requested", title=request.title)
        return await self.providers.script.suggest_visuals(request)

    async def health_check(self) -> dict[str, bool]:
        """Check health of all collaborators."""
        return {key: await provider.health_check() for key, provider in self.providers.all().items()}
