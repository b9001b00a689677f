"""Recording fakes for the generation collaborators."""

from video_producer.adapters.evaluator import EvaluationRequest, EvaluationResult, EvaluatorProvider
from video_producer.adapters.image_gen import ImageGenProvider, ImageGenRequest, ImageGenResult
from video_producer.adapters.music import MusicProvider, MusicRequest, MusicResult
from video_producer.adapters.video_gen import VideoGenProvider, VideoGenRequest, VideoGenResult
from video_producer.adapters.voiceover import VoiceoverProvider, VoiceoverRequest, VoiceoverResult
from video_producer.domain import AssetEvaluation, VisualAlternative, VisualPlan, VisualSection
from video_producer.services.cancellation import CancellationToken

TWO_SCENE_SCRIPT = "Meet the new way to brew coffee.\n\nOne button, perfect cup, every morning."


def make_plan(direction_prefix: str = "Shot") -> VisualPlan:
    """Two-section plan, each section with alternatives "_a" (selected) and "_b"."""
    return VisualPlan(
        sections=tuple(
            VisualSection(
                id=f"s{i}",
                name=f"Scene {i}",
                script_content=f"Line {i}",
                alternatives=(
                    VisualAlternative(id=f"s{i}_a", visual_direction=f"{direction_prefix} {i}a"),
                    VisualAlternative(id=f"s{i}_b", visual_direction=f"{direction_prefix} {i}b"),
                ),
                selected_id=f"s{i}_a",
            )
            for i in (1, 2)
        )
    )


class RecordingVoiceover(VoiceoverProvider):
    def __init__(self, duration: float | None = 12.0, fail: bool = False) -> None:
        self.requests: list[VoiceoverRequest] = []
        self.duration = duration
        self.fail = fail

    @property
    def name(self) -> str:
        return "recording"

    async def generate(self, request: VoiceoverRequest) -> VoiceoverResult:
        self.requests.append(request)
        if self.fail:
            return VoiceoverResult(success=False, error_message="voice service down")
        return VoiceoverResult(success=True, audio_url="https://cdn.test/vo.mp3", duration_seconds=self.duration)


class RecordingImageGen(ImageGenProvider):
    def __init__(self, fail_sections: set[str] | None = None, source: str = "stability_ai") -> None:
        self.requests: list[ImageGenRequest] = []
        self.fail_sections = fail_sections or set()
        self.source = source

    @property
    def name(self) -> str:
        return "recording"

    async def generate(self, request: ImageGenRequest) -> ImageGenResult:
        self.requests.append(request)
        if request.section in self.fail_sections:
            return ImageGenResult(success=False, error_message="image service down")
        return ImageGenResult(
            success=True,
            image_url=f"https://cdn.test/{request.section}.png",
            width=1920,
            height=1080,
            source=self.source,
        )


class RecordingVideoGen(VideoGenProvider):
    def __init__(self, raise_error: bool = False) -> None:
        self.requests: list[VideoGenRequest] = []
        self.raise_error = raise_error

    @property
    def name(self) -> str:
        return "recording"

    async def generate(self, request: VideoGenRequest) -> VideoGenResult:
        self.requests.append(request)
        if self.raise_error:
            raise RuntimeError("connection reset")
        return VideoGenResult(
            success=True,
            video_url=f"https://cdn.test/{request.section}.mp4",
            duration_seconds=float(request.duration_seconds),
            source="runway",
        )


class RecordingMusic(MusicProvider):
    def __init__(self) -> None:
        self.requests: list[MusicRequest] = []

    @property
    def name(self) -> str:
        return "recording"

    async def generate(self, request: MusicRequest) -> MusicResult:
        self.requests.append(request)
        return MusicResult(success=True, audio_url="https://cdn.test/music.mp3")


class ScriptedEvaluator(EvaluatorProvider):
    """Scores assets by position; unlisted assets score 90.

    ``extra`` evaluations are appended as returned, e.g. a section scored twice.
    """

    def __init__(
        self,
        scores: list[int] | None = None,
        fail: bool = False,
        extra: list[AssetEvaluation] | None = None,
    ) -> None:
        self.scores = scores or []
        self.extra = extra or []
        self.fail = fail
        self.requests: list[EvaluationRequest] = []

    @property
    def name(self) -> str:
        return "scripted"

    async def evaluate(self, request: EvaluationRequest) -> EvaluationResult:
        self.requests.append(request)
        if self.fail:
            return EvaluationResult(success=False, error_message="evaluator unavailable")
        evaluations = [
            AssetEvaluation(section=asset.section, score=self.scores[i] if i < len(self.scores) else 90)
            for i, asset in enumerate(request.assets)
        ]
        evaluations.extend(self.extra)
        overall = round(sum(e.score for e in evaluations) / len(evaluations)) if evaluations else None
        return EvaluationResult(success=True, overall_score=overall, evaluations=evaluations)


class CountingRegenerator:
    """Regenerator that records every call and returns a fixed score."""

    def __init__(self, score: int = 80) -> None:
        self.score = score
        self.calls: list[AssetEvaluation] = []

    async def regenerate(self, evaluation: AssetEvaluation, token: CancellationToken) -> int:
        await token.sleep(0)
        self.calls.append(evaluation)
        return self.score
