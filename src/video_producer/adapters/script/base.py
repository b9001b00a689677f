"""Base interface for script, visual-plan and analysis providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from video_producer.domain.models import ProductionBrief, Scene, VisualPlan


@dataclass
class ScriptRequest:
    """Request to write a narration script."""

    topic: str
    keywords: str = ""
    duration_seconds: int = 60
    style: str = "professional"
    target_audience: str = "General audience"


@dataclass
class ScriptResult:
    """Generated script, optionally with a visual plan."""

    success: bool
    script: str | None = None
    visual_plan: VisualPlan | None = None
    error_message: str | None = None


@dataclass
class VisualSuggestionRequest:
    """Request for AI-suggested visuals for a script."""

    script: str
    title: str = ""
    style: str = "professional"
    platform: str = "youtube"


@dataclass
class VisualSuggestionResult:
    success: bool
    visual_plan: VisualPlan | None = None
    error_message: str | None = None


@dataclass
class AnalysisResult:
    """Script and scene manifest derived from a product brief."""

    success: bool
    script: str | None = None
    scenes: list[Scene] = field(default_factory=list)
    error_message: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class ScriptProvider(ABC):
    """Abstract base class for script and planning providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name identifier."""
        ...

    @abstractmethod
    async def generate_script(self, request: ScriptRequest) -> ScriptResult:
        """Write a narration script for a topic."""
        ...

    @abstractmethod
    async def suggest_visuals(self, request: VisualSuggestionRequest) -> VisualSuggestionResult:
        """Break a script into sections with suggested visual directions."""
        ...

    @abstractmethod
    async def analyze(self, brief: ProductionBrief) -> AnalysisResult:
        """Turn a product brief into a script and scene manifest."""
        ...

    async def health_check(self) -> bool:
        return True
