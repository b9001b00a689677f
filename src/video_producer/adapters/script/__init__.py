"""Script, visual plan and brief analysis adapters."""

from video_producer.adapters.script.base import (
    AnalysisResult,
    ScriptProvider,
    ScriptRequest,
    ScriptResult,
    VisualSuggestionRequest,
    VisualSuggestionResult,
)
from video_producer.adapters.script.http import HttpScriptProvider
from video_producer.adapters.script.stub import StubScriptProvider

__all__ = [
    "AnalysisResult",
    "HttpScriptProvider",
    "ScriptProvider",
    "ScriptRequest",
    "ScriptResult",
    "StubScriptProvider",
    "VisualSuggestionRequest",
    "VisualSuggestionResult",
]
