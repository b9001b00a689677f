"""Final video assembly adapters."""

from video_producer.adapters.assembler.base import (
    AssemblerProvider,
    AssemblyRequest,
    AssemblyResult,
    DownloadResult,
)
from video_producer.adapters.assembler.http import HttpAssemblerProvider
from video_producer.adapters.assembler.stub import StubAssemblerProvider

__all__ = [
    "AssemblerProvider",
    "AssemblyRequest",
    "AssemblyResult",
    "DownloadResult",
    "HttpAssemblerProvider",
    "StubAssemblerProvider",
]
