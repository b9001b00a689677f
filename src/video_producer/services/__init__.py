"""Application services."""

from video_producer.services.cancellation import CancellationToken
from video_producer.services.producer import ProducerService
from video_producer.services.providers import ProducerProviders, get_providers
from video_producer.services.quality_gate import QUALITY_THRESHOLD, ScriptedRegenerator
from video_producer.services.registry import ProductionRecord, ProductionRegistry

__all__ = [
    "CancellationToken",
    "ProducerProviders",
    "ProducerService",
    "ProductionRecord",
    "ProductionRegistry",
    "QUALITY_THRESHOLD",
    "ScriptedRegenerator",
    "get_providers",
]
