"""FastAPI dependencies."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from video_producer.services.producer import ProducerService
from video_producer.services.registry import ProductionRegistry


def get_producer_service() -> ProducerService:
    """Get a producer service for one-off calls (scripts, plans, downloads)."""
    return ProducerService()


@lru_cache
def get_registry() -> ProductionRegistry:
    """Get the process-wide production registry."""
    return ProductionRegistry()


ProducerServiceDep = Annotated[ProducerService, Depends(get_producer_service)]
RegistryDep = Annotated[ProductionRegistry, Depends(get_registry)]
