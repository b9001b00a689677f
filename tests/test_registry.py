"""Tests for the in-memory production registry."""

import pytest

from tests.fakes import make_plan
from video_producer.domain import ProductionBrief, ProductionStatus
from video_producer.services.producer import ProducerService
from video_producer.services.providers import ProducerProviders
from video_producer.services.registry import ProductionRegistry


def fast_service() -> ProducerService:
    return ProducerService(providers=ProducerProviders.stub(latency_ms=0), delay_scale=0)


class TestProductions:
    @pytest.mark.asyncio
    async def test_run_completes_in_background(self, brief: ProductionBrief) -> None:
        registry = ProductionRegistry(service_factory=fast_service)

        record = registry.start(brief)
        assert record.task is not None
        await record.task

        assert registry.get(record.production.id).production.status == ProductionStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_oldest_finished_productions_are_dropped(self, brief: ProductionBrief) -> None:
        registry = ProductionRegistry(service_factory=fast_service, max_finished=1)

        first = registry.start(brief)
        await first.task
        second = registry.start(brief)
        await second.task
        third = registry.start(brief)

        assert list(registry.productions) == [second.production.id, third.production.id]
        with pytest.raises(KeyError):
            registry.get(first.production.id)
        await third.task

    @pytest.mark.asyncio
    async def test_running_productions_are_never_dropped(self, brief: ProductionBrief) -> None:
        registry = ProductionRegistry(service_factory=fast_service, max_finished=0)

        first = registry.start(brief)
        second = registry.start(brief)

        assert set(registry.productions) == {first.production.id, second.production.id}
        await first.task
        await second.task


class TestPlans:
    def test_oldest_plans_are_dropped(self) -> None:
        registry = ProductionRegistry(service_factory=fast_service, max_plans=2)

        first, _ = registry.add_plan(make_plan())
        second, _ = registry.add_plan(make_plan())
        third, _ = registry.add_plan(make_plan())

        assert list(registry.plans) == [second, third]
        with pytest.raises(KeyError):
            registry.get_plan(first)
