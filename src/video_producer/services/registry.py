"""In-memory registry of productions and visual plans served by the API."""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from uuid import uuid4

from video_producer.config import settings
from video_producer.domain.models import ProductionBrief, VideoProduction, VisualPlan
from video_producer.domain.state import create_production, new_production_id
from video_producer.domain.visual_plan import (
    VisualPlanReview,
    approve,
    edit_direction,
    ensure_can_start,
    receive_suggestions,
    regenerate,
    select_alternative,
)
from video_producer.logging import get_logger
from video_producer.services.cancellation import CancellationToken
from video_producer.services.producer import ProducerService

logger = get_logger(__name__)


@dataclass
class ProductionRecord:
    """Latest snapshot of a production plus what is needed to control it."""

    production: VideoProduction
    brief: ProductionBrief
    token: CancellationToken = field(default_factory=CancellationToken)
    task: asyncio.Task[VideoProduction] | None = None


class ProductionRegistry:
    """Tracks running and finished productions and the plans under review.

    Each production runs on its own ``ProducerService`` so several can be in
    flight at once. Nothing is persisted: records live as long as the process,
    and only the newest ``max_finished`` finished productions and
    ``max_plans`` plans are kept.
    """

    def __init__(
        self,
        service_factory: Callable[[], ProducerService] = ProducerService,
        max_finished: int | None = None,
        max_plans: int | None = None,
    ) -> None:
        self.service_factory = service_factory
        self.max_finished = settings.registry_max_finished if max_finished is None else max_finished
        self.max_plans = settings.registry_max_plans if max_plans is None else max_plans
        self.productions: dict[str, ProductionRecord] = {}
        self.plans: dict[str, VisualPlanReview] = {}

    # Productions

    def start(self, brief: ProductionBrief, plan_id: str | None = None) -> ProductionRecord:
        """Start a production in the background.

        Raises:
            KeyError: For an unknown plan id.
            PlanNotApprovedError: If the plan is not approved.
        """
        review = self.plans[plan_id] if plan_id else None
        ensure_can_start(review)
        self._prune_finished()

        production_id = new_production_id()
        record = ProductionRecord(
            production=create_production(brief.title, production_id),
            brief=brief,
        )
        self.productions[production_id] = record

        def on_update(snapshot: VideoProduction) -> None:
            record.production = snapshot

        service = self.service_factory()
        record.task = asyncio.create_task(
            service.run(
                brief,
                plan_review=review,
                token=record.token,
                on_update=on_update,
                production_id=production_id,
            )
        )
        logger.info("production_registered", production_id=production_id, plan_id=plan_id)
        return record

    def _prune_finished(self) -> None:
        finished = [pid for pid, record in self.productions.items() if record.production.status.is_terminal]
        for production_id in finished[: max(len(finished) - self.max_finished, 0)]:
            del self.productions[production_id]
            logger.debug("production_dropped", production_id=production_id)

    def get(self, production_id: str) -> ProductionRecord:
        """Raises KeyError for an unknown production."""
        return self.productions[production_id]

    def cancel(self, production_id: str, reason: str = "Cancelled by user") -> ProductionRecord:
        record = self.get(production_id)
        if not record.production.status.is_terminal:
            record.token.cancel(reason)
            logger.info("production_cancel_requested", production_id=production_id)
        return record

    async def shutdown(self) -> None:
        """Cancel every unfinished production and wait for them to stop."""
        tasks = []
        for record in self.productions.values():
            if record.task is not None and not record.task.done():
                record.token.cancel("Server shutting down")
                tasks.append(record.task)
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    # Visual plans

    def add_plan(self, plan: VisualPlan) -> tuple[str, VisualPlanReview]:
        plan_id = f"plan_{uuid4().hex[:12]}"
        while len(self.plans) >= self.max_plans:
            dropped = next(iter(self.plans))
            del self.plans[dropped]
            logger.debug("visual_plan_dropped", plan_id=dropped)
        self.plans[plan_id] = receive_suggestions(VisualPlanReview(), plan)
        return plan_id, self.plans[plan_id]

    def get_plan(self, plan_id: str) -> VisualPlanReview:
        """Raises KeyError for an unknown plan."""
        return self.plans[plan_id]

    def update_section(
        self,
        plan_id: str,
        section_id: str,
        alternative_id: str | None = None,
        visual_direction: str | None = None,
    ) -> VisualPlanReview:
        review = self.get_plan(plan_id)
        if alternative_id is not None:
            review = select_alternative(review, section_id, alternative_id)
        if visual_direction is not None:
            review = edit_direction(review, section_id, visual_direction)
        self.plans[plan_id] = review
        return review

    def approve_plan(self, plan_id: str) -> VisualPlanReview:
        self.plans[plan_id] = approve(self.get_plan(plan_id))
        return self.plans[plan_id]

    def replace_plan(self, plan_id: str, plan: VisualPlan) -> VisualPlanReview:
        """Swap in a regenerated plan and open it for review again."""
        review = regenerate(self.get_plan(plan_id), plan)
        self.plans[plan_id] = receive_suggestions(review, plan)
        return self.plans[plan_id]
