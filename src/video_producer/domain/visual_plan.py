"""Visual plan approval state machine.

    none -> generated -> under_review -> approved

Receiving suggestions moves a plan straight to ``under_review``. Selecting or
editing an alternative keeps the plan under review (an approved plan that is
changed must be approved again). Regenerating discards all edits and starts
again from ``generated``.
"""

from dataclasses import dataclass, replace
from typing import Any

from video_producer.domain.enums import PlanState
from video_producer.domain.errors import PlanNotApprovedError, PlanTransitionError
from video_producer.domain.models import Scene, VisualAlternative, VisualPlan, VisualSection

_EDITABLE = (PlanState.UNDER_REVIEW, PlanState.APPROVED)


@dataclass(frozen=True)
class VisualPlanReview:
    """A visual plan together with its approval state."""

    state: PlanState = PlanState.NONE
    plan: VisualPlan | None = None

    @property
    def blocks_production(self) -> bool:
        """True while a plan exists that has not been approved."""
        return self.plan is not None and self.state != PlanState.APPROVED

    def scenes(self) -> list[Scene] | None:
        """Scenes from the approved plan, or None when there is no usable plan."""
        if self.plan is None or self.state != PlanState.APPROVED:
            return None
        return self.plan.to_scenes()

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": str(self.state),
            "plan": self.plan.to_dict() if self.plan else None,
        }


def receive_plan(review: VisualPlanReview, plan: VisualPlan) -> VisualPlanReview:
    """Store a freshly generated plan, discarding any previous one."""
    return VisualPlanReview(state=PlanState.GENERATED, plan=plan)


def begin_review(review: VisualPlanReview) -> VisualPlanReview:
    if review.state != PlanState.GENERATED:
        raise PlanTransitionError(f"Cannot start review from state '{review.state}'")
    return replace(review, state=PlanState.UNDER_REVIEW)


def receive_suggestions(review: VisualPlanReview, plan: VisualPlan) -> VisualPlanReview:
    """Store suggestions and open them for review in one step."""
    return begin_review(receive_plan(review, plan))


def regenerate(review: VisualPlanReview, plan: VisualPlan) -> VisualPlanReview:
    """Replace the whole plan. Edits made to the old plan are lost."""
    return receive_plan(review, plan)


def _require_editable(review: VisualPlanReview) -> VisualPlan:
    if review.plan is None or review.state not in _EDITABLE:
        raise PlanTransitionError(f"Plan cannot be edited in state '{review.state}'")
    return review.plan


def _with_section(plan: VisualPlan, section: VisualSection) -> VisualPlan:
    return replace(
        plan,
        sections=tuple(section if s.id == section.id else s for s in plan.sections),
    )


def select_alternative(
    review: VisualPlanReview, section_id: str, alternative_id: str
) -> VisualPlanReview:
    """Choose one of a section's alternatives.

    Raises:
        KeyError: For an unknown section or alternative.
        PlanTransitionError: If the plan is not reviewable.
    """
    plan = _require_editable(review)
    section = plan.section(section_id)
    if alternative_id not in {alt.id for alt in section.alternatives}:
        raise KeyError(f"Section {section_id} has no alternative {alternative_id}")
    if section.selected_id == alternative_id:
        return review
    updated = replace(section, selected_id=alternative_id)
    return VisualPlanReview(state=PlanState.UNDER_REVIEW, plan=_with_section(plan, updated))


def edit_direction(review: VisualPlanReview, section_id: str, visual_direction: str) -> VisualPlanReview:
    """Replace a section's visual with user-written text and select it."""
    plan = _require_editable(review)
    section = plan.section(section_id)
    if section.visual_direction == visual_direction:
        return review

    custom_id = f"{section_id}_custom"
    custom = VisualAlternative(
        id=custom_id,
        visual_direction=visual_direction,
        shot_type=section.selected.shot_type,
        mood=section.selected.mood,
        custom=True,
    )
    alternatives = tuple(alt for alt in section.alternatives if alt.id != custom_id) + (custom,)
    updated = replace(section, alternatives=alternatives, selected_id=custom_id)
    return VisualPlanReview(state=PlanState.UNDER_REVIEW, plan=_with_section(plan, updated))


def approve(review: VisualPlanReview) -> VisualPlanReview:
    """Approve the plan. Approving an approved plan is a no-op."""
    if review.state == PlanState.APPROVED:
        return review
    if review.state != PlanState.UNDER_REVIEW:
        raise PlanTransitionError(f"Cannot approve a plan in state '{review.state}'")
    return replace(review, state=PlanState.APPROVED)


def ensure_can_start(review: VisualPlanReview | None) -> None:
    """Raise if a production may not start yet.

    Raises:
        PlanNotApprovedError: If a plan exists and is not approved.
    """
    if review is not None and review.blocks_production:
        raise PlanNotApprovedError(
            f"Visual plan is '{review.state}'; approve it before starting production"
        )
