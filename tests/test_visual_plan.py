"""Tests for the visual plan approval state machine."""

import pytest

from tests.fakes import make_plan
from video_producer.domain import (
    PlanNotApprovedError,
    PlanState,
    PlanTransitionError,
    VisualPlanReview,
)
from video_producer.domain.visual_plan import (
    approve,
    begin_review,
    edit_direction,
    ensure_can_start,
    receive_plan,
    receive_suggestions,
    regenerate,
    select_alternative,
)


@pytest.fixture
def review() -> VisualPlanReview:
    return receive_suggestions(VisualPlanReview(), make_plan())


def test_initial_state_allows_production() -> None:
    empty = VisualPlanReview()

    assert empty.state == PlanState.NONE
    ensure_can_start(empty)
    ensure_can_start(None)


def test_generated_then_review() -> None:
    generated = receive_plan(VisualPlanReview(), make_plan())
    assert generated.state == PlanState.GENERATED

    assert begin_review(generated).state == PlanState.UNDER_REVIEW


def test_begin_review_requires_generated(review) -> None:
    with pytest.raises(PlanTransitionError):
        begin_review(review)


def test_suggestions_open_review(review) -> None:
    assert review.state == PlanState.UNDER_REVIEW
    with pytest.raises(PlanNotApprovedError):
        ensure_can_start(review)


def test_select_alternative(review) -> None:
    updated = select_alternative(review, "s1", "s1_b")

    assert updated.state == PlanState.UNDER_REVIEW
    assert updated.plan is not None
    assert updated.plan.selections() == {"s1": "s1_b", "s2": "s2_a"}
    assert review.plan is not None
    assert review.plan.selections()["s1"] == "s1_a"


def test_select_unknown_alternative(review) -> None:
    with pytest.raises(KeyError):
        select_alternative(review, "s1", "nope")
    with pytest.raises(KeyError):
        select_alternative(review, "missing", "s1_a")


def test_edit_direction_adds_custom_alternative(review) -> None:
    updated = edit_direction(review, "s2", "Drone shot over the harbour")

    assert updated.plan is not None
    section = updated.plan.section("s2")
    assert section.selected_id == "s2_custom"
    assert section.selected.custom is True
    assert section.visual_direction == "Drone shot over the harbour"
    assert len(section.alternatives) == 3

    edited_again = edit_direction(updated, "s2", "Aerial shot")
    assert edited_again.plan is not None
    assert len(edited_again.plan.section("s2").alternatives) == 3


def test_approve_unblocks_production(review) -> None:
    approved = approve(review)

    assert approved.state == PlanState.APPROVED
    ensure_can_start(approved)
    scenes = approved.scenes()
    assert scenes is not None
    assert [s.visual_direction for s in scenes] == ["Shot 1a", "Shot 2a"]


def test_approve_is_idempotent(review) -> None:
    approved = approve(review)

    again = approve(approved)

    assert again == approved
    assert again.plan is not None and approved.plan is not None
    assert again.plan.selections() == approved.plan.selections()


def test_approve_requires_review() -> None:
    with pytest.raises(PlanTransitionError):
        approve(receive_plan(VisualPlanReview(), make_plan()))
    with pytest.raises(PlanTransitionError):
        approve(VisualPlanReview())


def test_editing_approved_plan_requires_reapproval(review) -> None:
    approved = approve(review)

    edited = select_alternative(approved, "s1", "s1_b")

    assert edited.state == PlanState.UNDER_REVIEW
    with pytest.raises(PlanNotApprovedError):
        ensure_can_start(edited)


def test_reselecting_same_alternative_keeps_approval(review) -> None:
    approved = approve(review)

    assert select_alternative(approved, "s1", "s1_a") is approved


def test_regenerate_discards_edits(review) -> None:
    edited = edit_direction(review, "s1", "Custom")

    regenerated = regenerate(edited, make_plan("Fresh"))

    assert regenerated.state == PlanState.GENERATED
    assert regenerated.plan is not None
    assert regenerated.plan.section("s1").visual_direction == "Fresh 1a"
    assert regenerated.scenes() is None


def test_cannot_edit_generated_plan() -> None:
    generated = receive_plan(VisualPlanReview(), make_plan())

    with pytest.raises(PlanTransitionError):
        select_alternative(generated, "s1", "s1_b")
