"""Tests for production state transitions."""

import pytest

from video_producer.domain import (
    AssetType,
    LogType,
    PhaseId,
    PhaseStatus,
    ProductionAsset,
    ProductionStatus,
    UnknownPhaseError,
)
from video_producer.domain.state import (
    add_asset,
    advance_phase,
    append_log,
    complete_phase,
    create_production,
    fail_phase,
    mark_regenerated,
    score_asset,
    set_output,
    set_status,
    skip_phase,
    start_phase,
    update_asset,
)


def _asset(section: str = "scene_1_img0") -> ProductionAsset:
    return ProductionAsset(
        id=f"asset_{section}",
        type=AssetType.IMAGE,
        section=section,
        scene=1,
        url="https://cdn.test/a.png",
        source="pexels",
    )


class TestAdvancePhase:
    def test_merges_partial_update(self) -> None:
        production = create_production("Demo")

        updated = advance_phase(production, PhaseId.GENERATE, progress=40)

        assert updated.phase(PhaseId.GENERATE).progress == 40
        assert updated.phase(PhaseId.GENERATE).status == PhaseStatus.PENDING
        assert updated.updated_at >= production.updated_at

    def test_does_not_mutate_input(self) -> None:
        production = create_production("Demo")

        advance_phase(production, PhaseId.ANALYZE, status=PhaseStatus.IN_PROGRESS)

        assert production.phase(PhaseId.ANALYZE).status == PhaseStatus.PENDING

    @pytest.mark.parametrize("progress", [-1, 101, 50.5])
    def test_rejects_invalid_progress(self, progress) -> None:
        with pytest.raises(ValueError):
            advance_phase(create_production("Demo"), PhaseId.ANALYZE, progress=progress)

    def test_rejects_unknown_field(self) -> None:
        with pytest.raises(ValueError):
            advance_phase(create_production("Demo"), PhaseId.ANALYZE, colour="red")

    def test_unknown_phase(self) -> None:
        with pytest.raises(UnknownPhaseError):
            advance_phase(create_production("Demo"), "publish", progress=10)  # type: ignore[arg-type]

    def test_phase_lifecycle_helpers(self) -> None:
        production = start_phase(create_production("Demo"), PhaseId.ANALYZE)
        assert production.current_phase is not None
        assert production.current_phase.id == PhaseId.ANALYZE
        assert production.phase(PhaseId.ANALYZE).started_at is not None

        production = complete_phase(production, PhaseId.ANALYZE)
        assert production.phase(PhaseId.ANALYZE).progress == 100
        assert production.current_phase is None

        production = skip_phase(production, PhaseId.ITERATE)
        assert production.phase(PhaseId.ITERATE).status == PhaseStatus.SKIPPED

        production = fail_phase(production, PhaseId.ASSEMBLE, "boom")
        assert production.phase(PhaseId.ASSEMBLE).error == "boom"


class TestLogsAndAssets:
    def test_logs_are_appended_in_order(self) -> None:
        production = create_production("Demo")
        production = append_log(production, LogType.DECISION, "first", PhaseId.ANALYZE)
        production = append_log(production, LogType.SUCCESS, "second", PhaseId.ANALYZE, "asset_1")

        assert [log.message for log in production.logs] == ["first", "second"]
        assert production.logs[1].asset_id == "asset_1"
        assert production.logs[0].id != production.logs[1].id

    def test_score_and_regenerate_asset(self) -> None:
        production = add_asset(create_production("Demo"), _asset())

        production = score_asset(production, "asset_scene_1_img0", 60)
        production = mark_regenerated(production, "asset_scene_1_img0", 82)

        asset = production.assets[0]
        assert asset.quality_score == 82
        assert asset.regeneration_count == 1

    def test_update_unknown_asset(self) -> None:
        with pytest.raises(KeyError):
            update_asset(create_production("Demo"), "missing", quality_score=10)

    def test_update_unknown_asset_field(self) -> None:
        production = add_asset(create_production("Demo"), _asset())
        with pytest.raises(ValueError):
            update_asset(production, "asset_scene_1_img0", section="scene_9_img0")


class TestStatus:
    def test_terminal_status_sets_completed_at(self) -> None:
        production = set_status(create_production("Demo"), ProductionStatus.IN_PROGRESS)
        assert production.completed_at is None

        production = set_status(production, ProductionStatus.COMPLETED)
        assert production.completed_at is not None

    def test_set_output_keeps_existing_values(self) -> None:
        production = set_output(create_production("Demo"), output_url="https://cdn.test/v.mp4")
        production = set_output(production, preview_html="<html></html>")

        assert production.output_url == "https://cdn.test/v.mp4"
        assert production.preview_html == "<html></html>"
