"""Tests for the quality gate and cancellation token."""

import asyncio
import random

import pytest

from video_producer.domain import AssetEvaluation, ProductionCancelledError
from video_producer.services.cancellation import CancellationToken
from video_producer.services.quality_gate import (
    QUALITY_THRESHOLD,
    REGENERATED_SCORE_MAX,
    REGENERATED_SCORE_MIN,
    ScriptedRegenerator,
    failing_evaluations,
    needs_regeneration,
)


class TestQualityGate:
    def test_threshold_is_seventy(self) -> None:
        assert QUALITY_THRESHOLD == 70
        assert needs_regeneration(69)
        assert not needs_regeneration(70)
        assert not needs_regeneration(100)

    def test_failing_evaluations_keep_order(self) -> None:
        evaluations = [
            AssetEvaluation(section="scene_1_img0", score=65),
            AssetEvaluation(section="scene_1_img1", score=80),
            AssetEvaluation(section="scene_1_video", score=12),
        ]

        failing = failing_evaluations(evaluations)

        assert [e.section for e in failing] == ["scene_1_img0", "scene_1_video"]

    def test_section_scored_twice_fails_once_with_lowest_score(self) -> None:
        evaluations = [
            AssetEvaluation(section="scene_1_img0", score=60),
            AssetEvaluation(section="scene_1_video", score=40),
            AssetEvaluation(section="scene_1_img0", score=50),
            AssetEvaluation(section="scene_1_video", score=65),
        ]

        failing = failing_evaluations(evaluations)

        assert [(e.section, e.score) for e in failing] == [("scene_1_img0", 50), ("scene_1_video", 40)]

    @pytest.mark.asyncio
    async def test_regenerated_score_in_range(self) -> None:
        regenerator = ScriptedRegenerator(delay_seconds=0, rng=random.Random(7))
        token = CancellationToken()

        scores = [
            await regenerator.regenerate(AssetEvaluation(section="s", score=10), token) for _ in range(20)
        ]

        assert all(REGENERATED_SCORE_MIN <= s <= REGENERATED_SCORE_MAX for s in scores)
        assert not any(needs_regeneration(s) for s in scores)

    @pytest.mark.asyncio
    async def test_regeneration_honours_cancellation(self) -> None:
        regenerator = ScriptedRegenerator(delay_seconds=0)
        token = CancellationToken()
        token.cancel()

        with pytest.raises(ProductionCancelledError):
            await regenerator.regenerate(AssetEvaluation(section="s", score=10), token)


class TestCancellationToken:
    @pytest.mark.asyncio
    async def test_sleep_returns_after_delay(self) -> None:
        token = CancellationToken()

        await token.sleep(0.01)

        assert not token.cancelled

    @pytest.mark.asyncio
    async def test_sleep_interrupted_by_cancel(self) -> None:
        token = CancellationToken()
        asyncio.get_running_loop().call_later(0.01, token.cancel, "stop")

        with pytest.raises(ProductionCancelledError, match="stop"):
            await asyncio.wait_for(token.sleep(10), timeout=1)

    @pytest.mark.asyncio
    async def test_guard_returns_result(self) -> None:
        token = CancellationToken()

        async def work() -> int:
            await asyncio.sleep(0)
            return 42

        assert await token.guard(work()) == 42

    @pytest.mark.asyncio
    async def test_guard_abandons_call_on_cancel(self) -> None:
        token = CancellationToken()
        finished = False

        async def slow() -> None:
            nonlocal finished
            await asyncio.sleep(10)
            finished = True

        asyncio.get_running_loop().call_later(0.01, token.cancel)

        with pytest.raises(ProductionCancelledError):
            await asyncio.wait_for(token.guard(slow()), timeout=1)
        assert finished is False

    @pytest.mark.asyncio
    async def test_guard_when_already_cancelled(self) -> None:
        token = CancellationToken()
        token.cancel("early")

        async def never() -> None:
            raise AssertionError("should not run")

        with pytest.raises(ProductionCancelledError, match="early"):
            await token.guard(never())

    def test_first_reason_wins(self) -> None:
        token = CancellationToken()
        token.cancel("first")
        token.cancel("second")

        assert token.reason == "first"
