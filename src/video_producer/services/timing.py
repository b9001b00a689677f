"""Timeline allocation for assembly."""

from collections.abc import Sequence

from video_producer.domain.models import ProductionAsset, SceneTiming

MIN_SCENE_SECONDS = 2.0


def compute_scene_timings(
    assets: Sequence[ProductionAsset],
    voiceover_duration: float | None,
    fallback_duration: float,
) -> list[SceneTiming]:
    """Divide the narration evenly across assets, at least 2 seconds each.

    ``fallback_duration`` (the brief's target length) is used when there is
    no voiceover duration. With the floor in place the total can exceed the
    narration; the composition endpoint trims or loops audio as needed.
    """
    if not assets:
        return []

    total = voiceover_duration if voiceover_duration and voiceover_duration > 0 else fallback_duration
    per_asset = max(MIN_SCENE_SECONDS, total / len(assets))

    timings = []
    start = 0.0
    for asset in assets:
        timings.append(
            SceneTiming(
                asset_id=asset.id,
                section=asset.section,
                start=round(start, 3),
                duration=round(per_asset, 3),
            )
        )
        start += per_asset
    return timings
