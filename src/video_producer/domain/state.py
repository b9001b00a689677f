"""Pure state transitions for a production run.

Each function takes a ``VideoProduction`` snapshot and returns a new one with
``updated_at`` refreshed. Inputs are never mutated, so any snapshot handed to
an observer stays valid forever.
"""

import time
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from video_producer.domain.enums import (
    AssetStatus,
    LogType,
    PhaseId,
    PhaseStatus,
    ProductionStatus,
)
from video_producer.domain.errors import UnknownPhaseError
from video_producer.domain.models import (
    PHASE_DEFINITIONS,
    ProductionAsset,
    ProductionLog,
    ProductionPhase,
    VideoProduction,
)

PHASE_ORDER: tuple[PhaseId, ...] = tuple(phase_id for phase_id, _, _ in PHASE_DEFINITIONS)

_PHASE_FIELDS = frozenset({"status", "progress", "started_at", "completed_at", "error"})
_ASSET_FIELDS = frozenset({"url", "source", "metadata", "status", "regeneration_count", "quality_score"})


def utcnow() -> datetime:
    return datetime.now(UTC)


def _short_id() -> str:
    return uuid4().hex[:9]


def _touch(production: VideoProduction, **changes: Any) -> VideoProduction:
    return replace(production, updated_at=utcnow(), **changes)


def new_production_id() -> str:
    return f"prod_{int(time.time() * 1000)}_{_short_id()}"


def create_production(title: str, production_id: str | None = None) -> VideoProduction:
    """Create a pending production with all phases pending."""
    now = utcnow()
    return VideoProduction(
        id=production_id or new_production_id(),
        title=title,
        status=ProductionStatus.PENDING,
        phases=tuple(
            ProductionPhase(id=phase_id, name=name, description=description)
            for phase_id, name, description in PHASE_DEFINITIONS
        ),
        created_at=now,
        updated_at=now,
    )


def advance_phase(production: VideoProduction, phase_id: PhaseId, **changes: Any) -> VideoProduction:
    """Merge a partial update into one phase.

    Ordering is not validated here; the pipeline driver visits phases in
    ``PHASE_ORDER``.

    Raises:
        UnknownPhaseError: If the production has no such phase.
        ValueError: For unknown fields or a progress outside 0-100.
    """
    unknown = set(changes) - _PHASE_FIELDS
    if unknown:
        raise ValueError(f"Unknown phase fields: {sorted(unknown)}")

    progress = changes.get("progress")
    if progress is not None and not (isinstance(progress, int) and 0 <= progress <= 100):
        raise ValueError(f"Phase progress must be an integer in 0-100, got {progress!r}")

    if phase_id not in {phase.id for phase in production.phases}:
        raise UnknownPhaseError(phase_id)

    phases = tuple(
        replace(phase, **changes) if phase.id == phase_id else phase for phase in production.phases
    )
    return _touch(production, phases=phases)


def start_phase(production: VideoProduction, phase_id: PhaseId) -> VideoProduction:
    return advance_phase(
        production,
        phase_id,
        status=PhaseStatus.IN_PROGRESS,
        progress=0,
        started_at=utcnow(),
    )


def complete_phase(production: VideoProduction, phase_id: PhaseId) -> VideoProduction:
    return advance_phase(
        production,
        phase_id,
        status=PhaseStatus.COMPLETED,
        progress=100,
        completed_at=utcnow(),
    )


def skip_phase(production: VideoProduction, phase_id: PhaseId) -> VideoProduction:
    return advance_phase(production, phase_id, status=PhaseStatus.SKIPPED, progress=100)


def fail_phase(production: VideoProduction, phase_id: PhaseId, error: str) -> VideoProduction:
    return advance_phase(production, phase_id, status=PhaseStatus.FAILED, error=error)


def append_log(
    production: VideoProduction,
    log_type: LogType,
    message: str,
    phase: PhaseId,
    asset_id: str | None = None,
) -> VideoProduction:
    """Append an entry to the audit trail."""
    now = utcnow()
    log = ProductionLog(
        id=f"log_{int(now.timestamp() * 1000)}_{_short_id()[:5]}",
        timestamp=now,
        type=log_type,
        message=message,
        phase=phase,
        asset_id=asset_id,
    )
    return _touch(production, logs=(*production.logs, log))


def add_asset(production: VideoProduction, asset: ProductionAsset) -> VideoProduction:
    return _touch(production, assets=(*production.assets, asset))


def update_asset(production: VideoProduction, asset_id: str, **changes: Any) -> VideoProduction:
    """Replace fields of one asset.

    Raises:
        KeyError: If no asset has the given id.
    """
    unknown = set(changes) - _ASSET_FIELDS
    if unknown:
        raise ValueError(f"Unknown asset fields: {sorted(unknown)}")
    if asset_id not in {asset.id for asset in production.assets}:
        raise KeyError(asset_id)

    assets = tuple(
        replace(asset, **changes) if asset.id == asset_id else asset for asset in production.assets
    )
    return _touch(production, assets=assets)


def score_asset(production: VideoProduction, asset_id: str, score: int) -> VideoProduction:
    return update_asset(production, asset_id, quality_score=score)


def mark_regenerated(production: VideoProduction, asset_id: str, score: int) -> VideoProduction:
    """Record one regeneration of an asset with its replacement score."""
    asset = next(a for a in production.assets if a.id == asset_id)
    return update_asset(
        production,
        asset_id,
        quality_score=score,
        regeneration_count=asset.regeneration_count + 1,
        status=AssetStatus.APPROVED,
    )


def set_status(production: VideoProduction, status: ProductionStatus) -> VideoProduction:
    completed_at = utcnow() if status.is_terminal else production.completed_at
    return _touch(production, status=status, completed_at=completed_at)


def set_voiceover(production: VideoProduction, url: str | None, duration: float | None) -> VideoProduction:
    return _touch(production, voiceover_url=url, voiceover_duration=duration)


def set_music(production: VideoProduction, url: str | None) -> VideoProduction:
    return _touch(production, music_url=url)


def set_overall_score(production: VideoProduction, score: int | None) -> VideoProduction:
    return _touch(production, overall_score=score)


def set_output(
    production: VideoProduction,
    output_url: str | None = None,
    preview_html: str | None = None,
) -> VideoProduction:
    return _touch(
        production,
        output_url=output_url or production.output_url,
        preview_html=preview_html or production.preview_html,
    )
