"""Pytest configuration and fixtures."""

import os
import tempfile
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app modules
os.environ["PRODUCER_PROVIDER"] = "stub"
os.environ["PIPELINE_DELAY_SCALE"] = "0"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DOWNLOAD_DIR"] = tempfile.mkdtemp(prefix="video_producer_test_")

from tests.fakes import (  # noqa: E402
    TWO_SCENE_SCRIPT,
    CountingRegenerator,
    RecordingImageGen,
    RecordingMusic,
    RecordingVideoGen,
    RecordingVoiceover,
    ScriptedEvaluator,
)
from video_producer.domain import ProductionBrief  # noqa: E402
from video_producer.services.providers import ProducerProviders  # noqa: E402


@pytest.fixture
def providers() -> ProducerProviders:
    """Stub providers with recording fakes for the generation calls."""
    stubs = ProducerProviders.stub(latency_ms=0)
    stubs.voiceover = RecordingVoiceover()
    stubs.image_gen = RecordingImageGen()
    stubs.video_gen = RecordingVideoGen()
    stubs.music = RecordingMusic()
    stubs.evaluator = ScriptedEvaluator()
    return stubs


@pytest.fixture
def regenerator() -> CountingRegenerator:
    return CountingRegenerator()


@pytest.fixture
def brief() -> ProductionBrief:
    return ProductionBrief(title="Coffee Maker", script=TWO_SCENE_SCRIPT, video_duration=30)


@pytest.fixture(scope="session")
def test_client() -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI app."""
    from video_producer.main import app

    with TestClient(app) as client:
        yield client
