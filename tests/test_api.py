"""Tests for the production, script and visual plan endpoints."""

import time
from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from video_producer.api.deps import get_registry
from video_producer.main import app
from video_producer.services.producer import ProducerService
from video_producer.services.providers import ProducerProviders
from video_producer.services.registry import ProductionRegistry

SCRIPT = "Mornings start with great coffee.\n\nOur maker brews in ninety seconds."


def fast_service() -> ProducerService:
    return ProducerService(providers=ProducerProviders.stub(latency_ms=0), delay_scale=0)


def slow_service() -> ProducerService:
    return ProducerService(providers=ProducerProviders.stub(latency_ms=0), delay_scale=1)


@pytest.fixture
def registry() -> Generator[ProductionRegistry, None, None]:
    registry = ProductionRegistry(service_factory=fast_service)
    app.dependency_overrides[get_registry] = lambda: registry
    yield registry
    app.dependency_overrides.pop(get_registry, None)


@pytest.fixture
def slow_registry() -> Generator[ProductionRegistry, None, None]:
    registry = ProductionRegistry(service_factory=slow_service)
    app.dependency_overrides[get_registry] = lambda: registry
    yield registry
    app.dependency_overrides.pop(get_registry, None)


def wait_for_status(client: TestClient, production_id: str, timeout: float = 10.0) -> dict[str, Any]:
    """Poll until the production reaches a terminal status."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        data = client.get(f"/api/v1/productions/{production_id}").json()
        if data["status"] in ("completed", "failed", "cancelled"):
            return data
        time.sleep(0.02)
    raise AssertionError(f"Production {production_id} did not finish in {timeout}s")


class TestProductionEndpoints:
    def test_start_and_complete(self, test_client: TestClient, registry: ProductionRegistry) -> None:
        response = test_client.post(
            "/api/v1/productions",
            json={"title": "Coffee Maker", "script": SCRIPT, "video_duration": 30},
        )

        assert response.status_code == 202
        accepted = response.json()
        assert accepted["production_id"].startswith("prod_")
        assert accepted["message"] == "Production started"

        data = wait_for_status(test_client, accepted["production_id"])
        assert data["status"] == "completed"
        assert [p["id"] for p in data["phases"]] == ["analyze", "generate", "evaluate", "iterate", "assemble"]
        assert len(data["assets"]) == 8
        assert data["output_url"].endswith(".mp4")
        assert data["logs"][-1]["message"] == "Video production complete!"

    def test_product_mode(self, test_client: TestClient, registry: ProductionRegistry) -> None:
        response = test_client.post(
            "/api/v1/productions",
            json={
                "title": "Smart Mug",
                "product": {"product_name": "Smart Mug", "product_description": "Keeps coffee hot"},
                "music_mood": "none",
            },
        )

        assert response.status_code == 202
        data = wait_for_status(test_client, response.json()["production_id"])
        assert data["status"] == "completed"
        assert len(data["assets"]) == 5 * 4
        assert data["music_url"] is None

    def test_requires_script_or_product(self, test_client: TestClient, registry: ProductionRegistry) -> None:
        response = test_client.post("/api/v1/productions", json={"title": "Empty", "script": "   "})

        assert response.status_code == 422

    def test_validation(self, test_client: TestClient, registry: ProductionRegistry) -> None:
        assert test_client.post("/api/v1/productions", json={"title": "", "script": SCRIPT}).status_code == 422
        assert (
            test_client.post(
                "/api/v1/productions",
                json={"title": "Short", "script": SCRIPT, "video_duration": 5},
            ).status_code
            == 422
        )
        assert (
            test_client.post(
                "/api/v1/productions",
                json={"title": "Mood", "script": SCRIPT, "music_mood": "spooky"},
            ).status_code
            == 422
        )

    def test_unknown_production(self, test_client: TestClient, registry: ProductionRegistry) -> None:
        assert test_client.get("/api/v1/productions/prod_missing").status_code == 404
        assert test_client.post("/api/v1/productions/prod_missing/cancel").status_code == 404
        assert test_client.get("/api/v1/productions/prod_missing/download").status_code == 404

    def test_cancel_running_production(self, test_client: TestClient, slow_registry: ProductionRegistry) -> None:
        production_id = test_client.post(
            "/api/v1/productions",
            json={"title": "Slow", "script": SCRIPT},
        ).json()["production_id"]

        response = test_client.post(f"/api/v1/productions/{production_id}/cancel")

        assert response.status_code == 200
        assert response.json()["cancel_requested"] is True
        data = wait_for_status(test_client, production_id)
        assert data["status"] == "cancelled"
        assert data["logs"][-1]["type"] == "error"
        assert data["completed_at"] is not None

    def test_download_requires_finished_production(
        self, test_client: TestClient, slow_registry: ProductionRegistry
    ) -> None:
        production_id = test_client.post(
            "/api/v1/productions",
            json={"title": "Slow", "script": SCRIPT},
        ).json()["production_id"]

        response = test_client.get(f"/api/v1/productions/{production_id}/download")

        assert response.status_code == 409
        test_client.post(f"/api/v1/productions/{production_id}/cancel")
        wait_for_status(test_client, production_id)

    def test_download_completed_production(self, test_client: TestClient, registry: ProductionRegistry) -> None:
        production_id = test_client.post(
            "/api/v1/productions",
            json={"title": "Coffee Maker", "script": SCRIPT},
        ).json()["production_id"]
        wait_for_status(test_client, production_id)

        response = test_client.get(f"/api/v1/productions/{production_id}/download")

        assert response.status_code == 200
        assert response.headers["content-type"] == "video/mp4"
        assert response.content == f"STUB_VIDEO_DATA_{production_id}".encode()


class TestVisualPlanEndpoints:
    def _create_plan(self, client: TestClient) -> dict[str, Any]:
        response = client.post("/api/v1/visual-plans", json={"script": SCRIPT, "title": "Coffee Maker"})
        assert response.status_code == 201
        return response.json()

    def test_create_plan_opens_review(self, test_client: TestClient, registry: ProductionRegistry) -> None:
        data = self._create_plan(test_client)

        assert data["plan_id"].startswith("plan_")
        assert data["state"] == "under_review"
        sections = data["plan"]["sections"]
        assert [s["id"] for s in sections] == ["section_1", "section_2"]
        assert sections[0]["selected_id"] == "section_1_alt1"

    def test_get_unknown_plan(self, test_client: TestClient, registry: ProductionRegistry) -> None:
        assert test_client.get("/api/v1/visual-plans/plan_missing").status_code == 404
        assert test_client.post("/api/v1/visual-plans/plan_missing/approve").status_code == 404

    def test_select_and_edit_sections(self, test_client: TestClient, registry: ProductionRegistry) -> None:
        plan_id = self._create_plan(test_client)["plan_id"]

        selected = test_client.put(
            f"/api/v1/visual-plans/{plan_id}/sections/section_1",
            json={"alternative_id": "section_1_alt2"},
        ).json()
        edited = test_client.put(
            f"/api/v1/visual-plans/{plan_id}/sections/section_2",
            json={"visual_direction": "Slow pour in golden light"},
        ).json()

        assert selected["plan"]["sections"][0]["selected_id"] == "section_1_alt2"
        section = edited["plan"]["sections"][1]
        assert section["visual_direction"] == "Slow pour in golden light"
        assert section["alternatives"][-1]["custom"] is True

    def test_update_section_errors(self, test_client: TestClient, registry: ProductionRegistry) -> None:
        plan_id = self._create_plan(test_client)["plan_id"]
        url = f"/api/v1/visual-plans/{plan_id}/sections/section_1"

        assert test_client.put(url, json={}).status_code == 422
        assert test_client.put(url, json={"alternative_id": "nope"}).status_code == 404
        assert (
            test_client.put(
                f"/api/v1/visual-plans/{plan_id}/sections/missing",
                json={"alternative_id": "section_1_alt1"},
            ).status_code
            == 404
        )

    def test_unapproved_plan_blocks_production(self, test_client: TestClient, registry: ProductionRegistry) -> None:
        plan_id = self._create_plan(test_client)["plan_id"]

        response = test_client.post(
            "/api/v1/productions",
            json={"title": "Coffee Maker", "script": SCRIPT, "plan_id": plan_id},
        )

        assert response.status_code == 409
        assert registry.productions == {}

    def test_unknown_plan_blocks_production(self, test_client: TestClient, registry: ProductionRegistry) -> None:
        response = test_client.post(
            "/api/v1/productions",
            json={"title": "Coffee Maker", "script": SCRIPT, "plan_id": "plan_missing"},
        )

        assert response.status_code == 404

    def test_approved_plan_drives_production(self, test_client: TestClient, registry: ProductionRegistry) -> None:
        plan_id = self._create_plan(test_client)["plan_id"]
        test_client.put(
            f"/api/v1/visual-plans/{plan_id}/sections/section_2",
            json={"visual_direction": "Slow pour in golden light"},
        )

        approved = test_client.post(f"/api/v1/visual-plans/{plan_id}/approve")
        assert approved.status_code == 200
        assert approved.json()["state"] == "approved"

        response = test_client.post(
            "/api/v1/productions",
            json={"title": "Coffee Maker", "script": SCRIPT, "plan_id": plan_id},
        )
        assert response.status_code == 202

        data = wait_for_status(test_client, response.json()["production_id"])
        assert data["status"] == "completed"
        prompts = {a["metadata"]["prompt"] for a in data["assets"] if a["section"] == "scene_2_video"}
        assert prompts == {"Slow pour in golden light"}

    def test_edit_after_approval_requires_reapproval(
        self, test_client: TestClient, registry: ProductionRegistry
    ) -> None:
        plan_id = self._create_plan(test_client)["plan_id"]
        test_client.post(f"/api/v1/visual-plans/{plan_id}/approve")

        edited = test_client.put(
            f"/api/v1/visual-plans/{plan_id}/sections/section_1",
            json={"alternative_id": "section_1_alt2"},
        )

        assert edited.json()["state"] == "under_review"
        response = test_client.post(
            "/api/v1/productions",
            json={"title": "Coffee Maker", "script": SCRIPT, "plan_id": plan_id},
        )
        assert response.status_code == 409

    def test_regenerate_discards_edits(self, test_client: TestClient, registry: ProductionRegistry) -> None:
        plan_id = self._create_plan(test_client)["plan_id"]
        test_client.put(
            f"/api/v1/visual-plans/{plan_id}/sections/section_1",
            json={"visual_direction": "Custom"},
        )

        response = test_client.post(
            f"/api/v1/visual-plans/{plan_id}/regenerate",
            json={"script": SCRIPT, "title": "Coffee Maker"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["state"] == "under_review"
        assert data["plan"]["sections"][0]["selected_id"] == "section_1_alt1"
        assert all(not alt["custom"] for alt in data["plan"]["sections"][0]["alternatives"])


class TestScriptEndpoints:
    def test_generate_script(self, test_client: TestClient) -> None:
        response = test_client.post("/api/v1/scripts/generate", json={"topic": "cold brew"})

        assert response.status_code == 200
        data = response.json()
        assert "cold brew" in data["script"]
        assert data["visual_plan"] is None

    def test_generate_script_validation(self, test_client: TestClient) -> None:
        assert test_client.post("/api/v1/scripts/generate", json={"topic": ""}).status_code == 422
