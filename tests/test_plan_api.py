"""
Plan Generation Tests

PlanService wiring and the HTTP surface (POST /api/generate-plan,
GET /api/v1/health, static index), with a fake model client injected
through create_app().
"""

import random
from pathlib import Path
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from api_server import create_app
from app.catalog.models import SupplementRecord
from app.config import Settings
from app.copy.renderer import SUPPLEMENT_SECTION_HEADING
from app.llm.errors import (
    ModelNotConfiguredError,
    SafetyBlockedError,
    InvalidApiKeyError,
    UpstreamNetworkError,
)
from app.plan.service import PlanService
from app.prompt.models import UserInput


PROJECT_ROOT = Path(__file__).resolve().parent.parent

MODEL_OUTPUT = (
    "# DAY 1\n"
    "### Barbell Bench Press\n"
    "• Sets: 4\n"
    "• Reps/Time: 6-8 reps\n"
    "\n"
    "## RECOMMENDED SUPPLEMENTS\n"
    "### HTC Creatine\n"
    "• Dosage: 5g daily"
)


class FakeModelClient:
    """Records prompts and returns canned text (or raises)."""

    def __init__(self, text: str = MODEL_OUTPUT, error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.prompts: List[str] = []

    def send(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


def make_catalog() -> List[SupplementRecord]:
    return [
        SupplementRecord(name="HTC Creatine", goals=["strength", "muscle_gain"]),
        SupplementRecord(name="HTC Whey", goals=["muscle_gain", "overall_fitness"]),
        SupplementRecord(name="HTC Omega", goals=["overall_fitness"]),
        SupplementRecord(name="HTC Shred", goals=["fat_loss"]),
    ]


def make_settings(tmp_path=None) -> Settings:
    static_dir = PROJECT_ROOT / "static" if tmp_path is None else tmp_path / "no-static"
    return Settings(google_api_key="test-key", static_dir=static_dir)


def make_client(model_client=None, catalog=None, tmp_path=None) -> TestClient:
    app = create_app(
        settings=make_settings(tmp_path),
        catalog=make_catalog() if catalog is None else catalog,
        model_client=model_client,
    )
    return TestClient(app)


PAYLOAD = {
    "goal": "muscle_gain",
    "experience": "advanced",
    "equipment": "full_gym",
    "frequency": "5",
    "duration": "75",
    "focusArea": "upper_body",
    "subFocus": "chest",
    "include_nutrition": True,
    "include_warmup": False,
    "include_cooldown": False,
    "include_progression": True,
}


# ============================================================================
# PlanService
# ============================================================================

class TestPlanService:
    """PlanService end-to-end with injected collaborators."""

    def test_generate_renders_both_fragments(self):
        client = FakeModelClient()
        service = PlanService(make_catalog(), client, rng_factory=lambda: random.Random(0))

        result = service.generate(UserInput(**PAYLOAD))

        assert result.plan == MODEL_OUTPUT
        assert "Barbell Bench Press" in result.plan_html
        assert "HTC Creatine" not in result.plan_html
        assert result.supplements_html.startswith(SUPPLEMENT_SECTION_HEADING)
        assert "Barbell Bench Press" not in result.supplements_html

    def test_selected_supplements_reach_prompt(self):
        client = FakeModelClient()
        service = PlanService(make_catalog(), client, rng_factory=lambda: random.Random(0))

        result = service.generate(UserInput(**PAYLOAD))

        assert len(result.supplements) == 3
        assert len(set(result.supplements)) == 3
        for name in result.supplements:
            assert f"- Product Name: {name}" in client.prompts[0]

    def test_goal_products_preferred(self):
        service = PlanService(make_catalog(), FakeModelClient(), supplement_count=2)

        selected = service.select(UserInput(goal="muscle_gain"))

        assert sorted(s.name for s in selected) == ["HTC Creatine", "HTC Whey"]

    def test_rng_factory_called_per_request(self):
        calls = []

        def factory():
            calls.append(1)
            return random.Random(len(calls))

        service = PlanService(make_catalog(), FakeModelClient(), rng_factory=factory)
        service.generate(UserInput(goal="fat_loss"))
        service.generate(UserInput(goal="fat_loss"))

        assert len(calls) == 2

    def test_empty_catalog_uses_placeholder(self):
        client = FakeModelClient()
        service = PlanService([], client)

        result = service.generate(UserInput(goal="fat_loss"))

        assert result.supplements == []
        assert "No specific supplements recommended" in client.prompts[0]

    def test_missing_client_raises(self):
        service = PlanService(make_catalog(), None)

        assert not service.is_configured
        with pytest.raises(ModelNotConfiguredError):
            service.generate(UserInput(goal="fat_loss"))

    def test_model_errors_propagate(self):
        service = PlanService(make_catalog(), FakeModelClient(error=SafetyBlockedError("blocked")))

        with pytest.raises(SafetyBlockedError):
            service.generate(UserInput(goal="fat_loss"))


# ============================================================================
# POST /api/generate-plan
# ============================================================================

class TestGeneratePlanEndpoint:
    """HTTP contract of the plan endpoint."""

    def test_success(self):
        fake = FakeModelClient()
        client = make_client(fake)

        response = client.post("/api/generate-plan", json=PAYLOAD)

        assert response.status_code == 200
        body = response.json()
        assert body["plan"] == MODEL_OUTPUT
        assert '<h3 class="day-heading">DAY 1</h3>' in body["plan_html"]
        assert "HTC Creatine" in body["supplements_html"]
        assert len(body["supplements"]) == 3
        assert "- Sub-Focus: chest" in fake.prompts[0]

    def test_empty_body_is_400(self):
        client = make_client(FakeModelClient())

        response = client.post("/api/generate-plan", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid user input received."}

    def test_non_object_body_is_400(self):
        client = make_client(FakeModelClient())

        response = client.post("/api/generate-plan", json=["goal"])

        assert response.status_code == 400

    def test_malformed_json_is_400(self):
        client = make_client(FakeModelClient())

        response = client.post(
            "/api/generate-plan",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400

    def test_invalid_field_is_400(self):
        client = make_client(FakeModelClient())

        response = client.post("/api/generate-plan", json={"goal": "fat_loss", "include_warmup": "maybe"})

        assert response.status_code == 400
        assert "error" in response.json()

    def test_not_configured_is_500(self):
        client = make_client(None)

        response = client.post("/api/generate-plan", json=PAYLOAD)

        assert response.status_code == 500
        assert response.json() == {"error": ModelNotConfiguredError.user_message}

    @pytest.mark.parametrize("error_cls", [
        SafetyBlockedError,
        InvalidApiKeyError,
        UpstreamNetworkError,
    ])
    def test_model_errors_map_to_user_messages(self, error_cls):
        fake = FakeModelClient(error=error_cls("upstream detail"))
        client = make_client(fake)

        response = client.post("/api/generate-plan", json=PAYLOAD)

        assert response.status_code == 500
        assert response.json() == {"error": error_cls.user_message}
        assert "upstream detail" not in response.text


# ============================================================================
# Health + static UI
# ============================================================================

class TestHealthAndStatic:
    """Health endpoint and static form serving."""

    def test_health_ok(self):
        client = make_client(FakeModelClient())

        body = client.get("/api/v1/health").json()

        assert body["status"] == "ok"
        assert body["components"]["catalog"] == {"status": "healthy", "products": 4}
        assert body["components"]["model"]["status"] == "healthy"

    def test_health_degraded(self):
        client = make_client(None, catalog=[])

        body = client.get("/api/v1/health").json()

        assert body["status"] == "degraded"
        assert body["components"]["catalog"]["status"] == "degraded"
        assert body["components"]["model"]["status"] == "not_configured"

    def test_index_served(self):
        client = make_client(FakeModelClient())

        response = client.get("/")

        assert response.status_code == 200
        assert "fitness-form" in response.text

    def test_static_assets_served(self):
        client = make_client(FakeModelClient())

        assert client.get("/static/script.js").status_code == 200

    def test_missing_static_dir_disables_ui(self, tmp_path):
        client = make_client(FakeModelClient(), tmp_path=tmp_path)

        assert client.get("/").status_code == 404
        assert client.get("/api/v1/health").status_code == 200

    def test_health_package_exports_router(self):
        from app.health import router

        assert router.prefix == "/api/v1/health"
