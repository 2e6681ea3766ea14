"""
Tests for Admin Preview API.

The preview endpoints must return the same markup as the server-side page
render for the same component list.
"""

from __future__ import annotations

import json
import logging

import pytest
from fastapi.testclient import TestClient

from src.api.deps import get_render_rules
from src.api.routes.admin_preview import router
from src.components.page_render import RenderRulesAdapter, render_all
from src.rules.models import FormRules, RenderRules, Rules

# --- Test Client Setup ---


@pytest.fixture
def client() -> TestClient:
    """Test client with default rules."""
    from fastapi import FastAPI

    app = FastAPI()
    app.include_router(router, prefix="/api/admin/preview")
    app.dependency_overrides[get_render_rules] = lambda: RenderRulesAdapter(Rules())

    return TestClient(app)


@pytest.fixture
def components() -> list[dict]:
    return [
        {"id": "c1", "type": "hero", "props": {"title": "Launch <2024>"}},
        {"id": "c2", "type": "mystery", "props": {}},
        {"id": "c3", "type": "raw-html", "props": {"html": "<style>p{color:red}</style><p>x</p>"}},
    ]


# --- Components Preview ---


class TestComponentsPreview:
    """Editor component list preview."""

    def test_parity_with_page_render(self, client: TestClient, components: list[dict]) -> None:
        """Preview HTML equals the server-side render."""
        response = client.post("/api/admin/preview/components", json={"components": components})

        assert response.status_code == 200
        data = response.json()
        assert data["html"] == render_all(components)
        assert "<h1>Launch &lt;2024&gt;</h1>" in data["html"]
        assert ".raw-html-block-c3 p {color:red}" in data["html"]

    def test_outcomes(self, client: TestClient, components: list[dict]) -> None:
        response = client.post("/api/admin/preview/components", json={"components": components})

        data = response.json()
        assert [o["status"] for o in data["outcomes"]] == ["rendered", "unknown", "rendered"]
        assert data["outcomes"][1]["kind"] == "mystery"
        assert data["error_count"] == 0

    def test_failing_component_counted(self, client: TestClient) -> None:
        comps = [{"type": "timeline", "props": {"events": [None]}}, {"type": "faq-section"}]

        response = client.post("/api/admin/preview/components", json={"components": comps})

        assert response.status_code == 200
        data = response.json()
        assert data["error_count"] == 1
        assert data["outcomes"][0]["status"] == "error"
        assert data["outcomes"][0]["error"].startswith("TypeError")
        assert data["html"].startswith("<!-- Render error: timeline -->")

    def test_malformed_entries_do_not_reject(self, client: TestClient) -> None:
        response = client.post(
            "/api/admin/preview/components", json={"components": [None, 3, "hero"]}
        )

        assert response.status_code == 200
        assert [o["status"] for o in response.json()["outcomes"]] == ["unknown"] * 3

    def test_empty_list(self, client: TestClient) -> None:
        response = client.post("/api/admin/preview/components", json={})

        assert response.status_code == 200
        assert response.json() == {"html": "", "outcomes": [], "error_count": 0}

    def test_components_must_be_list(self, client: TestClient) -> None:
        response = client.post("/api/admin/preview/components", json={"components": "hero"})

        assert response.status_code == 422

    def test_rules_override(self, components: list[dict]) -> None:
        from fastapi import FastAPI

        app = FastAPI()
        app.include_router(router, prefix="/api/admin/preview")
        app.dependency_overrides[get_render_rules] = lambda: RenderRulesAdapter(
            RenderRules(forms=FormRules(submit_label="Send"), disabled_kinds=["hero"])
        )
        client = TestClient(app)

        response = client.post(
            "/api/admin/preview/components",
            json={"components": [{"type": "hero"}, {"type": "contact-form"}]},
        )

        html = response.json()["html"]
        assert html.startswith("<!-- Unknown component: hero -->")
        assert '<button type="submit">Send</button>' in html


# --- Template Preview ---


class TestTemplatePreview:
    """Persisted template payload preview."""

    def test_object_payload(self, client: TestClient, components: list[dict]) -> None:
        payload = {"template_id": "landing", "theme_id": "dark", "components": components}

        response = client.post("/api/admin/preview/template", json={"template_data": payload})

        assert response.status_code == 200
        data = response.json()
        assert data["parsed"] is True
        assert data["component_count"] == 3
        assert data["template_id"] == "landing"
        assert data["theme_id"] == "dark"
        assert data["html"] == render_all(components)

    def test_string_payload(self, client: TestClient, components: list[dict]) -> None:
        raw = json.dumps({"components": components})

        response = client.post("/api/admin/preview/template", json={"template_data": raw})

        data = response.json()
        assert data["parsed"] is True
        assert data["html"] == render_all(components)

    def test_undecodable_payload(self, client: TestClient) -> None:
        response = client.post("/api/admin/preview/template", json={"template_data": "{oops"})

        assert response.status_code == 200
        data = response.json()
        assert data["parsed"] is False
        assert data["html"] == ""
        assert data["component_count"] == 0
        assert data["outcomes"] == []

    def test_missing_payload(self, client: TestClient) -> None:
        response = client.post("/api/admin/preview/template", json={})

        data = response.json()
        assert data["parsed"] is False
        assert data["html"] == ""

    def test_undecodable_payload_warned_once(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="src.core.services.template_data"):
            client.post("/api/admin/preview/template", json={"template_data": "{oops"})

        warnings = [r for r in caplog.records if r.name == "src.core.services.template_data"]
        assert len(warnings) == 1

    def test_deeply_nested_payload(self, client: TestClient) -> None:
        response = client.post(
            "/api/admin/preview/template", json={"template_data": "[" * 100000}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["parsed"] is False
        assert data["html"] == ""
