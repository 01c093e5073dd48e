from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from blueprint_visualizer.server.app import create_app
from blueprint_visualizer.server.config import ServerSettings


@pytest.fixture
def client(settings_env: Path) -> TestClient:
    return TestClient(create_app())


def test_health_and_functions(client: TestClient) -> None:
    health = client.get("/v1/health").json()
    assert health["status"] == "ok"
    assert "version" in health

    functions = client.get("/v1/functions").json()
    by_name = {f["name"]: f for f in functions}
    assert {"KubeTask", "ScaleWorkload"} <= set(by_name)
    assert by_name["ScaleWorkload"]["participant"] == "{namespace}/{kind}/{name}"
    assert by_name["ScaleWorkload"]["arguments"] == ["namespace", "kind", "name", "replicas"]


def test_validate_returns_mermaid_text(client: TestClient, backup_yaml: str) -> None:
    resp = client.post(
        "/v1/validate", content=backup_yaml, headers={"Content-Type": "application/x-yaml"}
    )

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text.startswith("sequenceDiagram\n")
    assert "    create participant ns1/Deployment/app\n" in resp.text
    assert resp.text.endswith("    Kanister-->>User: Backup completed!\n")


def test_validate_rejects_unparseable_body(client: TestClient) -> None:
    resp = client.post("/v1/validate", content="actions: [unterminated")

    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("Bad Request. Error:")


def test_validate_rejects_invalid_blueprint(client: TestClient) -> None:
    resp = client.post("/v1/validate", content="actions:\n  backup:\n    phases: []\n")

    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("Failed to validate Blueprint. Error:")


def test_validate_reports_unsupported_function(client: TestClient) -> None:
    body = "actions:\n  backup:\n    phases:\n      - {func: CopyVolumeData, name: copy}\n"

    resp = client.post("/v1/validate", content=body)

    assert resp.status_code == 501
    detail = resp.json()["detail"]
    assert detail.startswith("Failed to create flowchart for Blueprint. Error:")
    assert "CopyVolumeData" in detail
    assert "sequenceDiagram" not in resp.text


def test_validate_uses_configured_labels(
    settings_env: Path, monkeypatch: pytest.MonkeyPatch, backup_yaml: str
) -> None:
    monkeypatch.setenv("BLUEPRINT_ORCHESTRATOR_LABEL", "Runner")
    client = TestClient(create_app(ServerSettings()))

    resp = client.post("/v1/validate", content=backup_yaml)

    assert "    participant Runner\n" in resp.text
    assert "    Runner-->>User: Backup completed!\n" in resp.text


def test_cors_preflight_is_allowed(client: TestClient) -> None:
    resp = client.options(
        "/v1/validate",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] in {"*", "http://localhost:3000"}
