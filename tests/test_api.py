"""API tests using FastAPI's TestClient with the engine dependency overridden."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from alpha_hunter.api.endpoints import app, get_engine
from alpha_hunter.engine import AlphaHuntingEngine


@pytest.fixture
def client(stub_verifier):
    app.dependency_overrides[get_engine] = lambda: AlphaHuntingEngine(verifier=stub_verifier)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_root_lists_endpoints(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["endpoints"]["Analyze"] == "POST /api/analyze"


def test_health_check(client) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["llm_configured"] is True


def test_analyze_returns_camel_case_result(client, foo_csv) -> None:
    response = client.post("/api/analyze", json={"csv_text": foo_csv})

    assert response.status_code == 200
    body = response.json()
    assert body["summaryStatistics"]["totalProjects"] == 1
    top = body["prioritizedProjects"][0]
    assert top["websiteUrl"] == "https://foo.io"
    assert top["priorityScore"] == pytest.approx(9.6)
    assert top["verificationStatus"] == "unverified"
    assert body["categoryAnalysis"] == [
        {"label": "GameFi", "value": 1},
        {"label": "DeFi", "value": 1},
    ]


def test_parse_returns_unfiltered_projects(client, turkish_csv) -> None:
    response = client.post("/api/projects/parse", json={"csv_text": turkish_csv})

    assert response.status_code == 200
    names = [p["projectName"] for p in response.json()]
    assert names == ["Nebula Quest", "GridPower", "SwapLite", "OldChain"]


def test_missing_required_column_is_unprocessable(client) -> None:
    response = client.post("/api/analyze", json={"csv_text": "Project Name,Website\nFoo,foo.io"})

    assert response.status_code == 422
    body = response.json()
    assert body["type"] == "SchemaError"
    assert body["missing"] == ["potentialScore"]


def test_empty_upload_is_bad_request(client) -> None:
    response = client.post("/api/analyze", json={"csv_text": ""})

    assert response.status_code == 400
    assert response.json()["type"] == "EmptyDatasetError"


def test_verify_project(client) -> None:
    project = {"projectName": "Foo", "websiteUrl": "https://foo.io", "potentialScore": 9}

    response = client.post("/api/projects/verify", json={"project": project})

    assert response.status_code == 200
    body = response.json()
    assert body["verificationStatus"] == "verified"
    assert body["verificationSummary"] == "Foo is live."
    assert body["evidenceLinks"] == [{"title": "Site", "uri": "https://foo.io"}]


def test_verify_without_llm_is_unavailable(unconfigured_verifier) -> None:
    app.dependency_overrides[get_engine] = lambda: AlphaHuntingEngine(
        verifier=unconfigured_verifier
    )
    try:
        with TestClient(app) as test_client:
            response = test_client.post(
                "/api/projects/verify", json={"project": {"projectName": "Foo"}}
            )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 503
    assert response.json()["type"] == "VerificationError"


def test_export_returns_csv_attachment(client) -> None:
    projects = [{"projectName": "Foo", "categoryTags": "GameFi, DeFi", "potentialScore": 9}]

    response = client.post("/api/export", json={"projects": projects})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert 'filename="alpha_filtered_projects.csv"' in response.headers["content-disposition"]
    lines = response.text.splitlines()
    assert lines[0].startswith("projectName,websiteUrl")
    assert lines[1].startswith('Foo,N/A,N/A,"GameFi, DeFi"')


def test_sample_data_endpoint(client) -> None:
    response = client.post("/api/test")

    assert response.status_code == 200
    body = response.json()
    assert body["total_projects"] == 3
    assert body["top_project"] == "Nebula Quest"
