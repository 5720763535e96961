"""Tests for API endpoints (linter wired to the test catalog, no files on disk)."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from iconlint.dependencies import get_linter
from iconlint.engine.linter import Linter
from iconlint.main import app
from iconlint.svg.catalog import IconCatalog
from tests.conftest import CATALOG_ICONS, FULL_SVG, QUADRATIC_SVG, REDUNDANT_SVG, SQUARE_SVG


@pytest.fixture
def client():
    app.dependency_overrides[get_linter] = lambda: Linter(catalog=IconCatalog.from_icons(CATALOG_ICONS))
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["rules_registered"] == 8


def test_rules(client):
    data = client.get("/api/rules").json()
    assert set(data) == {
        "elm",
        "attr",
        "icon-title",
        "icon-size",
        "icon-precision",
        "ineffective-segments",
        "extraneous",
        "icon-centered",
    }


def test_lint_clean_icon(client):
    response = client.post("/api/lint", json={"svg": SQUARE_SVG, "name": "square.svg"})
    assert response.status_code == 200
    data = response.json()
    assert data["passed"] is True
    assert data["icon"] == "Square"
    assert data["source"] == "square.svg"
    assert data["diagnostics"] == []


def test_lint_redundant_icon(client):
    data = client.post("/api/lint", json={"svg": REDUNDANT_SVG}).json()
    assert data["passed"] is False
    assert [d["segment"] for d in data["diagnostics"]] == ["v0", "L0 22"]
    assert {d["rule"] for d in data["diagnostics"]} == {"ineffective-segments"}


def test_lint_malformed_path(client):
    data = client.post("/api/lint", json={"svg": QUADRATIC_SVG}).json()
    [diag] = data["diagnostics"]
    assert diag["rule"] == "path-syntax"
    assert diag["kind"] == "malformed-path"


def test_lint_missing_svg(client):
    assert client.post("/api/lint", json={}).status_code == 422


def test_lint_batch(client):
    response = client.post(
        "/api/lint/batch",
        json={"icons": [
            {"svg": FULL_SVG, "name": "full.svg"},
            {"svg": SQUARE_SVG, "name": "square.svg"},
        ]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["failed"] == 1
    assert [r["source"] for r in data["reports"]] == ["full.svg", "square.svg"]
    assert data["reports"][0]["diagnostics"][0]["rule"] == "icon-size"
    assert data["processing_time_ms"] >= 0


def test_path_analyze(client):
    response = client.post("/api/path/analyze", json={"d": "M0 2h24v0v20H0z"})
    assert response.status_code == 200
    data = response.json()
    assert [i["command"] for i in data["instructions"]] == ["M", "h", "v", "v", "H", "z"]
    assert data["instructions"][1]["absolute"] == [24.0]
    assert data["instructions"][1]["end"] == [24.0, 2.0]
    assert data["bbox"] == [0.0, 2.0, 24.0, 22.0]
    assert data["width"] == 24.0
    assert data["height"] == 20.0
    assert data["center"] == [12.0, 12.0]
    assert data["redundant"] == [{"index": 2, "segment": "v0", "suggestion": None}]


def test_path_analyze_malformed(client):
    response = client.post("/api/path/analyze", json={"d": "M0 0Q1 1 2 2"})
    assert response.status_code == 400
    assert "Q" in response.json()["detail"]
