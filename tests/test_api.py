"""Тесты HTTP API"""
import json

import pytest
from fastapi.testclient import TestClient

from api.main import app, get_loader
from sancai_calculator import DictionaryLoader

from .conftest import DICTIONARY_PAYLOAD


@pytest.fixture
def client(tmp_path):
    path = tmp_path / "characters.json"
    path.write_text(json.dumps(DICTIONARY_PAYLOAD, ensure_ascii=False), encoding="utf-8")
    loader = DictionaryLoader(str(path))

    app.dependency_overrides[get_loader] = lambda: loader
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client(tmp_path):
    loader = DictionaryLoader(str(tmp_path / "missing.json"))

    app.dependency_overrides[get_loader] = lambda: loader
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestSancaiEndpoint:
    """POST /api/sancai"""

    def test_success(self, client):
        response = client.post("/api/sancai", json={"surname": "王", "given_name": "浩然"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["grids"] == {"heaven": 5, "human": 15, "earth": 23, "total": 27, "outer": 13}
        assert data["sancai"] == {"heaven": "earth", "human": "earth", "earth": "fire"}
        assert data["elements"]["total"] == "metal"

    def test_surrounding_whitespace_trimmed(self, client):
        response = client.post("/api/sancai", json={"surname": " 王 ", "given_name": "浩 "})
        assert response.status_code == 200
        assert response.json()["data"]["grids"]["earth"] == 12

    def test_invalid_input(self, client):
        response = client.post("/api/sancai", json={"surname": "王", "given_name": "Hao"})

        assert response.status_code == 422
        error = response.json()["detail"]["error"]
        assert error["kind"] == "invalid_input"
        assert error["field"] == "given_name"

    def test_unresolved_characters_point_to_reference_list(self, client):
        response = client.post("/api/sancai", json={"surname": "王", "given_name": "鑫"})

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["error"]["invalid_characters"] == ["鑫"]
        assert detail["reference_list_url"]

    def test_dictionary_unavailable(self, broken_client):
        response = broken_client.post("/api/sancai", json={"surname": "王", "given_name": "浩"})
        assert response.status_code == 503

    def test_report(self, client):
        response = client.post("/api/sancai/report", json={"surname": "王", "given_name": "浩然"})

        assert response.status_code == 200
        report = response.json()["report"]
        assert "土土火" in report
        assert "天格: 5" in report


class TestCharacterEndpoint:
    """GET /api/characters/{char}"""

    def test_found(self, client):
        response = client.get("/api/characters/浩")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["resolved_strokes"] == 11
        assert data["source"] == "kangxi"
        assert data["strokes"] == {"kangxi": 11, "traditional": 10, "simplified": 10}

    def test_not_found(self, client):
        assert client.get("/api/characters/鑫").status_code == 404

    def test_status(self, client):
        client.get("/api/characters/浩")
        status = client.get("/api/dictionary/status").json()

        assert status["loaded"]
        assert status["characters"] == 9
