"""
HTTP smoke tests for the quotemaster endpoints against temporary JSON files.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the miniapis package importable for local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from miniapis.app import create_app  # noqa: E402
from miniapis.core import config as core_config  # noqa: E402
from miniapis.core.security import hash_reset_password  # noqa: E402
from miniapis.repositories.json_storage import JsonDocumentStore  # noqa: E402
from miniapis.services.quote_service import QuoteService  # noqa: E402

RESET_PASSWORD = "letmein"


@pytest.fixture()
def app_env(tmp_path, monkeypatch):
    """Point the data directory at a temp folder and reset cached settings."""
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("QUOTES_RESET_HASH", hash_reset_password(RESET_PASSWORD))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    core_config.get_settings.cache_clear()
    yield tmp_path
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(app_env):
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def default_quotes():
    settings = core_config.get_settings()
    return json.loads(settings.quotes_default_file.read_text(encoding="utf-8"))


def test_handshake_accepts_any_method(client):
    assert client.get("/handshake").status_code == 200
    assert client.post("/handshake").status_code == 200
    assert client.delete("/handshake").status_code == 200


def test_startup_creates_live_files(client, app_env, default_quotes):
    quotes_file = app_env / "quotes.json"
    assert quotes_file.exists()
    assert (app_env / "planner.json").exists()
    assert json.loads(quotes_file.read_text(encoding="utf-8")) == default_quotes


def test_get_quote_by_id(client, default_quotes):
    res = client.get("/quotemaster/id/0")
    assert res.status_code == 200
    assert res.json() == default_quotes["quotes"][0]

    res = client.get(f"/quotemaster/id/{len(default_quotes['quotes'])}")
    assert res.status_code == 400
    assert res.json() == {"errorMessage": "Invalid quote ID"}

    assert client.get("/quotemaster/id/abc").status_code == 400


def test_random_and_popular(client, default_quotes):
    ids = {q["id"] for q in default_quotes["quotes"]}
    assert client.get("/quotemaster/random").json()["id"] in ids
    assert client.get("/quotemaster/popular").json()["id"] in ids


def test_like_quote(client):
    assert client.post("/quotemaster/like", json={"id": 1}).status_code == 200
    assert client.get("/quotemaster/id/1").json()["likes"] == 1

    res = client.post("/quotemaster/like", json={"id": 999})
    assert res.status_code == 400
    assert res.json() == {"errorMessage": "Invalid quote ID"}
    assert client.post("/quotemaster/like", json={}).status_code == 400


def test_new_quote(client, default_quotes):
    res = client.post("/quotemaster/new", json={"quote": "Stay hungry.", "name": "Anon"})
    assert res.status_code == 200
    new_id = len(default_quotes["quotes"])
    assert res.json() == {"id": new_id}
    assert client.get(f"/quotemaster/id/{new_id}").json()["quote"] == "Stay hungry."

    res = client.post("/quotemaster/new", json={"quote": "", "name": "Anon"})
    assert res.status_code == 400
    assert res.json() == {"errorMessage": "Quote must be between 1 and 400 characters long"}

    res = client.post("/quotemaster/new", json={"quote": "Fine", "name": "n" * 41})
    assert res.status_code == 400
    assert res.json() == {"errorMessage": "Name must be between 1 and 40 characters long"}


def test_reset_quotes(client, app_env, default_quotes):
    client.post("/quotemaster/new", json={"quote": "Temporary", "name": "Anon"})

    res = client.post("/quotemaster/reset", json={"pass": "wrong"})
    assert res.status_code == 403
    assert res.json() == {"errorMessage": "Invalid password"}
    assert len(json.loads((app_env / "quotes.json").read_text(encoding="utf-8"))["quotes"]) == len(default_quotes["quotes"]) + 1

    assert client.post("/quotemaster/reset", json={"pass": RESET_PASSWORD}).status_code == 200
    assert json.loads((app_env / "quotes.json").read_text(encoding="utf-8")) == default_quotes


def test_empty_store_returns_404(app_env):
    default_file = app_env / "empty-default.json"
    default_file.write_text(json.dumps({"maxLikes": 0, "quotes": []}), encoding="utf-8")
    svc = QuoteService(JsonDocumentStore(app_env / "quotes.json", default_file))
    with TestClient(create_app(quote_service=svc)) as test_client:
        for path in ("/quotemaster/random", "/quotemaster/popular"):
            res = test_client.get(path)
            assert res.status_code == 404
            assert res.json() == {"errorMessage": "No quotes available"}
