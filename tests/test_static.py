# tests/test_static.py
from fastapi.testclient import TestClient

from pos.database import AppState
from pos.main import create_app


def test_index_served_at_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "<h1>POS</h1>" in r.text


def test_asset_served(client):
    r = client.get("/app.css")
    assert r.status_code == 200
    assert "margin" in r.text


def test_missing_asset_is_404(client):
    assert client.get("/nope.js").status_code == 404


def test_api_routes_win_over_static(client):
    assert client.get("/api/products").headers["content-type"].startswith("application/json")


def test_without_static_dir_unknown_paths_are_404(tmp_path):
    app = create_app(state=AppState(), static_dir=tmp_path / "missing")
    c = TestClient(app)
    assert c.get("/").status_code == 404
    assert c.get("/api/products").status_code == 200
