# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from pos.database import AppState
from pos.main import create_app


@pytest.fixture
def static_dir(tmp_path):
    (tmp_path / "index.html").write_text("<h1>POS</h1>")
    (tmp_path / "app.css").write_text("body { margin: 0; }")
    return tmp_path


@pytest.fixture
def state():
    return AppState()


@pytest.fixture
def app(state, static_dir):
    return create_app(state=state, static_dir=static_dir)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def sample_order():
    return {"items": [{"product_id": 1, "quantity": 2}], "total": 31.0}
