import pytest
from fastapi.testclient import TestClient

from social_media_api.app.core.config import settings
from social_media_api.app.core.db import init_db
from social_media_api.app.main import app


@pytest.fixture
def db(tmp_path, monkeypatch):
    """Point the application at a fresh SQLite file."""
    path = tmp_path / "social_media.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def client(db):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def broken_db(tmp_path, monkeypatch):
    """A database path that cannot be opened."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "missing" / "social_media.db"))


@pytest.fixture
def account(client):
    response = client.post("/register", json={"username": "bob", "password": "pass1"})
    assert response.status_code == 200
    return response.json()
