"""HTTP-level fixtures: the app wired to the test database and fakes."""

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_mailer, get_storage
from app.db.session import get_db
from app.main import app


@pytest.fixture
def client(engine, db, mailer, blob_store):
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_storage] = lambda: blob_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def account(client):
    """Register ``student@univ.ac.kr`` / ``password123`` over HTTP."""
    response = client.post("/api/v1/auth/register", json={
        "email": "student@univ.ac.kr",
        "password": "password123",
        "name": "Kim",
    })
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def auth_headers(client, account):
    response = client.post("/api/v1/auth/token", json={"email": "student@univ.ac.kr", "password": "password123"})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
