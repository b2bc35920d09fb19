"""
Shared fixtures: a fresh entity store per test and an HTTP client whose
application lifespan builds its own store.
"""
import os

# Must be set before app.core.config builds its Settings instance
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient

from app.database import EntityStore
from app.main import app


@pytest.fixture
def store():
    return EntityStore()


@pytest.fixture
def make_user(store):
    """Insert a user row directly into the store"""
    def _make_user(username, name=None, **fields):
        return store.users.insert(
            username=username,
            password="not-a-real-hash",
            name=name or username.title(),
            **fields
        )
    return _make_user


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register an account over HTTP, returning (user_id, auth headers)"""
    def _register(username, name=None, password="secret123"):
        response = client.post(
            "/api/v1/auth/register",
            json={"username": username, "password": password, "name": name or username.title()}
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return body["user_id"], {"Authorization": f"Bearer {body['access_token']}"}
    return _register
