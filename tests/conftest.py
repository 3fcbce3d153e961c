"""
Shared test fixtures - test client, a fresh in-memory session store per test.
"""

import pytest
from fastapi.testclient import TestClient

from backend import session as session_module
from backend.main import app
from backend.session import QuoteSession, SessionStore


@pytest.fixture(autouse=True)
def fresh_store(monkeypatch):
    """Give every test its own empty session store."""
    store = SessionStore()
    monkeypatch.setattr(session_module, "store", store)
    monkeypatch.setattr("backend.routers.quote_session.store", store)
    yield store


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def session():
    """A session with the blank form defaults (10' sidewall, 30' x 40')."""
    return QuoteSession()


@pytest.fixture
def session_id(client):
    """Start a session over the API and return its id."""
    response = client.post("/api/session/start")
    assert response.status_code == 200
    return response.json()["session_id"]
