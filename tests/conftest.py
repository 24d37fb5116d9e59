"""Pytest fixtures: one app over a fresh in-memory store per test."""

import pytest
from fastapi.testclient import TestClient

from config import settings
from database import Database
from main import create_app

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    """Lowest bcrypt cost so registration tests stay quick."""
    monkeypatch.setattr(settings, "bcrypt_rounds", 4)


@pytest.fixture
def client():
    app = create_app(Database(TEST_DATABASE_URL))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register(client):
    def _register(username="alice", password="s3cret", **extra):
        body = {"username": username, "password": password, **extra}
        return client.post("/register", json=body)

    return _register


@pytest.fixture
def apply_loan(client):
    def _apply(**fields):
        body = {"loanType": "personal", "fullName": "alice", "loanAmount": 5000, **fields}
        response = client.post("/apply-loan", json=body)
        assert response.status_code == 200, response.text
        return response

    return _apply
