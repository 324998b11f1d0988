"""
Global pytest fixtures for the Course Platform test suite.

Responsibilities:
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
    - Provide isolated in-memory Storage and manager fixtures for direct testing
    - Provide helpers for signing up users and building Basic-auth headers

Why an app factory?
    Using `create_app()` ensures each test gets fresh in-memory state,
    eliminating cross-test flakiness.
"""

import base64
import os

# Cheapest bcrypt cost; must be set before auth.config is imported
os.environ.setdefault("COURSE_BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from main import create_app
from course_platform.manager import CourseManager, UserManager
from course_platform.storage.storage import Storage


def basic_auth(email: str, password: str) -> dict:
    """Authorization header for HTTP Basic credentials."""
    token = base64.b64encode(f"{email}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


def user_payload(email: str = "ada@example.com", password: str = "secret", **overrides) -> dict:
    payload = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "emailAddress": email,
        "password": password,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def storage() -> Storage:
    """Provide a fresh in-memory Storage backend."""
    return Storage()


@pytest.fixture
def client(storage: Storage) -> TestClient:
    """
    Provide a fresh TestClient with a new app instance.

    Notes:
        - The app shares the `storage` fixture so tests can inspect stored state.
    """
    return TestClient(create_app(storage=storage))


@pytest.fixture
def user_manager(storage: Storage) -> UserManager:
    return UserManager(storage)


@pytest.fixture
def course_manager(storage: Storage) -> CourseManager:
    return CourseManager(storage)


@pytest.fixture
def make_auth():
    """Expose `basic_auth` to tests without importing conftest."""
    return basic_auth


@pytest.fixture
def signup(client: TestClient):
    """
    Sign up a user through the API and return its Basic-auth header.

    Usage:
        headers = signup("bob@example.com", "pw")
    """

    def _signup(email: str = "ada@example.com", password: str = "secret", **overrides) -> dict:
        resp = client.post("/users", json=user_payload(email, password, **overrides))
        assert resp.status_code == 201, resp.text
        return basic_auth(email, password)

    return _signup
